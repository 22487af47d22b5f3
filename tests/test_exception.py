import pytest

from assertkit import UnsupportedComparisonError


class TestUnsupportedComparisonError:

    def test_default_message(self):
        assert str(UnsupportedComparisonError()) == 'cannot take func type as argument'

    def test_custom_message(self):
        assert str(UnsupportedComparisonError('nope')) == 'nope'

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            raise UnsupportedComparisonError()


if __name__ == '__main__':
    pytest.main([__file__])
