import datetime

import pytest
import regex as re
from asserts import assert_equal, assert_in, assert_not_in, assert_raises
from asserts import assert_regex

from assertkit import ReportOptions, UnsupportedComparisonError, failure_report
from assertkit.console import ANSI_GREEN


def check_equal(expected, actual, message=''):
    return failure_report(expected, actual, message, ReportOptions())


class TestFailureReport:
    """Tests for failure_report function."""

    def test_layout(self):
        lines = failure_report(1, '1', options=ReportOptions()).split('\n')
        assert_equal(4, len(lines))
        assert_regex(lines[0], r'^  Error Trace:  test_assertutils\.py:\d+$')
        assert_equal('  Error      :  Not equal:', lines[1])
        assert_equal('  Expected   :  int(1)', lines[2])
        assert_equal('  Actual     :  string("1")', lines[3])

    def test_trace_through_helper(self):
        lines = check_equal([1], [2]).split('\n')
        assert_regex(lines[0], r'^  Error Trace:  test_assertutils\.py:\d+$')
        assert_regex(lines[1], r'^ {16}test_assertutils\.py:\d+$')
        assert_equal('  Expected   :  list([1])', lines[3])

    def test_message(self):
        report = check_equal(1, 2, 'values differ\nbadly')
        assert_in('  Messages   :  values differ\n' + ' ' * 16 + 'badly', report)

    def test_no_message(self):
        assert_not_in('Messages', check_equal(1, 2))

    def test_durations(self):
        report = check_equal(datetime.timedelta(seconds=30), datetime.timedelta(minutes=2))
        assert_in('  Expected   :  30 sec', report)
        assert_in('  Actual     :  2 min', report)

    def test_truncation(self):
        report = failure_report('a' * 100, 'b', options={'max_len': 12})
        assert_in('  Expected   :  string("aaaa<... truncated>', report)

    def test_color(self):
        report = failure_report(1, 2, options={'enable_color': True})
        assert_in(ANSI_GREEN + 'Expected', report)
        plain = re.sub(r'\x1b\[\d*m', '', report)
        assert_equal(
            ['  Error      :  Not equal:', '  Expected   :  int(1)', '  Actual     :  int(2)'],
            plain.split('\n')[1:])

    def test_functions_rejected(self):
        with assert_raises(UnsupportedComparisonError):
            check_equal(len, len)


if __name__ == '__main__':
    pytest.main([__file__])
