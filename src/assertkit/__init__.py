import logging

logger = logging.getLogger(__name__)


from assertkit.assertutils import *
from assertkit.callers import *
from assertkit.config import *
from assertkit.console import *
from assertkit.exception import *
from assertkit.formatutils import *
from assertkit.labels import *
from assertkit.log import *
from assertkit.mathutils import *
