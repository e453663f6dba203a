from .base import AbstractException  # noqa
from .criteria import Criteria  # noqa
from .decorators import check_instance  # noqa
from .exceptions import *  # noqa
from .models import *  # noqa
