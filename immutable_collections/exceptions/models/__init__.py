from .choices import StringFormatChoices  # noqa
from .exc_attribute import ExceptionAttribute  # noqa
from .exc_params import ExcParams  # noqa
from .formatter import Formatter  # noqa
from .mixins import FormattableModelMixin  # noqa
