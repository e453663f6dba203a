from .accumulation import Accumulation  # noqa
from .base import Collector  # noqa
from .collectors import ListCollector, MapCollector, SetCollector  # noqa
from .exceptions import AccumulationSealedError, DuplicateKeyError  # noqa
