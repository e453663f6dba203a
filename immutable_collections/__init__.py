__appname__ = "immutable-collections"
__version__ = "0.1.0"

from .containers import (  # noqa
    Entry, EntrySet, FixedCapacityError, ImmutableList, ImmutableMap,
    ImmutableSet, ListIterator)
from .collectors import (  # noqa
    Accumulation, AccumulationSealedError, Collector, DuplicateKeyError,
    ListCollector, MapCollector, SetCollector)
from .exceptions import (  # noqa
    ImmutableCollectionsError, ImproperUsageError, InvalidParamError,
    ParamError, RequiredParamError)
from .settings import SettingsError, settings  # noqa
