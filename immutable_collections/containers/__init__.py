from .entry import Entry, EntrySet  # noqa
from .exceptions import FixedCapacityError  # noqa
from .guards import rejects_mutation  # noqa
from .immutable_list import ImmutableList, EMPTY_LIST  # noqa
from .immutable_map import ImmutableMap, EMPTY_MAP  # noqa
from .immutable_set import ImmutableSet, EMPTY_SET  # noqa
from .list_iterator import ListIterator  # noqa
