import collections
import collections.abc

from .guards import rejects_mutation


class Entry(collections.namedtuple('Entry', ['key', 'value'])):
    """
    An immutable key/value pair of an :obj:`ImmutableMap`.

    An :obj:`Entry` is a :obj:`tuple`, so it equals and hashes identically to
    the plain pair `(key, value)` and unpacks like one.
    """
    __slots__ = ()

    container_name = "entry"
    is_mutable = False

    def __str__(self):
        return f"{self.key}={self.value}"

    @rejects_mutation("change the value of")
    def set_value(self, value):
        pass


class EntrySet(collections.abc.ItemsView):
    """
    A read-only set view of the :obj:`Entry` pairs of an :obj:`ImmutableMap`.

    Membership is decided by looking up the key and comparing the value, so
    maps holding unhashable values, i.e. lists, still have an entry set.
    """
    __slots__ = ()

    container_name = "entry set"
    is_mutable = False

    def __contains__(self, item):
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return super().__contains__(item)

    def __iter__(self):
        for key in self._mapping:
            yield Entry(key, self._mapping[key])

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self)!r})"

    @rejects_mutation("add an element to")
    def add(self, value):
        pass

    @rejects_mutation("remove an element from")
    def remove(self, value):
        pass

    @rejects_mutation("remove an element from")
    def discard(self, value):
        pass

    @rejects_mutation("clear")
    def clear(self):
        pass
