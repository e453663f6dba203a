import collections.abc
import copy

from immutable_collections import exceptions, utils

from .guards import rejects_mutation
from .list_iterator import ListIterator


class ImmutableList(collections.abc.Sequence):
    """
    A read-only ordered sequence that exclusively owns a private :obj:`list`.

    Every factory copies its input, so mutating the original collection
    after construction is never observable through the :obj:`ImmutableList`.
    The mutating operations of :obj:`list` are present, but each one raises
    :obj:`FixedCapacityError` naming the rejected operation.

    An :obj:`ImmutableList` equals a :obj:`list`, :obj:`tuple` or another
    :obj:`ImmutableList` holding equal elements in the same order, and hashes
    like the :obj:`tuple` of its elements.  Other sequences, such as
    :obj:`range`, hash differently and are never equal.

    >>> letters = ImmutableList.of("A", "B", "C")
    >>> letters == ["A", "B", "C"]
    >>> True
    >>> letters.sub_list(1, 3) == ImmutableList.of("B", "C")
    >>> True
    """
    __slots__ = ('_store', )

    container_name = "list"
    is_mutable = False

    def __init__(self, items=()):
        if items is None:
            raise exceptions.RequiredParamError(
                param='items', klass=self.__class__)
        self._store = list(items)

    @classmethod
    def _from_store(cls, store):
        # The store must already be owned exclusively by the new instance.
        if len(store) == 0:
            return cls.empty()
        instance = cls.__new__(cls)
        instance._store = store
        return instance

    @classmethod
    def empty(cls):
        return EMPTY_LIST

    @classmethod
    def of(cls, *items):
        """
        Creates an :obj:`ImmutableList` from the provided items.

        The items can be provided as positional arguments or as a single
        iterable (an array, collection, iterator or any other iterable), in
        which case that iterable is copied.  Strings are always treated as
        single items.

        >>> ImmutableList.of("A", "B", "C")
        >>> ImmutableList.of(["A", "B", "C"])

        The first item must not be None.
        """
        if len(items) == 0:
            return cls.empty()
        elif items[0] is None:
            raise exceptions.RequiredParamError(
                param='item', func=f'{cls.__name__}.of')
        return cls._from_store(utils.iterable_from_args(*items))

    @classmethod
    def copy_of(cls, items):
        """
        Creates an :obj:`ImmutableList` holding a copy of every element of the
        provided iterable, in iteration order.  Unlike :obj:`of`, the argument
        is always treated as the iterable to copy.
        """
        if items is None:
            raise exceptions.RequiredParamError(
                param='items', func=f'{cls.__name__}.copy_of')
        elif not isinstance(items, collections.abc.Iterable):
            raise exceptions.InvalidParamError(
                param='items',
                value=items,
                valid_types=(collections.abc.Iterable, ),
                func=f'{cls.__name__}.copy_of',
            )
        return cls._from_store(list(items))

    @classmethod
    def collector(cls):
        from immutable_collections.collectors import ListCollector
        return ListCollector()

    def __repr__(self):
        return f"{self.__class__.__name__}({self._store!r})"

    def __reduce__(self):
        return (self.copy_of, (list(self._store), ))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self._from_store(copy.deepcopy(self._store, memo))

    def __len__(self):
        return len(self._store)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._from_store(self._store[index])
        return self._store[index]

    def __contains__(self, value):
        return value in self._store

    def __iter__(self):
        return iter(self._store)

    def __reversed__(self):
        return reversed(self._store)

    def __eq__(self, other):
        if self is other:
            return True
        elif isinstance(other, ImmutableList):
            return self._store == other._store
        elif not isinstance(other, (list, tuple)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self._store, other))

    def __hash__(self):
        return hash(tuple(self._store))

    def is_empty(self):
        return len(self._store) == 0

    def contains_all(self, items):
        if items is None:
            raise exceptions.RequiredParamError(
                param='items', func=f'{self.__class__.__name__}.contains_all')
        return all(item in self._store for item in items)

    def get(self, index):
        """
        Returns the element at the provided position, which must be in the
        range [0, len) - negative positions are not supported.
        """
        if index < 0 or index >= len(self._store):
            raise IndexError(
                f"Index {index} out of bounds for length {len(self._store)}.")
        return self._store[index]

    def index_of(self, value):
        for i, element in enumerate(self._store):
            if element == value:
                return i
        return -1

    def last_index_of(self, value):
        for i in range(len(self._store) - 1, -1, -1):
            if self._store[i] == value:
                return i
        return -1

    def list_iterator(self, index=0):
        return ListIterator(self, index)

    def sub_list(self, from_index, to_index):
        """
        Returns an :obj:`ImmutableList` of the elements in the range
        [from_index, to_index).
        """
        if from_index < 0:
            raise IndexError(f"From index {from_index} is negative.")
        elif to_index > len(self._store):
            raise IndexError(
                f"To index {to_index} out of bounds for length "
                f"{len(self._store)}.")
        elif from_index > to_index:
            raise IndexError(
                f"From index {from_index} is greater than to index "
                f"{to_index}.")
        return self._from_store(self._store[from_index:to_index])

    def to_array(self, cast=list):
        """
        Exports the elements to a new, caller owned, container.

        Parameters:
        ----------
        cast: :obj:`type` or :obj:`lambda` (optional)
            The callable that builds the exported container from a
            :obj:`list` of the elements, i.e. :obj:`tuple` or
            `functools.partial(array.array, "l")` for a typed array.

            Default: list
        """
        exported = list(self._store)
        if cast is list:
            return exported
        return cast(exported)

    @rejects_mutation("add an element to")
    def append(self, value):
        pass

    @rejects_mutation("add elements to")
    def extend(self, values):
        pass

    @rejects_mutation("add elements to")
    def __iadd__(self, values):
        pass

    @rejects_mutation("add elements to")
    def __imul__(self, n):
        pass

    @rejects_mutation("insert an element into")
    def insert(self, index, value):
        pass

    @rejects_mutation("remove an element from")
    def remove(self, value):
        pass

    @rejects_mutation("remove an element from")
    def pop(self, index=-1):
        pass

    @rejects_mutation("remove elements from")
    def remove_all(self, values):
        pass

    @rejects_mutation("retain elements in")
    def retain_all(self, values):
        pass

    @rejects_mutation("clear")
    def clear(self):
        pass

    @rejects_mutation("sort")
    def sort(self, *, key=None, reverse=False):
        pass

    @rejects_mutation("reverse")
    def reverse(self):
        pass

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            return self._set_slice(index, value)
        return self._set_item(index, value)

    def __delitem__(self, index):
        if isinstance(index, slice):
            return self._delete_slice(index)
        return self._delete_item(index)

    @rejects_mutation("set an element in")
    def _set_item(self, index, value):
        pass

    @rejects_mutation("set elements in")
    def _set_slice(self, index, values):
        pass

    @rejects_mutation("remove an element from")
    def _delete_item(self, index):
        pass

    @rejects_mutation("remove elements from")
    def _delete_slice(self, index):
        pass


EMPTY_LIST = ImmutableList()
