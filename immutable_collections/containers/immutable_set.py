import collections.abc
import copy

from immutable_collections import exceptions, utils

from .guards import rejects_mutation


class ImmutableSet(collections.abc.Set):
    """
    A read-only unordered collection of unique elements that exclusively owns
    a private :obj:`set`.

    Every factory copies its input, collapsing duplicates using the native
    equality and hashing of the elements.  The mutating operations of
    :obj:`set` are present, but each one raises :obj:`FixedCapacityError`
    naming the rejected operation.

    An :obj:`ImmutableSet` equals any other :obj:`collections.abc.Set` with
    the same elements, regardless of order, and hashes like the
    :obj:`frozenset` of its elements.
    """
    __slots__ = ('_store', )

    container_name = "set"
    is_mutable = False

    def __init__(self, items=()):
        if items is None:
            raise exceptions.RequiredParamError(
                param='items', klass=self.__class__)
        self._store = set(items)

    @classmethod
    def _from_store(cls, store):
        if len(store) == 0:
            return cls.empty()
        instance = cls.__new__(cls)
        instance._store = store
        return instance

    @classmethod
    def _from_iterable(cls, it):
        # Used by the operators of :obj:`collections.abc.Set`.
        return cls._from_store(set(it))

    @classmethod
    def empty(cls):
        return EMPTY_SET

    @classmethod
    def of(cls, *items):
        """
        Creates an :obj:`ImmutableSet` from the provided items, provided as
        positional arguments or as a single iterable that is copied.  The
        first item must not be None.
        """
        if len(items) == 0:
            return cls.empty()
        elif items[0] is None:
            raise exceptions.RequiredParamError(
                param='item', func=f'{cls.__name__}.of')
        return cls._from_store(utils.iterable_from_args(*items, cast=set))

    @classmethod
    def copy_of(cls, items):
        """
        Creates an :obj:`ImmutableSet` from an array, collection, iterator or
        any other iterable.
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
        return cls._from_store(set(items))

    @classmethod
    def collector(cls):
        from immutable_collections.collectors import SetCollector
        return SetCollector()

    def __repr__(self):
        if len(self._store) == 0:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({self._store!r})"

    def __reduce__(self):
        return (self.copy_of, (list(self._store), ))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self._from_store(copy.deepcopy(self._store, memo))

    def __len__(self):
        return len(self._store)

    def __contains__(self, value):
        return value in self._store

    def __iter__(self):
        return iter(self._store)

    def __eq__(self, other):
        if self is other:
            return True
        elif isinstance(other, ImmutableSet):
            return self._store == other._store
        elif not isinstance(other, collections.abc.Set):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(element in other for element in self._store)

    def __hash__(self):
        return hash(frozenset(self._store))

    def is_empty(self):
        return len(self._store) == 0

    def contains_all(self, items):
        if items is None:
            raise exceptions.RequiredParamError(
                param='items', func=f'{self.__class__.__name__}.contains_all')
        return all(item in self._store for item in items)

    def to_array(self, cast=list):
        """
        Exports the elements, in iteration order, to a new caller owned
        container built by `cast` from a :obj:`list` of the elements.
        """
        exported = list(self._store)
        if cast is list:
            return exported
        return cast(exported)

    @rejects_mutation("add an element to")
    def add(self, value):
        pass

    @rejects_mutation("remove an element from")
    def remove(self, value):
        pass

    @rejects_mutation("remove an element from")
    def discard(self, value):
        pass

    @rejects_mutation("remove an element from")
    def pop(self):
        pass

    @rejects_mutation("add elements to")
    def update(self, *others):
        pass

    @rejects_mutation("add elements to")
    def __ior__(self, other):
        pass

    @rejects_mutation("retain elements in")
    def intersection_update(self, *others):
        pass

    @rejects_mutation("retain elements in")
    def retain_all(self, values):
        pass

    @rejects_mutation("retain elements in")
    def __iand__(self, other):
        pass

    @rejects_mutation("remove elements from")
    def difference_update(self, *others):
        pass

    @rejects_mutation("remove elements from")
    def remove_all(self, values):
        pass

    @rejects_mutation("remove elements from")
    def __isub__(self, other):
        pass

    @rejects_mutation("replace elements in")
    def symmetric_difference_update(self, other):
        pass

    @rejects_mutation("replace elements in")
    def __ixor__(self, other):
        pass

    @rejects_mutation("clear")
    def clear(self):
        pass


EMPTY_SET = ImmutableSet()
