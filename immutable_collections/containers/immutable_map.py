import collections.abc
import copy

from immutable_collections import exceptions, utils
from immutable_collections.settings import settings
from immutable_collections.stdout import stdout

from .entry import Entry, EntrySet
from .guards import rejects_mutation


_missing = utils.empty


class ImmutableMap(collections.abc.Mapping):
    """
    A read-only association of unique keys to values that exclusively owns a
    private :obj:`dict`, iterated in insertion order.

    Eager construction (`of`, `copy_of` and the constructor) collapses
    duplicate keys such that the last value wins, whereas the map collector
    rejects a duplicate key with :obj:`DuplicateKeyError`.  When the
    `warn_on_duplicate_keys` setting is on, the collapse is reported through
    :obj:`stdout.log`.

    >>> ImmutableMap.of((1, "A"), (2, "B"))
    >>> str(ImmutableMap.of((1, "A"), (2, "B")))
    >>> "{1=A, 2=B}"
    """
    __slots__ = ('_store', )

    container_name = "map"
    is_mutable = False

    def __init__(self, mapping_or_pairs=()):
        if mapping_or_pairs is None:
            raise exceptions.RequiredParamError(
                param='mapping_or_pairs', klass=self.__class__)
        self._store = self._build(
            self._pairs(mapping_or_pairs, param='mapping_or_pairs'))

    @classmethod
    def _from_store(cls, store):
        if len(store) == 0:
            return cls.empty()
        instance = cls.__new__(cls)
        instance._store = store
        return instance

    @classmethod
    def _pairs(cls, mapping_or_pairs, param):
        if isinstance(mapping_or_pairs, collections.abc.Mapping):
            return list(mapping_or_pairs.items())
        elif not utils.is_iterable(mapping_or_pairs):
            raise exceptions.InvalidParamError(
                param=param,
                value=mapping_or_pairs,
                valid_types=(
                    collections.abc.Mapping, collections.abc.Iterable),
            )
        return [cls._pair(p, param=param) for p in mapping_or_pairs]

    @classmethod
    def _pair(cls, pair, param):
        if not utils.is_iterable(pair):
            raise exceptions.InvalidParamError(
                param=param,
                value=pair,
                valid_types=(Entry, tuple),
            )
        pair = tuple(pair)
        if len(pair) != 2:
            raise exceptions.InvalidParamError(
                param=param,
                value=pair,
                message=(
                    f"Expected a key/value pair for param(s) {param}, "
                    f"received {pair!r}."
                )
            )
        return pair

    @classmethod
    def _build(cls, pairs):
        store = {}
        duplicates = []
        for key, value in pairs:
            if key in store and key not in duplicates:
                duplicates.append(key)
            store[key] = value
        if duplicates and settings.warn_on_duplicate_keys:
            humanized = utils.humanize_list(duplicates, callback=repr)
            stdout.log(
                f"Duplicate key(s) {humanized} collapsed while constructing "
                f"an {cls.__name__}, the last value was kept."
            )
        return store

    @classmethod
    def empty(cls):
        return EMPTY_MAP

    @staticmethod
    def entry(key, value):
        return Entry(key, value)

    @classmethod
    def of(cls, *entries):
        """
        Creates an :obj:`ImmutableMap` from the provided entries, each of
        which is an :obj:`Entry` or any two item pair.  Later entries replace
        earlier entries with an equal key.

        >>> ImmutableMap.of(ImmutableMap.entry(1, "A"), (2, "B"))

        The first entry must not be None and none of the other entries may be
        None.
        """
        if len(entries) == 0:
            return cls.empty()
        elif entries[0] is None:
            raise exceptions.RequiredParamError(
                param='entry', func=f'{cls.__name__}.of')
        for other in entries[1:]:
            if other is None:
                raise exceptions.InvalidParamError(
                    param='other_entries',
                    value=other,
                    valid_types=(Entry, tuple),
                    func=f'{cls.__name__}.of',
                )
        pairs = [cls._pair(entries[0], param='entry')] + [
            cls._pair(e, param='other_entries') for e in entries[1:]]
        return cls._from_store(cls._build(pairs))

    @classmethod
    def copy_of(cls, mapping_or_pairs):
        if mapping_or_pairs is None:
            raise exceptions.RequiredParamError(
                param='mapping_or_pairs', func=f'{cls.__name__}.copy_of')
        return cls._from_store(cls._build(
            cls._pairs(mapping_or_pairs, param='mapping_or_pairs')))

    @classmethod
    def collector(cls, key_mapper, value_mapper):
        """
        Returns a :obj:`MapCollector` that derives each pair from an element
        through `key_mapper` and `value_mapper`, and that rejects duplicate
        keys.
        """
        from immutable_collections.collectors import MapCollector
        return MapCollector(key_mapper, value_mapper)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._store!r})"

    def __str__(self):
        return "{" + utils.humanize_dict(self._store, delimeter=", ") + "}"

    def __reduce__(self):
        return (self.copy_of, (dict(self._store), ))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self._from_store(copy.deepcopy(self._store, memo))

    def __len__(self):
        return len(self._store)

    def __getitem__(self, key):
        return self._store[key]

    def __contains__(self, key):
        return key in self._store

    def __iter__(self):
        return iter(self._store)

    def __eq__(self, other):
        if self is other:
            return True
        elif isinstance(other, ImmutableMap):
            return self._store == other._store
        elif not isinstance(other, collections.abc.Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in self._store.items():
            other_value = other.get(key, _missing)
            if other_value is _missing:
                return False
            elif value is None:
                if other_value is not None:
                    return False
            elif value != other_value:
                return False
        return True

    def __hash__(self):
        return hash(frozenset(self._store.items()))

    def is_empty(self):
        return len(self._store) == 0

    def contains_key(self, key):
        return key in self._store

    def contains_value(self, value):
        return any(v == value for v in self._store.values())

    def get(self, key, default=None):
        return self._store.get(key, default)

    def entry_set(self):
        """
        Returns a read-only :obj:`EntrySet` view of the :obj:`Entry` pairs of
        the map, built on each call.
        """
        return EntrySet(self)

    def to_dict(self):
        return dict(self._store)

    @rejects_mutation("put an element to")
    def __setitem__(self, key, value):
        pass

    @rejects_mutation("put an element to")
    def setdefault(self, key, default=None):
        pass

    @rejects_mutation("remove an element from")
    def __delitem__(self, key):
        pass

    @rejects_mutation("remove an element from")
    def pop(self, key, *args):
        pass

    @rejects_mutation("remove an element from")
    def popitem(self):
        pass

    @rejects_mutation("put elements to")
    def update(self, *args, **kwargs):
        pass

    @rejects_mutation("put elements to")
    def __ior__(self, other):
        pass

    @rejects_mutation("clear")
    def clear(self):
        pass


EMPTY_MAP = ImmutableMap()
