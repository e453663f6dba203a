from immutable_collections import exceptions
from immutable_collections.containers import (
    ImmutableList, ImmutableMap, ImmutableSet)

from .base import Collector
from .exceptions import DuplicateKeyError


class ListCollector(Collector):
    def create_buffer(self):
        return []

    def add(self, buffer, element):
        buffer.append(element)

    def merge(self, buffer, other):
        buffer.extend(other)

    def freeze(self, buffer):
        return ImmutableList.copy_of(buffer)


class SetCollector(Collector):
    def create_buffer(self):
        return set()

    def add(self, buffer, element):
        buffer.add(element)

    def merge(self, buffer, other):
        buffer.update(other)

    def freeze(self, buffer):
        return ImmutableSet.copy_of(buffer)


class MapCollector(Collector):
    """
    Collects elements into an :obj:`ImmutableMap`, deriving the key and value
    of each element through the provided mappers.

    Unlike eager construction of an :obj:`ImmutableMap`, a key that was
    already collected raises :obj:`DuplicateKeyError`, and values must not be
    None.

    Parameters:
    ----------
    key_mapper: :obj:`lambda`
        Takes an element and returns its key.

    value_mapper: :obj:`lambda`
        Takes an element and returns its value.
    """
    def __init__(self, key_mapper, value_mapper):
        if key_mapper is None or value_mapper is None:
            raise exceptions.RequiredParamError(
                param=[
                    p for p, v in [
                        ('key_mapper', key_mapper),
                        ('value_mapper', value_mapper)
                    ] if v is None
                ],
                klass=self.__class__
            )
        self._key_mapper = key_mapper
        self._value_mapper = value_mapper

    def create_buffer(self):
        return {}

    def put(self, buffer, key, value):
        if value is None:
            raise exceptions.RequiredParamError(
                param='value', func=f'{self.__class__.__name__}.accumulator')
        elif key in buffer:
            raise DuplicateKeyError(
                key=key, value=buffer[key], other_value=value)
        buffer[key] = value

    def add(self, buffer, element):
        self.put(buffer, self._key_mapper(element),
            self._value_mapper(element))

    def merge(self, buffer, other):
        for key, value in other.items():
            self.put(buffer, key, value)

    def freeze(self, buffer):
        # A caller may still hold the buffer through `Accumulation.buffer`.
        return ImmutableMap._from_store(dict(buffer))
