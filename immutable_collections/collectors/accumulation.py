from immutable_collections import exceptions

from .exceptions import AccumulationSealedError


ensure_unsealed = exceptions.check_instance(
    exc_cls=AccumulationSealedError,
    criteria=[exceptions.Criteria(attr='sealed', value=False)]
)


class Accumulation:
    """
    The privately owned, mutable buffer that a :obj:`Collector` folds
    elements into.  Once the :obj:`Collector` finishes the accumulation, the
    accumulation is sealed and its buffer can no longer be accessed.
    """
    def __init__(self, buffer):
        self._buffer = buffer
        self._sealed = False

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} size={len(self._buffer)} "
            f"sealed={self._sealed}>"
        )

    def __len__(self):
        return len(self._buffer)

    @property
    def sealed(self):
        return self._sealed

    @ensure_unsealed(is_property=True)
    def buffer(self):
        return self._buffer

    @ensure_unsealed
    def seal(self):
        buffer = self._buffer
        self._sealed = True
        return buffer
