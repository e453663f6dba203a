from .guards import rejects_mutation


class ListIterator:
    """
    A bidirectional cursor over an :obj:`ImmutableList`.

    The cursor sits between elements: `next()` (the builtin, via `__next__`)
    returns the element after the cursor and `previous()` the element before
    it.  Both raise :obj:`StopIteration` when there is no such element.  The
    mutating operations of a list iterator are rejected.
    """
    container_name = "list iterator"
    is_mutable = False

    def __init__(self, sequence, index=0):
        if index < 0 or index > len(sequence):
            raise IndexError(
                f"Index {index} out of bounds for length {len(sequence)}.")
        self._sequence = sequence
        self._cursor = index

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} index={self._cursor} "
            f"size={len(self._sequence)}>"
        )

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        element = self._sequence[self._cursor]
        self._cursor += 1
        return element

    def has_next(self):
        return self._cursor < len(self._sequence)

    def has_previous(self):
        return self._cursor > 0

    def previous(self):
        if not self.has_previous():
            raise StopIteration
        self._cursor -= 1
        return self._sequence[self._cursor]

    def next_index(self):
        return self._cursor

    def previous_index(self):
        return self._cursor - 1

    @rejects_mutation("set an element through")
    def set(self, element):
        pass

    @rejects_mutation("add an element through")
    def add(self, element):
        pass

    @rejects_mutation("remove an element through")
    def remove(self):
        pass
