import functools
from abc import ABC, abstractmethod

from immutable_collections import exceptions

from .accumulation import Accumulation


class Collector(ABC):
    """
    Abstract base class for an aggregation sink that builds an immutable
    container from a stream of elements in four steps:

    (1) `supplier` seeds a fresh :obj:`Accumulation`.
    (2) `accumulator` folds a single element into an :obj:`Accumulation`.
    (3) `combiner` merges one :obj:`Accumulation` into another, such that
        partitions of a stream can be accumulated independently.
    (4) `finisher` seals an :obj:`Accumulation` and freezes it into the
        immutable container.

    Extensions only define how the buffer is created, extended, merged and
    frozen.
    """
    @abstractmethod
    def create_buffer(self):
        pass

    @abstractmethod
    def add(self, buffer, element):
        pass

    @abstractmethod
    def merge(self, buffer, other):
        pass

    @abstractmethod
    def freeze(self, buffer):
        pass

    def supplier(self):
        return Accumulation(self.create_buffer())

    def accumulator(self, accumulation, element):
        self.add(accumulation.buffer, element)

    def combiner(self, left, right):
        """
        Merges the `right` accumulation into the `left` accumulation, in that
        order, and returns the `left` accumulation.  The `right` accumulation
        is sealed afterwards.
        """
        if left is right:
            raise exceptions.InvalidParamError(
                param='right',
                message="An accumulation cannot be merged into itself."
            )
        self.merge(left.buffer, right.buffer)
        right.seal()
        return left

    def finisher(self, accumulation):
        return self.freeze(accumulation.seal())

    def accumulate(self, elements):
        accumulation = self.supplier()
        for element in elements:
            self.accumulator(accumulation, element)
        return accumulation

    def collect(self, elements):
        return self.finisher(self.accumulate(elements))

    def collect_partitioned(self, partitions, executor=None):
        """
        Accumulates each partition of elements into its own
        :obj:`Accumulation` and merges the accumulations in partition order
        before freezing the result.

        Parameters:
        ----------
        partitions: :obj:`list` or :obj:`tuple`
            An iterable of iterables of elements.

        executor: :obj:`concurrent.futures.Executor` (optional)
            The executor that the partitions are accumulated on.  When not
            provided, the partitions are accumulated sequentially.

            Default: None
        """
        if executor is not None:
            accumulations = executor.map(self.accumulate, partitions)
        else:
            accumulations = map(self.accumulate, partitions)
        return self.finisher(
            functools.reduce(self.combiner, accumulations, self.supplier()))
