from immutable_collections import exceptions

from .exceptions import FixedCapacityError


def rejects_mutation(operation):
    """
    Returns a decorator for a mutating method of an immutable container, or
    of a view derived from one, that raises :obj:`FixedCapacityError` naming
    the rejected `operation` before the decorated method is ever entered.

    The decision is made on the `is_mutable` capability of the instance,
    which every class in this package declares as False:

    >>> class ImmutableList(collections.abc.Sequence):
    >>>     container_name = "list"
    >>>     is_mutable = False
    >>>
    >>>     @rejects_mutation("add an element to")
    >>>     def append(self, value):
    >>>         pass
    >>>
    >>> ImmutableList().append("A")
    >>> FixedCapacityError: You must not add an element to this list.
    """
    return exceptions.check_instance(
        exc_cls=FixedCapacityError,
        exc_kwargs=lambda instance: {
            'operation': operation,
            'container': getattr(instance, 'container_name', None),
        },
        criteria=[
            exceptions.Criteria(attr='is_mutable', default_value=False)
        ]
    )
