from immutable_collections import exceptions


class FixedCapacityError(exceptions.ImmutableCollectionsError, TypeError):
    """
    Raised when an operation attempts to mutate an immutable container or a
    view derived from one.  The container is left unchanged.

    Parameters:
    ----------
    operation: :obj:`str` (optional)
        The rejected operation, phrased so that it reads naturally before the
        container, i.e. "add an element to".

        Default: None

    container: :obj:`str` (optional)
        The human readable name of the container, i.e. "list".

        Default: None
    """
    attributes = [
        exceptions.ExceptionAttribute(name='operation'),
        exceptions.ExceptionAttribute(name='container'),
    ]
    content = [
        "The container is immutable.",
        "The {container} is immutable.",
        "You must not {operation} this {container}.",
        "You must not {operation} this container.",
    ]
