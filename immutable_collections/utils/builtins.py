class empty:
    """
    Marks an argument or attribute as not provided, where None is a
    legitimate value, i.e. an element of a container.
    """
    @classmethod
    def default(cls, value, default):
        return default if value is empty else value


def obj_name(obj):
    """
    Returns the name used for a class, function or instance in messages.
    """
    if isinstance(obj, str):
        return obj
    elif hasattr(obj, '__name__'):
        return obj.__name__
    return obj.__class__.__name__


def is_function(func):
    return callable(func) and not isinstance(func, type)


def is_iterable(value):
    """
    Returns whether or not the value is an iterable of elements.  Text is
    treated as a single element.
    """
    return not isinstance(value, (str, bytes)) and hasattr(value, '__iter__')


def iterable_from_args(*args, cast=list, strict=True):
    """
    Returns the positional arguments as a single collection built by `cast`.
    A single iterable argument is treated as the elements themselves:

    >>> iterable_from_args("A", "B")
    >>> ["A", "B"]
    >>> iterable_from_args(("A", "B"), cast=set)
    >>> {"A", "B"}
    """
    if len(args) == 0:
        if strict:
            raise ValueError("At least one value must be provided.")
        return cast()
    elif len(args) == 1 and is_iterable(args[0]):
        return cast(args[0])
    return cast(args)


def ensure_iterable(value, cast=list):
    """
    Returns the value as an indexable collection: None becomes an empty
    collection, an iterable is copied and anything else is wrapped.
    """
    if value is None:
        return cast()
    elif is_iterable(value) and not isinstance(value, type):
        return cast(value)
    return cast([value])


def get_attribute(obj, attr, strict=True, default=None):
    """
    Reads `attr` from a :obj:`dict` by key, or from any other object by
    attribute.  When `strict` is False, a missing `attr` returns `default`
    instead of raising.
    """
    if isinstance(obj, dict):
        if attr not in obj and strict:
            raise KeyError(f"The key {attr} does not exist.")
        return obj.get(attr, default)
    elif not hasattr(obj, attr) and strict:
        raise AttributeError(
            f"The attribute {attr} does not exist on the {obj_name(obj)}.")
    return getattr(obj, attr, default)


def merge_without_duplicates(*args, attr=None):
    """
    Concatenates the provided arrays, where an element whose `attr` (or the
    element itself, when `attr` is None) equals that of an earlier element
    replaces the earlier element.
    """
    def identity(e):
        return e if attr is None else get_attribute(e, attr)

    merged = []
    for array in args:
        for element in array:
            merged = [
                e for e in merged if identity(e) != identity(element)
            ] + [element]
    return merged
