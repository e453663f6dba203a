import re

from .builtins import empty, ensure_iterable, get_attribute, is_iterable


FORMAT_ARGUMENT = re.compile(r"{([^{}]*)}")


def cjoin(*args, delimiter=" ", invalids=empty, formatter=None):
    """
    Joins the string form of each argument that is not one of `invalids`
    (by default, None) with `delimiter`.

    >>> cjoin("Warning:", None, "Duplicate key 1.")
    >>> "Warning: Duplicate key 1."
    """
    invalids = ensure_iterable(empty.default(invalids, [None]))
    parts = [str(a) for a in args if a not in invalids]
    if formatter is not None:
        parts = [formatter(p) for p in parts]
    return delimiter.join(parts)


def get_string_formatted_kwargs(value):
    """
    Returns the names of the format arguments of a string, in order and
    without duplicates.

    >>> get_string_formatted_kwargs("Must not {operation} this {container}")
    >>> ["operation", "container"]
    """
    names = []
    for name in FORMAT_ARGUMENT.findall(value):
        if name not in names:
            names.append(name)
    return names


def conditionally_format_string(string, *args, **kwargs):
    """
    Formats a string, or picks and formats the best of several candidate
    strings, with values read from an object.

    Unlike :obj:`str.format`, a format argument is only replaced when its
    value is present and not null, and a missing value never raises.  Of
    several candidates, the one with the fewest missing values and, among
    those, the most format arguments wins:

    >>> conditionally_format_string([
    >>>     "The container is immutable.",
    >>>     "You must not {operation} this {container}.",
    >>>     "You must not {operation} this container.",
    >>> ], {"operation": "clear"})
    >>> "You must not clear this container."

    Parameters:
    ----------
    string: :obj:`str` or :obj:`list` or :obj:`tuple`
        The string or candidate strings.

    obj: :obj:`dict` or :obj:`object` (optional)
        Where the values are read from, by key for a :obj:`dict` and by
        attribute otherwise.  Provided positionally or as a keyword argument.
        When omitted, the remaining keyword arguments are used.

    optimized: :obj:`bool` (optional)
        When False, every candidate is formatted and the formatted list is
        returned instead of the best candidate.

        Default: True

    is_null: :obj:`lambda` (optional)
        Decides whether or not a value counts as missing.

        Default: lambda v: v is None
    """
    from immutable_collections import exceptions

    if len(args) > 1:
        raise TypeError(f"Expected 0 or 1 arguments but received {len(args)}.")

    optimized = kwargs.pop('optimized', True)
    is_null = kwargs.pop('is_null', lambda v: v is None)
    if args:
        obj = args[0]
    else:
        obj = kwargs.pop('obj', kwargs)

    def lookup(name):
        return get_attribute(obj, name, strict=False)

    def rank(candidate):
        names = get_string_formatted_kwargs(candidate)
        missing = len([n for n in names if is_null(lookup(n))])
        return (missing, -len(names))

    def format_string(s):
        for name in get_string_formatted_kwargs(s):
            value = lookup(name)
            if not is_null(value):
                s = s.replace("{%s}" % name, str(value))
        return s.strip()

    if string is None or (is_iterable(string) and len(string) == 0):
        return None

    candidates = ensure_iterable(string)
    if any(not isinstance(c, str) for c in candidates):
        raise exceptions.InvalidParamError(
            param='string',
            valid_types=(str, ),
            message=(
                "Expected all values in the {humanized_param} array to be of "
                "type {humanized_valid_types}."
            )
        )
    if optimized:
        # min() keeps the first of equally ranked candidates.
        return format_string(min(candidates, key=rank))
    elif is_iterable(string):
        return [format_string(c) for c in candidates]
    return format_string(string)
