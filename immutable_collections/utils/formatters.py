CONJUNCTIONS = ('or', 'and')


def humanize_list(value, callback=str, conjunction='and',
        oxford_comma=True):
    """
    Renders the elements as an enumeration for messages, i.e.
    "1, 2, and 3" or "Entry or tuple".

    Parameters:
    ----------
    callback: :obj:`lambda` (optional)
        Renders a single element.

        Default: str

    conjunction: :obj:`str` (optional)
        Either "and" or "or".

        Default: "and"
    """
    if conjunction.lower() not in CONJUNCTIONS:
        raise ValueError(
            f"Expected conjunction `or` or `and`, but received {conjunction}.")
    rendered = [callback(v) for v in value]
    if len(rendered) < 2:
        return "".join(rendered)
    head = ", ".join(rendered[:-1])
    if len(rendered) > 2 and oxford_comma:
        head += ","
    return f"{head} {conjunction.lower()} {rendered[-1]}"


def humanize_dict(value, formatter=None, delimeter=" "):
    """
    Renders each pair of a mapping as `key=value`, in iteration order.

    >>> humanize_dict({1: "A", 2: "B"}, delimeter=", ")
    >>> "1=A, 2=B"
    """
    if not hasattr(value, 'items'):
        raise TypeError(
            f"The provided value must be a mapping, not {type(value)}.")
    if formatter is None:
        return delimeter.join(f"{k}={v}" for k, v in value.items())
    return delimeter.join(f"{k}={formatter(v)}" for k, v in value.items())
