from immutable_collections import exceptions


class DuplicateKeyError(exceptions.ImmutableCollectionsError):
    """
    Raised by the map collector when two elements map to the same key, either
    while folding sequentially or while merging two accumulations.

    Parameters:
    ----------
    key: (optional)
        The conflicting key.

        Default: None

    value: (optional)
        The value that the accumulation already holds for the key.

        Default: None

    other_value: (optional)
        The value that was being added for the key.

        Default: None
    """
    attributes = [
        exceptions.ExceptionAttribute(name='key'),
        exceptions.ExceptionAttribute(name='value'),
        exceptions.ExceptionAttribute(name='other_value'),
    ]
    content = [
        "Duplicate key encountered while collecting.",
        "Duplicate key {humanized_key}.",
        "Duplicate key {humanized_key} (attempted merging values "
        "{humanized_value} and {humanized_other_value}).",
    ]

    def __init__(self, **kwargs):
        # None is a legitimate key, so what was provided is tracked separately
        # from the attribute values.
        self._provided = {
            k for k in ('key', 'value', 'other_value') if k in kwargs}
        super().__init__(**kwargs)

    def humanize(self, name):
        if name not in self._provided:
            return None
        return str(getattr(self, name))

    @property
    def humanized_key(self):
        return self.humanize('key')

    @property
    def humanized_value(self):
        return self.humanize('value')

    @property
    def humanized_other_value(self):
        return self.humanize('other_value')


class AccumulationSealedError(exceptions.ImmutableCollectionsError):
    content = "The accumulation was already finished and cannot be modified."
