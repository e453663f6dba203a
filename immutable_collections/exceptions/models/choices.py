from immutable_collections import utils


class StringFormatChoices:
    """
    A group of candidate messages that only compete for an exception's
    message while `func` holds for the exception instance.

    >>> content = [
    >>>     StringFormatChoices(
    >>>         func=lambda instance: instance.value is None,
    >>>         isolated=True,
    >>>         choices=["Received an invalid value."]
    >>>     ),
    >>>     "Received invalid value {humanized_value}.",
    >>> ]

    Parameters:
    ----------
    func: :obj:`lambda`
        Takes the exception instance and returns whether or not the group
        applies.

    choices: :obj:`str` or :obj:`tuple` or :obj:`list`
        The candidate message or messages of the group.

    isolated: :obj:`bool` (optional)
        Whether or not the group replaces every other candidate when it
        applies.

        Default: False
    """
    def __init__(self, func, choices, isolated=False):
        self._func = func
        self._choices = choices
        self._isolated = isolated

    def __call__(self, instance):
        return self._func(instance) is True

    @property
    def choices(self):
        return utils.ensure_iterable(self._choices)

    @property
    def isolated(self):
        return self._isolated

    @classmethod
    def flattener(cls, instance):
        return lambda value: cls.flatten(instance, value)

    @classmethod
    def flatten(cls, instance, value):
        """
        Reduces a list of plain candidates and :obj:`StringFormatChoices` to
        the plain candidates that apply to the exception instance.
        """
        candidates = []
        for candidate in value:
            if not isinstance(candidate, cls):
                candidates.append(candidate)
            elif candidate(instance):
                if candidate.isolated:
                    return candidate.choices
                candidates.extend(candidate.choices)
        return candidates
