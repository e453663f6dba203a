from immutable_collections import utils


class ExceptionMetaClass(type):
    """
    Meta class for :obj:`AbstractException` that merges the `attributes` of
    the bases with those declared on the class being created, a later
    declaration of an attribute replacing an earlier one, and exposes each
    attribute as an @property that returns its formatted value.
    """
    def __new__(cls, name, bases, dct):
        declared = [getattr(b, 'attributes', []) for b in bases]
        dct['attributes'] = utils.merge_without_duplicates(
            *declared, dct.get('attributes', []), attr='name')
        klass = super().__new__(cls, name, bases, dct)
        for attr in dct['attributes']:
            static = getattr(klass, attr.name, utils.empty)
            getter = cls.attribute_getter(attr, static)
            setattr(klass, attr.name, property(getter))
        return klass

    @staticmethod
    def attribute_getter(attr, static=utils.empty):
        """
        Returns the getter of the @property of `attr`.  The value is looked
        up in the following order, where only None falls through to the next
        source:

        (1) The value provided on initialization.
        (2) The value defined statically on the class, which can itself be an
            @property.
        (3) The `default` of the :obj:`ExceptionAttribute`.
        (4) The `default_<name>` attribute of the class.
        """
        def getter(instance):
            value = getattr(instance, f'_{attr.name}', None)
            if value is None and static is not utils.empty:
                value = static
                if isinstance(static, property):
                    value = static.fget(instance)
            if value is None:
                value = attr.default
            if value is None:
                value = getattr(instance, f'default_{attr.name}', None)
            return attr.format(value, instance)
        return getter
