import pytest

from immutable_collections import (
    DuplicateKeyError, FixedCapacityError, ImmutableCollectionsError,
    InvalidParamError, RequiredParamError)
from immutable_collections import exceptions
from immutable_collections.containers import rejects_mutation


class TestMessages:
    def test_fixed_capacity_error(self):
        err = FixedCapacityError(operation="clear", container="map")
        assert str(err) == "You must not clear this map."
        assert isinstance(err, TypeError)
        assert isinstance(err, ImmutableCollectionsError)

    def test_fixed_capacity_error_partial(self):
        assert str(FixedCapacityError(operation="clear")) == \
            "You must not clear this container."
        assert str(FixedCapacityError(container="set")) == \
            "The set is immutable."
        assert str(FixedCapacityError()) == "The container is immutable."

    def test_duplicate_key_error(self):
        assert str(DuplicateKeyError(key=0, value="A", other_value="B")) == \
            "Duplicate key 0 (attempted merging values A and B)."
        assert str(DuplicateKeyError(key=2)) == "Duplicate key 2."
        assert str(DuplicateKeyError()) == \
            "Duplicate key encountered while collecting."

    def test_duplicate_key_error_with_none_key(self):
        err = DuplicateKeyError(key=None, value="A", other_value="B")
        assert str(err) == (
            "Duplicate key None (attempted merging values A and B).")
        assert err.key is None

    def test_required_param_error(self):
        assert str(RequiredParamError(param='item')) == \
            "The parameter `item` is required."
        assert str(RequiredParamError(param=['a', 'b'], conjunction='or')) \
            == "One of the parameters a or b is required."

    def test_required_param_error_prefix(self):
        err = RequiredParamError(param='item', func='ImmutableList.of')
        assert str(err) == (
            "Improper usage of method ImmutableList.of: "
            "The parameter `item` is required."
        )

    def test_invalid_param_error(self):
        err = InvalidParamError(param='items', value=5, valid_types=(list, ))
        assert str(err) == (
            "Received invalid value 5 for parameter items, expected list.")

    def test_invalid_param_error_without_value(self):
        err = InvalidParamError(param="other_entries", valid_types=(tuple, ))
        assert str(err) == (
            "Received an invalid value for parameter other_entries, "
            "expected tuple.")

    def test_explicit_message(self):
        err = InvalidParamError(param='x', message="Bad {humanized_param}.")
        assert str(err) == "Bad x."

    def test_detail(self):
        err = RequiredParamError(param='item', detail="Provide an item.")
        first, second = str(err).split("\n")
        assert first == "The parameter `item` is required."
        assert second.startswith("-->")
        assert second.endswith("Provide an item.")


class Gate:
    container_name = "gate"

    def __init__(self, is_mutable):
        self.is_mutable = is_mutable

    @rejects_mutation("open")
    def open(self):
        return "opened"


class TestCheckInstance:
    def test_passes_when_criteria_met(self):
        assert Gate(is_mutable=True).open() == "opened"

    def test_raises_when_criteria_not_met(self):
        with pytest.raises(
                FixedCapacityError, match="You must not open this gate."):
            Gate(is_mutable=False).open()

    def test_message_from_criteria_function(self):
        class Door:
            @exceptions.check_instance(
                criteria=[exceptions.Criteria(func=lambda i: "Not ready.")])
            def open(self):
                return "opened"

        with pytest.raises(TypeError, match="Not ready."):
            Door().open()

    def test_evaluate_without_raising(self):
        check = exceptions.check_instance(
            exceptions.Criteria(attr='is_mutable'))
        assert check.evaluate(Gate(is_mutable=True)) is True
        assert check.evaluate(Gate(is_mutable=False), strict=False) is None

    def test_criteria_requires_func_or_attr(self):
        with pytest.raises(RequiredParamError, match="func or attr"):
            exceptions.Criteria()

    def test_requires_criteria(self):
        with pytest.raises(InvalidParamError, match="At least 1 criteria"):
            exceptions.check_instance()
