import copy
import pickle
import re

import pytest

from immutable_collections import (
    FixedCapacityError, ImmutableList, InvalidParamError, RequiredParamError)


def fixed_capacity(message):
    return pytest.raises(FixedCapacityError, match=re.escape(message))


class TestConstruction:
    def test_of_copies_positional_items(self):
        letters = ImmutableList.of("A", "B", "C")
        assert len(letters) == 3
        assert letters.to_array() == ["A", "B", "C"]

    def test_of_copies_single_iterable(self):
        source = ["A", "B", "C"]
        letters = ImmutableList.of(source)
        source.append("D")
        source[0] = "Z"
        assert letters == ["A", "B", "C"]

    def test_of_treats_string_as_single_item(self):
        assert ImmutableList.of("ABC") == ["ABC"]

    def test_copy_of_copies_iterable(self):
        source = ["A", "B"]
        letters = ImmutableList.copy_of(source)
        source.clear()
        assert letters == ["A", "B"]

    def test_copy_of_accepts_iterator(self):
        assert ImmutableList.copy_of(iter(range(3))) == [0, 1, 2]

    def test_constructor_copies(self):
        source = ["A"]
        letters = ImmutableList(source)
        source.append("B")
        assert letters == ["A"]

    def test_of_without_items_is_empty_singleton(self):
        assert ImmutableList.of() is ImmutableList.empty()
        assert ImmutableList.copy_of([]) is ImmutableList.empty()
        assert ImmutableList.empty().is_empty()

    def test_of_rejects_none_first_item(self):
        with pytest.raises(
                RequiredParamError,
                match=re.escape("The parameter `item` is required.")):
            ImmutableList.of(None)

    def test_of_keeps_later_none_items(self):
        assert ImmutableList.of("A", None) == ["A", None]

    def test_copy_of_rejects_none(self):
        with pytest.raises(RequiredParamError, match="`items`"):
            ImmutableList.copy_of(None)

    def test_copy_of_rejects_non_iterable(self):
        with pytest.raises(InvalidParamError, match="items"):
            ImmutableList.copy_of(5)


class TestReads:
    letters = ImmutableList.of("A", "B", "C", "B")

    def test_contains(self):
        assert "A" in self.letters
        assert "Z" not in self.letters
        assert self.letters.contains_all(["A", "C"])
        assert not self.letters.contains_all(["A", "Z"])

    def test_get(self):
        assert self.letters.get(1) == "B"

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_get_out_of_bounds(self, index):
        with pytest.raises(IndexError):
            self.letters.get(index)

    def test_index_of(self):
        assert self.letters.index_of("B") == 1
        assert self.letters.last_index_of("B") == 3
        assert self.letters.index_of("Z") == -1
        assert self.letters.last_index_of("Z") == -1

    def test_slice_is_immutable_list(self):
        sliced = self.letters[1:3]
        assert isinstance(sliced, ImmutableList)
        assert sliced == ["B", "C"]

    def test_sub_list(self):
        assert self.letters.sub_list(1, 3) == ImmutableList.of("B", "C")
        assert self.letters.sub_list(2, 2) is ImmutableList.empty()

    @pytest.mark.parametrize("from_index,to_index", [(-1, 2), (0, 5), (3, 1)])
    def test_sub_list_invalid_range(self, from_index, to_index):
        with pytest.raises(IndexError):
            self.letters.sub_list(from_index, to_index)

    def test_to_array_is_caller_owned(self):
        exported = self.letters.to_array()
        exported.append("Z")
        assert len(self.letters) == 4
        assert self.letters.to_array(cast=tuple) == ("A", "B", "C", "B")

    def test_reversed(self):
        assert list(reversed(self.letters)) == ["B", "C", "B", "A"]


class TestListIterator:
    def test_walks_forward_and_backward(self):
        iterator = ImmutableList.of("A", "B").list_iterator()
        assert not iterator.has_previous()
        assert next(iterator) == "A"
        assert next(iterator) == "B"
        assert not iterator.has_next()
        with pytest.raises(StopIteration):
            next(iterator)
        assert iterator.previous() == "B"
        assert iterator.previous_index() == 0
        assert iterator.next_index() == 1

    def test_starts_at_index(self):
        iterator = ImmutableList.of("A", "B", "C").list_iterator(2)
        assert list(iterator) == ["C"]

    def test_rejects_invalid_index(self):
        with pytest.raises(IndexError):
            ImmutableList.of("A").list_iterator(2)

    def test_rejects_mutation(self):
        iterator = ImmutableList.of("A").list_iterator()
        with fixed_capacity(
                "You must not set an element through this list iterator."):
            iterator.set("B")
        with fixed_capacity(
                "You must not add an element through this list iterator."):
            iterator.add("B")
        with fixed_capacity(
                "You must not remove an element through this list iterator."):
            iterator.remove()


class TestMutation:
    @pytest.mark.parametrize("method,args,message", [
        ("append", ("D", ), "You must not add an element to this list."),
        ("extend", (["D"], ), "You must not add elements to this list."),
        ("insert", (0, "D"), "You must not insert an element into this list."),
        ("remove", ("A", ), "You must not remove an element from this list."),
        ("pop", (), "You must not remove an element from this list."),
        ("remove_all", (["A"], ), "You must not remove elements from this list."),
        ("retain_all", (["A"], ), "You must not retain elements in this list."),
        ("clear", (), "You must not clear this list."),
        ("sort", (), "You must not sort this list."),
        ("reverse", (), "You must not reverse this list."),
    ])
    def test_mutator_is_rejected(self, method, args, message):
        letters = ImmutableList.of("C", "A", "B")
        with fixed_capacity(message):
            getattr(letters, method)(*args)
        assert letters == ["C", "A", "B"]

    def test_item_assignment_is_rejected(self):
        letters = ImmutableList.of("A", "B")
        with fixed_capacity("You must not set an element in this list."):
            letters[0] = "Z"
        with fixed_capacity("You must not set elements in this list."):
            letters[0:1] = ["Z"]
        assert letters == ["A", "B"]

    def test_item_deletion_is_rejected(self):
        letters = ImmutableList.of("A", "B")
        with fixed_capacity("You must not remove an element from this list."):
            del letters[0]
        with fixed_capacity("You must not remove elements from this list."):
            del letters[0:1]
        assert letters == ["A", "B"]

    def test_in_place_operators_are_rejected(self):
        letters = ImmutableList.of("A")
        with fixed_capacity("You must not add elements to this list."):
            letters += ["B"]
        with fixed_capacity("You must not add elements to this list."):
            letters *= 2
        assert letters == ["A"]

    def test_empty_singleton_rejects_mutation(self):
        with fixed_capacity("You must not add an element to this list."):
            ImmutableList.empty().append("A")
        assert ImmutableList.empty().is_empty()

    def test_error_is_type_error(self):
        with pytest.raises(TypeError):
            ImmutableList.of("A").clear()


class TestEquality:
    def test_equals_other_sequences(self):
        letters = ImmutableList.of("A", "B")
        assert letters == ["A", "B"]
        assert letters == ("A", "B")
        assert letters == ImmutableList.copy_of(["A", "B"])
        assert letters != ["B", "A"]
        assert letters != ["A"]

    def test_does_not_equal_text(self):
        assert ImmutableList.of("A", "B") != "AB"

    def test_does_not_equal_range(self):
        numbers = ImmutableList.of(0, 1)
        assert numbers != range(2)
        assert range(2) != numbers
        assert len({numbers, range(2)}) == 2

    def test_hash_matches_tuple(self):
        letters = ImmutableList.of("A", "B")
        assert hash(letters) == hash(("A", "B"))
        assert {letters: 1}[ImmutableList.of("A", "B")] == 1

    def test_copy_and_pickle(self):
        letters = ImmutableList.of("A", ["B"])
        assert copy.copy(letters) is letters
        deep = copy.deepcopy(letters)
        assert deep == letters
        assert deep[1] is not letters[1]
        assert pickle.loads(pickle.dumps(letters)) == letters
        empty = pickle.loads(pickle.dumps(ImmutableList.empty()))
        assert empty is ImmutableList.empty()

    def test_repr(self):
        assert repr(ImmutableList.of("A")) == "ImmutableList(['A'])"
