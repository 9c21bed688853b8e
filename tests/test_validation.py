"""Tests for list and todo name validation."""

import pytest

from todolists.models import TodoList
from todolists.services.validation import (
    LIST_NAME_LENGTH_ERROR,
    LIST_NAME_TAKEN_ERROR,
    TODO_NAME_LENGTH_ERROR,
    NameValidationError,
    validate_list_name,
    validate_todo_name,
)


@pytest.fixture
def existing_lists():
    return [TodoList(id=1, name="Groceries"), TodoList(id=2, name="Work")]


class TestValidateListName:
    """Tests for validate_list_name."""

    @pytest.mark.parametrize("length", [1, 2, 50, 99, 100])
    def test_valid_lengths_with_unique_name(self, existing_lists, length):
        assert validate_list_name("x" * length, existing_lists) is None

    @pytest.mark.parametrize("name", ["", "x" * 101, "x" * 250])
    def test_invalid_lengths(self, existing_lists, name):
        assert validate_list_name(name, existing_lists) == [LIST_NAME_LENGTH_ERROR]

    def test_duplicate_name_is_case_insensitive(self, existing_lists):
        assert validate_list_name("groceries", existing_lists) == [LIST_NAME_TAKEN_ERROR]
        assert validate_list_name("WORK", existing_lists) == [LIST_NAME_TAKEN_ERROR]

    def test_unique_against_empty_store(self):
        assert validate_list_name("Groceries", []) is None

    def test_duplicate_check_uses_simple_lowercasing(self):
        existing = [TodoList(id=1, name="STRASSE")]

        assert validate_list_name("Stra\u00dfe", existing) is None
        assert validate_list_name("strasse", existing) == [LIST_NAME_TAKEN_ERROR]

    def test_rules_are_checked_independently(self):
        long_name = "x" * 101
        existing = [TodoList.model_construct(id=1, name=long_name.upper(), todos=[])]

        errors = validate_list_name(long_name, existing)

        assert errors == [LIST_NAME_LENGTH_ERROR, LIST_NAME_TAKEN_ERROR]


class TestValidateTodoName:
    """Tests for validate_todo_name."""

    @pytest.mark.parametrize("length", [1, 100])
    def test_boundaries_are_valid(self, length):
        assert validate_todo_name("t" * length) is None

    @pytest.mark.parametrize("name", ["", "t" * 101])
    def test_out_of_range_is_rejected(self, name):
        errors = validate_todo_name(name)
        assert errors == [TODO_NAME_LENGTH_ERROR]


def test_name_validation_error_keeps_messages():
    exc = NameValidationError([LIST_NAME_LENGTH_ERROR, LIST_NAME_TAKEN_ERROR])
    assert exc.errors == [LIST_NAME_LENGTH_ERROR, LIST_NAME_TAKEN_ERROR]
    assert isinstance(exc, ValueError)
    assert LIST_NAME_TAKEN_ERROR in str(exc)
