#!/usr/bin/env python3
"""
Tests for the Argument data model and the lookup helpers.
"""

import pytest

from simple_arguments import Argument, get_argument, has_action_argument, has_argument


def noop(arguments):
    return 0


class TestArgument:
    """Test suite for the Argument class."""

    def test_defaults(self):
        """Test a bare argument has empty fields and does not exist."""
        argument = Argument("force")
        assert argument.name == "force"
        assert argument.alias == ""
        assert argument.description == ""
        assert argument.value == ""
        assert argument.exists is False
        assert argument.dependencies == []
        assert argument.action is None
        assert argument.last_action is False

    def test_non_empty_default_value_exists(self):
        """Test a non-empty default value marks the argument as existing."""
        argument = Argument("thing", value="thing.ini")
        assert argument.value == "thing.ini"
        assert argument.exists is True

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_default_value_does_not_exist(self, value):
        """Test empty or None defaults leave the argument absent."""
        argument = Argument("thing", value=value)
        assert argument.value == value
        assert argument.exists is False

    def test_setting_value_marks_exists(self):
        argument = Argument("output")
        argument.value = "output.log"
        assert argument.exists is True

    def test_clearing_value_keeps_exists(self):
        """Test assigning an empty value never resets exists."""
        argument = Argument("output", value="output.log")
        argument.value = ""
        assert argument.value == ""
        assert argument.exists is True

    def test_exists_can_be_set_without_value(self):
        argument = Argument("force")
        argument.exists = True
        assert argument.exists is True
        assert argument.value == ""

    def test_short_uses_alias_or_first_character(self):
        assert Argument("silent", alias="q").short == "q"
        assert Argument("silent").short == "s"

    def test_dependencies_are_copied_to_list(self):
        dependencies = ("thing", "output")
        argument = Argument("some", dependencies=dependencies)
        assert argument.dependencies == ["thing", "output"]


class TestDependenciesSatisfied:
    """Test suite for Argument.dependencies_satisfied."""

    @pytest.mark.parametrize("dependencies", [None, []])
    def test_no_dependencies_always_satisfied(self, dependencies):
        argument = Argument("some", dependencies=dependencies)
        assert argument.dependencies_satisfied([]) is True
        assert argument.dependencies_satisfied([argument, Argument("thing")]) is True

    def test_existing_dependency(self):
        thing = Argument("thing", value="thing.ini")
        some = Argument("some", dependencies=["thing"])
        assert some.dependencies_satisfied([some, thing]) is True

    def test_missing_dependency(self):
        thing = Argument("thing")
        some = Argument("some", dependencies=["thing"])
        assert some.dependencies_satisfied([some, thing]) is False

    def test_all_dependencies_must_exist(self):
        thing = Argument("thing", value="thing.ini")
        force = Argument("force")
        some = Argument("some", dependencies=["thing", "force"])
        assert some.dependencies_satisfied([some, thing, force]) is False
        force.exists = True
        assert some.dependencies_satisfied([some, thing, force]) is True

    def test_unknown_dependency_is_satisfied(self):
        """Test dependency names matching no argument are ignored."""
        some = Argument("some", dependencies=["nothing"])
        assert some.dependencies_satisfied([some]) is True

    def test_dependency_matches_by_name_only(self):
        """Test a dependency on an alias does not match the aliased argument."""
        silent = Argument("silent", alias="q")
        some = Argument("some", dependencies=["q"])
        assert some.dependencies_satisfied([some, silent]) is True
        some.dependencies = ["silent"]
        assert some.dependencies_satisfied([some, silent]) is False


class TestLookupHelpers:
    """Test suite for get_argument, has_argument and has_action_argument."""

    def setup_method(self):
        self.thing = Argument("thing", value="thing.ini")
        self.force = Argument("force")
        self.diff = Argument("diff", action=noop)
        self.arguments = [self.thing, self.force, self.diff]

    def test_get_argument(self):
        assert get_argument("force", self.arguments) is self.force
        assert get_argument("f", self.arguments) is None
        assert get_argument("missing", self.arguments) is None

    def test_get_argument_returns_first_match(self):
        duplicate = Argument("thing")
        assert get_argument("thing", self.arguments + [duplicate]) is self.thing

    def test_get_argument_empty(self):
        assert get_argument("thing", []) is None
        assert get_argument("thing", None) is None

    def test_has_argument(self):
        assert has_argument("thing", self.arguments) is True
        assert has_argument("force", self.arguments) is False
        self.force.exists = True
        assert has_argument("force", self.arguments) is True

    def test_has_argument_does_not_use_alias(self):
        assert has_argument("t", self.arguments) is False

    @pytest.mark.parametrize(
        "name,use_arguments",
        [("", False), (None, True), ("", True), ("thing", False)],
    )
    def test_has_argument_invalid_input(self, name, use_arguments):
        """Test has_argument returns False instead of raising."""
        arguments = self.arguments if use_arguments else []
        assert has_argument(name, arguments) is False

    def test_has_argument_none_arguments(self):
        assert has_argument("thing", None) is False

    def test_has_action_argument(self):
        assert has_action_argument(self.arguments) is False
        self.diff.exists = True
        assert has_action_argument(self.arguments) is True

    def test_has_action_argument_ignores_existing_without_action(self):
        assert has_action_argument([self.thing]) is False
        assert has_action_argument([]) is False
