"""Unit tests for assignment input validation."""

import pytest

from grantsync.application.dto import parse_assignments
from grantsync.domain.entities import Assignment
from grantsync.domain.exceptions import ValidationError
from grantsync.domain.value_objects import ObjectKind


class TestParseAssignments:
    """Tests for parse_assignments."""

    def test_converts_to_domain(self) -> None:
        raw = [
            {"priority": 1, "tokens": ["Developers"], "users": ["alice"]},
            {"priority": 2, "roles": ["Administrators"], "groups": ["eng"]},
        ]
        assert parse_assignments(raw, ObjectKind.PROJECT) == [
            Assignment(priority=1, tokens=("Developers",), users=("alice",)),
            Assignment(priority=2, tokens=("Administrators",), groups=("eng",)),
        ]

    def test_none_is_empty(self) -> None:
        assert parse_assignments(None, ObjectKind.PROJECT) == []

    def test_space_permissions_alias(self) -> None:
        raw = [{"priority": 1, "permissions": ["read_space"], "groups": ["eng"]}]
        assert parse_assignments(raw, ObjectKind.SPACE)[0].tokens == ("read_space",)

    def test_duplicate_priorities_rejected(self) -> None:
        raw = [
            {"priority": 1, "tokens": ["a"], "users": ["alice"]},
            {"priority": 1, "tokens": ["b"], "users": ["bob"]},
        ]
        with pytest.raises(ValidationError, match="duplicate assignment priority 1"):
            parse_assignments(raw, ObjectKind.PROJECT)

    def test_empty_tokens_rejected(self) -> None:
        with pytest.raises(ValidationError, match="tokens"):
            parse_assignments([{"priority": 1, "tokens": []}], ObjectKind.PROJECT)

    def test_missing_priority_rejected(self) -> None:
        with pytest.raises(ValidationError, match="priority"):
            parse_assignments([{"tokens": ["a"]}], ObjectKind.PROJECT)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_assignments(
                [{"priority": 1, "tokens": ["a"], "owners": ["x"]}], ObjectKind.PROJECT
            )

    def test_unknown_space_permission_rejected(self) -> None:
        raw = [{"priority": 1, "tokens": ["read_space", "fly_space"], "users": ["alice"]}]
        with pytest.raises(ValidationError, match="Unknown space permissions: fly_space"):
            parse_assignments(raw, ObjectKind.SPACE)

    def test_project_roles_are_not_restricted(self) -> None:
        raw = [{"priority": 1, "tokens": ["Any Custom Role"], "users": ["alice"]}]
        assert parse_assignments(raw, ObjectKind.PROJECT)[0].tokens == ("Any Custom Role",)
