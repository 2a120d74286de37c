"""Unit tests for assignment resolution."""

from grantsync.domain.entities import Assignment
from grantsync.domain.services import resolve_assignments
from grantsync.domain.value_objects import ActorKind


def _two_rules() -> list[Assignment]:
    return [
        Assignment(priority=2, tokens=("y",), users=("A",)),
        Assignment(priority=1, tokens=("x",), users=("A",)),
    ]


class TestResolveAssignments:
    """Tests for resolve_assignments."""

    def test_higher_priority_overrides(self) -> None:
        order = resolve_assignments(_two_rules())
        assert order.users == {"A": frozenset({"y"})}

    def test_tokens_are_union_of_all_rules(self) -> None:
        order = resolve_assignments(_two_rules())
        assert order.tokens == frozenset({"x", "y"})
        assert order.sorted_tokens() == ["x", "y"]

    def test_names_keep_resolution_order_with_repeats(self) -> None:
        order = resolve_assignments(_two_rules())
        assert order.user_names == ["A", "A"]
        assert order.unique_names(ActorKind.USER) == ["A"]

    def test_deterministic(self) -> None:
        rules = [
            Assignment(priority=3, tokens=("admin",), groups=("eng",)),
            Assignment(priority=1, tokens=("read",), users=("alice", "bob"), groups=("ops",)),
            Assignment(priority=2, tokens=("write",), users=("bob",)),
        ]
        first = resolve_assignments(rules)
        second = resolve_assignments(rules)
        assert first.users == second.users
        assert first.groups == second.groups
        assert first.user_names == second.user_names == ["alice", "bob", "bob"]
        assert first.group_names == second.group_names == ["ops", "eng"]

    def test_round_trip_rules(self) -> None:
        order = resolve_assignments(
            [
                Assignment(priority=1, tokens=("read",), users=("alice",)),
                Assignment(priority=2, tokens=("write",), groups=("eng",)),
            ]
        )
        assert order.users == {"alice": frozenset({"read"})}
        assert order.groups == {"eng": frozenset({"write"})}

    def test_equal_priority_last_declared_wins(self) -> None:
        order = resolve_assignments(
            [
                Assignment(priority=1, tokens=("x",), users=("A",)),
                Assignment(priority=1, tokens=("y",), users=("A",)),
            ]
        )
        assert order.users == {"A": frozenset({"y"})}

    def test_empty_input(self) -> None:
        order = resolve_assignments([])
        assert order.is_empty()
        assert order.tokens == frozenset()

    def test_duplicate_tokens_collapse(self) -> None:
        order = resolve_assignments([Assignment(priority=1, tokens=("x", "x"), groups=("eng",))])
        assert order.groups == {"eng": frozenset({"x"})}
