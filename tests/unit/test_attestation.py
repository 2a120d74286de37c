"""Unit tests for attestation."""

from grantsync.domain.services import DEFAULT_IGNORED_TOKENS, create_attestation

from tests.conftest import FakePermissionGateway


def test_inverts_tokens_to_sorted_names() -> None:
    observed = FakePermissionGateway(
        users={"bob": ["Developers"], "alice": ["Developers", "Administrators"]},
        groups={"eng": ["Developers"]},
    ).read_permissions()

    attestation = create_attestation(observed)

    assert attestation.users == {
        "Administrators": ["alice"],
        "Developers": ["alice", "bob"],
    }
    assert attestation.groups == {"Developers": ["eng"]}
    assert list(attestation.users) == ["Administrators", "Developers"]


def test_ignored_tokens_are_left_out() -> None:
    observed = FakePermissionGateway(
        users={"addon": ["atlassian-addons-project-access"], "alice": ["Developers"]},
    ).read_permissions()

    attestation = create_attestation(observed)

    assert "atlassian-addons-project-access" in DEFAULT_IGNORED_TOKENS
    assert attestation.to_dict() == {"users": {"Developers": ["alice"]}, "groups": {}}


def test_custom_ignored_tokens() -> None:
    observed = FakePermissionGateway(groups={"eng": ["read_space", "export_space"]}).read_permissions()
    attestation = create_attestation(observed, ignored_tokens=["export_space"])
    assert attestation.groups == {"read_space": ["eng"]}
