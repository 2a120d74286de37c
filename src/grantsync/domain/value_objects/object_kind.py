"""Remote object kinds and their token vocabularies."""

from enum import StrEnum

# Confluence space permissions, as <operation>_<target>
SPACE_PERMISSION_KEYS: frozenset[str] = frozenset(
    {
        "read_space",
        "delete_space",
        "create_page",
        "delete_page",
        "archive_page",
        "create_blogpost",
        "delete_blogpost",
        "create_comment",
        "delete_comment",
        "create_attachment",
        "delete_attachment",
        "administer_space",
        "restrict_content_space",
        "export_space",
    }
)


class ObjectKind(StrEnum):
    """Objects whose access control is reconciled."""

    PROJECT = "project"
    SPACE = "space"

    @property
    def allowed_tokens(self) -> frozenset[str] | None:
        """Token vocabulary, or None when tokens are free-form (project role names)."""
        if self is ObjectKind.SPACE:
            return SPACE_PERMISSION_KEYS
        return None
