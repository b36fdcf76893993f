"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from leaf.domain.value.common import RootValueObject


class CommentStatus(str, Enum):
    """Moderation state of a comment.

    Only approved comments are shown on the public blog.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(str, Enum):
    """Role carried in the access token."""

    USER = "user"
    ADMIN = "admin"


class Handle(RootValueObject[str]):
    """Display name shown next to a user's comments."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Handle must be 1-100 characters")
        return v
