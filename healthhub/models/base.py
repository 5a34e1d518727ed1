from datetime import datetime, timezone

from beanie import Document
from pydantic import Field

from healthhub.constants import SENSITIVE_FIELDS


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedDocument(Document):
    """Shared base for every collection: creation/update times and public serialization."""

    createdAt: datetime = Field(default_factory=utcnow)
    updatedAt: datetime = Field(default_factory=utcnow)

    def touch(self) -> None:
        self.updatedAt = utcnow()

    def to_public(self, exclude: set[str] | None = None) -> dict:
        """JSON-ready dict without secrets (password, otp)."""
        return self.model_dump(mode="json", exclude=SENSITIVE_FIELDS | (exclude or set()))
