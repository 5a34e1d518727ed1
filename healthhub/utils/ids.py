from typing import Optional, Type, TypeVar

from beanie import Document
from beanie import PydanticObjectId as OID

from healthhub.exceptions import NotFoundError, ValidationError

D = TypeVar("D", bound=Document)


def parse_object_id(value: Optional[str], label: str) -> OID:
    """Turn a client supplied id into an ObjectId; 400 when missing or malformed."""
    if not value:
        raise ValidationError(f"{label} is required")
    if not OID.is_valid(value):
        raise ValidationError(f"Invalid {label}")
    return OID(value)


async def get_or_404(model: Type[D], value: Optional[str], label: str, not_found: str) -> D:
    document = await model.get(parse_object_id(value, label))
    if not document:
        raise NotFoundError(not_found)
    return document
