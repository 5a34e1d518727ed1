from beanie import Indexed

from healthhub.models.base import TimestampedDocument


class Customer(TimestampedDocument):
    """End customer of the platform. Registered through the customer app, managed here."""

    name: str | None = None
    email: str | None = None
    phoneNumber: Indexed(str, unique=True)
    password: str | None = None
    otp: str | None = None
    avatar: str | None = None
    isBlocked: bool = False

    class Settings:
        name = "customers"
