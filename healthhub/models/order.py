from datetime import datetime

from beanie import PydanticObjectId as OID
from pydantic import BaseModel, Field, model_validator

from healthhub.constants import OrderStatus, OrderType, PaymentMethod, PaymentStatus
from healthhub.models.base import TimestampedDocument, utcnow


class Coordinates(BaseModel):
    lat: float | None = None
    long: float | None = None


class DeliveryAddress(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    coordinates: Coordinates | None = None


class PickupAddress(BaseModel):
    address: str | None = None
    coordinates: Coordinates | None = None


class OrderItem(BaseModel):
    """Either a medicine line (pharmacy orders) or a named test (pathology orders)."""
    medicineId: OID | None = None
    testName: str | None = None
    quantity: int | None = None
    price: float | None = None
    prescription: str | None = None  # URL if uploaded


class Order(TimestampedDocument):
    orderType: OrderType
    customerId: OID
    pharmacyId: OID | None = None
    pathologyCenterId: OID | None = None
    deliveryPartnerId: OID | None = None

    items: list[OrderItem] = Field(default_factory=list)
    deliveryAddress: DeliveryAddress | None = None
    pickupAddress: PickupAddress | None = None

    orderStatus: OrderStatus = OrderStatus.PENDING
    paymentStatus: PaymentStatus = PaymentStatus.PENDING
    paymentMethod: PaymentMethod | None = None
    totalAmount: float

    orderDate: datetime = Field(default_factory=utcnow)
    deliveryDate: datetime | None = None
    prescriptionRequired: bool = False
    isTestHomeCollection: bool = False

    @model_validator(mode="after")
    def _check_partner_reference(self):
        if self.orderType == OrderType.PHARMACY and self.pharmacyId is None:
            raise ValueError("pharmacyId is required for pharmacy orders")
        if self.orderType == OrderType.PATHOLOGY and self.pathologyCenterId is None:
            raise ValueError("pathologyCenterId is required for pathology orders")
        return self

    class Settings:
        name = "orders"
