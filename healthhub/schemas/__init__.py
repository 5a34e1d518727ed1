from typing import Any, ClassVar, List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from healthhub.constants import AvailabilityStatus, PartnerStatus


def _strip_required(value: str) -> str:
    value = value.strip() if isinstance(value, str) else value
    if not value:
        raise ValueError("must not be blank")
    return value


def _lower_email(value: str) -> str:
    return value.strip().lower()


def _strip_if_given(value: Optional[str]) -> Optional[str]:
    # None and "" mean "leave unchanged"; anything else must have content
    if value is None or value == "":
        return value
    return _strip_required(value)


class UpdateIn(BaseModel):
    """Base for partial updates: only non-empty fields are applied."""

    id_field: ClassVar[str] = ""

    def changes(self) -> dict:
        data = self.model_dump(exclude_none=True, exclude={self.id_field})
        return {k: v for k, v in data.items() if v != ""}


# -------------------- Admin auth --------------------


class AdminLoginIn(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _lower_email(v)


class ChangePasswordIn(BaseModel):
    oldPassword: str
    newPassword: str = Field(..., min_length=6)


class AdminProfileUpdate(BaseModel):
    name: Optional[str] = None
    phoneNumber: Optional[str] = None
    avatar: Optional[str] = None


# -------------------- Pathology --------------------


class PathologyCenterCreate(BaseModel):
    centerName: str
    email: EmailStr
    phoneNumber: str
    address: str
    password: str
    ownerName: Optional[str] = None
    labs: List[str] = Field(default_factory=list)
    bookings: Optional[List[Any]] = None
    sampleCollection: Optional[List[Any]] = None

    @field_validator("centerName", "phoneNumber", "address", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _lower_email(v)


class PathologyCenterUpdate(UpdateIn):
    id_field: ClassVar[str] = "pathologyCenterId"
    pathologyCenterId: str
    centerName: Optional[str] = None
    ownerName: Optional[str] = None
    phoneNumber: Optional[str] = None
    address: Optional[str] = None
    labs: Optional[List[str]] = None
    status: Optional[PartnerStatus] = None

    @field_validator("centerName", "ownerName", "phoneNumber", "address")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _strip_if_given(v)


# -------------------- Pharmacy --------------------


class PharmacyCreate(BaseModel):
    pharmacyName: str
    email: EmailStr
    phoneNumber: str
    address: str
    password: str
    ownerName: Optional[str] = None
    licenseNumber: Optional[str] = None
    licenceImage: Optional[str] = None

    @field_validator("pharmacyName", "phoneNumber", "address", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _lower_email(v)


class PharmacyUpdate(UpdateIn):
    id_field: ClassVar[str] = "pharmacyId"
    pharmacyId: str
    pharmacyName: Optional[str] = None
    ownerName: Optional[str] = None
    phoneNumber: Optional[str] = None
    address: Optional[str] = None
    licenseNumber: Optional[str] = None
    licenceImage: Optional[str] = None
    status: Optional[PartnerStatus] = None

    @field_validator("pharmacyName", "ownerName", "phoneNumber", "address")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _strip_if_given(v)


# -------------------- Customers --------------------


class CustomerBlockIn(BaseModel):
    customerId: str
    # When omitted the current state is flipped.
    isBlocked: Optional[bool] = None


# -------------------- Delivery partners --------------------


class DeliveryPartnerIdIn(BaseModel):
    deliveryPartnerId: str


class DeliveryPartnerApprovalIn(DeliveryPartnerIdIn):
    approvalStatus: Literal["approved", "rejected"] = "approved"


class DeliveryPartnerStatusIn(DeliveryPartnerIdIn):
    status: PartnerStatus


class DeliveryPartnerAvailabilityIn(DeliveryPartnerIdIn):
    availabilityStatus: AvailabilityStatus


class DeliveryPartnerUpdate(UpdateIn):
    id_field: ClassVar[str] = "deliveryPartnerId"
    deliveryPartnerId: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phoneNumber: Optional[str] = None
    avatar: Optional[str] = None
    vehicleType: Optional[str] = None
    vehicleNumber: Optional[str] = None
    licenseNumber: Optional[str] = None

    @field_validator("name", "phoneNumber")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _strip_if_given(v)


# -------------------- Medicines --------------------


class MedicineCreate(BaseModel):
    name: str
    price: float = Field(..., ge=0)
    genericName: Optional[str] = None
    manufacturer: Optional[str] = None
    category: Optional[str] = None
    mrp: Optional[float] = Field(None, ge=0)
    stock: int = Field(0, ge=0)
    description: Optional[str] = None
    prescriptionRequired: bool = False
    pharmacyId: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_required(v)


class MedicineUpdate(UpdateIn):
    id_field: ClassVar[str] = "medicineId"
    medicineId: str
    name: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    genericName: Optional[str] = None
    manufacturer: Optional[str] = None
    category: Optional[str] = None
    mrp: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    prescriptionRequired: Optional[bool] = None
    isActive: Optional[bool] = None
