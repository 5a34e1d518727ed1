# Re-export Beanie documents
from .admin import Admin
from .customer import Customer
from .pathology import PathologyCenter
from .pharmacy import Pharmacy
from .delivery_partner import DeliveryPartner
from .medicine import Medicine
from .order import Order, OrderItem, DeliveryAddress, PickupAddress, Coordinates

DOCUMENT_MODELS = [
    Admin,
    Customer,
    PathologyCenter,
    Pharmacy,
    DeliveryPartner,
    Medicine,
    Order,
]
