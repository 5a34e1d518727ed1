import pytest
from beanie import PydanticObjectId as OID
from pydantic import ValidationError

from healthhub.constants import OrderStatus, OrderType, PaymentStatus
from healthhub.models import Order, OrderItem


async def test_pharmacy_order_requires_pharmacy(db):
    with pytest.raises(ValidationError):
        Order(orderType=OrderType.PHARMACY, customerId=OID(), totalAmount=10)


async def test_pathology_order_requires_center(db):
    with pytest.raises(ValidationError):
        Order(orderType=OrderType.PATHOLOGY, customerId=OID(), pharmacyId=OID(), totalAmount=10)


async def test_pathology_order_defaults(db):
    order = Order(
        orderType=OrderType.PATHOLOGY,
        customerId=OID(),
        pathologyCenterId=OID(),
        items=[OrderItem(testName="Lipid profile", price=499)],
        totalAmount=499,
        isTestHomeCollection=True,
    )
    await order.insert()

    stored = await Order.get(order.id)
    assert stored.orderStatus == OrderStatus.PENDING
    assert stored.paymentStatus == PaymentStatus.PENDING
    assert stored.items[0].testName == "Lipid profile"
