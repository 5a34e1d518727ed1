from typing import Optional

from healthhub.models import Customer
from healthhub.services.pagination import Page, PageParams, paginate
from healthhub.utils.ids import get_or_404
from healthhub.utils.logger import get_logger

logger = get_logger("customer_service")


async def list_customers(params: PageParams) -> Page:
    return await paginate(Customer, params)


async def get_customer(customer_id: Optional[str]) -> Customer:
    return await get_or_404(Customer, customer_id, "Customer ID", "Customer not found")


async def set_blocked(customer_id: Optional[str], blocked: Optional[bool] = None) -> Customer:
    """Block or unblock a customer.

    Without `blocked` the current flag is negated (read-modify-write), so two
    calls in a row restore the original state. Passing `blocked` sets that
    state explicitly and is safe to retry.
    """
    customer = await get_customer(customer_id)
    customer.isBlocked = (not customer.isBlocked) if blocked is None else blocked
    customer.touch()
    await customer.save()
    logger.info(f"Customer {customer.id} isBlocked={customer.isBlocked}")
    return customer
