from src.models.customer import Customer
from src.models.invoice import Invoice
from src.models.revenue import Revenue
from src.models.user import User

__all__ = [
    "Customer",
    "Invoice",
    "Revenue",
    "User",
]
