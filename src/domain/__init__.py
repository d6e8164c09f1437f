"""Domain layer: errors, schemas, static catalog."""

from .catalog import Catalog, Order, OrderItem, Product, load_catalog
from .errors import CatalogError, ErrorCodes, RelayError, ValidationError
from .schemas import Message, Role, Sender, Turn

__all__ = [
    "Catalog",
    "Order",
    "OrderItem",
    "Product",
    "load_catalog",
    "CatalogError",
    "ErrorCodes",
    "RelayError",
    "ValidationError",
    "Message",
    "Role",
    "Sender",
    "Turn",
]
