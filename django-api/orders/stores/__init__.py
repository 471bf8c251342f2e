from orders.stores.django_store import DjangoOrderStore
from orders.stores.interfaces import DuplicateBarcodeError, DuplicateOrderError, OrderStore

__all__ = ["OrderStore", "DjangoOrderStore", "DuplicateBarcodeError", "DuplicateOrderError"]
