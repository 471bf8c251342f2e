from orders.services.barcodes import BarcodeGenerator
from orders.services.checkout_service import CheckoutService
from orders.services.order_service import OrderService

__all__ = ["BarcodeGenerator", "CheckoutService", "OrderService"]
