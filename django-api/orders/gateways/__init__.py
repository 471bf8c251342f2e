from orders.gateways.notifications import EmailOrderNotifier, OrderNotifier
from orders.gateways.payments import Charge, PaymentGateway, StripePaymentGateway

__all__ = [
    "Charge",
    "PaymentGateway",
    "StripePaymentGateway",
    "OrderNotifier",
    "EmailOrderNotifier",
]
