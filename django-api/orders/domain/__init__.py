from orders.domain.models import ContactInfo, Order, OrderId, Ticket, TicketId, TicketStatus
from orders.domain.requests import CheckoutRequest, parse_checkout_request, quantity_limit_error

__all__ = [
    "Order",
    "Ticket",
    "OrderId",
    "TicketId",
    "TicketStatus",
    "ContactInfo",
    "CheckoutRequest",
    "parse_checkout_request",
    "quantity_limit_error",
]
