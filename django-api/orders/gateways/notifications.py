"""Order confirmation delivery."""

import logging
from abc import ABC, abstractmethod
from typing import Any
from zoneinfo import ZoneInfo

from django.core.mail import send_mail

logger = logging.getLogger(__name__)


class OrderNotifier(ABC):
    """Interface for notifying a buyer about an order."""

    @abstractmethod
    def send(self, template: str, data: dict[str, Any]) -> None:
        """Render ``template`` with ``data`` and deliver it to the buyer."""
        ...


class EmailOrderNotifier(OrderNotifier):
    """Sends order confirmations through Django's email backend."""

    TEMPLATES = {"order"}

    def __init__(self, from_email: str) -> None:
        self._from_email = from_email

    def send(self, template: str, data: dict[str, Any]) -> None:
        if template not in self.TEMPLATES:
            raise ValueError(f"Unknown notification template: {template}")

        order = data["order"]
        recipient = order.contact.email or getattr(data["buyer"], "email", "")
        if not recipient:
            logger.info("Order %s has no email recipient; skipping confirmation", order.id)
            return

        subject, body = self._compose_order(data)
        send_mail(subject, body, self._from_email, [recipient], fail_silently=False)
        logger.info("Sent order confirmation for order %s", order.id)

    def _compose_order(self, data: dict[str, Any]) -> tuple[str, str]:
        order = data["order"]
        event = data["event"]
        tz = ZoneInfo(event.timezone)

        lines = [
            f"Thank you for your order, {order.contact.first_name or 'there'}.",
            "",
            f"Event: {event.name}",
        ]
        if event.start_date:
            lines.append(f"Starts: {event.start_date.astimezone(tz).isoformat()}")
        lines += [
            f"Order: {order.id}",
            f"Order date: {order.created_at.astimezone(tz).isoformat()}",
            f"Tickets: {data['quantity']} x {data['unit_price']}",
            f"Total: {data['total']}",
            "",
        ]
        lines += [f"  {ticket.barcode}" for ticket in order.tickets]
        return f"Your tickets for {event.name}", "\n".join(lines)
