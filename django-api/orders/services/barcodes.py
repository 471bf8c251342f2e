"""Ticket barcode generation.

Barcodes are short random tokens, unique within an event. The existence check
here filters almost every collision, but the (event, barcode) unique
constraint is what guarantees uniqueness, so inserts go through ``assign``.
"""

import logging
import string
from collections.abc import Callable
from typing import TypeVar

from django.utils.crypto import get_random_string

from common.errors import BarcodeExhaustedError
from events.domain import EventId
from orders.stores.interfaces import DuplicateBarcodeError, OrderStore

logger = logging.getLogger(__name__)

BARCODE_ALPHABET = string.ascii_letters + string.digits

T = TypeVar("T")


class BarcodeGenerator:
    """Produces barcodes that are unique per event."""

    def __init__(
        self,
        store: OrderStore,
        length: int = 12,
        max_attempts: int = 10,
        random_string: Callable[[int, str], str] = get_random_string,
    ) -> None:
        self._store = store
        self._length = length
        self._max_attempts = max_attempts
        self._random_string = random_string

    def generate(self, event_id: EventId) -> str:
        """Return a barcode not yet used by any ticket of the event.

        Raises:
            BarcodeExhaustedError: If every attempt collided.
        """
        for _ in range(self._max_attempts):
            barcode = self._random_string(self._length, BARCODE_ALPHABET)
            if not self._store.barcode_exists(event_id, barcode):
                return barcode
            logger.warning("Barcode collision for event %s; regenerating", event_id)
        raise BarcodeExhaustedError(str(event_id), self._max_attempts)

    def assign(self, event_id: EventId, insert: Callable[[str], T]) -> T:
        """Generate a barcode and pass it to ``insert``.

        A late collision reported by ``insert`` as DuplicateBarcodeError
        regenerates the barcode and retries.

        Raises:
            BarcodeExhaustedError: If no insert succeeded within the bound.
        """
        for _ in range(self._max_attempts):
            barcode = self.generate(event_id)
            try:
                return insert(barcode)
            except DuplicateBarcodeError:
                logger.warning("Barcode taken at insert for event %s; retrying", event_id)
        raise BarcodeExhaustedError(str(event_id), self._max_attempts)
