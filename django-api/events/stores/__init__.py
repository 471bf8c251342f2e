from events.stores.django_store import DjangoEventStore, DjangoOfferStore
from events.stores.interfaces import EventStore, OfferStore

__all__ = ["EventStore", "OfferStore", "DjangoEventStore", "DjangoOfferStore"]
