from orders.handlers.views import CheckoutView, OrderDetailView, OrderListView

__all__ = ["CheckoutView", "OrderListView", "OrderDetailView"]
