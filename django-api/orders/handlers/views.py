"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to common.exception_handler for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import permissions, status
from rest_framework.pagination import PageNumberPagination
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.stores import DjangoEventStore, DjangoOfferStore
from orders.domain import parse_checkout_request
from orders.gateways import EmailOrderNotifier, StripePaymentGateway
from orders.handlers.serializers import OrderSerializer
from orders.services import BarcodeGenerator, CheckoutService, OrderService
from orders.stores import DjangoOrderStore


def build_checkout_service() -> CheckoutService:
    orders = DjangoOrderStore()
    return CheckoutService(
        offers=DjangoOfferStore(),
        events=DjangoEventStore(),
        orders=orders,
        payments=StripePaymentGateway(
            api_key=settings.STRIPE_SECRET_KEY,
            statement_descriptor=settings.CHECKOUT_STATEMENT_DESCRIPTOR,
        ),
        notifier=EmailOrderNotifier(from_email=settings.ORDER_EMAIL_FROM),
        barcodes=BarcodeGenerator(
            orders,
            length=settings.BARCODE_LENGTH,
            max_attempts=settings.BARCODE_MAX_ATTEMPTS,
        ),
        currency=settings.CHECKOUT_CURRENCY,
        description=settings.CHECKOUT_DESCRIPTION,
    )


def build_order_service() -> OrderService:
    return OrderService(DjangoOrderStore())


class CheckoutView(APIView):
    """Handler for POST /api/checkout"""

    permission_classes = [permissions.IsAuthenticated]

    def post(self, request: Request) -> Response:
        checkout_request = parse_checkout_request(request.data, find_offer=DjangoOfferStore().get_offer)
        order = build_checkout_service().checkout(request.user, checkout_request)
        return Response({"order": OrderSerializer(order).data}, status=status.HTTP_201_CREATED)


class OrderListView(APIView):
    """Handler for GET /api/orders"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request) -> Response:
        orders = build_order_service().list_orders(request.user)
        paginator = PageNumberPagination()
        page = paginator.paginate_queryset(orders, request, view=self)
        return paginator.get_paginated_response(OrderSerializer(page, many=True).data)


class OrderDetailView(APIView):
    """Handler for GET /api/orders/{order_id}"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request, order_id: str) -> Response:
        order = build_order_service().get_order(request.user, order_id)
        return Response(OrderSerializer(order).data)
