from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.payments import get_payment_gateway

from .serializers import (
    PurchaseInputSerializer,
    PurchaseResultSerializer,
    PurchaseErrorSerializer,
    OrderFilterSerializer,
    OrderSerializer,
)
from .services import (
    PurchaseOrchestrator,
    list_orders_for_buyer,
    list_orders_for_seller,
    list_orders_for_user,
    get_order_for_participant,
    # Exceptions
    PurchaseError,
    OrderNotFoundError,
)


PURCHASE_ERROR_STATUS = {
    'invalid_input': status.HTTP_400_BAD_REQUEST,
    'not_available': status.HTTP_400_BAD_REQUEST,
    'already_sold': status.HTTP_400_BAD_REQUEST,
    'self_purchase': status.HTTP_400_BAD_REQUEST,
    'data_integrity': status.HTTP_500_INTERNAL_SERVER_ERROR,
    'persistence_error': status.HTTP_500_INTERNAL_SERVER_ERROR,
    'gateway_error': status.HTTP_502_BAD_GATEWAY,
    'gateway_unavailable': status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _purchase_error_response(error):
    return Response(
        {
            'error': error.client_message,
            'code': error.code,
            'outcome': error.outcome,
            'stage': error.stage.value if error.stage else None,
        },
        status=PURCHASE_ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


@extend_schema(
    request=PurchaseInputSerializer,
    responses={
        201: PurchaseResultSerializer,
        400: PurchaseErrorSerializer,
        500: PurchaseErrorSerializer,
        502: PurchaseErrorSerializer,
        503: PurchaseErrorSerializer,
    },
    description=(
        "Buy a listing. Card purchases return a hosted checkout URL to redirect "
        "to; in-person purchases go straight to the new conversation."
    ),
    tags=['marketplace'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def purchase(request):
    """Purchase a listing as the current student."""
    serializer = PurchaseInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    orchestrator = PurchaseOrchestrator(gateway=get_payment_gateway())
    try:
        result = orchestrator.purchase(
            buyer=request.user,
            listing_id=serializer.validated_data['listingId'],
            payment_method=serializer.validated_data['paymentMethod'],
        )
    except PurchaseError as e:
        return _purchase_error_response(e)

    data = {
        'orderId': str(result.order_id),
        'conversationId': str(result.conversation_id),
    }
    if result.checkout_url:
        data['checkoutUrl'] = result.checkout_url

    return Response(data, status=status.HTTP_201_CREATED)


class OrderViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Orders the current student bought or sold.

    list: Orders, optionally filtered with ?role=buyer|seller
    retrieve: One order (buyer or seller only)
    """

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        filter_serializer = OrderFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        role = filter_serializer.validated_data.get('role')

        if role == 'buyer':
            queryset = list_orders_for_buyer(buyer=self.request.user)
        elif role == 'seller':
            queryset = list_orders_for_seller(seller=self.request.user)
        else:
            queryset = list_orders_for_user(user=self.request.user)
        return queryset.select_related('conversation')

    @extend_schema(
        parameters=[
            OpenApiParameter('role', str, enum=['buyer', 'seller'], required=False),
        ]
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def retrieve(self, request, *args, **kwargs):
        try:
            order = get_order_for_participant(order_id=self.kwargs['pk'], user=request.user)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(OrderSerializer(order).data)
