"""
Cart API v1 views.
"""
import logging

from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.cart_dto import CartActionDTO, CartDTO
from ....application.use_cases import ClearCartUseCase, GetCartUseCase, ModifyCartUseCase
from ....domain.exceptions import CartIdentityError
from ....infrastructure.factories import build_cart_repository
from ...identity import resolve_cart_identity
from ...serializers.cart_serializer import CartActionSerializer, CartSerializer

logger = logging.getLogger(__name__)

CartResponseSerializer = inline_serializer(
    name='CartResponse',
    fields={
        'success': serializers.BooleanField(),
        'data': CartSerializer(),
    },
)

ErrorResponseSerializer = inline_serializer(
    name='ErrorResponse',
    fields={
        'success': serializers.BooleanField(),
        'error': inline_serializer(
            name='ErrorDetail',
            fields={
                'code': serializers.CharField(),
                'message': serializers.CharField(),
            },
        ),
    },
)


def cart_response(cart: CartDTO, status_code: int = status.HTTP_200_OK) -> Response:
    return Response(
        {
            'success': True,
            'data': CartSerializer(cart).data,
        },
        status=status_code,
    )


@extend_schema(tags=['Cart'])
@method_decorator(ensure_csrf_cookie, name='dispatch')
class CartView(APIView):
    """Cart endpoint for the caller's customer or anonymous session identity."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartResponseSerializer, 500: ErrorResponseSerializer},
        summary="Get current cart",
    )
    def get(self, request):
        identity = resolve_cart_identity(request)
        if not identity.is_present:
            # First contact: hand out an anonymous identity, nothing is stored yet.
            resolve_cart_identity(request, issue_anonymous=True)

        result = GetCartUseCase(cart_repository=build_cart_repository()).execute(identity)
        return cart_response(result.data)

    @extend_schema(
        request=CartActionSerializer,
        responses={
            200: CartResponseSerializer,
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
        summary="Add, remove or update a cart line",
    )
    def post(self, request):
        identity = resolve_cart_identity(request)
        if not identity.is_present:
            raise CartIdentityError()

        serializer = CartActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ModifyCartUseCase(cart_repository=build_cart_repository()).execute(
            CartActionDTO(
                identity=identity,
                action=serializer.validated_data['action'],
                product_id=serializer.validated_data['product_id'],
                quantity=serializer.validated_data.get('quantity'),
            )
        )
        logger.debug(f"Cart {result.data.id} now holds {result.data.item_count} unit(s)")
        return cart_response(result.data)

    @extend_schema(
        responses={200: CartResponseSerializer, 401: ErrorResponseSerializer, 500: ErrorResponseSerializer},
        summary="Clear cart",
    )
    def delete(self, request):
        identity = resolve_cart_identity(request)
        if not identity.is_present:
            raise CartIdentityError()

        result = ClearCartUseCase(cart_repository=build_cart_repository()).execute(identity)
        return cart_response(result.data)
