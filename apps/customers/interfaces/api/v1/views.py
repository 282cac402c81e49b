"""
Customers API v1 views.

Login and logout go through ``django.contrib.auth`` so that the
``user_logged_in`` and ``user_logged_out`` signals move the caller's cart.
"""
import logging

from django.contrib.auth import authenticate, login, logout
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cart.application.dtos.cart_dto import CartDTO
from apps.cart.application.use_cases import GetCartUseCase
from apps.cart.domain.value_objects import CartIdentity
from apps.cart.infrastructure.factories import build_cart_repository, build_identity_transition_handler
from apps.cart.interfaces.serializers.cart_serializer import CartSerializer
from ....application.dtos import CustomerDTO
from ....domain.exceptions import InvalidCredentialsError, NotLoggedInError
from ...serializers import CustomerSerializer, LoginSerializer

logger = logging.getLogger(__name__)

SessionResponseSerializer = inline_serializer(
    name='CustomerSessionResponse',
    fields={
        'success': serializers.BooleanField(),
        'data': inline_serializer(
            name='CustomerSession',
            fields={
                'customer': CustomerSerializer(allow_null=True),
                'cart': CartSerializer(),
            },
        ),
    },
)


def session_response(customer, cart: CartDTO) -> Response:
    return Response({
        'success': True,
        'data': {
            'customer': CustomerSerializer(customer).data if customer else None,
            'cart': CartSerializer(cart).data,
        },
    })


@extend_schema(tags=['Customers'])
@method_decorator(ensure_csrf_cookie, name='dispatch')
class LoginView(APIView):
    """Session login endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=LoginSerializer,
        responses={200: SessionResponseSerializer},
        summary="Log in and load the customer cart",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            username=serializer.validated_data['username'],
            password=serializer.validated_data['password'],
        )
        if user is None:
            logger.warning(f"Failed login for {serializer.validated_data['username']}")
            raise InvalidCredentialsError()

        # Fires user_logged_in, which applies the login merge policy.
        login(request, user)

        customer = CustomerDTO.from_user(user)
        result = GetCartUseCase(cart_repository=build_cart_repository()).execute(
            CartIdentity.for_customer(customer.id)
        )
        return session_response(customer, result.data)


@extend_schema(tags=['Customers'])
class LogoutView(APIView):
    """Session logout endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=None,
        responses={200: SessionResponseSerializer},
        summary="Log out and fall back to an anonymous cart",
    )
    def post(self, request):
        user = getattr(request, 'user', None)
        customer_id = str(user.pk) if user is not None and user.is_authenticated else None

        # Fires user_logged_out, then flushes the session.
        logout(request)
        cart = build_identity_transition_handler().on_logout(customer_id)
        return session_response(None, cart)


@extend_schema(tags=['Customers'])
class MeView(APIView):
    """Current customer endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CustomerSerializer},
        summary="Get the logged in customer",
    )
    def get(self, request):
        if not request.user.is_authenticated:
            raise NotLoggedInError()
        return Response({
            'success': True,
            'data': CustomerSerializer(CustomerDTO.from_user(request.user)).data,
        })
