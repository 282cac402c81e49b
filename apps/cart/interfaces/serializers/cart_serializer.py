"""
Cart serializers.
"""
from rest_framework import serializers

from ...application.dtos.cart_dto import CartAction


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    product_id = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    added_at = serializers.DateTimeField(read_only=True)


class CartTotalsSerializer(serializers.Serializer):
    """Serializer for server computed totals."""
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    shipping = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    id = serializers.CharField(read_only=True, allow_blank=True)
    items = CartItemSerializer(many=True, read_only=True)
    totals = CartTotalsSerializer(read_only=True)
    currency = serializers.CharField(read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CartActionSerializer(serializers.Serializer):
    """
    Serializer for ``POST /cart``.

    add needs quantity >= 1, update needs quantity >= 0 (0 removes),
    remove ignores quantity.
    """
    action = serializers.ChoiceField(
        choices=[action.value for action in CartAction],
        error_messages={'invalid_choice': 'Invalid action. Must be add, remove, or update'},
    )
    product_id = serializers.CharField(max_length=64)
    quantity = serializers.IntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        action = attrs['action']
        quantity = attrs.get('quantity')
        if action == CartAction.ADD.value and (quantity is None or quantity < 1):
            raise serializers.ValidationError('Valid quantity is required for add action')
        if action == CartAction.UPDATE.value and (quantity is None or quantity < 0):
            raise serializers.ValidationError('Valid quantity is required for update action')
        if action == CartAction.REMOVE.value:
            attrs['quantity'] = None
        return attrs
