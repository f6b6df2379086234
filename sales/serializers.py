from decimal import Decimal
from django.utils import timezone
from rest_framework import serializers

from menu.serializers import ItemSerializer
from .models import SaleFields


class SaleSerializer(serializers.Serializer):
    """Payload for both an item sale and a whole-menu sale."""
    sale_type = serializers.ChoiceField(
        choices=SaleFields.SALE_TYPE_CHOICES,
        error_messages={"invalid_choice": "Sale type must be fixed or percentage"},
    )
    sale_amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, error_messages={"required": "Amount is required"},
    )
    sale_start_date = serializers.DateTimeField(required=False, allow_null=True)
    sale_end_date = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        sale_type = attrs["sale_type"]
        amount = attrs["sale_amount"]
        start = attrs.get("sale_start_date")
        end = attrs.get("sale_end_date")
        now = timezone.now()

        if sale_type == SaleFields.FIXED and amount < Decimal("0.01"):
            raise serializers.ValidationError({"sale_amount": "Fixed sale amount must be greater than 0"})
        if sale_type == SaleFields.PERCENTAGE and not (1 <= amount <= 100):
            raise serializers.ValidationError({"sale_amount": "Percentage must be between 1 and 100"})

        if start and start <= now:
            raise serializers.ValidationError({"sale_start_date": "Sale start date must be in the future"})
        if start and not end:
            raise serializers.ValidationError({"sale_end_date": "Sale end date is required when a start date is set"})
        if end and end <= (start or now):
            raise serializers.ValidationError({"sale_end_date": "Sale end date must be after the sale start date"})

        return attrs


class OnSaleSummarySerializer(serializers.Serializer):
    items = ItemSerializer(many=True)
    active_sales = serializers.IntegerField()
    expiring_soon_sales = serializers.IntegerField()
    upcoming_sales = serializers.IntegerField()
    total_sales = serializers.IntegerField()
