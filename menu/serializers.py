from rest_framework import serializers
from django.utils import timezone

from sales.pricing import resolve_effective_price, sale_started
from .models import Category, Item, Variant, VariantOption, Addon


class CategorySerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=60, trim_whitespace=True)

    class Meta:
        model = Category
        fields = ("id", "name")


class VariantOptionSerializer(serializers.ModelSerializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, default=0)

    class Meta:
        model = VariantOption
        fields = ("id", "name", "price")
        read_only_fields = ("id",)


class VariantSerializer(serializers.ModelSerializer):
    options = VariantOptionSerializer(many=True)
    is_required = serializers.BooleanField(default=True)
    is_available = serializers.BooleanField(default=True)

    class Meta:
        model = Variant
        fields = ("id", "name", "options", "is_required", "is_available")
        read_only_fields = ("id",)

    def validate_options(self, value):
        if not value:
            raise serializers.ValidationError("Variant options are required")
        return value


class AddonSerializer(serializers.ModelSerializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, default=0)

    class Meta:
        model = Addon
        fields = ("id", "name", "price")
        read_only_fields = ("id",)


class ItemWriteSerializer(serializers.Serializer):
    """Admin create/edit payload. Variants and addons are replaced wholesale on edit."""
    title = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=250)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    category_id = serializers.IntegerField()
    tags = serializers.ListField(child=serializers.CharField(max_length=40), required=False, default=list)
    ingredients = serializers.ListField(child=serializers.CharField(max_length=60), required=False, default=list)
    image_url = serializers.URLField(required=False, allow_blank=True, default="")
    variants = VariantSerializer(many=True, required=False, default=list)
    addons = AddonSerializer(many=True, required=False, default=list)
    is_available = serializers.BooleanField(default=True)

    def validate_category_id(self, value):
        restaurant = self.context["restaurant"]
        category = Category.objects.filter(pk=value, restaurant=restaurant).first()
        if not category:
            raise serializers.ValidationError("Category not found")
        return value


class ItemSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)
    variants = VariantSerializer(many=True, read_only=True)
    addons = AddonSerializer(many=True, read_only=True)
    sale_started = serializers.SerializerMethodField()

    class Meta:
        model = Item
        fields = (
            "id", "title", "description", "price", "category", "tags", "ingredients", "image_url",
            "variants", "addons", "rating", "is_edited", "is_available",
            "on_sale", "sale_type", "sale_amount", "sale_start_date", "sale_end_date", "sale_started",
            "created_at", "updated_at",
        )
        read_only_fields = fields

    def get_sale_started(self, obj) -> bool:
        return sale_started(obj, self.context.get("now"))


class CustomerItemSerializer(ItemSerializer):
    """Item as shown in the marketplace, with the price the customer actually pays."""
    effective_price = serializers.SerializerMethodField()
    discount_source = serializers.SerializerMethodField()

    class Meta(ItemSerializer.Meta):
        fields = ItemSerializer.Meta.fields + ("effective_price", "discount_source")
        read_only_fields = fields

    def _price(self, obj):
        cache = self.context.setdefault("_prices", {})
        if obj.pk not in cache:
            now = self.context.get("now") or timezone.now()
            cache[obj.pk] = resolve_effective_price(obj, obj.restaurant, now)
        return cache[obj.pk]

    def get_effective_price(self, obj) -> str:
        return str(self._price(obj).amount)

    def get_discount_source(self, obj) -> str | None:
        return self._price(obj).discount_source
