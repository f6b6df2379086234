import re
from rest_framework import serializers
from sales.pricing import sale_started
from .hours import is_auto_closed
from .models import Restaurant, User, WEEKDAYS

NAME_RE = re.compile(r"^[A-Za-zÀ-ÿ '-]+$")
TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

PASSWORD_RULES = [
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"\d"), "Password must contain at least one number"),
    (re.compile(r"[@$!%*?&]"), "Password must contain at least one special character"),
]


def validate_strong_password(value):
    if len(value) < 8:
        raise serializers.ValidationError("Password must be at least 8 characters long")
    for pattern, message in PASSWORD_RULES:
        if not pattern.search(value):
            raise serializers.ValidationError(message)
    return value


def validate_letters(value, message):
    if not NAME_RE.match(value):
        raise serializers.ValidationError(message)
    return value


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "email", "first_name", "last_name", "role", "is_email_verified")


class RegisterUserSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=50)
    last_name = serializers.CharField(max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate_first_name(self, value):
        return validate_letters(value, "First name must contain only letters")

    def validate_last_name(self, value):
        return validate_letters(value, "Last name must contain only letters")

    def validate_password(self, value):
        return validate_strong_password(value)

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)


class RegisterRestaurantSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    cuisine = serializers.CharField(min_length=2, max_length=30)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate_name(self, value):
        return validate_letters(value, "Restaurant name must contain only letters")

    def validate_cuisine(self, value):
        return validate_letters(value, "Cuisine must contain only letters")

    def validate_password(self, value):
        return validate_strong_password(value)

    def create(self, validated_data):
        password = validated_data.pop("password")
        restaurant = Restaurant(**validated_data)
        restaurant.set_password(password)
        restaurant.save()
        return restaurant


class DailyHoursSerializer(serializers.Serializer):
    open = serializers.CharField(required=False, allow_blank=True, default="")
    close = serializers.CharField(required=False, allow_blank=True, default="")

    def _validate_time(self, value):
        if value and not TIME_RE.match(value):
            raise serializers.ValidationError("Time must be in HH:MM format")
        return value

    def validate_open(self, value):
        return self._validate_time(value)

    def validate_close(self, value):
        return self._validate_time(value)


class OpeningHoursSerializer(serializers.Serializer):
    monday = DailyHoursSerializer()
    tuesday = DailyHoursSerializer()
    wednesday = DailyHoursSerializer()
    thursday = DailyHoursSerializer()
    friday = DailyHoursSerializer()
    saturday = DailyHoursSerializer()
    sunday = DailyHoursSerializer()

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return {day: dict(value[day]) for day in WEEKDAYS}


class AddressSerializer(serializers.Serializer):
    street = serializers.CharField(max_length=50)
    city = serializers.CharField(max_length=50)
    state = serializers.CharField(max_length=50)
    zip_code = serializers.CharField(max_length=10)
    country = serializers.CharField(allow_blank=True, default="")
    latitude = serializers.FloatField(required=False, allow_null=True, min_value=-90, max_value=90)
    longitude = serializers.FloatField(required=False, allow_null=True, min_value=-180, max_value=180)


class PublishRestaurantSerializer(serializers.Serializer):
    """
    Profile data needed before a restaurant shows up in the marketplace.
    Also used (partially) by the manage endpoint.
    """
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(max_length=400)
    cuisine = serializers.CharField(max_length=30)
    address = AddressSerializer()
    opening_hours = OpeningHoursSerializer()
    phone_number = serializers.CharField(max_length=20)
    website = serializers.URLField(required=False, allow_blank=True)
    logo = serializers.URLField(required=False, allow_blank=True)
    cover_image = serializers.URLField(required=False, allow_blank=True)

    def update(self, instance, validated_data):
        address = validated_data.pop("address", None) or {}
        for field, value in {**validated_data, **address}.items():
            setattr(instance, field, value)
        instance.save()
        return instance


class RestaurantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Restaurant
        fields = [
            "id", "name", "cuisine", "description", "email",
            "street", "city", "state", "zip_code", "country", "latitude", "longitude",
            "opening_hours", "phone_number", "website", "logo", "cover_image",
            "is_email_verified", "is_published", "is_closed",
            "on_sale", "sale_type", "sale_amount", "sale_start_date", "sale_end_date",
            "created_at",
        ]
        read_only_fields = fields


class RestaurantCardSerializer(serializers.ModelSerializer):
    """Marketplace listing shape (restaurants list, favorites)."""
    is_auto_closed = serializers.SerializerMethodField()
    sale_started = serializers.SerializerMethodField()

    class Meta:
        model = Restaurant
        fields = [
            "id", "name", "cuisine", "description", "logo", "cover_image", "city",
            "is_closed", "is_auto_closed",
            "on_sale", "sale_type", "sale_amount", "sale_start_date", "sale_end_date", "sale_started",
        ]
        read_only_fields = fields

    def _now(self):
        return self.context.get("now")

    def get_is_auto_closed(self, obj) -> bool:
        return is_auto_closed(obj.opening_hours, self._now())

    def get_sale_started(self, obj) -> bool:
        return sale_started(obj, self._now())


class RestaurantDetailSerializer(RestaurantCardSerializer):
    class Meta(RestaurantCardSerializer.Meta):
        fields = RestaurantCardSerializer.Meta.fields + [
            "street", "state", "zip_code", "country", "latitude", "longitude",
            "opening_hours", "phone_number", "website",
        ]
        read_only_fields = fields
