from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager
from django.contrib.auth.hashers import make_password, check_password
from django.db import models
from sales.models import SaleFields

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def default_opening_hours():
    return {day: {"open": "", "close": ""} for day in WEEKDAYS}


class Restaurant(SaleFields):
    """
    A restaurant account. Logs in on its own (admin dashboard) and owns the menu,
    the categories and a whole-menu sale (the SaleFields columns).
    """
    name = models.CharField(max_length=255)
    cuisine = models.CharField(max_length=60)
    description = models.TextField(blank=True, default="")
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=128)

    # address
    street = models.CharField(max_length=50, blank=True, default="")
    city = models.CharField(max_length=50, blank=True, default="")
    state = models.CharField(max_length=50, blank=True, default="")
    zip_code = models.CharField(max_length=10, blank=True, default="")
    country = models.CharField(max_length=60, blank=True, default="")
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)

    opening_hours = models.JSONField(default=default_opening_hours)
    phone_number = models.CharField(max_length=20, blank=True, default="")
    website = models.URLField(blank=True, default="")
    logo = models.URLField(blank=True, default="")
    cover_image = models.URLField(blank=True, default="")

    is_email_verified = models.BooleanField(default=False)
    is_published = models.BooleanField(default=False, db_index=True)
    is_closed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["is_published", "cuisine"], name="restaurant_published_idx"),
            models.Index(fields=["on_sale", "sale_end_date"], name="restaurant_sale_end_idx"),
        ]

    def __str__(self):
        return self.name

    # DRF treats the authenticated restaurant as request.user
    @property
    def is_authenticated(self):
        return True

    def set_password(self, raw_password):
        self.password = make_password(raw_password)

    def check_password(self, raw_password):
        return check_password(raw_password, self.password)


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("User must have an email")

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", "admin")
        return self.create_user(email=email, password=password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)

    role = models.CharField(max_length=20, choices=[
        ("customer", "Customer"),
        ("admin", "Admin"),
    ], default="customer")

    is_email_verified = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    favorites = models.ManyToManyField(Restaurant, blank=True, related_name="favorited_by")

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name", "last_name"]

    def __str__(self):
        return self.email

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()
