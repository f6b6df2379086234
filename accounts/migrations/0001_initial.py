import accounts.models.main
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("on_sale", models.BooleanField(db_index=True, default=False)),
                ("sale_type", models.CharField(blank=True, choices=[("fixed", "Fixed"), ("percentage", "Percentage")], max_length=10, null=True)),
                ("sale_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("sale_start_date", models.DateTimeField(blank=True, null=True)),
                ("sale_end_date", models.DateTimeField(blank=True, null=True)),
                ("name", models.CharField(max_length=255)),
                ("cuisine", models.CharField(max_length=60)),
                ("description", models.TextField(blank=True, default="")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("password", models.CharField(max_length=128)),
                ("street", models.CharField(blank=True, default="", max_length=50)),
                ("city", models.CharField(blank=True, default="", max_length=50)),
                ("state", models.CharField(blank=True, default="", max_length=50)),
                ("zip_code", models.CharField(blank=True, default="", max_length=10)),
                ("country", models.CharField(blank=True, default="", max_length=60)),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                ("opening_hours", models.JSONField(default=accounts.models.main.default_opening_hours)),
                ("phone_number", models.CharField(blank=True, default="", max_length=20)),
                ("website", models.URLField(blank=True, default="")),
                ("logo", models.URLField(blank=True, default="")),
                ("cover_image", models.URLField(blank=True, default="")),
                ("is_email_verified", models.BooleanField(default=False)),
                ("is_published", models.BooleanField(db_index=True, default=False)),
                ("is_closed", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["is_published", "cuisine"], name="restaurant_published_idx"),
                    models.Index(fields=["on_sale", "sale_end_date"], name="restaurant_sale_end_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("first_name", models.CharField(max_length=50)),
                ("last_name", models.CharField(max_length=50)),
                ("role", models.CharField(choices=[("customer", "Customer"), ("admin", "Admin")], default="customer", max_length=20)),
                ("is_email_verified", models.BooleanField(default=False)),
                ("is_active", models.BooleanField(default=True)),
                ("is_staff", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("favorites", models.ManyToManyField(blank=True, related_name="favorited_by", to="accounts.restaurant")),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "abstract": False,
            },
        ),
    ]
