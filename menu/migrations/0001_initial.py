import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=60)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("restaurant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="categories", to="accounts.restaurant")),
            ],
            options={
                "ordering": ["name"],
                "constraints": [
                    models.UniqueConstraint(fields=("restaurant", "name"), name="uniq_category_per_restaurant"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Item",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("on_sale", models.BooleanField(db_index=True, default=False)),
                ("sale_type", models.CharField(blank=True, choices=[("fixed", "Fixed"), ("percentage", "Percentage")], max_length=10, null=True)),
                ("sale_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("sale_start_date", models.DateTimeField(blank=True, null=True)),
                ("sale_end_date", models.DateTimeField(blank=True, null=True)),
                ("title", models.CharField(max_length=100)),
                ("description", models.CharField(max_length=250)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("ingredients", models.JSONField(blank=True, default=list)),
                ("image_url", models.URLField(blank=True, default="")),
                ("rating", models.DecimalField(decimal_places=2, default=0, max_digits=3)),
                ("is_edited", models.BooleanField(default=False)),
                ("is_available", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="items", to="menu.category")),
                ("restaurant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="items", to="accounts.restaurant")),
            ],
            options={
                "ordering": ["title"],
                "indexes": [
                    models.Index(fields=["restaurant", "category"], name="item_restaurant_category_idx"),
                    models.Index(fields=["on_sale", "sale_end_date"], name="item_sale_end_idx"),
                    models.Index(fields=["on_sale", "restaurant"], name="item_sale_restaurant_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("restaurant", "title"), name="uniq_item_title_per_restaurant"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Variant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("is_required", models.BooleanField(default=False)),
                ("is_available", models.BooleanField(default=True)),
                ("item", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="variants", to="menu.item")),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="VariantOption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("variant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="options", to="menu.variant")),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Addon",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("item", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="addons", to="menu.item")),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
