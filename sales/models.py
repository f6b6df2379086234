from django.db import models


class SaleFields(models.Model):
    """
    Sale columns shared by Item (item-level sale) and Restaurant (whole-menu sale).
    A sale is only meaningful while on_sale is set; a cleared sale nulls every other field.
    """
    FIXED = "fixed"
    PERCENTAGE = "percentage"
    SALE_TYPE_CHOICES = [
        (FIXED, "Fixed"),
        (PERCENTAGE, "Percentage"),
    ]

    on_sale = models.BooleanField(default=False, db_index=True)
    sale_type = models.CharField(max_length=10, choices=SALE_TYPE_CHOICES, null=True, blank=True)
    sale_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    sale_start_date = models.DateTimeField(null=True, blank=True)
    sale_end_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        abstract = True


CLEARED_SALE = {
    "on_sale": False,
    "sale_type": None,
    "sale_amount": None,
    "sale_start_date": None,
    "sale_end_date": None,
}
