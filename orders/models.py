from django.db import models
from django.conf import settings


class Order(models.Model):
    DEFAULT_STATUS = 'Pending'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders'
    )

    customer_name = models.CharField(max_length=150)
    surname = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=40, blank=True)
    city = models.CharField(max_length=100, blank=True)
    address = models.CharField(max_length=255, blank=True)

    payment_method = models.CharField(max_length=50, blank=True)
    delivery_method = models.CharField(max_length=50, blank=True)

    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total = models.DecimalField(max_digits=12, decimal_places=2)

    # free text, admins may set any label
    status = models.CharField(max_length=30, default=DEFAULT_STATUS)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Order {self.id} for {self.customer_name}"


class OrderItem(models.Model):
    """
    One cart line. Product name and image are copied at order time so old
    orders stay readable after the product is edited or removed; for the
    same reason ``product_id`` is a plain column rather than a foreign key.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items'
    )
    product_id = models.BigIntegerField(null=True, blank=True, db_index=True)
    name = models.CharField(max_length=150, null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField()

    @property
    def line_total(self):
        return self.unit_price * self.quantity

    def __str__(self):
        return f"{self.quantity}x {self.name or self.product_id}"
