from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from product_management.models import Product


class Feedback(models.Model):
    """
    A product review. Visible as soon as it is stored (``is_approved``
    defaults to True) and a user may review the same product any number
    of times. Admins can attach one reply; a new reply replaces the old one.
    """

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='feedbacks'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='feedbacks'
    )
    rating = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(1),
            MaxValueValidator(5)
        ]
    )
    comment = models.TextField(blank=True)
    is_approved = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    admin_reply = models.TextField(null=True, blank=True)
    admin_reply_by = models.CharField(max_length=150, null=True, blank=True)
    admin_reply_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['product', 'is_approved'], name='feedback_product_approved_idx'),
        ]

    def __str__(self):
        return f"Feedback {self.rating}/5 on {self.product_id}"
