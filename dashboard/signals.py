from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from orders.models import Order
from product_management.models import Product
from review_rating.models import Feedback
from .dsh_cache import invalidate_stats


@receiver([post_save, post_delete], sender=Order)
@receiver([post_save, post_delete], sender=Feedback)
@receiver([post_save, post_delete], sender=Product)
def drop_admin_stats(sender, instance, **kwargs):
    invalidate_stats()
