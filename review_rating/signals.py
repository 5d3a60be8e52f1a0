from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from core.exceptions import TransientStorageError
from .models import Feedback
from .services import recompute_product_rating

import logging
logger = logging.getLogger("rest_framework")


@receiver([post_save, post_delete], sender=Feedback)
def update_product_rating(sender, instance, created=False, **kwargs):
    # FeedbackService.submit recomputes new reviews itself and reports the result
    if created:
        return
    try:
        recompute_product_rating(instance.product_id)
    except TransientStorageError as e:
        logger.warning(f"{e}: {e.__cause__}")
