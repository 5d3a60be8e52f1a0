from decimal import Decimal, ROUND_HALF_UP

from django.db import DatabaseError, transaction
from django.db.models import Avg, Count
from django.utils import timezone

from core.exceptions import TransientStorageError
from product_management.models import Product
from .models import Feedback

import logging
logger = logging.getLogger("rest_framework")

ONE_DECIMAL = Decimal("0.1")


def round_rating(value):
    if value is None:
        return Decimal("0.0")
    return Decimal(str(value)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def recompute_product_rating(product_id):
    """
    Recompute average rating and review count over the approved feedback of
    a product and store them on the product row.

    Returns ``(avg_rating, review_count)``. Database failures are re-raised
    as :class:`TransientStorageError`.
    """
    try:
        with transaction.atomic():
            agg = Feedback.objects.filter(product_id=product_id, is_approved=True).aggregate(
                avg_rating=Avg('rating'),
                total_reviews=Count('id')
            )
            avg_rating = round_rating(agg['avg_rating'])
            review_count = agg['total_reviews'] or 0
            Product.objects.filter(pk=product_id).update(rating=avg_rating, reviews=review_count)
    except DatabaseError as exc:
        raise TransientStorageError(f"rating recompute failed for product {product_id}") from exc
    return avg_rating, review_count


class FeedbackService:
    @staticmethod
    def submit(user, product, rating, text=''):
        """
        Store a review and refresh the product aggregate.

        The insert is committed on its own. If the recompute fails afterwards
        the review stays and the aggregate already stored on ``product`` is
        reported instead.
        """
        feedback = Feedback.objects.create(
            product=product,
            user=user,
            rating=rating,
            comment=text or '',
            is_approved=True,
        )
        logger.info(f"User {user.pk} rated product {product.pk} with {rating}")

        try:
            avg_rating, review_count = recompute_product_rating(product.pk)
        except TransientStorageError as e:
            logger.warning(f"{e}: {e.__cause__}")
            return feedback, round_rating(product.rating), product.reviews

        product.rating = avg_rating
        product.reviews = review_count
        return feedback, avg_rating, review_count

    @staticmethod
    def reply(feedback, text, author):
        """Replace the admin reply on ``feedback``; there is no reply history."""
        feedback.admin_reply = text
        feedback.admin_reply_by = author
        feedback.admin_reply_at = timezone.now()
        feedback.save(update_fields=['admin_reply', 'admin_reply_by', 'admin_reply_at'])
        return feedback
