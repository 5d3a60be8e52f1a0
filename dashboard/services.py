import calendar

from django.contrib.auth import get_user_model
from django.db.models import Count, Sum
from django.db.models.functions import TruncMonth
from django.utils import timezone

from orders.models import Order
from product_management.models import Product
from review_rating.models import Feedback


def month_starts(now, count):
    """First instant of the ``count`` calendar months ending with ``now``'s month, oldest first."""
    year, month = now.year, now.month
    starts = []
    for _ in range(count):
        starts.append(now.replace(year=year, month=month, day=1, hour=0, minute=0, second=0, microsecond=0))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    return list(reversed(starts))


class AdminStats:
    MONTHS = 6

    @staticmethod
    def collect(now=None):
        """
        Totals for the admin dashboard plus per-month sales and order counts
        for the last ``MONTHS`` months (months without orders report zeros).
        """
        now = now or timezone.now()
        starts = month_starts(now, AdminStats.MONTHS)

        monthly_rows = (
            Order.objects.filter(created_at__gte=starts[0])
                 .annotate(month=TruncMonth('created_at'))
                 .values('month')
                 .annotate(sales=Sum('total'), orders=Count('id'))
                 .order_by('month')
        )
        by_month = {(row['month'].year, row['month'].month): row for row in monthly_rows}

        monthly = []
        for start in starts:
            row = by_month.get((start.year, start.month), {})
            monthly.append({
                'month': calendar.month_abbr[start.month],
                'sales': float(row.get('sales') or 0),
                'orders': row.get('orders') or 0,
            })

        revenue = Order.objects.aggregate(revenue=Sum('total'))['revenue'] or 0

        return {
            'totalProducts': Product.objects.count(),
            'totalReviews': Feedback.objects.filter(is_approved=True).count(),
            'totalUsers': get_user_model().objects.count(),
            'totalOrders': Order.objects.count(),
            'revenue': float(revenue),
            'monthly': monthly,
        }
