from decimal import Decimal

from django.db import DatabaseError, transaction

from core.exceptions import TransientStorageError
from product_management.models import Product
from .fallback import FallbackOrderStore
from .models import Order, OrderItem

import logging
logger = logging.getLogger("rest_framework")

CENTS = Decimal("0.01")


def compute_totals(items, discount=0, total=None):
    """
    Return ``(subtotal, total)`` for checkout lines of ``{price, qty}``.

    A client-supplied ``total`` wins when it is positive; otherwise the total
    is the subtotal minus ``discount``, never below zero.
    """
    subtotal = sum((Decimal(item['price']) * item['qty'] for item in items), Decimal("0"))
    discount = Decimal(discount or 0)

    if total is not None and Decimal(total) > 0:
        final = Decimal(total)
    else:
        final = max(Decimal("0"), subtotal - discount)

    return subtotal.quantize(CENTS), final.quantize(CENTS)


class OrderService:
    @staticmethod
    def submit(checkout, payload, user=None, store=None):
        """
        Persist a validated checkout.

        Returns ``{"success": True, "orderId": ...}`` when the database write
        commits, or ``{"success": True, "fallbackId": ...}`` when it fails and
        the raw ``payload`` was appended to the fallback store instead. A
        failing fallback raises :class:`core.exceptions.FatalStorageError`.
        """
        subtotal, total = compute_totals(
            checkout['items'], checkout.get('discount'), checkout.get('total')
        )

        try:
            order = OrderService.create_order(checkout, subtotal, total, user)
        except TransientStorageError as e:
            logger.error(f"{e}: {e.__cause__}. Writing order to fallback store.")
            store = store or FallbackOrderStore.from_settings()
            record = store.append(payload)
            return {'success': True, 'fallbackId': record['id']}

        logger.info(f"Order {order.pk} created with {len(checkout['items'])} item(s), total {total}")
        return {'success': True, 'orderId': order.pk}

    @staticmethod
    def create_order(checkout, subtotal, total, user=None):
        items = checkout['items']
        try:
            with transaction.atomic():
                order = Order.objects.create(
                    user=user if user is not None and user.is_authenticated else None,
                    customer_name=checkout['customer_name'],
                    surname=checkout.get('surname', ''),
                    phone=checkout.get('phone', ''),
                    city=checkout.get('city', ''),
                    address=checkout.get('address', ''),
                    payment_method=checkout.get('payment_method', ''),
                    delivery_method=checkout.get('delivery_method', ''),
                    subtotal=subtotal,
                    discount=Decimal(checkout.get('discount') or 0).quantize(CENTS),
                    total=total,
                )

                snapshots = OrderService.product_snapshots({item['id'] for item in items})

                OrderItem.objects.bulk_create([
                    OrderItem(
                        order=order,
                        product_id=item['id'],
                        name=snapshots.get(item['id'], {}).get('name'),
                        image_url=snapshots.get(item['id'], {}).get('image_url'),
                        unit_price=item['price'],
                        quantity=item['qty'],
                    )
                    for item in items
                ])
        except DatabaseError as exc:
            raise TransientStorageError("order insert failed") from exc
        return order

    @staticmethod
    def product_snapshots(product_ids):
        """
        Map product id to its current ``name`` and ``image_url``.

        Runs in a savepoint so a failed lookup leaves the surrounding order
        transaction usable; missing products and lookup errors simply yield
        no snapshot.
        """
        if not product_ids:
            return {}
        try:
            with transaction.atomic():
                rows = list(
                    Product.objects.filter(pk__in=product_ids).values('id', 'name', 'image_url')
                )
        except DatabaseError as e:
            logger.warning(f"Product lookup for order items failed: {e}")
            return {}
        return {row['id']: row for row in rows}
