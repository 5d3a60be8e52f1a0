from rest_framework import serializers
from .models import Order, OrderItem


class CheckoutItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    qty = serializers.IntegerField(min_value=1, default=1)


class CheckoutSerializer(serializers.Serializer):
    """
    Checkout payload sent by the storefront. ``name``/``customerName`` and
    ``payment``/``paymentMethod`` are accepted interchangeably.
    """

    customerName = serializers.CharField(max_length=150, required=False, allow_blank=True)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    surname = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    phone = serializers.CharField(max_length=40, required=False, allow_blank=True, default='')
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    paymentMethod = serializers.CharField(max_length=50, required=False, allow_blank=True)
    payment = serializers.CharField(max_length=50, required=False, allow_blank=True)
    deliveryMethod = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    items = CheckoutItemSerializer(many=True, allow_empty=False)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)

    def validate(self, data):
        customer_name = (data.pop('customerName', '') or data.pop('name', '') or '').strip()
        data.pop('name', None)
        if not customer_name:
            raise serializers.ValidationError({"customerName": "Customer name is required."})
        data['customer_name'] = customer_name

        payment = data.pop('paymentMethod', '') or data.pop('payment', '') or ''
        data.pop('payment', None)
        data['payment_method'] = payment
        data['delivery_method'] = data.pop('deliveryMethod', '')
        return data


class OrderItemSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source='product_id', read_only=True)
    imageUrl = serializers.CharField(source='image_url', read_only=True)
    price = serializers.DecimalField(source='unit_price', max_digits=10, decimal_places=2, read_only=True)
    qty = serializers.IntegerField(source='quantity', read_only=True)
    lineTotal = serializers.DecimalField(source='line_total', max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'productId', 'name', 'imageUrl', 'price', 'qty', 'lineTotal']


class OrderSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    customerName = serializers.CharField(source='customer_name', read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    deliveryMethod = serializers.CharField(source='delivery_method', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    itemsCount = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'userId', 'customerName', 'surname', 'phone', 'city', 'address',
            'paymentMethod', 'deliveryMethod', 'subtotal', 'discount', 'total',
            'status', 'createdAt', 'itemsCount',
        ]
        read_only_fields = fields

    def get_itemsCount(self, obj) -> int:
        count = getattr(obj, 'items_count', None)
        if count is None:
            count = obj.items.count()
        return count


class OrderDetailSerializer(OrderSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ['items']
        read_only_fields = fields


class OrderStatusSerializer(serializers.ModelSerializer):
    status = serializers.CharField(max_length=30)

    class Meta:
        model = Order
        fields = ['status']
