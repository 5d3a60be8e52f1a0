from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Catalog representation used by the storefront. Field names follow the
    camelCase the SPA consumes; ``rating`` and ``reviews`` are aggregates
    maintained by the review flow and can never be written directly.
    """

    subCategory = serializers.CharField(source='sub_category', required=False, allow_blank=True)
    originalPrice = serializers.DecimalField(
        source='original_price', max_digits=10, decimal_places=2,
        required=False, allow_null=True, min_value=0
    )
    imageUrl = serializers.CharField(source='image_url', required=False, allow_blank=True, max_length=500)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'category', 'subCategory',
            'price', 'originalPrice', 'discount', 'rating', 'reviews',
            'imageUrl', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id', 'rating', 'reviews']

    def validate(self, data):
        price = data.get('price', getattr(self.instance, 'price', None))
        original = data.get('original_price', getattr(self.instance, 'original_price', None))
        if price is not None and original is not None and original < price:
            raise serializers.ValidationError(
                {"originalPrice": "Original price cannot be lower than the current price."}
            )
        return data
