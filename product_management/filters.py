import django_filters
from .models import Product


class ProductFilter(django_filters.FilterSet):
    price_min = django_filters.NumberFilter(field_name="price", lookup_expr='gte')
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr='lte')
    category = django_filters.CharFilter(field_name="category", lookup_expr='iexact')
    subCategory = django_filters.CharFilter(field_name="sub_category", lookup_expr='iexact')

    class Meta:
        model = Product
        fields = ['price_min', 'price_max', 'category', 'subCategory']
