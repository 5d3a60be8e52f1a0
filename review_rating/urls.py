from django.urls import path
from .views import (
    ProductReviewListCreateView,
    AdminFeedbackListView,
    AdminFeedbackDetailView,
    AdminFeedbackReplyView,
)

urlpatterns = [
    path('products/<str:product_id>/reviews', ProductReviewListCreateView.as_view(), name='product-reviews'),

    path('admin/feedbacks', AdminFeedbackListView.as_view(), name='admin-feedback-list'),
    path('admin/feedbacks/<str:feedback_id>', AdminFeedbackDetailView.as_view(), name='admin-feedback-detail'),
    path('admin/feedbacks/<str:feedback_id>/reply', AdminFeedbackReplyView.as_view(), name='admin-feedback-reply'),
]
