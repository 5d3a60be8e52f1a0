from rest_framework import serializers
from .models import Feedback


class FeedbackCreateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            "required": "Rating is required.",
            "min_value": "Rating must be between 1 and 5.",
            "max_value": "Rating must be between 1 and 5.",
        }
    )
    text = serializers.CharField(required=False, allow_blank=True, max_length=2000, default='')

    def validate_rating(self, value):
        if not value:
            raise serializers.ValidationError("Rating is required.")
        return value


class FeedbackSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source='product_id', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    userName = serializers.SerializerMethodField()
    isApproved = serializers.BooleanField(source='is_approved', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    adminReply = serializers.CharField(source='admin_reply', read_only=True)
    adminReplyBy = serializers.CharField(source='admin_reply_by', read_only=True)
    adminReplyAt = serializers.DateTimeField(source='admin_reply_at', read_only=True)

    class Meta:
        model = Feedback
        fields = (
            'id', 'productId', 'userId', 'userName', 'rating', 'comment', 'isApproved',
            'createdAt', 'adminReply', 'adminReplyBy', 'adminReplyAt',
        )
        read_only_fields = fields

    def get_userName(self, obj):
        if obj.user is None:
            return None
        return obj.user.display_name


class AdminFeedbackSerializer(FeedbackSerializer):
    productName = serializers.CharField(source='product.name', read_only=True)

    class Meta(FeedbackSerializer.Meta):
        fields = FeedbackSerializer.Meta.fields + ('productName',)
        read_only_fields = fields


class FeedbackReplySerializer(serializers.Serializer):
    reply = serializers.CharField(
        max_length=2000,
        error_messages={
            "required": "Reply text is required.",
            "blank": "Reply text cannot be empty.",
        }
    )
