from django.contrib import admin

from .models import Feedback


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ('id', 'product', 'user', 'rating', 'is_approved', 'created_at', 'admin_reply_at')
    list_filter = ('is_approved', 'rating', 'created_at')
    search_fields = ('comment', 'product__name', 'user__email')
    readonly_fields = ('created_at',)
