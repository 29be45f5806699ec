# ==========================================
# apps/conversations/admin.py
# ==========================================

from django.contrib import admin
from apps.conversations.models import Conversation, Message


class MessageInline(admin.TabularInline):
    model = Message
    extra = 0
    fields = ['sequence', 'sender', 'content', 'created_at']
    readonly_fields = fields
    can_delete = False
    ordering = ['created_at', 'sequence']
    
    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    """Admin interface for buyer and seller conversations."""
    
    list_display = ['id', 'order', 'buyer', 'seller', 'message_count', 'created_at']
    search_fields = ['buyer__email', 'seller__email', 'order__listing__title']
    readonly_fields = ['id', 'order', 'buyer', 'seller', 'created_at']
    date_hierarchy = 'created_at'
    inlines = [MessageInline]
    
    def message_count(self, obj):
        return obj.messages.count()
    message_count.short_description = 'Messages'
    
    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('order', 'buyer', 'seller')
    
    def has_add_permission(self, request):
        return False
    
    def has_delete_permission(self, request, obj=None):
        return False
