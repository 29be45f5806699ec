# ==========================================
# apps/orders/admin.py
# ==========================================

from django.contrib import admin
from apps.orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Read-only admin for orders. Orders are never edited or deleted by hand."""
    
    list_display = [
        'id',
        'listing',
        'buyer',
        'payment_method',
        'status',
        'amount_cents',
        'created_at',
    ]
    list_filter = ['payment_method', 'status', 'created_at']
    search_fields = ['listing__title', 'buyer__email', 'gateway_session_id']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    readonly_fields = [
        'id',
        'listing',
        'buyer',
        'payment_method',
        'status',
        'gateway_session_id',
        'amount_cents',
        'created_at',
        'updated_at',
    ]
    
    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('listing', 'buyer')
    
    def has_add_permission(self, request):
        return False
    
    def has_delete_permission(self, request, obj=None):
        return False
