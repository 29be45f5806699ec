# ==========================================
# apps/marketplace/admin.py
# ==========================================

from django.contrib import admin
from apps.marketplace.models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    """Admin interface for marketplace listings."""
    
    list_display = [
        'title',
        'owner',
        'price_display',
        'category',
        'campus',
        'is_active',
        'sold_at',
        'created_at',
    ]
    list_filter = ['is_active', 'category', 'condition', 'campus', 'created_at']
    search_fields = ['title', 'description', 'owner__email']
    # Sale state changes only through the purchase flow
    readonly_fields = ['is_active', 'sold_at', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    
    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'description', 'owner', 'image_url')
        }),
        ('Pricing', {
            'fields': ('price_cents', 'payment_options')
        }),
        ('Details', {
            'fields': ('category', 'condition', 'campus')
        }),
        ('Sale', {
            'fields': ('is_active', 'sold_at')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    
    def price_display(self, obj):
        """Show price in currency units."""
        return f"{obj.price_cents / 100:.2f}"
    price_display.short_description = 'Price'
    price_display.admin_order_field = 'price_cents'
    
    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('owner')
