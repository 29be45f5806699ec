from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

router = DefaultRouter()
router.register(r'orders', views.OrderViewSet, basename='order')

urlpatterns = [
    # POST /api/marketplace/purchase/       - Buy a listing
    path('purchase/', views.purchase, name='purchase'),

    # GET  /api/marketplace/orders/          - My orders (?role=buyer|seller)
    # GET  /api/marketplace/orders/{id}/     - Order details
    path('', include(router.urls)),
]
