from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'marketplace'

router = DefaultRouter()
router.register(r'listings', views.ListingViewSet, basename='listing')

urlpatterns = [
    # GET    /api/marketplace/listings/         - Browse active listings
    # POST   /api/marketplace/listings/         - Post a listing
    # GET    /api/marketplace/listings/mine/    - My listings
    # GET    /api/marketplace/listings/{id}/    - Listing details
    # PATCH  /api/marketplace/listings/{id}/    - Edit active listing
    # DELETE /api/marketplace/listings/{id}/    - Delete active listing
    path('', include(router.urls)),
]
