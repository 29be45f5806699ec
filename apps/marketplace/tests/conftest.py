import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.marketplace.models import Listing


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def seller(db):
    """Create and return a student who sells items."""
    return User.objects.create_user(
        email='seller@iit.edu',
        password='TestPass123!',
        full_name='Sam Seller',
    )


@pytest.fixture
def buyer(db):
    """Create and return another student."""
    return User.objects.create_user(
        email='buyer@iit.edu',
        password='TestPass123!',
        full_name='Bea Buyer',
    )


@pytest.fixture
def seller_client(api_client, seller):
    """Return an API client authenticated as the seller."""
    refresh = RefreshToken.for_user(seller)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def buyer_client(buyer):
    """Return an API client authenticated as the buyer."""
    client = APIClient()
    refresh = RefreshToken.for_user(buyer)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def listing(seller):
    """Create an active textbook listing owned by the seller."""
    return Listing.objects.create(
        owner=seller,
        title='CS Textbook Bundle',
        description='Algorithms and data structures.',
        price_cents=4500,
        category='textbooks',
        campus='Mies Campus',
    )


@pytest.fixture
def sold_listing(seller):
    """Create a listing that has already been sold."""
    from django.utils import timezone
    return Listing.objects.create(
        owner=seller,
        title='Desk Lamp',
        price_cents=1200,
        category='dorm',
        is_active=False,
        sold_at=timezone.now(),
    )
