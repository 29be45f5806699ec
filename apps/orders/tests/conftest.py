import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User
from apps.marketplace.models import Listing

from .fakes import FakeGateway


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def seller(db):
    """Seller S1."""
    return User.objects.create_user(
        email='s1@iit.edu',
        password='TestPass123!',
        full_name='Seller One',
    )


@pytest.fixture
def buyer(db):
    """Buyer B1."""
    return User.objects.create_user(
        email='b1@iit.edu',
        password='TestPass123!',
        full_name='Buyer One',
    )


@pytest.fixture
def outsider(db):
    """A student who is neither buyer nor seller."""
    return User.objects.create_user(
        email='outsider@iit.edu',
        password='TestPass123!',
    )


@pytest.fixture
def listing(seller):
    """Listing P1, priced 4500 cents."""
    return Listing.objects.create(
        owner=seller,
        title='CS Textbook Bundle',
        description='Algorithms and data structures.',
        price_cents=4500,
        category='textbooks',
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def buyer_client(buyer):
    return _client_for(buyer)


@pytest.fixture
def seller_client(seller):
    return _client_for(seller)


@pytest.fixture
def outsider_client(outsider):
    return _client_for(outsider)
