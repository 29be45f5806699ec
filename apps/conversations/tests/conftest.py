import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User
from apps.marketplace.models import Listing
from apps.orders.models import Order


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def seller(db):
    return User.objects.create_user(email='seller@iit.edu', password='TestPass123!')


@pytest.fixture
def buyer(db):
    return User.objects.create_user(email='buyer@iit.edu', password='TestPass123!')


@pytest.fixture
def outsider(db):
    return User.objects.create_user(email='outsider@iit.edu', password='TestPass123!')


@pytest.fixture
def listing(seller):
    return Listing.objects.create(owner=seller, title='Mini Fridge', price_cents=5500)


@pytest.fixture
def order(listing, buyer):
    """An in-person order that hasn't been given a conversation yet."""
    return Order.objects.create(
        listing=listing,
        buyer=buyer,
        payment_method='in_person',
        status='created',
        amount_cents=listing.price_cents,
    )


@pytest.fixture
def conversation(order):
    from apps.conversations.services import start_conversation
    return start_conversation(order=order, opening_message='When can we meet?')


@pytest.fixture
def buyer_client(buyer):
    return _client_for(buyer)


@pytest.fixture
def seller_client(seller):
    return _client_for(seller)


@pytest.fixture
def outsider_client(outsider):
    return _client_for(outsider)
