import uuid

import pytest
from django.urls import reverse
from rest_framework import status

from apps.marketplace.models import Listing


@pytest.mark.django_db
class TestListingBrowse:
    """Tests for GET /api/marketplace/listings/"""

    def test_anonymous_can_browse(self, api_client, listing, sold_listing):
        url = reverse('marketplace:listing-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        ids = [item['id'] for item in response.data['results']]
        assert ids == [str(listing.id)]

    def test_filter_by_category(self, api_client, listing):
        url = reverse('marketplace:listing-list')
        response = api_client.get(url, {'category': 'electronics'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0

    def test_invalid_category(self, api_client, listing):
        url = reverse('marketplace:listing-list')
        response = api_client.get(url, {'category': 'boats'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve_sold_listing(self, api_client, sold_listing):
        url = reverse('marketplace:listing-detail', args=[sold_listing.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_active'] is False
        assert response.data['owner']['display_name'] == 'Sam Seller'


@pytest.mark.django_db
class TestListingCreate:
    """Tests for POST /api/marketplace/listings/"""

    def test_create_listing(self, seller_client, seller):
        url = reverse('marketplace:listing-list')
        data = {
            'title': 'Mini Fridge',
            'price_cents': 5500,
            'category': 'dorm',
            'payment_options': ['in_person'],
        }
        response = seller_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['payment_options'] == ['in_person']
        assert response.data['is_active'] is True
        assert Listing.objects.get(id=response.data['id']).owner == seller

    def test_anonymous_cannot_create(self, api_client):
        url = reverse('marketplace:listing-list')
        response = api_client.post(url, {'title': 'X', 'price_cents': 100}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_zero_price_rejected(self, seller_client):
        url = reverse('marketplace:listing-list')
        response = seller_client.post(url, {'title': 'Free', 'price_cents': 0}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestListingModify:
    """Tests for PATCH and DELETE /api/marketplace/listings/{id}/"""

    def test_owner_can_edit(self, seller_client, listing):
        url = reverse('marketplace:listing-detail', args=[listing.id])
        response = seller_client.patch(url, {'price_cents': 4000}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['price_cents'] == 4000

    def test_other_student_cannot_edit(self, buyer_client, listing):
        url = reverse('marketplace:listing-detail', args=[listing.id])
        response = buyer_client.patch(url, {'price_cents': 1}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_sold_listing_cannot_be_edited(self, seller_client, sold_listing):
        url = reverse('marketplace:listing-detail', args=[sold_listing.id])
        response = seller_client.patch(url, {'title': 'Relisted'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_edit_unknown_listing(self, seller_client):
        url = reverse('marketplace:listing-detail', args=[uuid.uuid4()])
        response = seller_client.patch(url, {'title': 'Ghost'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_owner_can_delete(self, seller_client, listing):
        url = reverse('marketplace:listing-detail', args=[listing.id])
        response = seller_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Listing.objects.filter(id=listing.id).exists()


@pytest.mark.django_db
class TestMyListings:
    """Tests for GET /api/marketplace/listings/mine/"""

    def test_includes_sold(self, seller_client, listing, sold_listing):
        url = reverse('marketplace:listing-mine')
        response = seller_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_requires_auth(self, api_client):
        url = reverse('marketplace:listing-mine')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
