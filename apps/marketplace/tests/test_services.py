import uuid
from datetime import timedelta

import pytest
from django.core.management import call_command
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.marketplace.models import Listing
from apps.marketplace.services import (
    get_active_listing,
    mark_sold,
    create_listing,
    update_listing,
    delete_listing,
    list_active_listings,
    list_listings_for_owner,
    ListingNotFoundError,
    ListingConflictError,
    ListingNotEditableError,
    NotListingOwnerError,
    InvalidPaymentOptionsError,
)


# =============================================================================
# Listing Store
# =============================================================================

@pytest.mark.django_db
class TestGetActiveListing:

    def test_returns_active_listing(self, listing):
        found = get_active_listing(listing_id=listing.id)
        assert found == listing
        assert found.owner.email == 'seller@iit.edu'

    def test_sold_listing_is_not_available(self, sold_listing):
        with pytest.raises(ListingNotFoundError):
            get_active_listing(listing_id=sold_listing.id)

    def test_unknown_id(self, db):
        with pytest.raises(ListingNotFoundError):
            get_active_listing(listing_id=uuid.uuid4())

    def test_malformed_id(self, db):
        with pytest.raises(ListingNotFoundError):
            get_active_listing(listing_id='not-a-uuid')


@pytest.mark.django_db
class TestMarkSold:

    def test_flips_listing_to_sold(self, listing):
        sold_at = timezone.now()

        result = mark_sold(listing_id=listing.id, sold_at=sold_at)

        assert result.is_active is False
        assert result.sold_at == sold_at
        listing.refresh_from_db()
        assert listing.is_active is False
        assert listing.sold_at == sold_at

    def test_second_call_conflicts(self, listing):
        first = timezone.now()
        mark_sold(listing_id=listing.id, sold_at=first)

        with pytest.raises(ListingConflictError):
            mark_sold(listing_id=listing.id, sold_at=first + timedelta(seconds=5))

        listing.refresh_from_db()
        assert listing.sold_at == first

    def test_missing_listing(self, db):
        with pytest.raises(ListingNotFoundError):
            mark_sold(listing_id=uuid.uuid4(), sold_at=timezone.now())

    def test_database_rejects_inconsistent_sale_state(self, seller):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Listing.objects.create(
                    owner=seller,
                    title='Broken',
                    price_cents=100,
                    is_active=False,
                )


# =============================================================================
# Listing management
# =============================================================================

@pytest.mark.django_db
class TestCreateListing:

    def test_defaults(self, seller):
        listing = create_listing(owner=seller, title='Monitor', price_cents=7000)

        assert listing.is_active is True
        assert listing.sold_at is None
        assert listing.category == 'other'
        assert listing.accepted_payment_methods == ['card', 'in_person']

    def test_payment_options_list(self, seller):
        listing = create_listing(
            owner=seller,
            title='Monitor',
            price_cents=7000,
            payment_options=['in_person', 'in_person'],
        )
        assert listing.payment_options == 'in_person'
        assert listing.accepts('in_person')
        assert not listing.accepts('card')

    def test_unknown_payment_option(self, seller):
        with pytest.raises(InvalidPaymentOptionsError):
            create_listing(owner=seller, title='X', price_cents=100, payment_options='cash')

    def test_empty_payment_options(self, seller):
        with pytest.raises(InvalidPaymentOptionsError):
            create_listing(owner=seller, title='X', price_cents=100, payment_options=[])


@pytest.mark.django_db
class TestUpdateListing:

    def test_owner_updates_fields(self, listing, seller):
        updated = update_listing(
            listing_id=listing.id,
            user=seller,
            price_cents=4000,
            campus='Rice Campus',
        )
        assert updated.price_cents == 4000
        assert updated.campus == 'Rice Campus'

    def test_sale_state_is_not_editable(self, listing, seller):
        updated = update_listing(listing_id=listing.id, user=seller, is_active=False)
        assert updated.is_active is True

    def test_non_owner_rejected(self, listing, buyer):
        with pytest.raises(NotListingOwnerError):
            update_listing(listing_id=listing.id, user=buyer, title='Mine now')

    def test_sold_listing_rejected(self, sold_listing, seller):
        with pytest.raises(ListingNotEditableError):
            update_listing(listing_id=sold_listing.id, user=seller, title='Relist')


@pytest.mark.django_db
class TestDeleteListing:

    def test_owner_deletes(self, listing, seller):
        delete_listing(listing_id=listing.id, user=seller)
        assert not Listing.objects.filter(id=listing.id).exists()

    def test_non_owner_rejected(self, listing, buyer):
        with pytest.raises(NotListingOwnerError):
            delete_listing(listing_id=listing.id, user=buyer)
        assert Listing.objects.filter(id=listing.id).exists()

    def test_sold_listing_kept(self, sold_listing, seller):
        with pytest.raises(ListingNotEditableError):
            delete_listing(listing_id=sold_listing.id, user=seller)


@pytest.mark.django_db
class TestListingQueries:

    def test_active_listings_exclude_sold(self, listing, sold_listing):
        assert list(list_active_listings()) == [listing]

    def test_filters(self, listing, seller):
        create_listing(owner=seller, title='Sofa', price_cents=3000, category='furniture')

        assert list(list_active_listings(category='textbooks')) == [listing]
        assert list(list_active_listings(campus='mies campus')) == [listing]
        assert list(list_active_listings(search='algorithms')) == [listing]

    def test_owner_listings_include_sold(self, listing, sold_listing, seller, buyer):
        assert set(list_listings_for_owner(owner=seller)) == {listing, sold_listing}
        assert list(list_listings_for_owner(owner=buyer)) == []


@pytest.mark.django_db
class TestSeedCommand:

    def test_seeds_demo_listings_once(self):
        call_command('seed_marketplace')
        call_command('seed_marketplace')

        listings = Listing.objects.filter(owner__email='demo.seller@iit.edu')
        assert listings.count() == 3
        assert set(listings.values_list('price_cents', flat=True)) == {4500, 2500, 7000}

    def test_clear_recreates_listings(self):
        call_command('seed_marketplace')
        call_command('seed_marketplace', '--clear')

        assert Listing.objects.filter(owner__email='demo.seller@iit.edu').count() == 3
