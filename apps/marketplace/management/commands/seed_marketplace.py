"""
Management command to seed demo marketplace data.

Usage:
    python manage.py seed_marketplace
    python manage.py seed_marketplace --clear

This creates:
- 1 demo seller (demo.seller@iit.edu)
- 3 active listings (textbooks, dorm kit, monitor)

Existing demo listings are matched by title and left untouched.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, StudentType
from apps.marketplace.models import Listing, ListingCategory, ListingCondition
from apps.marketplace.services import create_listing


DEMO_SELLER_EMAIL = 'demo.seller@iit.edu'

DEMO_LISTINGS = [
    {
        'title': 'CS Textbook Bundle (Algorithms & Data Structures)',
        'description': (
            'Gently used textbooks for CS courses at IIT, including algorithms, '
            'data structures, and discrete math.'
        ),
        'price_cents': 4500,
        'category': ListingCategory.TEXTBOOKS,
        'condition': ListingCondition.GOOD,
    },
    {
        'title': 'Dorm Starter Kit (Lamp, Hangers, Organizer)',
        'description': (
            'Perfect starter kit for new international students: desk lamp, '
            'hangers, and storage organizer.'
        ),
        'price_cents': 2500,
        'category': ListingCategory.DORM,
        'condition': ListingCondition.LIKE_NEW,
    },
    {
        'title': '24" Monitor for Study & Projects',
        'description': (
            '1080p monitor ideal for coding, design, and research work. '
            'Used for one semester.'
        ),
        'price_cents': 7000,
        'category': ListingCategory.ELECTRONICS,
        'condition': ListingCondition.LIKE_NEW,
    },
]


class Command(BaseCommand):
    help = 'Seed a demo seller and marketplace listings'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete the demo seller\'s unsold listings before seeding',
        )
        parser.add_argument(
            '--campus',
            default='Mies Campus',
            help='Campus to assign to the demo listings',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        seller = self.get_or_create_seller()

        if options['clear']:
            deleted, _ = Listing.objects.filter(owner=seller, is_active=True).delete()
            self.stdout.write(f'Removed {deleted} unsold demo listing(s).')

        created = 0
        for data in DEMO_LISTINGS:
            if Listing.objects.filter(owner=seller, title=data['title']).exists():
                continue
            create_listing(owner=seller, campus=options['campus'], **data)
            created += 1

        self.stdout.write(self.style.SUCCESS(
            f'Seeding complete: {created} listing(s) created.'
        ))

    def get_or_create_seller(self):
        """Return the demo seller, creating it on first run."""
        seller = User.objects.filter(email=DEMO_SELLER_EMAIL).first()
        if seller:
            return seller

        seller = User.objects.create_user(
            email=DEMO_SELLER_EMAIL,
            password=None,
            full_name='Demo Seller',
            student_type=StudentType.GRADUATE,
            program='M.S. Cybersecurity',
        )
        self.stdout.write(f'Created demo seller {seller.email} (login disabled).')
        return seller
