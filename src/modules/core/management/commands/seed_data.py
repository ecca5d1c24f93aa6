from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.models import Customer

SEED_CUSTOMERS = [
    ("Ivan Polovyi", "626.164.7481", "Apt. 843 399 Lachelle Crossing, New Eldenhaven, LA 63962-9260"),
    ("Ana Souza", "1-669-210-0504", "Suite 120 55 Harbor Road, Port Alden, OR 97001"),
    ("Bruno Lima", "(555) 013-2298", "12 Elm Street, Springfield, IL 62704"),
    ("Carla Mendes", "555.019.4471", "4 Rue de la Paix, Lakeside, WI 53001"),
    ("Daniel Costa", "555-017-8820", "Unit 9 801 Market Street, Riverton, UT 84065"),
]


class Command(BaseCommand):
    help = "Seed the database with sample customers (idempotent)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding customers...")
        created = 0
        for full_name, phone_number, address in SEED_CUSTOMERS:
            if Customer.objects.alive().filter(phone_number=phone_number).exists():
                continue
            Customer.objects.create(
                full_name=full_name,
                phone_number=phone_number,
                address=address,
            )
            created += 1
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers={created}, "
                f"skipped={len(SEED_CUSTOMERS) - created}"
            )
        )
