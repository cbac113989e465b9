"""Sample catalog and transaction generator for demos."""

import logging
import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from dateutil.relativedelta import relativedelta

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import PaymentStatus, TransactionType

logger = logging.getLogger(__name__)

# (name, price) pairs for an air-conditioning service business
SAMPLE_SERVICES = [
    ("AC Cleaning Split 0.5 - 1 PK", Decimal("75000")),
    ("AC Cleaning Split 1.5 - 2 PK", Decimal("85000")),
    ("Refrigerant Refill R32/R410", Decimal("350000")),
    ("Refrigerant Refill R22", Decimal("250000")),
    ("AC Removal & Installation", Decimal("450000")),
    ("Control Module Repair", Decimal("350000")),
    ("Capacitor Replacement", Decimal("175000")),
    ("Leak Welding", Decimal("250000")),
]

SAMPLE_EXPENSES = [
    ("R32 Refrigerant Purchase", Decimal("850000")),
    ("Copper Pipe 3m", Decimal("250000")),
    ("Operational Fuel", Decimal("50000")),
    ("Team Lunch", Decimal("75000")),
    ("Tools & Equipment", Decimal("450000")),
    ("Social Media Ads", Decimal("150000")),
]

SAMPLE_TRANSACTION_COUNT = 50
INCOME_RATIO = 0.6
UNPAID_RATIO = 0.2
SAMPLE_MONTHS = 6


class SampleDataService:
    """Populate an empty book with demo data."""

    def __init__(self, db: Database):
        self.db = db

    def seed(
        self,
        random_seed: Optional[int] = None,
        today: Optional[date] = None,
        count: int = SAMPLE_TRANSACTION_COUNT,
    ) -> tuple[int, int]:
        """Insert the sample catalog and random transactions.

        Catalog services whose name already exists are skipped. Transactions
        are dated within the last six months up to today.

        Args:
            random_seed: Seed for reproducible output
            today: Reference date (defaults to today)
            count: Number of transactions to generate

        Returns:
            Tuple of (services created, transactions created)
        """
        rng = random.Random(random_seed)
        today = today or date.today()
        start = today - relativedelta(months=SAMPLE_MONTHS)
        span_days = (today - start).days

        services_created = 0
        for name, price in SAMPLE_SERVICES:
            if self.db.get_service_by_name(name) is None:
                self.db.create_service(name=name, price=price)
                services_created += 1

        for _ in range(count):
            if rng.random() < INCOME_RATIO:
                description, amount = rng.choice(SAMPLE_SERVICES)
                txn_type = TransactionType.INCOME
            else:
                description, amount = rng.choice(SAMPLE_EXPENSES)
                txn_type = TransactionType.EXPENSE

            status = PaymentStatus.UNPAID if rng.random() < UNPAID_RATIO else PaymentStatus.PAID
            self.db.create_transaction(
                date=start + timedelta(days=rng.randint(0, span_days)),
                description=description,
                amount=amount,
                type=txn_type,
                payment_status=status,
            )

        logger.info("Seeded %d services and %d transactions", services_created, count)
        return services_created, count
