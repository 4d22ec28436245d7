import datetime
import uuid

import pytest
from pydantic import ValidationError

from src.data.placeholder import CUSTOMERS, PLACEHOLDER_DATASET
from src.schemas.seed import (
    CustomerRecord,
    InvoiceRecord,
    RevenueRecord,
    SeedDataset,
    UserRecord,
)


class TestUserRecord:
    def test_id_optional(self):
        record = UserRecord(name="Ada", email="ada@example.com", password="secret")
        assert record.id is None

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError):
            UserRecord(name="Ada", email="ada@example.com", password="")

    def test_password_hidden_from_repr(self):
        record = UserRecord(name="Ada", email="ada@example.com", password="secret")
        assert "secret" not in repr(record)


class TestCustomerRecord:
    def test_id_required(self):
        with pytest.raises(ValidationError):
            CustomerRecord(name="Amy", email="amy@burns.com", image_url="/customers/amy-burns.png")

    def test_image_url_length_limit(self):
        with pytest.raises(ValidationError):
            CustomerRecord(id=uuid.uuid4(), name="Amy", email="amy@burns.com", image_url="x" * 256)


class TestInvoiceRecord:
    def test_parses_iso_date(self):
        record = InvoiceRecord(
            customer_id=uuid.uuid4(), amount=3040, status="paid", date="2022-10-29"
        )
        assert record.date == datetime.date(2022, 10, 29)

    @pytest.mark.parametrize("status", ["overdue", "PAID", ""])
    def test_unknown_status_rejected(self, status):
        with pytest.raises(ValidationError):
            InvoiceRecord(customer_id=uuid.uuid4(), amount=1, status=status, date="2023-01-01")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            InvoiceRecord(customer_id=uuid.uuid4(), amount=-1, status="paid", date="2023-01-01")


class TestRevenueRecord:
    def test_month_longer_than_four_rejected(self):
        with pytest.raises(ValidationError):
            RevenueRecord(month="January", revenue=2000)

    def test_empty_month_rejected(self):
        with pytest.raises(ValidationError):
            RevenueRecord(month="", revenue=2000)


class TestSeedDataset:
    def test_collections_default_empty(self):
        dataset = SeedDataset()
        assert dataset.users == dataset.customers == dataset.invoices == dataset.revenue == []


class TestPlaceholderDataset:
    def test_sizes(self):
        assert len(PLACEHOLDER_DATASET.users) == 1
        assert len(PLACEHOLDER_DATASET.customers) == 6
        assert len(PLACEHOLDER_DATASET.invoices) == 13
        assert len(PLACEHOLDER_DATASET.revenue) == 12

    def test_invoices_reference_known_customers(self):
        customer_ids = {uuid.UUID(c["id"]) for c in CUSTOMERS}
        assert {inv.customer_id for inv in PLACEHOLDER_DATASET.invoices} <= customer_ids

    def test_months_unique(self):
        months = [r.month for r in PLACEHOLDER_DATASET.revenue]
        assert len(months) == len(set(months))
