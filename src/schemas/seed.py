import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Dataset records
# ---------------------------------------------------------------------------


class UserRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID | None = None
    name: str = Field(max_length=255)
    email: str
    password: str = Field(repr=False)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Password must not be empty")
        return v


class CustomerRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    image_url: str = Field(max_length=255)


class InvoiceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: UUID
    amount: int = Field(ge=0)  # minor units (cents)
    status: Literal["pending", "paid"]
    date: datetime.date


class RevenueRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: str = Field(min_length=1, max_length=4)
    revenue: int = Field(ge=0)


class SeedDataset(BaseModel):
    """The four collections written by one seeding run."""

    users: list[UserRecord] = []
    customers: list[CustomerRecord] = []
    invoices: list[InvoiceRecord] = []
    revenue: list[RevenueRecord] = []


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class TableSummary(BaseModel):
    attempted: int
    inserted: int
    skipped: int


class SeedSummary(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "users": {"attempted": 1, "inserted": 1, "skipped": 0},
                "customers": {"attempted": 6, "inserted": 6, "skipped": 0},
                "invoices": {"attempted": 13, "inserted": 13, "skipped": 0},
                "revenue": {"attempted": 12, "inserted": 0, "skipped": 12},
            }
        }
    )

    users: TableSummary
    customers: TableSummary
    invoices: TableSummary
    revenue: TableSummary


class SeedResponse(BaseModel):
    message: str = "Database seeded successfully"
    summary: SeedSummary


class SeedStatusResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"users": 1, "customers": 6, "invoices": 13, "revenue": None}
        }
    )

    # ``None`` means the table has not been created yet.
    users: int | None
    customers: int | None
    invoices: int | None
    revenue: int | None
