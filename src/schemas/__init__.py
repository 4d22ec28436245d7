from .common import ErrorCode, ErrorDetail, ErrorResponse
from .health import HealthResponse
from .seed import (
    CustomerRecord,
    InvoiceRecord,
    RevenueRecord,
    SeedDataset,
    SeedResponse,
    SeedStatusResponse,
    SeedSummary,
    TableSummary,
    UserRecord,
)

__all__ = [
    # common
    "ErrorDetail",
    "ErrorCode",
    "ErrorResponse",
    # health
    "HealthResponse",
    # seed
    "UserRecord",
    "CustomerRecord",
    "InvoiceRecord",
    "RevenueRecord",
    "SeedDataset",
    "TableSummary",
    "SeedSummary",
    "SeedResponse",
    "SeedStatusResponse",
]
