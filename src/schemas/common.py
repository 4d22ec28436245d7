from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "month",
                "message": "String should have at most 4 characters",
            }
        }
    )

    field: str
    message: str


class ErrorCode(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "SEED_FAILED",
                "message": "invoices: relation \"invoices\" does not exist",
                "details": None,
            }
        }
    )

    code: str
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": {
                    "code": "SEED_FAILED",
                    "message": "users: duplicate key value violates unique constraint",
                    "details": None,
                }
            }
        }
    )

    error: ErrorCode
