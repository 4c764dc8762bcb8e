# Request/response records, camelCase on the wire
from pydantic import BaseModel, ConfigDict, Field, field_validator

SUCCESS_STATUS = "SUCCESS"


# API request models
class TransferRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    from_account: str | None = Field(default=None, alias="fromAccount")
    to_account: str | None = Field(default=None, alias="toAccount")
    amount: float = 0.0

    @field_validator("amount", mode="before")
    @classmethod
    def null_amount_is_zero(cls, value):
        return 0.0 if value is None else value


class TransferResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: str = SUCCESS_STATUS
    transaction_id: str = Field(alias="transactionId")
