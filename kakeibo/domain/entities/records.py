"""
Boundary records exchanged with repositories.

Plain data with no behaviour; the transaction type travels as text at the
edges and is parsed through TransactionType.from_string on the way in.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    InstanceOf,
    PlainSerializer,
)

from kakeibo.domain.values.transaction_type import TransactionType


def as_transaction_type(value: Any) -> TransactionType:
    """Pass TransactionType through, parse anything else with from_string."""
    if isinstance(value, TransactionType):
        return value
    return TransactionType.from_string(value)


TransactionTypeField = Annotated[
    InstanceOf[TransactionType],
    BeforeValidator(as_transaction_type),
    PlainSerializer(str, return_type=str),
]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class CategoryRecord(Record):
    id: int = Field(..., gt=0)
    name: str
    type: TransactionTypeField
    is_default: bool = False
    user_id: int | None = Field(default=None, gt=0)
    is_visible: bool = True
    display_order: int = Field(default=0, ge=0)
    created_at: datetime
    updated_at: datetime


class TransactionRecord(Record):
    id: int = Field(..., gt=0)
    user_id: int = Field(..., gt=0)
    type: TransactionTypeField
    title: str
    amount: int = Field(..., ge=0)
    currency: str = Field(default="JPY", min_length=3, max_length=3)
    date: str = Field(..., description="YYYY-MM-DD")
    category_id: int = Field(..., gt=0)
    memo: str = ""
    created_at: datetime
    updated_at: datetime


class TransactionListItemRecord(Record):
    id: int = Field(..., gt=0)
    user_id: int = Field(..., gt=0)
    type: TransactionTypeField
    title: str
    amount: int = Field(..., ge=0)
    currency_code: str = "JPY"
    date: str = Field(..., description="YYYY-MM-DD")
    category_ids: list[int] = Field(default_factory=list)
    memo: str | None = None
    created_at: datetime
    updated_at: datetime


class CreateTransactionData(Record):
    user_id: int = Field(..., gt=0)
    type: TransactionTypeField
    title: str
    amount: int = Field(..., gt=0)
    date: str = Field(..., description="YYYY-MM-DD")
    category_id: int = Field(..., gt=0)
    memo: str = ""


class CreateCategoryData(Record):
    user_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    type: TransactionTypeField


class UpdateCategoryData(Record):
    """Per-category display settings; None leaves a setting unchanged."""

    is_visible: bool | None = None
    display_order: int | None = Field(default=None, ge=0)
