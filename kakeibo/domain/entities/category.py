"""
Category entity.

Defaults (user_id is None) are shared by every user and cannot be renamed
or deleted; custom categories belong to the user who created them.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from kakeibo.domain.values.category_name import CategoryName
from kakeibo.domain.values.domain_error import DomainError
from kakeibo.domain.values.identity import as_category_id, as_user_id
from kakeibo.domain.values.transaction_type import TransactionType
from kakeibo.utils.datetime_helpers import utc_now

from .records import TransactionTypeField, as_transaction_type


class CategoryDomainError(DomainError):
    pass


class Category(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., gt=0)
    name: InstanceOf[CategoryName]
    type: TransactionTypeField
    is_default: bool = False
    user_id: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: int,
        name: CategoryName,
        type: TransactionType | str,
        is_default: bool,
        user_id: int | None,
    ) -> "Category":
        now = utc_now()
        return cls.reconstruct(
            id, name, type, is_default, user_id, now, now
        )

    @classmethod
    def reconstruct(
        cls,
        id: int,
        name: CategoryName,
        type: TransactionType | str,
        is_default: bool,
        user_id: int | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Category":
        return cls(
            id=as_category_id(id),
            name=name,
            type=as_transaction_type(type),
            is_default=is_default,
            user_id=(
                as_user_id(user_id) if user_id is not None else None
            ),
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_name(self, new_name: CategoryName) -> None:
        """
        Rename a custom category.

        Raises:
            CategoryDomainError: The category is a shared default.
        """
        if self.is_default:
            raise CategoryDomainError("Default categories cannot be renamed")
        self.name = new_name
        self.updated_at = utc_now()

    def can_delete(self) -> bool:
        return not self.is_default

    def can_edit_by(self, user_id: int) -> bool:
        if self.is_default:
            return False
        return self.user_id is not None and self.user_id == user_id

    def is_available_for(self, user_id: int) -> bool:
        if self.user_id is None:
            return True
        return self.user_id == user_id

    def is_common_category(self) -> bool:
        return self.user_id is None

    def is_custom_category(self) -> bool:
        return self.user_id is not None
