from datetime import datetime, UTC
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from tasktracker.models.status import TaskStatus


def _title_not_empty(v):
    if v is None:
        return v
    if not v.strip():
        raise ValueError("title cannot be empty")
    return v.strip()


# status accepts any JSON value on input so anything outside the enumeration
# is reported as "Invalid status value" (400) by the router, not a 422.
class TaskCreate(BaseModel):
    title: str
    description: str
    status: Any = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _title_not_empty(v)


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Any = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _title_not_empty(v)

    def changes(self) -> dict:
        """Only the fields the caller actually sent.

        Nulls are dropped except for status, which must still be checked.
        """
        sent = self.model_dump(exclude_unset=True)
        return {k: v for k, v in sent.items() if v is not None or k == "status"}


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    created_at: datetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class Message(BaseModel):
    message: str
