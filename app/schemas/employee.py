from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EmployeeIn(BaseModel):
    """Request body for create and update. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str | None = None
    position: str | None = None
    salary: float | None = None


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str | None
    position: str | None
    salary: float | None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
    deleted_at: datetime | None = Field(default=None, serialization_alias="deletedAt")


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
