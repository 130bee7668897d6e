from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Length limits are enforced by validation.validate_todo_data rather than by
# Field constraints, so that every rule violation is reported as a single
# 400 envelope listing human-readable messages.


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Short title for the todo item (1..100 chars)")
    description: Optional[str] = Field(default=None, description="Optional detailed description (<= 500 chars)")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided fields are merged over the stored item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries and supplies",
                "description": "Milk, eggs, bread, and paper towels",
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Short title for the todo item (1..100 chars)")
    description: Optional[str] = Field(default=None, description="Optional detailed description (<= 500 chars)")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 3,
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
                "completed": False,
                "createdAt": "2025-01-25T10:15:30.123456Z",
                "updatedAt": "2025-01-26T09:00:00.000001Z",
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    description: str = Field(default="", description="Detailed description, empty when not given")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update timestamp")


class TodoEnvelope(BaseModel):
    """Envelope for a single Todo item."""

    success: bool = Field(default=True, description="Always true for successful responses")
    data: TodoOut


class TodoMessageEnvelope(TodoEnvelope):
    """Envelope for a single Todo item with a human-readable message."""

    message: str = Field(..., description="Summary of the performed action")


class TodoListEnvelope(BaseModel):
    """Envelope for list responses."""

    success: bool = Field(default=True, description="Always true for successful responses")
    data: List[TodoOut] = Field(..., description="Todo items matching the filters")
    count: int = Field(..., description="Number of items in data")


class BulkDeleteEnvelope(BaseModel):
    """Envelope returned after deleting all completed todos."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True, description="Always true for successful responses")
    message: str = Field(..., description="Summary of the performed action")
    deleted_count: int = Field(..., alias="deletedCount", description="Number of todos removed")


class HealthOut(BaseModel):
    """Liveness response."""

    success: bool = True
    message: str
    timestamp: datetime
    version: str


class ErrorEnvelope(BaseModel):
    """Envelope for error responses."""

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(..., description="Short error summary")
    message: Optional[str] = Field(default=None, description="Optional longer explanation")
    details: Optional[List[str]] = Field(default=None, description="Validation messages, if any")
