"""
GenexMart Backend: Category Schemas
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CategoryIn(BaseModel):
    """Body of POST /api/categories and PUT /api/categories/{id}."""
    name: Any = None

    model_config = ConfigDict(extra="allow")


class CategoryCreated(BaseModel):
    """Returned by POST /api/categories."""
    id: str
    name: Any = None
