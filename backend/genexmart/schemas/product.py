"""
GenexMart Backend: Product Schemas
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ProductIn(BaseModel):
    """
    Body of POST /api/products and PUT /api/products/{id}.

    Extra keys are kept so the create response can echo the body back.
    """
    category_id: Any = None
    name: Any = None
    price: Any = None
    stock: Any = None

    model_config = ConfigDict(extra="allow")
