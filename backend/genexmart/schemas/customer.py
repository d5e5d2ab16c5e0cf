"""
GenexMart Backend: Customer Schemas
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CustomerIn(BaseModel):
    """
    Body of POST /api/customers and PUT /api/customers/{id}.

    gender_id is only read on create; updates leave the stored gender alone.
    """
    name: Any = None
    email: Any = None
    phone: Any = None
    address: Any = None
    gender_id: Any = None

    model_config = ConfigDict(extra="allow")
