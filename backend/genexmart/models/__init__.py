"""
GenexMart Backend: ORM Models
================================

Importing this package registers every genexmart table on Base.metadata.
"""

from genexmart.models.category import Category
from genexmart.models.customer import Customer
from genexmart.models.order import Order, OrderDetail
from genexmart.models.product import Product

__all__ = ["Category", "Customer", "Order", "OrderDetail", "Product"]
