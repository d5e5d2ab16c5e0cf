"""
GenexMart Backend: Application Package Initializer
=====================================================

What: REST API over the genexmart point-of-sale database (categories,
      products, customers, orders).
Who:  Imported by uvicorn (genexmart.main:app) and pytest.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← path/body extraction, status codes
    ├─────────────────────────────────────┤
    │     Services (Data Access Layer)    │  ← one statement per step
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← single-connection async engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
