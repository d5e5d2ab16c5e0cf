# Services package init
"""
GenexMart Backend: Services Package
======================================

What:  The data access layer: one service per resource, each running its
       statements on the request's AsyncSession.

Service Inventory:
    - category_service: product_categories CRUD
    - product_service:  products CRUD (list joined with category name)
    - customer_service: customers CRUD
    - order_service:    orders + order_details (list, read, create)
    - identifiers:      random primary-key codes for categories/customers
"""
