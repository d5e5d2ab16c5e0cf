# Routes package init
"""
GenexMart Backend: API Routes Package
========================================

Route Inventory:
    - categories.py: GET/POST /api/categories, PUT/DELETE /api/categories/{id}
    - products.py:   GET/POST /api/products,   PUT/DELETE /api/products/{id}
    - customers.py:  GET/POST /api/customers,  PUT/DELETE /api/customers/{id}
    - orders.py:     GET/POST /api/penjualan,  GET /api/penjualan/{id}
    - health.py:     GET /  and  GET /health

Routes stay thin: extract path/body fields, call the service, pick the
status code. Statements live in the services.
"""
