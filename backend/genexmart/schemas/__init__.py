"""
GenexMart Backend: API Schemas
=================================

Request bodies accept any JSON value for every field and keep unknown
keys: the store, not the API, decides what it will take.
"""
