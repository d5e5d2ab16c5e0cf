# Middleware package init
"""
GenexMart Backend: Middleware Package
========================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every later log line carries the ID
    - Logging sees the final status code and total duration
    - CORS is Starlette's CORSMiddleware (answers preflight requests)
"""
