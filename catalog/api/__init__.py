"""API Layer — FastAPI routes, request boundary and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All failures become responses in boundary.py or error_handlers.py, nowhere else

Design Decisions:
    - Thin routes delegate to services
"""
