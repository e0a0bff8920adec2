"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes decode request bodies, call one store operation, and return

Design Decisions:
    - Thin routes delegate to the stores in services/
"""
