"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body uses the {status, message?, data?} envelope

Design Decisions:
    - Thin routes delegate to services/user_handlers
"""
