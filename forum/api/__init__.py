"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every JSON failure body is {"message": str}

Design Decisions:
    - Thin routes delegate to services
"""
