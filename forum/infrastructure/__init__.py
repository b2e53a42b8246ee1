"""Infrastructure Layer — store adapter and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/routes
    - All store failures surface as core/errors.py types

Design Decisions:
    - Thin wrappers over SQLAlchemy: the forum needs find/insert/save/delete, nothing more
"""
