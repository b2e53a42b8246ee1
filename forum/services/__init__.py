"""Services Layer — resource handlers for questions, replies and users.

Invariants:
    - One handler class per resource, constructed per request with its own AsyncSession
    - Handlers raise core/errors.py types; they never build HTTP responses

Design Decisions:
    - One handler file per resource for locality
"""
