"""Core Layer — domain rules with no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything here runs synchronously and can be tested without a store

Design Decisions:
    - Functional core separated from imperative shell: handlers do the IO,
      core decides what is valid
"""
