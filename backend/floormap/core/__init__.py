"""Core Layer: domain types, errors, permission rules and repository contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here are pure: no IO, no async
"""
