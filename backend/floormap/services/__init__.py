"""Services Layer: one service per aggregate, wired to Protocol repositories.

Invariants:
    - Services fetch entities, ask core/permissions.py, then write through a repository
    - Missing entities become per-entity NotFound errors; denials become ForbiddenError
"""
