"""Infrastructure Layer: database sessions, SQL repositories, credentials and logging.

Invariants:
    - Library failures (SQLAlchemy, passlib, PyJWT) leave this layer as core/errors.py types
"""
