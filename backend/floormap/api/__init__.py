"""API Layer: FastAPI routers, request dependencies and error handlers.

Invariants:
    - Routes are thin: parse, resolve the Requester, call one service method
    - Every failure leaves through the FloorMapError envelope (error_handlers.py)
"""
