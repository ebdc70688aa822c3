"""API Layer — FastAPI routes, request gates, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON or an empty body

Design Decisions:
    - Thin routes delegate to services/post_service.py
"""
