"""Services Layer — async orchestration between routes and the store.

Invariants:
    - Services receive their repository and AuthContext as arguments
    - Pure decisions are delegated to core/
"""
