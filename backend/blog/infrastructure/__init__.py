"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every store call maps driver exceptions to StoreError

Design Decisions:
    - Repository classes implement core/repository_protocols.py contracts
"""
