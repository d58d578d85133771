"""Infrastructure Layer — database client, repositories and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - Every database failure leaves here as core.errors.SystemError

Design Decisions:
    - Collection-style repositories over raw sessions: logic reads like find/create/save
"""
