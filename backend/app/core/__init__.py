"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or db/
    - All functions are pure and deterministic (id and salt generation aside)

Design Decisions:
    - Functional core separated from imperative shell: validation runs here,
      synchronously, before services start any IO
"""
