"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock and id factories injected)

Design Decisions:
    - Functional core separated from imperative shell: stores in services/
      own the mutable state and call into core for every rule
"""
