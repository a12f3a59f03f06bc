"""Database Infrastructure — SQLAlchemy Base shared by ORM models.

Invariants:
    - Single engine per process (created by SqlKeyValueStorage)
"""
