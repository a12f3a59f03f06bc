"""Infrastructure Layer — durable storage and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core/ domain logic beyond errors and protocols
    - All storage failures mapped to StorageError

Design Decisions:
    - Storage implementations satisfy core.storage_protocols.KeyValueStorage
      structurally; stores never see SQLAlchemy types
"""
