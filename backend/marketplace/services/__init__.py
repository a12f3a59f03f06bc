"""Services Layer — stateful stores and background refresh.

Invariants:
    - Stores own their in-memory collections and persist through KeyValueStorage
    - Rules live in core/; services sequence mutation → persist → log

Design Decisions:
    - One Marketplace object built at start-up and injected (no module globals)
"""
