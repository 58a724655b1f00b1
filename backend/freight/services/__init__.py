"""Services Layer — identity, uniqueness-checked creation, commodity and carrier operations.

Invariants:
    - Every public operation returns an Outcome; no expected failure raises
    - Store and hashing failures are logged, then translated into InternalError outcomes

Design Decisions:
    - One service module per resource for locality
"""
