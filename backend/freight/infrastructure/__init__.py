"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/
    - All SQLAlchemy exceptions surfaced through DatabaseError

Design Decisions:
    - Resilient wrappers over raw clients: rollback and error mapping in one place
"""
