"""Database Infrastructure — declarative base, audit mixin and the audit hook.

Invariants:
    - All sessions are async (AsyncSession)
    - Every flush passes through the audit hook (db/auditing.py)

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
