"""Core Layer — pure identity and envelope logic, no database or HTTP imports.

Invariants:
    - Core NEVER imports from services/, api/ or infrastructure/
    - Expected results travel as Outcome values; exceptions only for I/O failures

Design Decisions:
    - Credential hashing and token signing live here: CPU-bound, no IO, trivially testable
"""
