"""HTTP Layer — FastAPI routers, auth dependency, outcome rendering and error handlers.

Invariants:
    - Routes never contain business logic (delegate to services/)
    - Outcome kinds map 1:1 onto HTTP status codes (api/responses.py)
"""
