"""Services Layer — orchestration between the request boundary and storage.

Invariants:
    - Services depend on core protocols only, never on a concrete repository
    - Services return Result values; they never build HTTP responses

Design Decisions:
    - One service per resource for locality
"""
