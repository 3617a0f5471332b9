"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All storage calls wrapped with rollback and error mapping

Design Decisions:
    - Adapters convert ORM rows to core entities at the edge
"""
