"""Infrastructure Layer — cross-cutting concerns outside the domain core.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
