"""Core Layer — entity store and domain rules, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Every operation is a synchronous in-memory computation

Design Decisions:
    - Functional core separated from the HTTP shell: the store can be used and
      tested without a running application
"""
