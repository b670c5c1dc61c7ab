"""Infrastructure Layer - database access, key-value store, ids, time and logging.

Invariants:
    - Infrastructure never imports from core/ rule modules
    - SQLAlchemy errors are mapped to DatabaseError before leaving this layer
"""
