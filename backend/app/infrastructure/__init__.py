"""Infrastructure Layer: database access, the SQL post store and logging setup.

Invariants:
    - All SQLAlchemy exceptions are mapped to DatabaseError before leaving this layer
"""
