"""ORM Models: SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models are imported here so Base.metadata is complete for create_all and alembic
"""

from app.models.post import PostRecord  # noqa: F401
