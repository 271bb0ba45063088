"""ORM Models — SQLAlchemy declarative models for stored documents.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from inventory.models.product import Product  # noqa: F401
