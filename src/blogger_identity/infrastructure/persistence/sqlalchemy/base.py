"""SQLAlchemy declarative base for blogger_identity models.

Uses the same metadata as blogger's Base so one create_all covers every table.
"""

from blogger.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
