# /app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# before `Base.metadata.create_all` runs at startup.

from .database import Base

from .models.key_value_models import KeyValueEntry
