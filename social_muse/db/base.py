# /social_muse/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# the Base metadata knows about every table before create_all() runs.

from .base_class import Base

from .models.storage_models import StorageSlot
