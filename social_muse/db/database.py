# /social_muse/db/database.py

import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

load_dotenv()

# Local SQLite file by default; any SQLAlchemy URL works.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./social_muse.db")

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

# Each instance of SessionLocal is a database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Creates any missing tables. Called once from the application lifespan."""
    from .base import Base
    Base.metadata.create_all(bind=bind or engine)
