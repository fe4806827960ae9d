# taskboard/database.py

import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from taskboard.models import Base


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")

# SQLite requires check_same_thread=False for usage across threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
