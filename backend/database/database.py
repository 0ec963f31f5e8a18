from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from advisor.components.src_logging.logger import logging
from backend import config

connect_args = {"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    config.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
)

session_local = sessionmaker(autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None):
    # models must be imported so every table is registered on Base.metadata
    from backend.database import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logging.info("Database tables ensured.")


def get_db():
    db = session_local()
    try:
        yield db
    finally:
        db.close()
