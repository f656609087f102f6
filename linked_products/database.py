from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from linked_products.core.settings import get_settings

SQLALCHEMY_DATABASE_URL = get_settings().database_url

connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
        Database session generator.

        Opens a session and closes it once the request is done; meant to be used
        as a FastAPI dependency.

        Yields:
            SessionLocal: an open SQLAlchemy session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
