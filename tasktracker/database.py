import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from fastapi import Request

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine (connection pool) and session factory for one store.

    Built explicitly and handed to the app factory; `open()` runs at startup
    and `close()` at shutdown.
    """

    def __init__(self, url: str):
        # Only apply sqlite-specific connect_args when using sqlite
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        # pool_pre_ping avoids handing out stale connections
        self.engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def open(self):
        # Importing the models registers their tables on Base.metadata
        from tasktracker.models import task  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("database ready url=%s", self.engine.url)

    def close(self):
        self.engine.dispose()
        logger.info("database closed url=%s", self.engine.url)

    def session(self) -> Session:
        return self.SessionLocal()


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
