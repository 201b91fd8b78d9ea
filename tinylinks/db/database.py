import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from tinylinks.core.config import Settings
from tinylinks.db.models import Base

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    url = make_url(settings.DATABASE_URL)
    kwargs = {"pool_pre_ping": True, "future": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    elif settings.DATABASE_SSL and url.get_backend_name() == "postgresql":
        kwargs["connect_args"] = {"sslmode": "require"}

    return create_engine(url, **kwargs)


def init_db(engine: Engine):
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"DB init error: {e}")
        raise
    logger.info("Database table created/verified")


def verify_database_connection(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


def get_db(request: Request):
    """
    FastAPI dependency: yield a SQLAlchemy session from the app context and ensure it's closed.
    Usage: db: Session = Depends(database.get_db)
    """
    db = request.app.state.context.session_factory()
    try:
        yield db
    finally:
        db.close()
