import logging
import time
from dataclasses import dataclass, field

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from tinylinks.core.config import Settings
from tinylinks.db import database

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Process-wide state shared by request handlers: settings, pool and start time."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    started_at: float = field(default_factory=time.monotonic)

    @classmethod
    def build(cls, settings: Settings) -> "AppContext":
        engine = database.create_db_engine(settings)
        if not database.verify_database_connection(engine):
            engine.dispose()
            raise RuntimeError("Cannot reach database at startup")
        database.init_db(engine)
        session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
        return cls(settings=settings, engine=engine, session_factory=session_factory)

    def uptime_seconds(self) -> int:
        return int(time.monotonic() - self.started_at)

    def close(self):
        logger.info("Disposing database engine")
        self.engine.dispose()
