from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings
from database.models import Base


def make_engine(url: str) -> Engine:
    """Create an engine; SQLite URLs get the options FastAPI's threadpool needs."""
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)
    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise each connection gets its own empty database
        options["poolclass"] = StaticPool
    return create_engine(url, **options)


engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def init_db(bind: Engine | None = None) -> None:
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
