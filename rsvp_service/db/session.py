from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from rsvp_service.core.config import settings

# SQLite connections are shared with FastAPI's worker threads.
connect_args = (
    {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)

# The engine is the entry point to the database. It's configured with the
# database URL and handles the connection pooling.
engine = create_engine(
    settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args
)

# SessionLocal is a factory for creating new Session objects.
# One session is opened per request; see rsvp_service.api.deps.get_db.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
