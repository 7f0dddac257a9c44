from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from skilltracker.core.config import settings

# SQLAlchemy Base class for models to inherit
Base = declarative_base()

engine_kwargs = {"pool_pre_ping": True}  # helps avoid stale connections
if settings.database_url.startswith("sqlite"):
    # FastAPI runs sync routes in a threadpool
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if ":memory:" in settings.database_url:
        # one shared connection, otherwise each thread sees an empty database
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(settings.database_url, **engine_kwargs)

# Factory that creates DB sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dependency we will use in FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
