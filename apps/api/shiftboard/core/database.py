from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from shiftboard.core.config import settings

# SQLite connections are bound to the thread that opened them unless told otherwise
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
)

class Base(DeclarativeBase):
    pass

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
