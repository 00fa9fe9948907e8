from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlmodel import Session, SQLModel, create_engine

from community.core.config import settings

engine = create_engine(str(settings.DATABASE_URI))


def create_db_and_tables() -> None:
    """Create database tables."""
    SQLModel.metadata.create_all(engine)


def get_db_session() -> Generator[Session, None, None]:
    """Get database session."""
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    Unit of work around a multi-step write.

    Commits when the block exits normally, rolls back and re-raises on any
    exception so partial writes never become visible.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def init_db() -> None:
    """Initialize database with tables."""
    create_db_and_tables()
