"""Database engine, session and write-transaction scope for SQLite (dev) / PostgreSQL (prod)."""
from collections.abc import Generator, Iterator
from contextlib import contextmanager
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from utils.config import DATABASE_URL, TESTING
from utils.errors import ConflictError, NotFoundError, PersistenceError

LOG = logging.getLogger(__name__)

# Runtime safety: when TESTING=true, never use production DB.
if TESTING:
    url = DATABASE_URL
    if "transit.db" in url or (":memory:" not in url and "test" not in url.lower().split("?")[0]):
        raise RuntimeError(
            "Tests must not run against production. Set TESTING_DATABASE_URL to sqlite:///:memory: "
            "(or another test URL containing :memory: or 'test')."
        )

_connect_args = {"check_same_thread": False} if "sqlite" in DATABASE_URL else {}
# In-memory SQLite: use one connection so all sessions share the same DB.
_engine_kw = {"connect_args": _connect_args, "echo": False}
if "sqlite" in DATABASE_URL and ":memory:" in DATABASE_URL:
    _engine_kw["poolclass"] = StaticPool

_engine = create_engine(DATABASE_URL, **_engine_kw)

if "sqlite" in DATABASE_URL:

    @event.listens_for(_engine, "connect")
    def _sqlite_connect(dbapi_conn, connection_record):
        # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs nest; FKs drive the cascades.
        dbapi_conn.isolation_level = None
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    @event.listens_for(_engine, "begin")
    def _sqlite_begin(conn):
        conn.exec_driver_sql("BEGIN")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: yield a DB session and close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _is_unique_violation(exc: IntegrityError) -> bool:
    text = str(exc.orig).lower()
    return "unique" in text or "primary key" in text or "duplicate" in text


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    return "foreign key" in str(exc.orig).lower()


@contextmanager
def write_transaction(
    session: Session,
    *,
    conflict_message: str,
    not_found_message: str = "Registro relacionado não encontrado!",
) -> Iterator[Session]:
    """Scope the write statements of one operation: commit on success, roll back on any failure.

    Constraint violations raised by the store are translated to the same outcomes the
    repository pre-checks produce: unique/primary key -> ConflictError, foreign key -> NotFoundError.
    Any other store failure becomes PersistenceError.
    """
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        session.rollback()
        LOG.warning("Write rolled back on constraint violation: %s", e.orig)
        if _is_unique_violation(e):
            raise ConflictError(conflict_message) from e
        if _is_foreign_key_violation(e):
            raise NotFoundError(not_found_message) from e
        raise PersistenceError(str(e.orig)) from e
    except SQLAlchemyError as e:
        session.rollback()
        LOG.exception("Write rolled back on persistence failure")
        raise PersistenceError(str(e)) from e
    except Exception:
        session.rollback()
        raise
