"""Unit tests: write_transaction commit/rollback and constraint error translation."""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from db import write_transaction
from utils.errors import ConflictError, NotFoundError, PersistenceError

pytestmark = pytest.mark.unit


def _integrity_error(text: str) -> IntegrityError:
    return IntegrityError("INSERT INTO stop ...", {}, Exception(text))


def test_commits_on_success():
    """A clean block is committed once and never rolled back."""
    session = MagicMock()
    with write_transaction(session, conflict_message="dup"):
        session.add("row")
    session.commit.assert_called_once()
    session.rollback.assert_not_called()


def test_unique_violation_becomes_conflict():
    """A primary key / unique violation rolls back and raises ConflictError with the given message."""
    session = MagicMock()
    session.commit.side_effect = _integrity_error("UNIQUE constraint failed: stop.id")
    with pytest.raises(ConflictError) as exc:
        with write_transaction(session, conflict_message="Parada com mesmo id já foi cadastrada no sistema!"):
            pass
    assert exc.value.message == "Parada com mesmo id já foi cadastrada no sistema!"
    session.rollback.assert_called_once()


def test_postgres_duplicate_key_becomes_conflict():
    """PostgreSQL wording for duplicate keys is also a conflict."""
    session = MagicMock()
    session.commit.side_effect = _integrity_error('duplicate key value violates unique constraint "line_pkey"')
    with pytest.raises(ConflictError):
        with write_transaction(session, conflict_message="dup"):
            pass


def test_foreign_key_violation_becomes_not_found():
    """A foreign key violation rolls back and raises NotFoundError."""
    session = MagicMock()
    session.commit.side_effect = _integrity_error("FOREIGN KEY constraint failed")
    with pytest.raises(NotFoundError) as exc:
        with write_transaction(session, conflict_message="dup", not_found_message="Linha não encontrada!"):
            pass
    assert exc.value.message == "Linha não encontrada!"
    session.rollback.assert_called_once()


def test_other_integrity_error_becomes_persistence_error():
    """A NOT NULL violation is not a conflict; it surfaces as PersistenceError."""
    session = MagicMock()
    session.commit.side_effect = _integrity_error("NOT NULL constraint failed: stop.name")
    with pytest.raises(PersistenceError) as exc:
        with write_transaction(session, conflict_message="dup"):
            pass
    assert "NOT NULL" in exc.value.error


def test_store_failure_becomes_persistence_error():
    """Connectivity-style failures roll back and raise PersistenceError."""
    session = MagicMock()
    session.commit.side_effect = OperationalError("COMMIT", {}, Exception("database is locked"))
    with pytest.raises(PersistenceError) as exc:
        with write_transaction(session, conflict_message="dup"):
            pass
    assert "database is locked" in exc.value.error
    session.rollback.assert_called_once()


def test_error_inside_block_rolls_back_and_propagates():
    """A non-database error inside the block rolls back and is re-raised unchanged."""
    session = MagicMock()
    with pytest.raises(KeyError):
        with write_transaction(session, conflict_message="dup"):
            raise KeyError("boom")
    session.rollback.assert_called_once()
    session.commit.assert_not_called()
