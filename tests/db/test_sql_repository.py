"""Unit tests for src/db/sql_repository.py"""

from typing import Callable
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from src.core.exceptions import RepositoryError
from src.core.models import PlayerModel
from src.db.sql_repository import SQLPlayerRepository

PlayerFactory = Callable[..., PlayerModel]


def test_create_player(db_session_repo: Session, make_player: PlayerFactory) -> None:
    """Conversion from a PlayerModel to DBPlayer for a new entry to the database."""
    model = make_player(1, region="BE", levels_completed=2)
    repo = SQLPlayerRepository(db_session_repo)
    record_in_db = repo.create_player(model)
    assert isinstance(record_in_db, PlayerModel)
    assert record_in_db == model


def test_create_duplicate_email(db_session_repo: Session, make_player: PlayerFactory) -> None:
    """Unique constraint violation surfaces as a RepositoryError, and the session stays usable."""
    repo = SQLPlayerRepository(db_session_repo)
    repo.create_player(make_player(1))
    clash = make_player(2)
    clash.email = make_player(1).email
    with pytest.raises(RepositoryError):
        _ = repo.create_player(clash)
    assert repo.get_player("p1") is not None
    assert repo.get_player("p2") is None


def test_get_player_by_id(db_session_repo: Session, make_player: PlayerFactory) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    expected = repo.create_player(make_player(1))
    assert repo.get_player("p1") == expected


def test_get_unknown_player(db_session_repo: Session, make_player: PlayerFactory) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLPlayerRepository(db_session_repo)
    assert repo.get_player("p1") is None

    repo.create_player(make_player(1))
    assert repo.get_player("p2") is None


def test_get_player_by_email(db_session_repo: Session, make_player: PlayerFactory) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    expected = repo.create_player(make_player(1))
    assert repo.get_player_by_email("PLAYER1@example.com") == expected
    assert repo.get_player_by_email("nobody@example.com") is None


def test_credit_level_completion(db_session_repo: Session, make_player: PlayerFactory) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    repo.create_player(make_player(1))

    credited = repo.credit_level_completion("p1")
    assert credited is not None
    assert credited.levels_completed == 1

    repo.credit_level_completion("p1")
    stored = repo.get_player("p1")
    assert stored is not None
    assert stored.levels_completed == 2


def test_credit_unknown_player(db_session_repo: Session) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    assert repo.credit_level_completion("p1") is None


def test_credit_level_completions(db_session_repo: Session, make_player: PlayerFactory) -> None:
    """Every listed player gets exactly one level, unknown ids are skipped."""
    repo = SQLPlayerRepository(db_session_repo)
    for index in range(1, 4):
        repo.create_player(make_player(index))

    credited = repo.credit_level_completions(["p1", "p2", "ghost"])

    assert sorted(p.id for p in credited) == ["p1", "p2"]
    assert all(p.levels_completed == 1 for p in credited)
    p3 = repo.get_player("p3")
    assert p3 is not None
    assert p3.levels_completed == 0


def test_failed_credit_commit_credits_nobody(db_session_repo: Session, make_player: PlayerFactory) -> None:
    """Commit failure rolls the whole batch back and surfaces as a RepositoryError."""
    repo = SQLPlayerRepository(db_session_repo)
    for index in range(1, 4):
        repo.create_player(make_player(index))

    commit_failure = OperationalError("UPDATE players", {}, Exception("disk I/O error"))
    with patch.object(db_session_repo, "commit", side_effect=commit_failure):
        with pytest.raises(RepositoryError):
            _ = repo.credit_level_completions(["p1", "p2", "p3"])

    assert [p.levels_completed for p in repo.list_players()] == [0, 0, 0]


def test_credit_is_visible_to_other_sessions(
    session_factory: sessionmaker, make_player: PlayerFactory
) -> None:
    """A leaderboard read through another session never shows the pre-credit value."""
    writer_session = session_factory()
    reader_session = session_factory()
    writer = SQLPlayerRepository(writer_session)
    reader = SQLPlayerRepository(reader_session)
    writer.create_player(make_player(1))

    before = reader.get_player("p1")
    assert before is not None
    assert before.levels_completed == 0

    writer.credit_level_completion("p1")

    after = reader.get_player("p1")
    assert after is not None
    assert after.levels_completed == 1
    assert [p.levels_completed for p in reader.list_players()] == [1]

    writer_session.close()
    reader_session.close()


def test_list_players(db_session_repo: Session, make_player: PlayerFactory) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    repo.create_player(make_player(1, region="NL"))
    repo.create_player(make_player(2, region="BE"))
    repo.create_player(make_player(3, region="nl"))

    assert {p.id for p in repo.list_players()} == {"p1", "p2", "p3"}
    assert {p.id for p in repo.list_players("NL")} == {"p1", "p3"}
    assert repo.list_players("FR") == []
