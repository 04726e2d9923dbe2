"""Composition root: wire the SQL player directory into the services a transport layer would call."""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session, sessionmaker

from src.core.config import INITIAL_SQUARE_COUNT, configure_logging
from src.db.sql_repository import SQLPlayerRepository
from src.services.player_service import PlayerService
from src.services.squares_service import GameCoordinator


@dataclass
class Services:
    coordinator: GameCoordinator
    players: PlayerService
    sessions: list[Session] = field(default_factory=list)

    def close(self) -> None:
        """Release the database sessions on shutdown. The coordinator's in-memory board goes with the process."""
        for session in self.sessions:
            session.close()
        self.sessions.clear()


def create_services(
    session_factory: sessionmaker | None = None,
    square_count: int = INITIAL_SQUARE_COUNT,
) -> Services:
    """
    One coordinator per process: the board it owns is the game.

    Without a session factory, connects to DATABASE_URL from the configuration.
    The coordinator gets a session of its own, which it only touches while holding its lock.
    Registration and leaderboard reads go through a separate session.
    Call `Services.close()` on shutdown.
    """
    configure_logging()
    if session_factory is None:
        # importing creates the engine and tables
        from src.db.database import SessionLocal

        session_factory = SessionLocal

    coordinator_session = session_factory()
    players_session = session_factory()
    return Services(
        coordinator=GameCoordinator(
            SQLPlayerRepository(coordinator_session), square_count=square_count
        ),
        players=PlayerService(SQLPlayerRepository(players_session)),
        sessions=[coordinator_session, players_session],
    )
