from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.repositories import CredentialVerifier, Randomizer
from ..domain.themes import ThemeSelector
from ..domain.votes import VoteRecorder
from ..infrastructure.auth import DEFAULT_ALGORITHMS, JwksCredentialVerifier
from ..infrastructure.random import SystemRandomizer
from ..infrastructure.sqlite import (
    SQLiteDatabase,
    SQLiteResultsRepository,
    SQLiteThemesRepository,
    SQLiteVotesRepository,
)
from .queries import ResultsQueryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerConfig:
    db_path: str
    jwks_url: str
    jwt_audience: str | None = None
    jwt_algorithms: tuple[str, ...] = DEFAULT_ALGORITHMS
    host: str = "0.0.0.0"
    port: int = 3000
    metrics_log_path: str | None = None


class AppContainer:
    def __init__(
        self,
        *,
        config: ServerConfig,
        theme_selector: ThemeSelector,
        vote_recorder: VoteRecorder,
        results: ResultsQueryService,
        verifier: CredentialVerifier,
        database: SQLiteDatabase,
        themes_repo: SQLiteThemesRepository,
    ):
        self.config = config
        self.theme_selector = theme_selector
        self.vote_recorder = vote_recorder
        self.results = results
        self.verifier = verifier
        self.database = database
        self.themes_repo = themes_repo

    async def init_resources(self) -> None:
        await self.database.init()
        logger.info("Database ready at %s", self.config.db_path)


def create_container(
    config: ServerConfig,
    *,
    verifier: CredentialVerifier | None = None,
    randomizer: Randomizer | None = None,
) -> AppContainer:
    database = SQLiteDatabase(config.db_path)

    themes_repo = SQLiteThemesRepository(database)
    votes_repo = SQLiteVotesRepository(database)
    results_repo = SQLiteResultsRepository(database)

    theme_selector = ThemeSelector(
        themes_repo=themes_repo,
        votes_repo=votes_repo,
        randomizer=randomizer or SystemRandomizer(),
    )
    vote_recorder = VoteRecorder(themes_repo=themes_repo, votes_repo=votes_repo)
    results = ResultsQueryService(results_repo)

    if verifier is None:
        verifier = JwksCredentialVerifier(
            config.jwks_url,
            algorithms=config.jwt_algorithms,
            audience=config.jwt_audience,
        )

    return AppContainer(
        config=config,
        theme_selector=theme_selector,
        vote_recorder=vote_recorder,
        results=results,
        verifier=verifier,
        database=database,
        themes_repo=themes_repo,
    )
