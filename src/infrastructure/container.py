"""Application wiring: Settings -> gateway, repositories and services.

The one place configuration turns into live objects:

    container = build_container(Settings())
    ctx = await container.actors.resolve(subject)
    ...
    await container.mm.dispose()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from src.domain.services import ActorResolver, ProgressService
from src.infrastructure.database import ModelManager, Settings
from src.infrastructure.log_config import configure_logging
from src.infrastructure.persistence.repositories import Repositories, get_repositories

logger = logging.getLogger(__name__)


@dataclass
class Container:
    mm: ModelManager
    repos: Repositories
    progress: ProgressService
    actors: ActorResolver


def build_services(repos: Repositories, settings: Settings) -> tuple[ProgressService, ActorResolver]:
    progress = ProgressService(
        users=repos.users,
        lessons=repos.lessons,
        tasks=repos.tasks,
        answers=repos.answers,
        progress=repos.progress,
        attempts=repos.attempts,
        tokens=repos.tokens,
        token_ttl=timedelta(minutes=settings.progress_token_ttl_minutes),
    )
    return progress, ActorResolver(repos.users)


def build_container(settings: Settings, mm: ModelManager | None = None) -> Container:
    """Configure logging and build every long-lived object from settings.

    mm defaults to ModelManager.connect(settings); pass one to reuse an
    existing engine.
    """
    configure_logging(settings)
    mm = mm or ModelManager.connect(settings)
    repos = get_repositories(mm)
    progress, actors = build_services(repos, settings)
    logger.info("Container ready (token ttl %d min)", settings.progress_token_ttl_minutes)
    return Container(mm=mm, repos=repos, progress=progress, actors=actors)
