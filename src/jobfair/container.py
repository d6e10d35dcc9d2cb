"""Dependency injection container for the job fair application."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .repository import Repository
from .schemas.config import AppConfig
from .service import JobFairService


class JobFairContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    repository = providers.Singleton(
        Repository,
        data_dir=config.data_dir,
    )

    service = providers.Factory(
        JobFairService,
        repository=repository,
        default_sort=config.default_sort,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> JobFairContainer:
    """Instantiate container with defaults plus optional overrides."""

    container = JobFairContainer()
    container.config.from_dict(AppConfig().to_settings())

    if settings:
        container.config.from_dict(AppConfig.model_validate(settings).to_settings())

    return container
