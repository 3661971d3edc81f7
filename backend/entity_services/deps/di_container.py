"""
Dependency injection container using dependency-injector.
Wires the storage backend and the entity services.
"""

from typing import Optional

from dependency_injector import containers, providers

from entity_services.core.config import settings
from entity_services.core.exceptions import ConfigurationError
from entity_services.db.repositories.memory_repository import MemoryDatabase
from entity_services.db.session import SqlDatabase
from entity_services.services.account_service import AccountService
from entity_services.services.organization_service import OrganizationService
from entity_services.services.person_service import PersonService


STORAGE_BACKENDS = ("memory", "sql")


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Storage backend, one instance per container
    database = providers.Selector(
        config.storage_backend,
        memory=providers.Singleton(MemoryDatabase),
        sql=providers.Singleton(
            SqlDatabase,
            url=config.database_url,
            echo=config.database_echo,
        ),
    )

    # Services, a fresh instance and collaborator handle per call
    account_service = providers.Factory(
        AccountService,
        dao=database.provided.collection.call("account"),
    )

    person_service = providers.Factory(
        PersonService,
        dao=database.provided.collection.call("person"),
    )

    organization_service = providers.Factory(
        OrganizationService,
        dao=database.provided.collection.call("organization"),
    )

    # Lookup by service type name
    services = providers.Aggregate(
        account=account_service,
        person=person_service,
        organization=organization_service,
    )


def build_container(
    storage_backend: Optional[str] = None,
    database_url: Optional[str] = None,
    database_echo: Optional[bool] = None,
) -> Container:
    """Create a configured container, falling back to settings for unset values."""
    storage_backend = storage_backend or settings.STORAGE_BACKEND
    if storage_backend not in STORAGE_BACKENDS:
        raise ConfigurationError(
            f'The storage backend "{storage_backend}" does not exist.',
            details={"available": list(STORAGE_BACKENDS)},
        )

    container = Container()
    container.config.from_dict({
        "storage_backend": storage_backend,
        "database_url": database_url or settings.DATABASE_URL,
        "database_echo": settings.DATABASE_ECHO if database_echo is None else database_echo,
    })
    return container


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = build_container()
    return _container


def set_container(container: Optional[Container]) -> None:
    """Replace the global container, ``None`` drops it."""
    global _container
    _container = container


def reset_container() -> None:
    set_container(None)
