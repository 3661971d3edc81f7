"""
Service factory.
Creates entity services by type name and hands out their operation handles.
"""

import enum
from typing import List, Union

from entity_services.core.exceptions import ConfigurationError
from entity_services.core.logging import get_logger, trace
from entity_services.deps.di_container import get_container
from entity_services.services.handle import ServiceHandle
from entity_services.utils.preconditions import require_string

logger = get_logger(__name__)


class ServiceType(str, enum.Enum):
    """Service type enumeration."""
    ACCOUNT = "account"
    PERSON = "person"
    ORGANIZATION = "organization"


def create(service_type: Union[str, ServiceType]) -> ServiceHandle:
    """
    Create a service by type.

    Every call builds a new service with its own storage collaborator.

    Args:
        service_type: Registered service type name

    Returns:
        Handle exposing the operations of the service

    Raises:
        PreconditionError: the type is not a non-empty string
        ConfigurationError: no service is registered under the type
    """
    if isinstance(service_type, ServiceType):
        service_type = service_type.value
    require_string(service_type, "Please define the type of the service you want to create.")

    provider = get_container().services.providers.get(service_type)
    if not callable(provider):
        raise ConfigurationError(
            f'The Service "{service_type}" does not exist.',
            details={"available": available_services()},
        )

    service = provider()

    trace(logger, 'Created service with type "%s"', service_type)

    return service.handle()


def available_services() -> List[str]:
    """Names of all registered service types."""
    return sorted(get_container().services.providers)
