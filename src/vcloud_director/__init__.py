"""
Client library for the VMware Cloud Director OpenAPI.
"""

from .client.api_client import VCDClient
from .client.exceptions import ENTITY_NOT_FOUND, NotFoundException, VCDException
from .resources.content_libraries import ContentLibrary
from .resources.defined_entities import DefinedEntity
from .resources.defined_entity_types import DefinedEntityType
from .resources.defined_interfaces import DefinedInterface
from .resources.vcenters import VCenter

__all__ = [
    "VCDClient",
    "ENTITY_NOT_FOUND",
    "NotFoundException",
    "VCDException",
    "ContentLibrary",
    "DefinedEntity",
    "DefinedEntityType",
    "DefinedInterface",
    "VCenter",
]
