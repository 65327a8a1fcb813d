from enum import Enum
from typing import Any, Optional
from pydantic import Field
from vcloud_director.interface.base import EntityInterface, OpenApiReference, VCDModel
from vcloud_director.client.endpoints import OPENAPI_PATH_VERSION_1_0_0, OPENAPI_ENDPOINT_ENTITIES

class DefinedEntityState(str, Enum):
    pre_created = "PRE_CREATED"
    resolved = "RESOLVED"
    resolution_error = "RESOLUTION_ERROR"

class DefinedEntityGet(VCDModel):
    id: Optional[str] = None
    entity_type: Optional[str] = Field(None, description="URN of the Runtime Defined Entity type")
    name: Optional[str] = None
    external_id: Optional[str] = None
    entity: Optional[dict[str, Any]] = Field(None, description="Payload, validated server side against the type schema")
    state: Optional[str] = None
    owner: Optional[OpenApiReference] = None
    org: Optional[OpenApiReference] = None

class DefinedEntityResolution(VCDModel):
    id: Optional[str] = None
    entity_state: Optional[str] = None
    message: Optional[str] = None

class DefinedEntityInterface(EntityInterface):
    get = DefinedEntityGet
    endpoint = OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES
    label = "Runtime Defined Entity"
    requires_sys_admin = True
