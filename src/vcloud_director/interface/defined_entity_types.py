from typing import Any, Optional
from pydantic import Field
from vcloud_director.interface.base import EntityInterface, VCDModel
from vcloud_director.client.endpoints import OPENAPI_PATH_VERSION_1_0_0, OPENAPI_ENDPOINT_ENTITY_TYPES

class DefinedEntityTypeGet(VCDModel):
    id: Optional[str] = Field(None, description="URN of the type, urn:vcloud:type:<vendor>:<nss>:<version>")
    name: Optional[str] = None
    namespace: Optional[str] = Field(None, alias="nss", description="Namespace of the type")
    version: Optional[str] = Field(None, description="Semantic version of the type")
    description: Optional[str] = None
    external_id: Optional[str] = None
    json_schema: Optional[dict[str, Any]] = Field(None, alias="schema", description="JSON schema of the entity payload")
    vendor: Optional[str] = None
    interfaces: Optional[list[str]] = Field(None, description="URNs of the implemented interfaces")
    hooks: Optional[dict[str, str]] = None
    is_read_only: Optional[bool] = Field(None, alias="readonly")
    max_implicit_right: Optional[str] = None

class DefinedEntityTypeInterface(EntityInterface):
    get = DefinedEntityTypeGet
    endpoint = OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITY_TYPES
    label = "Runtime Defined Entity type"
    requires_sys_admin = True
