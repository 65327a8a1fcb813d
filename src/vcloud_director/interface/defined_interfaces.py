from typing import Optional
from pydantic import Field
from vcloud_director.interface.base import EntityInterface, VCDModel
from vcloud_director.client.endpoints import OPENAPI_PATH_VERSION_1_0_0, OPENAPI_ENDPOINT_INTERFACES

class DefinedInterfaceGet(VCDModel):
    id: Optional[str] = None
    name: Optional[str] = None
    namespace: Optional[str] = Field(None, alias="nss")
    version: Optional[str] = None
    vendor: Optional[str] = None
    is_read_only: Optional[bool] = Field(None, alias="readonly")

class DefinedInterfaceInterface(EntityInterface):
    get = DefinedInterfaceGet
    endpoint = OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_INTERFACES
    label = "Defined Interface"
    requires_sys_admin = True
