from enum import Enum
from typing import Optional
from vcloud_director.interface.base import EntityInterface, OpenApiReference, VCDModel
from vcloud_director.client.endpoints import OPENAPI_PATH_VCF, OPENAPI_ENDPOINT_CONTENT_LIBRARIES

class ContentLibraryType(str, Enum):
    provider = "PROVIDER"
    tenant = "TENANT"

class ContentLibrarySubscriptionConfig(VCDModel):
    subscription_url: Optional[str] = None
    password: Optional[str] = None
    need_local_copy: Optional[bool] = None

class ContentLibraryGet(VCDModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    library_type: Optional[str] = None
    storage_classes: Optional[list[OpenApiReference]] = None
    auto_attach: Optional[bool] = None
    creation_date: Optional[str] = None
    is_shared: Optional[bool] = None
    is_subscribed: Optional[bool] = None
    org: Optional[OpenApiReference] = None
    subscription_config: Optional[ContentLibrarySubscriptionConfig] = None
    version: Optional[str] = None

class ContentLibraryInterface(EntityInterface):
    get = ContentLibraryGet
    endpoint = OPENAPI_PATH_VCF + OPENAPI_ENDPOINT_CONTENT_LIBRARIES
    label = "Content Library"
