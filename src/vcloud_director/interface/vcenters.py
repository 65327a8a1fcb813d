from typing import Optional
from vcloud_director.interface.base import EntityInterface, VCDModel
from vcloud_director.client.endpoints import OPENAPI_PATH_VERSION_1_0_0, OPENAPI_ENDPOINT_VIRTUAL_CENTERS

class VSphereVirtualCenterGet(VCDModel):
    vc_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    url: Optional[str] = None
    is_enabled: Optional[bool] = None
    vsphere_web_client_server_url: Optional[str] = None
    has_proxy: Optional[bool] = None
    root_folder: Optional[str] = None
    vc_none_network: Optional[str] = None
    tenant_visible_name: Optional[str] = None
    is_connected: Optional[bool] = None
    mode: Optional[str] = None
    listener_state: Optional[str] = None
    cluster_health_status: Optional[str] = None
    vc_version: Optional[str] = None
    build_number: Optional[str] = None
    uuid: Optional[str] = None
    nsx_v_manager: Optional[dict] = None
    proxy_configuration_urn: Optional[str] = None

class VCenterInterface(EntityInterface):
    get = VSphereVirtualCenterGet
    endpoint = OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_VIRTUAL_CENTERS
    label = "vCenter Server"
    id_field = "vc_id"
