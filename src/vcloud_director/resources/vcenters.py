import logging
from vcloud_director.client.api_client import VCDClient
from vcloud_director.client.crud_client import (
    create_inner_entity_async,
    create_outer_entity,
    delete_entity_by_id,
    get_all_outer_entities,
    get_outer_entity,
    one_or_error,
    update_inner_entity,
)
from vcloud_director.client.exceptions import TaskException, VCDException
from vcloud_director.client.task import Task
from vcloud_director.interface.base import ListQuery, fiql_filter
from vcloud_director.interface.tasks import TaskRecord
from vcloud_director.interface.vcenters import VCenterInterface, VSphereVirtualCenterGet
from vcloud_director.resources.base import OuterEntity

logger = logging.getLogger(__name__)

def extract_uuid(urn: str) -> str:
    """``urn:vcloud:vimserver:<uuid>`` -> ``<uuid>``"""
    return urn.rsplit(":", 1)[-1]

class VCenter(OuterEntity[VSphereVirtualCenterGet]):
    """A vCenter Server registered with the site."""

    interface = VCenterInterface

    @property
    def vsphere_vcenter(self) -> VSphereVirtualCenterGet:
        return self.inner

    def update(self, vcenter_config: VSphereVirtualCenterGet) -> "VCenter":
        self.inner = update_inner_entity(self.client, VSphereVirtualCenterGet, self.crud_config(self.require_id()), vcenter_config)
        return self

    def delete(self):
        delete_entity_by_id(self.client, self.crud_config(self.require_id()))
        self.reset()

    def disable(self) -> "VCenter":
        self.inner.is_enabled = False
        return self.update(self.inner)

    def get_vim_server_url(self) -> str:
        return f"{self.client.root_href()}/api/admin/extension/vimServer/{extract_uuid(self.require_id())}"

    def refresh(self) -> "VCenter":
        # Lookup by ID returns the URL with an explicit port while lookup by
        # name does not. Refresh by name so that url stays comparable.
        self.inner = get_vcenter_by_name(self.client, self.inner.name).inner
        return self

    def _run_action(self, action: str) -> Task:
        url = f"{self.get_vim_server_url()}/action/{action}"
        logger.info("Triggering %s on %s %s", action, self.interface.label, self.inner.name)

        response = self.client.execute_json_request(url, "POST")

        try:
            task = Task(self.client, TaskRecord(**response.json()))
        except ValueError as e:
            raise TaskException(f"error retrieving task for {action} of {self.interface.label}: {e}")

        return task.wait_task_completion()

    def refresh_vcenter(self):
        """Sync vCenter components such as supervisors. Blocks until the task finishes."""
        self._run_action("refresh")

    def refresh_storage_profiles(self):
        self._run_action("refreshStorageProfiles")

def create_vcenter(client: VCDClient, config: VSphereVirtualCenterGet) -> VCenter:
    return create_outer_entity(client, VCenter, VCenter.crud_config(), config)

def create_vcenter_async(client: VCDClient, config: VSphereVirtualCenterGet) -> Task:
    return create_inner_entity_async(client, VCenter.crud_config(), config)

def get_all_vcenters(client: VCDClient, query_parameters: ListQuery | dict | None = None) -> list[VCenter]:
    config = VCenter.crud_config(query_parameters=query_parameters)
    return get_all_outer_entities(client, VCenter, config)

def get_vcenter_by_name(client: VCDClient, name: str) -> VCenter:
    if not name:
        raise VCDException(f"{VCenter.interface.label} lookup requires name")

    vcenters = get_all_vcenters(client, {"filter": fiql_filter(name=name)})

    return one_or_error("name", name, vcenters)

def get_vcenter_by_url(client: VCDClient, url: str) -> VCenter:
    if not url:
        raise VCDException(f"{VCenter.interface.label} lookup requires URL")

    # The API cannot filter by URL
    vcenters = [vcenter for vcenter in get_all_vcenters(client) if vcenter.inner.url == url]

    return one_or_error("url", url, vcenters)

def get_vcenter_by_id(client: VCDClient, id: str) -> VCenter:
    return get_outer_entity(client, VCenter, VCenter.crud_config(id))
