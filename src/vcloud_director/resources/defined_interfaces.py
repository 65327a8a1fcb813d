from vcloud_director.client.api_client import VCDClient
from vcloud_director.client.crud_client import (
    create_outer_entity,
    delete_entity_by_id,
    get_all_outer_entities,
    get_inner_entity,
    get_outer_entity,
    one_or_error,
    update_inner_entity,
)
from vcloud_director.interface.base import ListQuery, fiql_filter
from vcloud_director.interface.defined_interfaces import DefinedInterfaceGet, DefinedInterfaceInterface
from vcloud_director.resources.base import OuterEntity

class DefinedInterface(OuterEntity[DefinedInterfaceGet]):
    interface = DefinedInterfaceInterface

    @property
    def defined_interface(self) -> DefinedInterfaceGet:
        return self.inner

    def refresh(self) -> "DefinedInterface":
        self.check_sys_admin(self.client, "getting")

        self.inner = get_inner_entity(self.client, DefinedInterfaceGet, self.crud_config(self.require_id()))
        return self

    def update(self, interface_to_update: DefinedInterfaceGet) -> "DefinedInterface":
        # The server only accepts changes to the name
        self.check_sys_admin(self.client, "updating")

        self.inner = update_inner_entity(self.client, DefinedInterfaceGet, self.crud_config(self.require_id()), interface_to_update)
        return self

    def delete(self):
        self.check_sys_admin(self.client, "deleting")

        delete_entity_by_id(self.client, self.crud_config(self.require_id()))
        self.reset()

def create_defined_interface(client: VCDClient, defined_interface: DefinedInterfaceGet) -> DefinedInterface:
    DefinedInterface.check_sys_admin(client, "creating")

    return create_outer_entity(client, DefinedInterface, DefinedInterface.crud_config(), defined_interface)

def get_all_defined_interfaces(client: VCDClient, query_parameters: ListQuery | dict | None = None) -> list[DefinedInterface]:
    DefinedInterface.check_sys_admin(client, "getting")

    config = DefinedInterface.crud_config(query_parameters=query_parameters)
    return get_all_outer_entities(client, DefinedInterface, config)

def get_defined_interface(client: VCDClient, vendor: str, namespace: str, version: str) -> DefinedInterface:
    interfaces = get_all_defined_interfaces(client, {"filter": fiql_filter(vendor=vendor, nss=namespace, version=version)})

    return one_or_error("vendor, namespace and version", f"{vendor}:{namespace}:{version}", interfaces)

def get_defined_interface_by_id(client: VCDClient, id: str) -> DefinedInterface:
    DefinedInterface.check_sys_admin(client, "getting")

    return get_outer_entity(client, DefinedInterface, DefinedInterface.crud_config(id))
