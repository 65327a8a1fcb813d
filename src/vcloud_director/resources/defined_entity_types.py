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
from vcloud_director.client.exceptions import VCDException
from vcloud_director.interface.base import ListQuery, fiql_filter
from vcloud_director.interface.defined_entities import DefinedEntityGet
from vcloud_director.interface.defined_entity_types import DefinedEntityTypeGet, DefinedEntityTypeInterface
from vcloud_director.resources import defined_entities
from vcloud_director.resources.base import OuterEntity
from vcloud_director.resources.defined_entities import DefinedEntity

class DefinedEntityType(OuterEntity[DefinedEntityTypeGet]):
    """A Runtime Defined Entity type: the schema RDE instances are validated against."""

    interface = DefinedEntityTypeInterface

    @property
    def defined_entity_type(self) -> DefinedEntityTypeGet:
        return self.inner

    def refresh(self) -> "DefinedEntityType":
        self.check_sys_admin(self.client, "getting")

        self.inner = get_inner_entity(self.client, DefinedEntityTypeGet, self.crud_config(self.require_id()))
        return self

    def update(self, rde_type_to_update: DefinedEntityTypeGet) -> "DefinedEntityType":
        self.check_sys_admin(self.client, "updating")
        type_id = self.require_id()

        if rde_type_to_update.id and rde_type_to_update.id != type_id:
            raise VCDException(f"ID of the receiver {self.interface.label} and the input ID don't match")

        self.inner = update_inner_entity(self.client, DefinedEntityTypeGet, self.crud_config(type_id), rde_type_to_update)
        return self

    def delete(self):
        self.check_sys_admin(self.client, "deleting")

        delete_entity_by_id(self.client, self.crud_config(self.require_id()))
        self.reset()

    def create_rde(self, rde: DefinedEntityGet) -> DefinedEntity:
        return defined_entities.create_rde(self.client, self.require_id(), rde)

    def get_all_rdes(self, query_parameters: ListQuery | dict | None = None) -> list[DefinedEntity]:
        self.require_id()

        return defined_entities.get_all_rdes(
            self.client, self.inner.vendor, self.inner.namespace, self.inner.version, query_parameters)

    def get_rdes_by_name(self, name: str) -> list[DefinedEntity]:
        self.require_id()

        return defined_entities.get_rdes_by_name(
            self.client, self.inner.vendor, self.inner.namespace, self.inner.version, name)

    def get_rde_by_id(self, id: str) -> DefinedEntity:
        return defined_entities.get_rde_by_id(self.client, id)

def create_rde_type(client: VCDClient, rde_type: DefinedEntityTypeGet) -> DefinedEntityType:
    DefinedEntityType.check_sys_admin(client, "creating")

    return create_outer_entity(client, DefinedEntityType, DefinedEntityType.crud_config(), rde_type)

def get_all_rde_types(client: VCDClient, query_parameters: ListQuery | dict | None = None) -> list[DefinedEntityType]:
    DefinedEntityType.check_sys_admin(client, "getting")

    config = DefinedEntityType.crud_config(query_parameters=query_parameters)
    return get_all_outer_entities(client, DefinedEntityType, config)

def get_rde_type(client: VCDClient, vendor: str, namespace: str, version: str) -> DefinedEntityType:
    """Get the RDE type identified by its unique vendor, namespace and version."""
    DefinedEntityType.check_sys_admin(client, "getting")

    rde_types = get_all_rde_types(client, {"filter": fiql_filter(vendor=vendor, nss=namespace, version=version)})

    return one_or_error("vendor, namespace and version", f"{vendor}:{namespace}:{version}", rde_types)

def get_rde_type_by_id(client: VCDClient, id: str) -> DefinedEntityType:
    DefinedEntityType.check_sys_admin(client, "getting")

    return get_outer_entity(client, DefinedEntityType, DefinedEntityType.crud_config(id))
