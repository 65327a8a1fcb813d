import logging
from typing import Optional
from vcloud_director.client.api_client import VCDClient
from vcloud_director.client.crud_client import (
    create_inner_entity,
    create_inner_entity_async,
    delete_entity_by_id,
    get_all_outer_entities,
    get_inner_entity,
    get_outer_entity,
    update_inner_entity,
)
from vcloud_director.client.endpoints import (
    OPENAPI_ENDPOINT_ENTITIES_RESOLVE,
    OPENAPI_ENDPOINT_ENTITIES_TYPES,
    OPENAPI_ENDPOINT_ENTITY_TYPES,
    OPENAPI_PATH_VERSION_1_0_0,
)
from vcloud_director.client.exceptions import VCDException
from vcloud_director.interface.base import ListQuery, fiql_filter
from vcloud_director.interface.defined_entities import (
    DefinedEntityGet,
    DefinedEntityInterface,
    DefinedEntityResolution,
    DefinedEntityState,
)
from vcloud_director.resources.base import OuterEntity

logger = logging.getLogger(__name__)

class DefinedEntity(OuterEntity[DefinedEntityGet]):
    """A Runtime Defined Entity (RDE) instance."""

    interface = DefinedEntityInterface

    @property
    def defined_entity(self) -> DefinedEntityGet:
        return self.inner

    @property
    def state(self) -> Optional[str]:
        return self.inner.state

    def resolve(self) -> "DefinedEntity":
        """
        Ask the server to validate the entity against its type schema.

        A freshly created entity is PRE_CREATED and cannot be deleted until it
        has been resolved. Raises VCDException when the server reports
        RESOLUTION_ERROR.
        """
        self.check_sys_admin(self.client, "resolving")
        rde_id = self.require_id()

        config = self.crud_config(rde_id, endpoint=OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES_RESOLVE)
        resolution = create_inner_entity(self.client, DefinedEntityResolution, config, None)

        if resolution.entity_state == DefinedEntityState.resolution_error.value:
            logger.warning("Resolution of %s %s failed: %s", self.interface.label, rde_id, resolution.message)
            raise VCDException(f"resolution of {self.interface.label} {rde_id} failed: {resolution.message}")

        return self.refresh()

    def refresh(self) -> "DefinedEntity":
        self.check_sys_admin(self.client, "getting")

        self.inner = get_inner_entity(self.client, DefinedEntityGet, self.crud_config(self.require_id()))
        return self

    def update(self, rde_to_update: DefinedEntityGet) -> "DefinedEntity":
        self.check_sys_admin(self.client, "updating")
        rde_id = self.require_id()

        if rde_to_update.id and rde_to_update.id != rde_id:
            raise VCDException(f"ID of the receiver {self.interface.label} and the input ID don't match")

        self.inner = update_inner_entity(self.client, DefinedEntityGet, self.crud_config(rde_id), rde_to_update)
        return self

    def delete(self):
        self.check_sys_admin(self.client, "deleting")

        delete_entity_by_id(self.client, self.crud_config(self.require_id()))
        self.reset()

def create_rde(client: VCDClient, rde_type_id: str, rde: DefinedEntityGet) -> DefinedEntity:
    """
    Create an RDE of the given type and wait for the creation task.

    The entity is returned in PRE_CREATED state.
    """
    DefinedEntity.check_sys_admin(client, "creating")

    config = DefinedEntity.crud_config(rde_type_id, endpoint=OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITY_TYPES)
    task = create_inner_entity_async(client, config, rde).wait_task_completion()

    if not task.owner_id:
        raise VCDException(f"task creating {DefinedEntity.interface.label} did not reference the new entity")

    return get_rde_by_id(client, task.owner_id)

def get_all_rdes(client: VCDClient, vendor: str, namespace: str, version: str,
                 query_parameters: ListQuery | dict | None = None) -> list[DefinedEntity]:
    DefinedEntity.check_sys_admin(client, "getting")

    config = DefinedEntity.crud_config(
        f"{vendor}/{namespace}/{version}",
        endpoint=OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES_TYPES,
        query_parameters=query_parameters)

    return get_all_outer_entities(client, DefinedEntity, config)

def get_rdes_by_name(client: VCDClient, vendor: str, namespace: str, version: str, name: str) -> list[DefinedEntity]:
    if name == "":
        raise VCDException(f"{DefinedEntity.interface.label} lookup requires name")

    return get_all_rdes(client, vendor, namespace, version, {"filter": fiql_filter(name=name)})

def get_rde_by_id(client: VCDClient, id: str) -> DefinedEntity:
    DefinedEntity.check_sys_admin(client, "getting")

    return get_outer_entity(client, DefinedEntity, DefinedEntity.crud_config(id))
