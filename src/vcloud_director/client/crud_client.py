import logging
from typing import Any, Optional, Sequence, TypeVar, TYPE_CHECKING
from pydantic import BaseModel
from vcloud_director.client.api_client import VCDClient
from vcloud_director.client.exceptions import NotFoundException, VCDException
from vcloud_director.client.task import Task
from vcloud_director.interface.base import VCDModel

if TYPE_CHECKING:
    from vcloud_director.resources.base import OuterEntity

logger = logging.getLogger(__name__)

E = TypeVar("E")
M = TypeVar("M", bound=VCDModel)

class CrudConfig(BaseModel):
    """
    Describes one request of the generic CRUD helpers.

    ``endpoint`` is a path relative to ``/cloudapi/``. When it contains ``{}``
    placeholders they are filled with ``endpoint_params``, otherwise the params
    are appended to it.
    """
    entity_label: str = ""
    endpoint: str = ""
    endpoint_params: list[str] = []
    query_parameters: Optional[dict[str, Any]] = None
    additional_header: Optional[dict[str, str]] = None

    def validate_config(self):
        if self.entity_label == "":
            raise VCDException("crud config must have an entity label")

        if self.endpoint == "":
            raise VCDException(f"crud config for {self.entity_label} must have an endpoint")

        for param in self.endpoint_params:
            if param == None or param == "":
                raise VCDException(f"endpoint params for {self.entity_label} cannot be empty, got {self.endpoint_params}")

    def resolved_endpoint(self) -> str:
        if "{}" in self.endpoint:
            return self.endpoint.format(*self.endpoint_params)
        return self.endpoint + "".join(self.endpoint_params)

def _prepare(client: VCDClient, config: CrudConfig) -> tuple[str, str]:
    config.validate_config()
    api_version = client.get_openapi_highest_elevated_version(config.endpoint)
    url = client.openapi_build_endpoint(config.resolved_endpoint())
    return api_version, url

def create_inner_entity(client: VCDClient, inner_type: type[M], config: CrudConfig, payload: BaseModel | dict | None) -> M:
    api_version, url = _prepare(client, config)
    logger.debug("Creating %s at %s", config.entity_label, url)

    response = client.openapi_post_item(api_version, url, payload, config.query_parameters, config.additional_header)
    if response == None:
        raise VCDException(f"creating {config.entity_label} returned no entity")

    return inner_type(**response)

def create_inner_entity_async(client: VCDClient, config: CrudConfig, payload: BaseModel | dict | None) -> Task:
    api_version, url = _prepare(client, config)
    logger.debug("Creating %s asynchronously at %s", config.entity_label, url)

    return client.openapi_post_item_async(api_version, url, payload, config.query_parameters, config.additional_header)

def get_inner_entity(client: VCDClient, inner_type: type[M], config: CrudConfig) -> M:
    api_version, url = _prepare(client, config)

    return inner_type(**client.openapi_get_item(api_version, url, config.query_parameters, config.additional_header))

def get_all_inner_entities(client: VCDClient, inner_type: type[M], config: CrudConfig) -> list[M]:
    api_version, url = _prepare(client, config)

    items = client.openapi_get_all_items(api_version, url, config.query_parameters, config.additional_header)

    return [inner_type(**item) for item in items]

def update_inner_entity(client: VCDClient, inner_type: type[M], config: CrudConfig, payload: BaseModel | dict) -> M:
    api_version, url = _prepare(client, config)
    logger.debug("Updating %s at %s", config.entity_label, url)

    return inner_type(**client.openapi_put_item(api_version, url, payload, config.query_parameters, config.additional_header))

def delete_entity_by_id(client: VCDClient, config: CrudConfig):
    api_version, url = _prepare(client, config)
    logger.debug("Deleting %s at %s", config.entity_label, url)

    client.openapi_delete_item(api_version, url, config.query_parameters, config.additional_header)

def create_outer_entity(client: VCDClient, outer_type: type["OuterEntity"], config: CrudConfig, payload: BaseModel | dict) -> "OuterEntity":
    inner = create_inner_entity(client, outer_type.interface.get, config, payload)
    return outer_type(client, inner)

def get_outer_entity(client: VCDClient, outer_type: type["OuterEntity"], config: CrudConfig) -> "OuterEntity":
    inner = get_inner_entity(client, outer_type.interface.get, config)
    return outer_type(client, inner)

def get_all_outer_entities(client: VCDClient, outer_type: type["OuterEntity"], config: CrudConfig) -> list["OuterEntity"]:
    inner_entities = get_all_inner_entities(client, outer_type.interface.get, config)
    return [outer_type(client, inner) for inner in inner_entities]

def update_outer_entity(client: VCDClient, outer_type: type["OuterEntity"], config: CrudConfig, payload: BaseModel | dict) -> "OuterEntity":
    inner = update_inner_entity(client, outer_type.interface.get, config, payload)
    return outer_type(client, inner)

def one_or_error(key: str, value: str, entities: Sequence[E]) -> E:
    if len(entities) > 1:
        raise VCDException(f"got more than one entity by {key} '{value}': {len(entities)}")

    if len(entities) == 0:
        raise NotFoundException(f"got zero entities by {key} '{value}'")

    return entities[0]
