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
from vcloud_director.client.exceptions import TenantManagerRequiredException, VCDException
from vcloud_director.interface.base import ListQuery, fiql_filter
from vcloud_director.interface.content_libraries import ContentLibraryGet, ContentLibraryInterface
from vcloud_director.resources.base import OuterEntity

class ContentLibrary(OuterEntity[ContentLibraryGet]):
    interface = ContentLibraryInterface

    @property
    def content_library(self) -> ContentLibraryGet:
        return self.inner

    def refresh(self) -> "ContentLibrary":
        self.inner = get_inner_entity(self.client, ContentLibraryGet, self.crud_config(self.require_id()))
        return self

    def update(self, content_library_config: ContentLibraryGet) -> "ContentLibrary":
        self.inner = update_inner_entity(self.client, ContentLibraryGet, self.crud_config(self.require_id()), content_library_config)
        return self

    def delete(self):
        delete_entity_by_id(self.client, self.crud_config(self.require_id()))
        self.reset()

def create_content_library(client: VCDClient, config: ContentLibraryGet) -> ContentLibrary:
    if not client.is_tm:
        raise TenantManagerRequiredException(f"creating {ContentLibrary.interface.label} requires a Tenant Manager site")

    return create_outer_entity(client, ContentLibrary, ContentLibrary.crud_config(), config)

def get_all_content_libraries(client: VCDClient, query_parameters: ListQuery | dict | None = None) -> list[ContentLibrary]:
    config = ContentLibrary.crud_config(query_parameters=query_parameters)
    return get_all_outer_entities(client, ContentLibrary, config)

def get_content_library_by_name(client: VCDClient, name: str) -> ContentLibrary:
    if name == "":
        raise VCDException(f"{ContentLibrary.interface.label} lookup requires name")

    filtered_entities = get_all_content_libraries(client, {"filter": fiql_filter(name=name)})
    single_entity = one_or_error("name", name, filtered_entities)

    return get_content_library_by_id(client, single_entity.id)

def get_content_library_by_id(client: VCDClient, id: str) -> ContentLibrary:
    return get_outer_entity(client, ContentLibrary, ContentLibrary.crud_config(id))
