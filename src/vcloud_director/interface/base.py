from abc import ABC
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class VCDModel(BaseModel):
    """Base for every payload exchanged with Cloud Director.

    Fields are snake_case in Python and camelCase on the wire. All fields are
    optional so that an empty instance can represent a deleted entity.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='allow',
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

class OpenApiReference(VCDModel):
    name: Optional[str] = None
    id: Optional[str] = None

class ListQuery(BaseModel):
    page: Optional[int] = None
    page_size: Optional[int] = Field(None, serialization_alias="pageSize")
    filter: Optional[str] = None
    sort_asc: Optional[str] = Field(None, serialization_alias="sortAsc")
    sort_desc: Optional[str] = Field(None, serialization_alias="sortDesc")

    def to_params(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

def fiql_filter(**conditions: str) -> str:
    return ";".join(f"{key}=={value}" for key, value in conditions.items())

class EntityInterface(ABC):
    get: type[VCDModel] = None
    query: type[ListQuery] = ListQuery
    endpoint: str = None
    label: str = None
    id_field: str = "id"

    requires_sys_admin: bool = False

    @classmethod
    def entity_id(cls, entity: Any) -> Optional[str]:
        return getattr(entity, cls.id_field, None)
