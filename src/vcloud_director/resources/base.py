from typing import Generic, Optional, TypeVar
from vcloud_director.client.api_client import VCDClient, query_to_params
from vcloud_director.client.crud_client import CrudConfig
from vcloud_director.client.exceptions import SysAdminRequiredException, VCDException
from vcloud_director.interface.base import EntityInterface, ListQuery, VCDModel

M = TypeVar("M", bound=VCDModel)

class OuterEntity(Generic[M]):
    """
    Pairs a server side entity with the client it was read through.

    ``inner`` is never None. After a successful ``delete()`` it is reset to an
    empty instance of the entity model.
    """

    interface: type[EntityInterface] = None

    def __init__(self, client: VCDClient, inner: Optional[M] = None):
        self.client = client
        self.inner: M = inner if inner != None else self.interface.get()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"

    @property
    def id(self) -> Optional[str]:
        return self.interface.entity_id(self.inner)

    @classmethod
    def check_sys_admin(cls, client: VCDClient, action: str):
        if cls.interface.requires_sys_admin and not client.is_sys_admin:
            raise SysAdminRequiredException(f"{action} {cls.interface.label}s requires System user")

    @classmethod
    def crud_config(cls, *endpoint_params: str, endpoint: Optional[str] = None,
                    query_parameters: ListQuery | dict | None = None) -> CrudConfig:
        return CrudConfig(
            entity_label=cls.interface.label,
            endpoint=endpoint or cls.interface.endpoint,
            endpoint_params=list(endpoint_params),
            query_parameters=query_to_params(query_parameters),
        )

    def require_id(self) -> str:
        if not self.id:
            raise VCDException(f"ID of the receiver {self.interface.label} is empty")
        return self.id

    def reset(self):
        self.inner = self.interface.get()
