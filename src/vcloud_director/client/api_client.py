import logging
from typing import Any, Optional
from httpx import BaseTransport, Client, Response
from pydantic import BaseModel
from vcloud_director.client.endpoints import (
    ENDPOINT_ELEVATED_API_VERSIONS,
    ENDPOINT_MIN_API_VERSIONS,
    OPENAPI_ENDPOINT_SESSIONS,
    OPENAPI_ENDPOINT_SESSIONS_PROVIDER,
    OPENAPI_PATH_VERSION_1_0_0,
)
from vcloud_director.client.exceptions import VCDException, response_to_exception
from vcloud_director.client.task import Task
from vcloud_director.interface.base import ListQuery
from vcloud_director.interface.versions import SupportedVersions, parse_version

logger = logging.getLogger(__name__)

SESSION_TOKEN_HEADER = "X-VMWARE-VCLOUD-ACCESS-TOKEN"
SYSTEM_ORG = "system"
DEFAULT_PAGE_SIZE = 128

def raise_if_response_is_error(response: Response):
    if response.is_error:
        try:
            details = response.json()
        except ValueError:
            details = response.text or None
        response_exception = response_to_exception(response.status_code, details)
        raise response_exception if response_exception != None else response.raise_for_status()

def query_to_params(params: ListQuery | dict | None) -> dict:
    if params == None:
        return {}
    if isinstance(params, ListQuery):
        return params.to_params()
    return dict(params)

def payload_to_json(payload: BaseModel | dict | None) -> Any:
    if payload == None:
        return None
    if isinstance(payload, BaseModel):
        if hasattr(payload, "to_payload"):
            return payload.to_payload()
        return payload.model_dump(by_alias=True, exclude_none=True, mode="json")
    return payload

class VCDClient:
    """
    Session holding client for a Cloud Director site.

    Wraps a single httpx Client. OpenAPI requests are made with the API version
    negotiated per endpoint, legacy requests with the client's API version.
    """

    def __init__(
        self,
        href: str,
        api_version: str = "37.0",
        insecure: bool = False,
        timeout: float = 120,
        is_tm: bool = False,
        task_poll_interval: float = 1.0,
        task_timeout: float = 600,
        transport: Optional[BaseTransport] = None,
    ):
        href = href.rstrip("/")
        if href.endswith("/api"):
            href = href[:-len("/api")]

        self.href = href
        self.api_version = api_version
        self.is_tm = is_tm
        self.task_poll_interval = task_poll_interval
        self.task_timeout = task_timeout
        self.org: Optional[str] = None
        self.is_sys_admin = False
        self._supported_versions: Optional[SupportedVersions] = None

        self.client = Client(base_url=self.href, verify=not insecure, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings=None, transport: Optional[BaseTransport] = None) -> "VCDClient":
        if settings == None:
            from vcloud_director.settings import ClientSettings
            settings = ClientSettings()

        if settings.VCD_URL == None:
            raise VCDException("VCD_URL is not set")

        vcd_client = cls(
            href=settings.VCD_URL,
            api_version=settings.VCD_API_VERSION,
            insecure=settings.VCD_INSECURE,
            timeout=settings.VCD_HTTP_TIMEOUT,
            is_tm=settings.VCD_IS_TM,
            task_poll_interval=settings.VCD_TASK_POLL_INTERVAL,
            task_timeout=settings.VCD_TASK_TIMEOUT,
            transport=transport,
        )

        if settings.VCD_TOKEN:
            vcd_client.set_token(settings.VCD_TOKEN, settings.VCD_ORG)
        elif settings.VCD_API_TOKEN:
            vcd_client.login_with_api_token(settings.VCD_API_TOKEN, settings.VCD_ORG)
        elif settings.VCD_USER and settings.VCD_PASSWORD:
            vcd_client.login(settings.VCD_USER, settings.VCD_PASSWORD, settings.VCD_ORG)
        else:
            raise VCDException("no credentials configured: set VCD_TOKEN, VCD_API_TOKEN or VCD_USER and VCD_PASSWORD")

        return vcd_client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.client.close()

    # Authentication

    def _set_org(self, org: str):
        self.org = org
        self.is_sys_admin = org.lower() == SYSTEM_ORG

    def set_token(self, token: str, org: str = "System"):
        self.client.headers.update({"Authorization": f"Bearer {token}"})
        self._set_org(org)

    def login(self, username: str, password: str, org: str = "System"):
        endpoint = OPENAPI_ENDPOINT_SESSIONS_PROVIDER if org.lower() == SYSTEM_ORG else OPENAPI_ENDPOINT_SESSIONS
        url = self.openapi_build_endpoint(OPENAPI_PATH_VERSION_1_0_0, endpoint)

        response = self.client.post(
            url,
            auth=(f"{username}@{org}", password),
            headers={"Accept": f"application/json;version={self.api_version}"})

        raise_if_response_is_error(response)

        token = response.headers.get(SESSION_TOKEN_HEADER)
        if not token:
            raise VCDException(f"login response did not contain {SESSION_TOKEN_HEADER}")

        self.set_token(token, org)
        logger.info("Established session for %s@%s on %s", username, org, self.href)

    def login_with_api_token(self, api_token: str, org: str = "System"):
        if org.lower() == SYSTEM_ORG:
            url = f"{self.href}/oauth/provider/token"
        else:
            url = f"{self.href}/oauth/tenant/{org}/token"

        response = self.client.post(
            url,
            data={"grant_type": "refresh_token", "refresh_token": api_token},
            headers={"Accept": "application/json"})

        raise_if_response_is_error(response)

        access_token = response.json().get("access_token")
        if not access_token:
            raise VCDException("API token exchange did not return an access token")

        self.set_token(access_token, org)
        logger.info("Established session with API token for org %s on %s", org, self.href)

    # Versions and endpoints

    def root_href(self) -> str:
        return self.href

    def openapi_build_endpoint(self, *endpoint: str) -> str:
        return f"{self.href}/cloudapi/{''.join(endpoint)}"

    def supported_versions(self) -> SupportedVersions:
        if self._supported_versions == None:
            response = self.client.get(f"{self.href}/api/versions", headers={"Accept": "application/*+json"})
            raise_if_response_is_error(response)
            self._supported_versions = SupportedVersions(**response.json())

        return self._supported_versions

    def server_max_version(self) -> Optional[str]:
        return self.supported_versions().max_version()

    def server_supports(self, version: str) -> bool:
        max_version = self.server_max_version()
        if max_version == None:
            return False
        return parse_version(version) <= parse_version(max_version)

    def get_openapi_highest_elevated_version(self, endpoint: str) -> str:
        """
        Pick the API version for an OpenAPI endpoint.

        The server must support the endpoint's minimum version. The highest
        elevated version the server supports wins. Otherwise the client's own
        version is used when it is above the minimum and the server supports
        it, else the minimum.
        """
        min_version = ENDPOINT_MIN_API_VERSIONS.get(endpoint)
        if min_version == None:
            raise VCDException(f"minimum API version for endpoint '{endpoint}' is not defined")

        if not self.server_supports(min_version):
            raise VCDException(
                f"endpoint '{endpoint}' requires API version {min_version}, "
                f"server supports up to {self.server_max_version()}")

        for version in sorted(ENDPOINT_ELEVATED_API_VERSIONS.get(endpoint, []), key=parse_version, reverse=True):
            if self.server_supports(version):
                logger.debug("Elevated API version %s for endpoint %s", version, endpoint)
                return version

        if parse_version(self.api_version) > parse_version(min_version) and self.server_supports(self.api_version):
            return self.api_version

        return min_version

    # OpenAPI verbs

    def _openapi_headers(self, api_version: str, additional_header: Optional[dict] = None) -> dict:
        headers = {
            "Accept": f"application/json;version={api_version}",
            "Content-Type": "application/json",
        }
        if additional_header:
            headers.update(additional_header)
        return headers

    def _openapi_request(self, method: str, api_version: str, url: str, params: dict = None,
                         payload: Any = None, additional_header: Optional[dict] = None) -> Response:
        logger.debug("%s %s (API %s) params=%s", method, url, api_version, params)

        response = self.client.request(
            method,
            url,
            params=params or None,
            json=payload,
            headers=self._openapi_headers(api_version, additional_header))

        raise_if_response_is_error(response)
        return response

    def _task_from_response(self, response: Response) -> Task:
        location = response.headers.get("Location")
        if not location:
            raise VCDException(f"asynchronous response from {response.request.url} did not contain a task location")
        return Task.from_href(self, location)

    def openapi_get_item(self, api_version: str, url: str, params: ListQuery | dict | None = None,
                         additional_header: Optional[dict] = None) -> dict:
        response = self._openapi_request("GET", api_version, url, query_to_params(params), additional_header=additional_header)
        return response.json()

    def openapi_get_all_items(self, api_version: str, url: str, params: ListQuery | dict | None = None,
                              additional_header: Optional[dict] = None) -> list[dict]:
        """Fetch every page of an OpenAPI collection and return the merged ``values``."""
        params = query_to_params(params)
        params.setdefault("pageSize", DEFAULT_PAGE_SIZE)
        page = int(params.get("page", 1))

        items: list[dict] = []

        while True:
            params["page"] = page
            body = self._openapi_request("GET", api_version, url, params, additional_header=additional_header).json()

            items.extend(body.get("values") or [])

            if page >= int(body.get("pageCount") or 1):
                break
            page += 1

        return items

    def openapi_post_item(self, api_version: str, url: str, payload: Any, params: ListQuery | dict | None = None,
                          additional_header: Optional[dict] = None) -> Optional[dict]:
        response = self._openapi_request("POST", api_version, url, query_to_params(params), payload_to_json(payload), additional_header)

        if response.status_code == 202:
            task = self._task_from_response(response).wait_task_completion()
            if task.owner_id == None:
                return None
            return self.openapi_get_item(api_version, url + task.owner_id, additional_header=additional_header)

        if response.status_code == 204 or not response.content:
            return None

        return response.json()

    def openapi_post_item_async(self, api_version: str, url: str, payload: Any, params: ListQuery | dict | None = None,
                                additional_header: Optional[dict] = None) -> Task:
        response = self._openapi_request("POST", api_version, url, query_to_params(params), payload_to_json(payload), additional_header)
        return self._task_from_response(response)

    def openapi_put_item(self, api_version: str, url: str, payload: Any, params: ListQuery | dict | None = None,
                         additional_header: Optional[dict] = None) -> dict:
        response = self._openapi_request("PUT", api_version, url, query_to_params(params), payload_to_json(payload), additional_header)

        if response.status_code == 202:
            self._task_from_response(response).wait_task_completion()
            return self.openapi_get_item(api_version, url, additional_header=additional_header)

        return response.json()

    def openapi_delete_item(self, api_version: str, url: str, params: ListQuery | dict | None = None,
                            additional_header: Optional[dict] = None):
        response = self._openapi_request("DELETE", api_version, url, query_to_params(params), additional_header=additional_header)

        if response.status_code == 202:
            self._task_from_response(response).wait_task_completion()

    # Legacy API

    def execute_json_request(self, url: str, method: str, payload: Any = None) -> Response:
        logger.debug("%s %s (legacy API %s)", method, url, self.api_version)

        response = self.client.request(
            method,
            url,
            json=payload_to_json(payload),
            headers={
                "Accept": f"application/*+json;version={self.api_version}",
                "Content-Type": "application/*+json",
            })

        raise_if_response_is_error(response)
        return response
