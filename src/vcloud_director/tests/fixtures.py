"""
In-memory Cloud Director used by the test suite.

FakeVCD implements just enough of the OpenAPI and legacy API for the client:
sessions, /api/versions, paged collections with FIQL filters, asynchronous
creation through tasks and the RDE resolve rules.
"""

import base64
import json
import re
import uuid
from typing import Optional
from urllib.parse import unquote

import httpx
from packaging.version import Version

FAKE_TOKEN = "fake-session-token"
FAKE_PASSWORD = "secret"
FAKE_API_TOKEN = "fake-api-token"
FAKE_HREF = "https://vcd.example.com"
RELEASED_VERSIONS = ["35.0", "36.0", "37.0", "38.0", "39.0", "40.0", "41.0"]

def error(status_code: int, message: str, minor: str = "BAD_REQUEST") -> httpx.Response:
    return httpx.Response(status_code, json={"minorErrorCode": minor, "message": message})

def matches_filter(item: dict, fiql: Optional[str]) -> bool:
    if not fiql:
        return True
    for condition in fiql.split(";"):
        key, _, value = condition.partition("==")
        if str(item.get(key)) != value:
            return False
    return True

class FakeVCD:

    def __init__(self, max_version: str = "37.0", task_polls: int = 1, prerelease_versions: Optional[list[str]] = None):
        self.max_version = max_version
        self.task_polls = task_polls
        self.prerelease_versions = prerelease_versions or []
        self.requests: list[tuple[str, str, Optional[str]]] = []

        self.entity_types: dict[str, dict] = {}
        self.entities: dict[str, dict] = {}
        self.interfaces: dict[str, dict] = {}
        self.vcenters: dict[str, dict] = {}
        self.content_libraries: dict[str, dict] = {}
        self.tasks: dict[str, dict] = {}
        self.failing_tasks: set[str] = set()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    # Helpers

    def api_version_of(self, request: httpx.Request) -> Optional[str]:
        match = re.search(r"version=([0-9.]+)", request.headers.get("Accept", ""))
        return match.group(1) if match else None

    def calls(self, method: str, path_prefix: str) -> list[tuple[str, str, Optional[str]]]:
        return [c for c in self.requests if c[0] == method and c[1].startswith(path_prefix)]

    def new_task(self, operation: str, owner_id: Optional[str], fail_message: Optional[str] = None) -> dict:
        task_uuid = str(uuid.uuid4())
        task = {
            "href": f"{FAKE_HREF}/api/task/{task_uuid}",
            "id": f"urn:vcloud:task:{task_uuid}",
            "name": "task",
            "operationName": operation,
            "operation": operation,
            "status": "running",
            "progress": 0,
            "owner": {"id": owner_id, "name": operation, "type": "application/json", "href": ""},
            "_remaining": self.task_polls,
            "_fail": fail_message,
        }
        self.tasks[task_uuid] = task
        return task

    def accepted(self, task: dict) -> httpx.Response:
        return httpx.Response(202, headers={"Location": task["href"]})

    def page(self, request: httpx.Request, items: list[dict]) -> httpx.Response:
        params = request.url.params
        items = [item for item in items if matches_filter(item, params.get("filter"))]
        page_size = int(params.get("pageSize", 128))
        page = int(params.get("page", 1))
        page_count = max(1, -(-len(items) // page_size))
        values = items[(page - 1) * page_size: page * page_size]
        return httpx.Response(200, json={
            "resultTotal": len(items),
            "pageCount": page_count,
            "page": page,
            "pageSize": page_size,
            "values": values,
        })

    # Dispatch

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = unquote(request.url.path)
        self.requests.append((request.method, path, self.api_version_of(request)))

        if path == "/api/versions":
            released = [v for v in RELEASED_VERSIONS if Version(v) <= Version(self.max_version)]
            return httpx.Response(200, json={"versionInfo": [
                {"version": v, "deprecated": False} for v in released + self.prerelease_versions
            ]})

        if path.startswith("/cloudapi/1.0.0/sessions"):
            return self.handle_login(request)

        if path.startswith("/oauth/"):
            body = dict(httpx.QueryParams(request.content.decode()))
            if body.get("refresh_token") != FAKE_API_TOKEN:
                return error(400, "invalid refresh token", "BAD_REQUEST")
            return httpx.Response(200, json={"access_token": FAKE_TOKEN, "token_type": "Bearer"})

        if request.headers.get("Authorization") != f"Bearer {FAKE_TOKEN}":
            return error(401, "not authenticated", "UNAUTHORIZED")

        if path.startswith("/api/task/"):
            return self.handle_task(path.rsplit("/", 1)[-1])

        match = re.fullmatch(r"/api/admin/extension/vimServer/([^/]+)/action/(\w+)", path)
        if match:
            return self.handle_vim_action(request, match.group(1), match.group(2))

        if path.startswith("/cloudapi/1.0.0/entityTypes/"):
            return self.handle_entity_types(request, path[len("/cloudapi/1.0.0/entityTypes/"):])

        if path.startswith("/cloudapi/1.0.0/entities/types/"):
            vendor, nss, version = path[len("/cloudapi/1.0.0/entities/types/"):].split("/")
            type_id = f"urn:vcloud:type:{vendor}:{nss}:{version}"
            return self.page(request, [e for e in self.entities.values() if e["entityType"] == type_id])

        match = re.fullmatch(r"/cloudapi/1\.0\.0/entities/([^/]+)/resolve", path)
        if match:
            return self.handle_resolve(match.group(1))

        if path.startswith("/cloudapi/1.0.0/entities/"):
            return self.handle_entities(request, path[len("/cloudapi/1.0.0/entities/"):])

        if path.startswith("/cloudapi/1.0.0/interfaces/"):
            return self.handle_collection(request, self.interfaces, path[len("/cloudapi/1.0.0/interfaces/"):],
                                          self.new_interface_id)

        if path.startswith("/cloudapi/1.0.0/virtualCenters/"):
            return self.handle_vcenters(request, path[len("/cloudapi/1.0.0/virtualCenters/"):])

        if path.startswith("/cloudapi/vcf/contentLibraries/"):
            return self.handle_collection(request, self.content_libraries, path[len("/cloudapi/vcf/contentLibraries/"):],
                                          lambda body: f"urn:vcloud:contentLibrary:{uuid.uuid4()}")

        return error(404, f"no route for {request.method} {path}", "NOT_FOUND")

    def handle_login(self, request: httpx.Request) -> httpx.Response:
        auth = request.headers.get("Authorization", "")
        try:
            user, _, password = base64.b64decode(auth.split(" ", 1)[1]).decode().partition(":")
        except (IndexError, ValueError):
            return error(401, "missing credentials", "UNAUTHORIZED")

        org = user.rsplit("@", 1)[-1]
        provider = request.url.path.endswith("/provider")
        if password != FAKE_PASSWORD or provider != (org.lower() == "system"):
            return error(401, "invalid credentials", "UNAUTHORIZED")

        return httpx.Response(200, headers={"X-VMWARE-VCLOUD-ACCESS-TOKEN": FAKE_TOKEN},
                              json={"user": {"name": user}, "org": {"name": org}})

    def handle_task(self, task_uuid: str) -> httpx.Response:
        task = self.tasks.get(task_uuid)
        if task == None:
            return error(404, f"task {task_uuid} does not exist", "NOT_FOUND")

        if task["status"] == "running":
            if task["_remaining"] > 0:
                task["_remaining"] -= 1
                task["progress"] = 50
            elif task["_fail"]:
                task["status"] = "error"
                task["error"] = {"majorErrorCode": 500, "minorErrorCode": "INTERNAL_SERVER_ERROR", "message": task["_fail"]}
            else:
                task["status"] = "success"
                task["progress"] = 100

        return httpx.Response(200, json={k: v for k, v in task.items() if not k.startswith("_")})

    def handle_vim_action(self, request: httpx.Request, vc_uuid: str, action: str) -> httpx.Response:
        vc_id = f"urn:vcloud:vimserver:{vc_uuid}"
        if vc_id not in self.vcenters:
            return error(404, f"vimServer {vc_uuid} does not exist", "NOT_FOUND")

        fail_message = f"{action} failed" if vc_id in self.failing_tasks else None
        task = self.new_task(f"vimServer{action[0].upper()}{action[1:]}", vc_id, fail_message)
        return httpx.Response(202, json={k: v for k, v in task.items() if not k.startswith("_")})

    # Collections

    def new_interface_id(self, body: dict) -> str:
        return f"urn:vcloud:interface:{body['vendor']}:{body['nss']}:{body['version']}"

    def handle_collection(self, request: httpx.Request, store: dict, item_id: str, new_id,
                          id_key: str = "id") -> httpx.Response:
        if item_id == "":
            if request.method == "GET":
                return self.page(request, list(store.values()))
            if request.method == "POST":
                body = json.loads(request.content)
                body[id_key] = new_id(body)
                if body[id_key] in store:
                    return error(400, f"{body[id_key]} already exists", "DUPLICATE_NAME")
                store[body[id_key]] = body
                return httpx.Response(201, json=body)
            return error(405, "method not allowed", "METHOD_NOT_ALLOWED")

        if item_id not in store:
            return error(404, f"{item_id} not found", "NOT_FOUND")

        if request.method == "GET":
            return httpx.Response(200, json=store[item_id])

        if request.method == "PUT":
            body = json.loads(request.content)
            body[id_key] = item_id
            store[item_id] = body
            return httpx.Response(200, json=body)

        if request.method == "DELETE":
            del store[item_id]
            return httpx.Response(204)

        return error(405, "method not allowed", "METHOD_NOT_ALLOWED")

    def handle_entity_types(self, request: httpx.Request, type_id: str) -> httpx.Response:
        if type_id == "" or request.method != "POST":
            if type_id != "" and type_id not in self.entity_types:
                # Cloud Director reports missing types as a bad request
                return error(400, f"RDE_CANNOT_FIND_ENTITY_TYPE [ {type_id} ] does not exist", "BAD_REQUEST")

            if request.method == "DELETE" and any(e["entityType"] == type_id for e in self.entities.values()):
                return error(400, f"entity type {type_id} is still in use", "BAD_REQUEST")

            return self.handle_collection(
                request, self.entity_types, type_id,
                lambda body: f"urn:vcloud:type:{body['vendor']}:{body['nss']}:{body['version']}")

        # POST on a type creates an entity of that type
        if type_id not in self.entity_types:
            return error(400, f"RDE_CANNOT_FIND_ENTITY_TYPE [ {type_id} ] does not exist", "BAD_REQUEST")

        body = json.loads(request.content)
        entity_id = f"urn:vcloud:entity:{type_id.split(':', 3)[-1]}:{uuid.uuid4()}"
        body.update({
            "id": entity_id,
            "entityType": type_id,
            "state": "PRE_CREATED",
            "owner": {"name": "administrator", "id": "urn:vcloud:user:1"},
            "org": {"name": "System", "id": "urn:vcloud:org:1"},
        })
        self.entities[entity_id] = body
        return self.accepted(self.new_task("createDefinedEntity", entity_id))

    def handle_entities(self, request: httpx.Request, entity_id: str) -> httpx.Response:
        entity = self.entities.get(entity_id)
        if entity == None:
            return error(400, f"RDE_CANNOT_FIND_ENTITY [ {entity_id} ] does not exist", "BAD_REQUEST")

        if request.method == "DELETE" and entity["state"] != "RESOLVED":
            return error(400, f"Entity {entity_id} must be resolved before it can be deleted", "BAD_REQUEST")

        if request.method == "PUT":
            body = json.loads(request.content)
            entity.update({k: v for k, v in body.items() if k in ("name", "entity", "externalId")})
            return httpx.Response(200, json=entity)

        return self.handle_collection(request, self.entities, entity_id, None)

    def handle_resolve(self, entity_id: str) -> httpx.Response:
        entity = self.entities.get(entity_id)
        if entity == None:
            return error(400, f"RDE_CANNOT_FIND_ENTITY [ {entity_id} ] does not exist", "BAD_REQUEST")

        schema = self.entity_types[entity["entityType"]].get("schema") or {}
        missing = [key for key in schema.get("required", []) if key not in (entity.get("entity") or {})]

        if missing:
            entity["state"] = "RESOLUTION_ERROR"
            message = f"missing required properties {missing}"
        else:
            entity["state"] = "RESOLVED"
            message = None

        return httpx.Response(200, json={"id": entity_id, "entityState": entity["state"], "message": message})

    def handle_vcenters(self, request: httpx.Request, vc_id: str) -> httpx.Response:
        if vc_id == "" and request.method == "POST":
            body = json.loads(request.content)
            body["vcId"] = f"urn:vcloud:vimserver:{uuid.uuid4()}"
            body["isConnected"] = True
            body.pop("password", None)
            self.vcenters[body["vcId"]] = body
            return self.accepted(self.new_task("registerVimServer", body["vcId"]))

        if request.method == "PUT" and vc_id in self.vcenters:
            body = json.loads(request.content)
            body.pop("password", None)
            body["vcId"] = vc_id
            self.vcenters[vc_id] = body
            return self.accepted(self.new_task("updateVimServer", vc_id))

        if request.method == "DELETE" and vc_id in self.vcenters:
            del self.vcenters[vc_id]
            return self.accepted(self.new_task("unregisterVimServer", vc_id))

        return self.handle_collection(request, self.vcenters, vc_id, None, id_key="vcId")
