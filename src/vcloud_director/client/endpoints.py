"""
OpenAPI endpoint paths and the API versions required to call them.

Paths are relative to ``<href>/cloudapi/``. Templates use ``{}`` placeholders
and are always looked up in the version tables unformatted.
"""

OPENAPI_PATH_VERSION_1_0_0 = "1.0.0/"
OPENAPI_PATH_VCF = "vcf/"

OPENAPI_ENDPOINT_ENTITY_TYPES = "entityTypes/"
OPENAPI_ENDPOINT_ENTITIES = "entities/"
OPENAPI_ENDPOINT_ENTITIES_TYPES = "entities/types/"
OPENAPI_ENDPOINT_ENTITIES_RESOLVE = "entities/{}/resolve"
OPENAPI_ENDPOINT_INTERFACES = "interfaces/"
OPENAPI_ENDPOINT_VIRTUAL_CENTERS = "virtualCenters/"
OPENAPI_ENDPOINT_CONTENT_LIBRARIES = "contentLibraries/"

OPENAPI_ENDPOINT_SESSIONS = "sessions"
OPENAPI_ENDPOINT_SESSIONS_PROVIDER = "sessions/provider"

ENDPOINT_MIN_API_VERSIONS = {
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITY_TYPES: "35.0",
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES: "35.0",
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES_TYPES: "35.0",
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES_RESOLVE: "35.0",
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_INTERFACES: "35.0",
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_VIRTUAL_CENTERS: "36.0",
    OPENAPI_PATH_VCF + OPENAPI_ENDPOINT_CONTENT_LIBRARIES: "40.0",
}

# Endpoints whose payloads gained fields in later versions. The highest entry
# the server supports wins over the minimum version.
ENDPOINT_ELEVATED_API_VERSIONS = {
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITY_TYPES: ["36.0", "37.0"],
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES: ["36.0", "37.0"],
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_ENTITIES_TYPES: ["36.0", "37.0"],
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_INTERFACES: ["36.0"],
    OPENAPI_PATH_VERSION_1_0_0 + OPENAPI_ENDPOINT_VIRTUAL_CENTERS: ["37.0", "38.0"],
}
