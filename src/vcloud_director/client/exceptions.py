from typing import Any, Optional

ENTITY_NOT_FOUND = "[ENF] entity not found"

class VCDException(Exception):
    status_code: Optional[int] = None
    default_detail = "Cloud Director request failed"

    def __init__(self, detail: Any = None, status_code: Optional[int] = None):
        self.detail = detail or self.default_detail
        if status_code != None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if isinstance(self.detail, dict):
            return self.detail.get("message") or str(self.detail)
        return str(self.detail)

    @property
    def minor_error_code(self) -> Optional[str]:
        if isinstance(self.detail, dict):
            return self.detail.get("minorErrorCode")
        return None

    def __str__(self) -> str:
        if self.status_code != None:
            return f"[{self.status_code}] {self.message}"
        return self.message

class NotFoundException(VCDException):
    status_code = 404
    default_detail = "Not found"

    @property
    def message(self) -> str:
        return f"{ENTITY_NOT_FOUND}: {super().message}"

class BadRequestException(VCDException):
    status_code = 400
    default_detail = "Bad request"

class UnauthorizedException(VCDException):
    status_code = 401
    default_detail = "Unauthorized"

class ForbiddenException(VCDException):
    status_code = 403
    default_detail = "Forbidden"

class NotImplementedException(VCDException):
    status_code = 501
    default_detail = "Not Implemented"

class InternalServerException(VCDException):
    status_code = 500
    default_detail = "Internal server error"

class ServiceUnavailableException(VCDException):
    status_code = 503
    default_detail = "Service unavailable error"

class SysAdminRequiredException(VCDException):
    default_detail = "operation requires System user"

class TenantManagerRequiredException(VCDException):
    default_detail = "operation requires a Tenant Manager site"

class TaskException(VCDException):
    default_detail = "task failed"

# Some missing entities are reported as 400 with one of these markers
NOT_FOUND_MARKERS = ("does not exist", "not found", "RDE_CANNOT_FIND_ENTITY")

def is_not_found_detail(details: Any) -> bool:
    text = (details.get("message") or "") if isinstance(details, dict) else str(details or "")
    return any(marker.lower() in text.lower() for marker in NOT_FOUND_MARKERS)

def response_to_exception(status_code: int, details: Any) -> Optional[VCDException]:
    if status_code == 404:
        return NotFoundException(detail=details)
    elif status_code == 400:
        if is_not_found_detail(details):
            return NotFoundException(detail=details, status_code=status_code)
        return BadRequestException(detail=details)
    elif status_code == 401:
        return UnauthorizedException(detail=details)
    elif status_code == 403:
        return ForbiddenException(detail=details)
    elif status_code == 501:
        return NotImplementedException(detail=details)
    elif status_code == 500:
        return InternalServerException(detail=details)
    elif status_code == 503:
        return ServiceUnavailableException(detail=details)
    elif status_code >= 400:
        return VCDException(detail=details, status_code=status_code)
    else:
        return None
