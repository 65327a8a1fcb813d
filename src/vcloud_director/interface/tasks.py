from enum import Enum
from typing import Optional
from vcloud_director.interface.base import VCDModel

class TaskStatus(str, Enum):
    queued = "queued"
    pre_running = "preRunning"
    running = "running"
    success = "success"
    error = "error"
    aborted = "aborted"

class TaskOwner(VCDModel):
    href: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None

class TaskError(VCDModel):
    major_error_code: Optional[int] = None
    minor_error_code: Optional[str] = None
    message: Optional[str] = None

class TaskRecord(VCDModel):
    href: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    operation: Optional[str] = None
    operation_name: Optional[str] = None
    status: Optional[str] = None
    progress: Optional[int] = None
    owner: Optional[TaskOwner] = None
    error: Optional[TaskError] = None
