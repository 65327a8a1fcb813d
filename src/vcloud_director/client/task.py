import time
import logging
from typing import TYPE_CHECKING
from vcloud_director.client.exceptions import TaskException
from vcloud_director.interface.tasks import TaskRecord, TaskStatus

if TYPE_CHECKING:
    from vcloud_director.client.api_client import VCDClient

logger = logging.getLogger(__name__)

class Task:
    """A server side task, tracked through the legacy ``/api/task`` endpoint."""

    def __init__(self, client: "VCDClient", task: TaskRecord):
        self.client = client
        self.task = task

    @classmethod
    def from_href(cls, client: "VCDClient", href: str) -> "Task":
        return cls(client, TaskRecord(href=href))

    @property
    def owner_id(self) -> str | None:
        if self.task.owner == None:
            return None
        return self.task.owner.id

    def refresh(self) -> "Task":
        if not self.task.href:
            raise TaskException("cannot refresh a task without href")

        response = self.client.execute_json_request(self.task.href, "GET")
        self.task = TaskRecord(**response.json())
        return self

    def wait_task_completion(self) -> "Task":
        """
        Poll the task until it finishes.

        Raises TaskException when the task ends in error, is aborted or does not
        finish within the client's task timeout.
        """
        deadline = time.monotonic() + self.client.task_timeout

        while True:
            self.refresh()
            status = self.task.status
            logger.debug("Task %s status: %s (%s%%)", self.task.id, status, self.task.progress)

            if status == TaskStatus.success.value:
                logger.info("Task %s (%s) completed", self.task.id, self.task.operation_name)
                return self

            if status in (TaskStatus.error.value, TaskStatus.aborted.value):
                message = self.task.error.message if self.task.error != None else None
                logger.warning("Task %s finished with status %s: %s", self.task.id, status, message)
                raise TaskException(f"task {self.task.id} finished with status '{status}': {message or 'no details'}")

            if time.monotonic() >= deadline:
                raise TaskException(f"timed out after {self.client.task_timeout}s waiting for task {self.task.id}")

            time.sleep(self.client.task_poll_interval)
