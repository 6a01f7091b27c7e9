"""
Task controller seam.

The route table resolves handlers on a ``TaskController`` by name. This base
class answers every request with 501; deployments pass a subclass backed by
their task service to ``create_app``.
"""
import logging

from ..utils.response_helpers import build_error_response


logger = logging.getLogger(__name__)


class TaskController:
    def _not_implemented(self, handler):
        logger.warning(f"TaskController.{handler} has no implementation")
        return build_error_response(f"'{handler}' is not available.", 501, "NOT_IMPLEMENTED")

    def add_task(self, list_id, user_id):
        return self._not_implemented("add_task")

    def get_all_tasks(self):
        return self._not_implemented("get_all_tasks")

    def get_single_task(self, task_id):
        return self._not_implemented("get_single_task")

    def edit_task(self, task_id):
        return self._not_implemented("edit_task")

    def delete_task(self, task_id):
        return self._not_implemented("delete_task")
