from flask import Blueprint

from .route_table import RouteEntry, register_routes
from ..middleware import user_auth


# PUT and DELETE are not guarded by user_auth
TASK_ROUTES = (
    RouteEntry("POST", "/<list_id>/task", "add_task", (user_auth,)),
    RouteEntry("GET", "/tasks", "get_all_tasks"),
    RouteEntry("GET", "/tasks/<task_id>", "get_single_task"),
    RouteEntry("PUT", "/tasks/<task_id>", "edit_task"),
    RouteEntry("DELETE", "/tasks/<task_id>", "delete_task"),
)


def register_task_routes(router, controller):
    return register_routes(router, TASK_ROUTES, controller)


def init_app(controller):
    """Build the tasks blueprint around ``controller``."""
    tasks_api = Blueprint("tasks_api", __name__)
    return register_task_routes(tasks_api, controller)
