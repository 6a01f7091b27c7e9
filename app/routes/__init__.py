from .route_table import RouteEntry, register_routes
from .tasks_routes import TASK_ROUTES, register_task_routes
from .user_auth_routes import USER_AUTH_ROUTES, register_user_auth_routes

__all__ = [
    'RouteEntry',
    'register_routes',
    'TASK_ROUTES',
    'register_task_routes',
    'USER_AUTH_ROUTES',
    'register_user_auth_routes'
]
