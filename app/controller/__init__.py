from .task_controller import TaskController
from .user_auth_controller import UserAuthController

__all__ = [
    'TaskController',
    'UserAuthController'
]
