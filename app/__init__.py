from flask import Flask
from flask_cors import CORS

from config import Config
from .common import handle_exception, setup_logging
from .controller import TaskController, UserAuthController


def create_app(config_class=Config, task_controller=None, user_auth_controller=None):
    """
    Build the Flask application.

    Args:
        config_class: Configuration object loaded with ``app.config.from_object``
        task_controller: Handlers for the task routes (defaults to ``TaskController``)
        user_auth_controller: Handlers for the user routes (defaults to ``UserAuthController``)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging (console + file)
    setup_logging(app)

    CORS(app, resources={r"/*": {
        "origins": app.config.get("CORS_ORIGINS", "*"),
        "methods": ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        "allow_headers": "*",
        "expose_headers": "*"
    }})

    from .routes.user_auth_routes import init_app as user_auth_api_init
    user_auth_api = user_auth_api_init(user_auth_controller or UserAuthController())
    app.register_blueprint(user_auth_api)

    from .routes.tasks_routes import init_app as tasks_api_init
    tasks_api = tasks_api_init(task_controller or TaskController())
    app.register_blueprint(tasks_api)

    from .controller.health import init_app as health_api_init
    health_api = health_api_init()
    app.register_blueprint(health_api)

    app.register_error_handler(Exception, handle_exception)

    return app
