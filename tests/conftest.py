import jwt
import pytest
from flask import jsonify, request

from app import create_app
from app.controller import TaskController, UserAuthController
from config import Config


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SECRET_KEY = "test-secret-key-for-the-task-manager-api"
    LOG_TO_FILE = False
    PHONE_REGIONS = ("NG", "GB")


class RecordingTaskController(TaskController):
    """Records every handler call and echoes it back."""

    def __init__(self):
        self.calls = []

    def _record(self, handler, **params):
        self.calls.append((handler, params))
        return jsonify({"handler": handler, "params": params}), 200

    def add_task(self, list_id, user_id):
        return self._record("add_task", list_id=list_id, user_id=user_id)

    def get_all_tasks(self):
        return self._record("get_all_tasks")

    def get_single_task(self, task_id):
        return self._record("get_single_task", task_id=task_id)

    def edit_task(self, task_id):
        return self._record("edit_task", task_id=task_id)

    def delete_task(self, task_id):
        return self._record("delete_task", task_id=task_id)


class RecordingUserAuthController(UserAuthController):
    """Records every handler call together with the body it received."""

    def __init__(self):
        self.calls = []

    def _record(self, handler, **params):
        body = request.get_json(silent=True)
        self.calls.append((handler, body))
        return jsonify({"handler": handler, "body": body, "params": params}), 200

    def register(self):
        return self._record("register")

    def verify_email(self):
        return self._record("verify_email")

    def resend_email_verification(self):
        return self._record("resend_email_verification")

    def login(self):
        return self._record("login")

    def forgot_password(self):
        return self._record("forgot_password")

    def verify_password_otp(self):
        return self._record("verify_password_otp")

    def reset_password(self, user_id):
        return self._record("reset_password", user_id=user_id)


@pytest.fixture
def task_controller():
    return RecordingTaskController()


@pytest.fixture
def user_auth_controller():
    return RecordingUserAuthController()


@pytest.fixture
def app(task_controller, user_auth_controller):
    return create_app(
        TestConfig,
        task_controller=task_controller,
        user_auth_controller=user_auth_controller
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    token = jwt.encode({"user_id": "user-42"}, TestConfig.SECRET_KEY, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}
