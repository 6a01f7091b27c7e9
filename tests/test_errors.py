import logging

import pytest

from app import create_app
from app.common.exceptions import FieldValidationError, TaskManagerError
from app.common.logging_config import setup_logging

from .conftest import TestConfig


@pytest.fixture
def failing_app():
    app = create_app(TestConfig)

    @app.route("/boom/domain")
    def domain_error():
        raise TaskManagerError("Task list is archived", code="TASK001")

    @app.route("/boom/unexpected")
    def unexpected_error():
        raise RuntimeError("database went away")

    return app


def test_task_manager_error_maps_to_400(failing_app):
    response = failing_app.test_client().get("/boom/domain")

    assert response.status_code == 400
    assert response.get_json() == {"resultMessage": "Task list is archived", "resultCode": "TASK001"}


def test_unexpected_error_maps_to_500(failing_app, caplog):
    with caplog.at_level(logging.ERROR):
        response = failing_app.test_client().get("/boom/unexpected")

    assert response.status_code == 500
    assert response.get_json()["resultCode"] == "INTERNAL_ERROR"
    assert "database went away" not in response.get_data(as_text=True)
    assert "Unhandled error: database went away" in caplog.text


def test_method_not_allowed_uses_envelope(failing_app):
    response = failing_app.test_client().get("/users/signUp")

    assert response.status_code == 405
    assert response.get_json()["resultCode"] == "METHOD_NOT_ALLOWED"


def test_field_validation_error_to_dict():
    error = FieldValidationError(["a", "b"], details={"fields": ["x", "y"]})

    assert str(error) == "a, b"
    assert error.to_dict() == {
        "error": "FieldValidationError",
        "message": "a, b",
        "code": "VAL001",
        "details": {"fields": ["x", "y"]},
    }


def test_setup_logging_writes_rotating_file(tmp_path):
    class FileLoggingConfig(TestConfig):
        LOG_TO_FILE = True
        LOG_DIR = str(tmp_path / "logs")

    app = create_app(FileLoggingConfig)
    logging.getLogger("app.test").info("hello from the test suite")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "app.log"
    assert log_file.exists()
    contents = log_file.read_text(encoding="utf-8")
    assert "hello from the test suite" in contents
    assert "Task Manager API started" in contents
    assert "=" * 60 not in contents

    # running the setup again must not stack handlers
    setup_logging(app)
    assert len(logging.getLogger().handlers) == 2

    for handler in list(logging.getLogger().handlers):
        handler.close()
        logging.getLogger().removeHandler(handler)
