import pytest

from task_manager.core.errors import (
    AppError, AuthenticationError, ConflictError, ForbiddenError, InternalError,
    NotFoundError, ValidationError, status_for, translate_errors,
)


@pytest.mark.parametrize("exc, expected", [
    (ValidationError("bad"), 400),
    (ConflictError("dup"), 400),
    (NotFoundError("missing"), 400),
    (AuthenticationError("who"), 401),
    (ForbiddenError("nope"), 403),
    (InternalError(), 500),
    (RuntimeError("boom"), 500),
])
def test_status_for(exc, expected):
    assert status_for(exc) == expected


def test_subclasses_inherit_status():
    class EmptyTitle(ValidationError):
        pass

    assert status_for(EmptyTitle("x")) == 400


def test_internal_error_has_generic_message():
    assert InternalError().msg == "Internal Server Error"


def test_translate_errors_passes_app_errors_through():
    @translate_errors
    def handler():
        raise ForbiddenError("You can't update task of another user")

    with pytest.raises(ForbiddenError) as excinfo:
        handler()
    assert excinfo.value.msg == "You can't update task of another user"


def test_translate_errors_hides_unexpected_errors():
    @translate_errors
    def handler():
        raise KeyError("secret detail")

    with pytest.raises(InternalError) as excinfo:
        handler()
    assert "secret detail" not in excinfo.value.msg


def test_translate_errors_keeps_signature():
    @translate_errors
    def handler(task_id: str, flag: bool = False):
        return task_id, flag

    assert handler.__name__ == "handler"
    assert handler("abc", flag=True) == ("abc", True)
    assert isinstance(InternalError(), AppError)


def test_unknown_route_uses_failure_envelope(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"status": False, "msg": "Not Found"}
