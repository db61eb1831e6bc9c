import pytest
import uuid
from services.common.core import request_context


def test_generate_request_id_creates_uuid():
    """Ensure generate_request_id() creates a UUIDv4 and sets it in context."""
    # Act.
    req_id = request_context.generate_request_id()

    # Assert.
    assert req_id is not None
    assert isinstance(req_id, str)
    # Verify UUID format.
    try:
        uuid_obj = uuid.UUID(req_id)
        assert str(uuid_obj) == req_id
    except ValueError:
        pytest.fail(f"Generated ID is not a valid UUID: {req_id}")

    # Verify it is set in context.
    assert request_context.get_request_id() == req_id


def test_generate_request_id_is_unique():
    """Ensure a different ID is generated each call."""
    id1 = request_context.generate_request_id()
    id2 = request_context.generate_request_id()

    assert id1 != id2


def test_clear_request_id():
    request_context.generate_request_id()

    request_context.clear_request_id()

    assert request_context.get_request_id() is None
