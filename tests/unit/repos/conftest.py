import pytest
from botocore.exceptions import ClientError

# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────


def _client_error(
    op_name: str, *, code: str = "500", message: str | None = None
) -> ClientError:
    """
    Build a botocore ClientError for unit tests.
    """
    msg = message or f"Boom in {op_name}"
    return ClientError(
        error_response={"Error": {"Code": code, "Message": msg}},
        operation_name=op_name,
    )


@pytest.fixture
def client_error():
    return _client_error


# ─────────────────────────────────────────────────────────────
# Fake DynamoDB Table
# ─────────────────────────────────────────────────────────────


OP_NAMES = {
    "get_item": "GetItem",
    "put_item": "PutItem",
    "update_item": "UpdateItem",
}


class FakeTable:
    """
    A lightweight fake for boto3 DynamoDB Table.

    - `response`: dict returned by get/put/update
    - `fail_on`: set of operation names that should raise ClientError
      (e.g. {"get_item", "update_item"})
    """

    def __init__(
        self, response: dict | None = None, *, fail_on: set[str] | None = None
    ):
        self.response: dict = response or {}
        self.fail_on: set[str] = set(fail_on or [])

        self.last_get_kwargs: dict | None = None
        self.last_put_kwargs: dict | None = None
        self.last_update_kwargs: dict | None = None

    def _maybe_fail(self, op: str):
        name = OP_NAMES[op]
        if op in self.fail_on or name in self.fail_on:
            raise _client_error(name)

    def get_item(self, **kwargs):
        self._maybe_fail("get_item")
        self.last_get_kwargs = kwargs
        return self.response

    def put_item(self, **kwargs):
        self._maybe_fail("put_item")
        self.last_put_kwargs = kwargs
        return self.response

    def update_item(self, **kwargs):
        self._maybe_fail("update_item")
        self.last_update_kwargs = kwargs
        return self.response


# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def fake_table() -> FakeTable:
    """
    Tests can override FakeTable.response to simulate DynamoDB responses.
    """
    return FakeTable()


@pytest.fixture
def failing_get_table() -> FakeTable:
    return FakeTable(fail_on={"get_item"})


@pytest.fixture
def failing_put_table() -> FakeTable:
    return FakeTable(fail_on={"put_item"})


@pytest.fixture
def failing_update_table() -> FakeTable:
    return FakeTable(fail_on={"update_item"})
