"""Domain Types - verifies identity wrappers, operations and their messages.

Tests:
    - NewType wrappers exist and are callable
    - Every Operation has a success and a failure message
    - Enums serialize to string values
"""

from customer_store.core.domain_types import CollectionName, DocumentId, Operation
from customer_store.core.messages import FAILURE_MESSAGES, SUCCESS_MESSAGES


def test_identity_types_wrap_str():
    assert DocumentId("abc") == "abc"
    assert CollectionName("Customer") == "Customer"


def test_every_operation_has_messages():
    assert set(SUCCESS_MESSAGES) == set(Operation)
    assert set(FAILURE_MESSAGES) == set(Operation)


def test_http_operation_messages():
    assert SUCCESS_MESSAGES[Operation.LIST] == "get data success"
    assert SUCCESS_MESSAGES[Operation.INSERT] == "post data success"
    assert FAILURE_MESSAGES[Operation.UPDATE] == "error put to db"
    assert FAILURE_MESSAGES[Operation.DELETE] == "error delete to db"


def test_enums_serialize_to_string():
    assert Operation.INSERT.value == "insert"
    assert Operation("delete") is Operation.DELETE
