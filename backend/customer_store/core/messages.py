"""Response Messages - fixed human-readable strings for the {message, body} envelope.

Invariants:
    - Every Operation reachable over HTTP has a success and a failure message
    - Messages are pure data (no IO, no formatting)
"""

from customer_store.core.domain_types import Operation

SUCCESS_MESSAGES: dict[Operation, str] = {
    Operation.LIST: "get data success",
    Operation.INSERT: "post data success",
    Operation.UPDATE: "put data success",
    Operation.DELETE: "delete data success",
    Operation.DROP: "drop data success",
}

FAILURE_MESSAGES: dict[Operation, str] = {
    Operation.LIST: "can't get data from database",
    Operation.INSERT: "error post to db",
    Operation.UPDATE: "error put to db",
    Operation.DELETE: "error delete to db",
    Operation.DROP: "error drop from db",
}

INCORRECT_DATA = "Incorrect data"
DATABASE_UNREACHABLE = "can't connect to db"
UNEXPECTED_ERROR = "An unexpected error occurred"
