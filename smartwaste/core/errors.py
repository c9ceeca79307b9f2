from enum import Enum


class ValidationKind(str, Enum):
    MISSING_NAME = "missing-name"
    MISSING_EXPIRY = "missing-expiry"
    INVALID_QUANTITY = "invalid-quantity"
    INVALID_OUTCOME = "invalid-outcome"
    NO_PENDING_REMOVAL = "no-pending-removal"


class SmartWasteError(Exception):
    """Base class for every error the inventory core raises.

    All of them are recoverable: the command that raised is rejected and the
    store is left exactly as it was.
    """


class ValidationError(SmartWasteError):
    def __init__(self, kind: ValidationKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class NotFoundError(SmartWasteError):
    def __init__(self, item_id):
        super().__init__(f"Item with id {item_id} not found")
        self.item_id = item_id


class InvalidDateError(SmartWasteError):
    def __init__(self, value):
        super().__init__(f"Invalid date {value!r}, expected a real calendar date as YYYY-MM-DD")
        self.value = value
