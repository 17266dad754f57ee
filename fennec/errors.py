from typing import Optional


class StoreError(Exception):
    """Base class for failures raised by the record stores."""
    status_code = 500
    default_message = "Store operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(StoreError):
    status_code = 400
    default_message = "Invalid request body"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class DuplicateKey(StoreError):
    status_code = 400
    default_message = "Duplicate key"

    def __init__(self, field: str, value=None, message: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Duplicate value for {field}: {value}")


class InvalidReference(StoreError):
    status_code = 400
    default_message = "One or more referenced IDs are invalid"


class InvalidIdentifier(StoreError):
    status_code = 400

    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__(f"Invalid id format: {record_id!r}")


class NotFound(StoreError):
    status_code = 404

    def __init__(self, resource: str, record_id: Optional[str] = None):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} not found")


class StoreUnavailable(StoreError):
    status_code = 500
    default_message = "Database unavailable"
