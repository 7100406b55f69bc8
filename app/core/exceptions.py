"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
``app.main`` turn them into JSON responses.
"""


class PortalError(Exception):
    """Base exception for all portal errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(PortalError):
    """Raised when a class or user id does not resolve to a row."""

    status_code = 404

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidRoleError(PortalError):
    """Raised when a user exists but is not of the required role."""

    status_code = 400

    def __init__(self, user_id, expected_role: str):
        self.user_id = user_id
        self.expected_role = expected_role
        super().__init__(f"User {user_id} is not a {expected_role}")
