"""User custom exceptions"""
from uuid import UUID
from app.exceptions import ConflictError, NotFoundError, ValidationError


class EmailAlreadyRegisteredException(ConflictError):
    """Raised when signing up with an email that is already taken"""
    def __init__(self):
        super().__init__("Email already registered")


class UserNotFoundException(NotFoundError):
    """Raised when a referenced user id does not resolve"""
    def __init__(self, user_id: UUID | None = None):
        super().__init__("User not found")
        self.user_id = user_id


class InvalidCredentialsException(ValidationError):
    """Raised when login fails; the detail says which check failed"""
    def __init__(self, detail: str):
        super().__init__(detail)
