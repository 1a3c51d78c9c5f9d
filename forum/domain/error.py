"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidInputError(ValidationError):
    """Raised when a request carries a value the domain cannot accept."""

    def __init__(self, message: str):
        super().__init__(message)


class UnauthenticatedError(DomainError):
    """Raised when an operation requires an identity and none was resolved."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    pass


class VoteConflictError(ConflictError):
    """Raised when a concurrent request changed the same (voter, answer) vote."""

    def __init__(self, user_id: str, answer_id: str):
        self.user_id = user_id
        self.answer_id = answer_id
        super().__init__(
            f"Vote by user {user_id} on answer {answer_id} was modified concurrently"
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")
