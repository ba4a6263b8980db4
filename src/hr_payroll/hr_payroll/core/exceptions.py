class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateRangeError(ValidationError):
    """Raised when a start date falls after its end date."""


class AuthorizationError(DomainError):
    """Raised when the caller's role lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class EmployeeNotFoundError(NotFoundError):
    pass


class DepartmentNotFoundError(NotFoundError):
    pass


class SalaryNotFoundError(NotFoundError):
    pass


class AttendanceNotFoundError(NotFoundError):
    pass


class AlreadyExistsError(DomainError):
    """Raised when creating an entity would break a uniqueness rule."""


class EmployeeAlreadyExistsError(AlreadyExistsError):
    pass


class DepartmentAlreadyExistsError(AlreadyExistsError):
    pass


class AttendanceAlreadyExistsError(AlreadyExistsError):
    pass


class DepartmentInUseError(ValidationError):
    """Raised when deleting a department that employees or salary snapshots still reference."""
