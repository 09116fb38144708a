class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateAttendanceError(ValidationError):
    """Raised when attendance was already marked for the member on that date."""

    def __init__(self, prefect_number: str, work_date: str):
        super().__init__(f"Attendance already marked for {prefect_number} on {work_date}")
        self.prefect_number = prefect_number
        self.date = work_date


class DuplicateMemberError(ValidationError):
    """Raised when a prefect number is already taken by another member."""

    def __init__(self, prefect_number: str):
        super().__init__(f"Prefect number {prefect_number} is already registered")
        self.prefect_number = prefect_number


class InvalidBadgeError(ValidationError):
    """Raised when a scanned badge payload is not one of ours."""


class StorageError(DomainError):
    """Raised when the store cannot be created, opened or queried."""


class ConflictError(StorageError):
    """Raised by repositories when a uniqueness constraint rejects a write."""


class BackupError(DomainError):
    """Raised when a backup blob cannot be exported or restored."""
