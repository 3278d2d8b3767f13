"""Core exception hierarchy

Only conditions the caller cannot branch on as a normal outcome are raised;
completion/notes failures are returned as TransitionResult values instead.
"""

from .models.enums import ErrorCode


class DischargeFlowError(Exception):
    """Base exception for the core package"""

    code: ErrorCode | None = None

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: error description
            recoverable: whether the caller can continue after handling it
        """
        super().__init__(message)
        self.recoverable = recoverable


class InvalidInputError(DischargeFlowError):
    """Malformed patient reference date/time at task generation

    Fails the generation call for that patient; a batch call propagates it
    so the offending patient can be reported.
    """

    code = ErrorCode.INVALID_INPUT

    def __init__(self, patient_id: str, field: str, value: object) -> None:
        """
        Args:
            patient_id: patient whose record is malformed
            field: name of the offending field
            value: the raw value that failed to parse
        """
        super().__init__(
            f"Invalid {field} for patient {patient_id!r}: {value!r}",
            recoverable=True,
        )
        self.patient_id = patient_id
        self.field = field
        self.value = value


class StorageFormatError(DischargeFlowError):
    """Serialized task data could not be decoded"""

    def __init__(self, message: str = "Unreadable task data") -> None:
        super().__init__(message, recoverable=False)
