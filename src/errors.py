"""Exceptions raised at the receipt processor boundary."""


class ReceiptProcessorError(Exception):
    """Base exception for all receipt processor errors."""

    code = "RECEIPT_PROCESSOR_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidReceiptError(ReceiptProcessorError):
    """Raised when a submitted receipt is missing a required field."""

    code = "INVALID_RECEIPT"
    http_status = 400

    def __init__(self, message: str = "Invalid receipt format. Please verify input.") -> None:
        super().__init__(message)


class MalformedReceiptIdError(ReceiptProcessorError):
    """Raised when a lookup key is empty or contains whitespace."""

    code = "MALFORMED_RECEIPT_ID"
    http_status = 400

    def __init__(self, message: str = "Invalid receipt ID format") -> None:
        super().__init__(message)


class ReceiptNotFoundError(ReceiptProcessorError):
    """Raised when no receipt is stored under a well-formed identifier."""

    code = "RECEIPT_NOT_FOUND"
    http_status = 404

    def __init__(self, receipt_id: str, message: str = "Receipt not found") -> None:
        super().__init__(message)
        self.receipt_id = receipt_id
