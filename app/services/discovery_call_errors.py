from fastapi import status


class DiscoveryCallError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_payload(self) -> dict[str, str]:
        payload = {"message": self.message}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class DiscoveryCallValidationError(DiscoveryCallError):
    status_code = status.HTTP_400_BAD_REQUEST


class MissingRequiredFieldsError(DiscoveryCallValidationError):
    def __init__(self) -> None:
        super().__init__("Missing required fields")


class InvalidTimeSlotError(DiscoveryCallValidationError):
    def __init__(self, reason: str | None = None) -> None:
        super().__init__("Invalid time slot format")
        self.reason = reason


class MethodNotAllowedError(DiscoveryCallError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self) -> None:
        super().__init__("Method not allowed")


class DiscoveryCallInternalError(DiscoveryCallError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
