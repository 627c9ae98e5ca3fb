# Short codes returned in API error bodies
ERR_BUSY = "BUSY"
ERR_NO_IMAGE = "NO_IMAGE"
ERR_SERVER = "SERVER_ERROR"
ERR_TRANSPORT = "TRANSPORT_ERROR"
ERR_PERMISSION = "PERMISSION_DENIED"


class SalonError(Exception):
    code = "UNKNOWN"


class PermissionDenied(SalonError):
    code = ERR_PERMISSION

    def __init__(self, message: str = "camera permission not granted"):
        super().__init__(message)


class ServerError(SalonError):
    """Processing endpoint answered with a non-200 status."""

    code = ERR_SERVER

    def __init__(self, status: int):
        super().__init__(f"server responded with HTTP {status}")
        self.status = status


class TransportError(SalonError):
    """The request never produced a usable response."""

    code = ERR_TRANSPORT

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class SubmitUnavailable(SalonError):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
