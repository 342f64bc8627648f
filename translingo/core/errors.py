from typing import Optional


class GatewayError(Exception):
    """Terminal failure of one gateway request, rendered as ``{error, details}``."""

    status_code = 500
    error = "Server error"

    def __init__(self, details: Optional[str] = None, error: Optional[str] = None):
        super().__init__(error or self.error)
        if error:
            self.error = error
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidRequest(GatewayError):
    status_code = 400
    error = "Invalid request"


class UpstreamError(GatewayError):
    error = "Azure API error"

    def __init__(self, upstream_status: int, details: str):
        super().__init__(details)
        self.upstream_status = upstream_status


class EmptyResult(GatewayError):
    error = "No translations received"


class ServerError(GatewayError):
    error = "Server error"


# 客户端侧错误


class ClientError(Exception):
    message = "Translation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class NetworkError(ClientError):
    message = (
        "Unable to connect to translation service. "
        "Make sure the server is running."
    )


class ServerReportedError(ClientError):
    def __init__(self, status_code: int, message: Optional[str] = None,
                 details: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class UnexpectedResponse(ClientError):
    message = "Unexpected response format from server."
