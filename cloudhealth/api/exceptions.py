class CloudHealthError(Exception):
    """Base exception for all CloudHealth client errors."""


class TransportError(CloudHealthError):
    """Raised when a request fails before a complete HTTP response is read."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause


class ValidationError(CloudHealthError, ValueError):
    """Raised when a request fails a client-side precondition."""


class DecodeError(CloudHealthError):
    """Raised when a successful response body is not the expected JSON."""


class ResponseError(CloudHealthError):
    """Base class for errors derived from an HTTP status code."""

    status_code = None
    default_message = "Unexpected response from CloudHealth"

    def __init__(self, message=None, status_code=None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message or self.default_message)


class HeaderMissingError(ResponseError):
    status_code = 400
    default_message = "Header missing"


class AuthenticationError(ResponseError):
    status_code = 401
    default_message = "Authentication error with CloudHealth"


class ForbiddenError(ResponseError):
    status_code = 403
    default_message = "Access forbidden by CloudHealth"


class NotFoundError(ResponseError):
    """Raised when a resource doesn't exist on a read, update or delete."""

    status_code = 404
    default_message = "Resource not found"


class UnprocessableEntityError(ResponseError):
    status_code = 422
    default_message = ("Bad Request (Input format error). "
                       "Please check if a resource with same name already exists")


class TooManyRequestsError(ResponseError):
    status_code = 429
    default_message = "Exceeding post rate limit"


class UnknownResponseError(ResponseError):
    def __init__(self, status_code):
        super().__init__(f"Unknown response from CloudHealth: `{status_code}`", status_code)


class AccountNotFoundError(NotFoundError):
    def __init__(self, account_id):
        self.account_id = account_id
        super().__init__(f"AWS Account `{account_id}` not found")


class AccountCreationError(UnprocessableEntityError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Bad Request. Please check if an AWS Account with this name `{name}` already exists")


class CustomerNotFoundError(NotFoundError):
    def __init__(self, customer_id):
        self.customer_id = customer_id
        super().__init__(f"Customer `{customer_id}` not found")


class CustomerCreationError(UnprocessableEntityError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Bad Request. Please check if a Customer with this name `{name}` already exists")
