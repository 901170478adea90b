"""
Client library for the CloudHealth cloud cost management API.
"""

from .api.client import CloudHealthClient
from .api.exceptions import (
    AccountCreationError,
    AccountNotFoundError,
    AuthenticationError,
    CloudHealthError,
    CustomerCreationError,
    CustomerNotFoundError,
    DecodeError,
    ForbiddenError,
    HeaderMissingError,
    NotFoundError,
    ResponseError,
    TooManyRequestsError,
    TransportError,
    UnknownResponseError,
    UnprocessableEntityError,
    ValidationError,
)
from .api.pipeline import AuthStyle
from .resources.reports import CostHistoryRequestOptions

__version__ = "0.1.0"

__all__ = [
    'CloudHealthClient',
    'AuthStyle',
    'CostHistoryRequestOptions',
    'CloudHealthError',
    'TransportError',
    'ResponseError',
    'HeaderMissingError',
    'AuthenticationError',
    'ForbiddenError',
    'NotFoundError',
    'AccountNotFoundError',
    'CustomerNotFoundError',
    'UnprocessableEntityError',
    'AccountCreationError',
    'CustomerCreationError',
    'TooManyRequestsError',
    'UnknownResponseError',
    'ValidationError',
    'DecodeError',
]
