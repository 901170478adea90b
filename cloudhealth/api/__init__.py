"""
API module for the CloudHealth REST API.
"""

from .client import CloudHealthClient
from .pipeline import AuthStyle, RequestDescriptor

__all__ = ['CloudHealthClient', 'AuthStyle', 'RequestDescriptor']
