import logging
from urllib.parse import urljoin, urlsplit

from ..config.settings import REQUEST_TIMEOUT
from ..resources.aws_account_assignments import AwsAccountAssignments
from ..resources.aws_accounts import AwsAccounts
from ..resources.customer_statements import CustomerStatements
from ..resources.customers import Customers
from ..resources.organizations import Organizations
from ..resources.price_book_assignments import AccountPriceBookAssignments, CustomerPriceBookAssignments
from ..resources.reports import CostHistoryReports
from .exceptions import ValidationError
from .pipeline import AuthStyle, HttpRequest, RequestDescriptor, encode_body, execute

logger = logging.getLogger(__name__)


class CloudHealthClient:
    """
    Client for interacting with the CloudHealth API.

    The API key and endpoint are fixed at construction; every request is
    built from them and nothing else is shared between calls.

    Example:
        >>> client = CloudHealthClient("my-api-key", "https://chapi.cloudhealthtech.com/")
        >>> accounts = client.aws_accounts.list()
    """

    def __init__(self, api_key, endpoint_url):
        """
        Initialize the CloudHealth client.

        Args:
            api_key (str): CloudHealth API key, with or without a ``Bearer `` prefix
            endpoint_url (str): Absolute base URL of the API

        Raises:
            ValueError: If the API key is empty or the endpoint is not an absolute http(s) URL
        """
        if not api_key:
            raise ValueError("An API key must be provided")

        parts = urlsplit(endpoint_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"Invalid CloudHealth endpoint URL: {endpoint_url!r}")

        self._api_key = api_key
        # Relative paths resolve under the base path only when it ends with a slash
        self._endpoint_url = endpoint_url if endpoint_url.endswith("/") else endpoint_url + "/"
        self._base = (parts.scheme, parts.netloc)
        self._timeout = REQUEST_TIMEOUT

        self.aws_accounts = AwsAccounts(self)
        self.customers = Customers(self)
        self.customer_statements = CustomerStatements(self)
        self.aws_account_assignments = AwsAccountAssignments(self)
        self.account_price_book_assignments = AccountPriceBookAssignments(self)
        self.customer_price_book_assignments = CustomerPriceBookAssignments(self)
        self.organizations = Organizations(self)
        self.reports = CostHistoryReports(self)

    @property
    def api_key(self):
        return self._api_key

    @property
    def endpoint_url(self):
        return self._endpoint_url

    @property
    def timeout(self):
        return self._timeout

    def _authorization_value(self):
        if self._api_key.startswith("Bearer "):
            return self._api_key
        return f"Bearer {self._api_key}"

    def build_request(self, method, relative_path, body=None, auth=AuthStyle.HEADER):
        """
        Build an HTTP request for a path relative to the endpoint.

        Args:
            method (str): HTTP method (GET, POST, PUT, DELETE)
            relative_path (str): Path relative to the endpoint, may include a query
            body (JSONSerializable, optional): Request body
            auth (AuthStyle): Send the key as an Authorization header or an api_key parameter

        Returns:
            HttpRequest: Ready to hand to the transport

        Raises:
            ValidationError: If the path resolves outside the endpoint's scheme and host,
                             or the body cannot be encoded
        """
        url = urljoin(self._endpoint_url, relative_path)
        target = urlsplit(url)
        if (target.scheme, target.netloc) != self._base:
            raise ValidationError(f"Path {relative_path!r} escapes the CloudHealth endpoint")

        headers = {"Accept": "application/json"}
        params = None
        if auth is AuthStyle.QUERY:
            params = {"api_key": self._api_key}
        else:
            headers["Authorization"] = self._authorization_value()

        data = None
        if body is not None:
            data = encode_body(body)
            headers["Content-Type"] = "application/json"

        return HttpRequest(method=method.upper(), url=url, headers=headers, params=params, data=data)

    def execute(self, method, relative_path, body=None, auth=AuthStyle.HEADER):
        """Send one request and return the raw body bytes; see :func:`pipeline.execute`."""
        return execute(self, RequestDescriptor(method, relative_path, body, auth))
