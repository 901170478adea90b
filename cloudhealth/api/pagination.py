import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .exceptions import ValidationError
from .pipeline import AuthStyle, RequestDescriptor, execute

logger = logging.getLogger(__name__)


def with_query(path, **params):
    """Append query parameters to a relative path, keeping any it already has."""
    parts = urlsplit(path)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend((key, str(value)) for key, value in params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


def fetch_all(client, path, page_size, decode_page, auth=AuthStyle.HEADER):
    """
    Collect every item of a page-based list endpoint.

    Pages are requested in order starting at 1. The first page holding fewer
    than ``page_size`` items is the last one, so a collection whose size is
    an exact multiple of ``page_size`` costs one extra, empty request.

    Args:
        client (CloudHealthClient): Client used for every page
        path (str): Relative path of the list endpoint, optionally with a query
        page_size (int): Value sent as ``per_page``
        decode_page (callable): Turns a page body into a list of items
        auth (AuthStyle): How the credential is sent

    Returns:
        list: All items, in server order

    Raises:
        CloudHealthError: From the first page that fails; nothing is returned
    """
    if page_size < 1:
        raise ValidationError(f"page_size must be positive, got {page_size}")

    results = []
    page = 1

    while True:
        page_path = with_query(path, page=page, per_page=page_size)
        body = execute(client, RequestDescriptor("GET", page_path, auth=auth))
        items = decode_page(body)
        results.extend(items)
        logger.debug(f"Page {page} of {path}: {len(items)} items")

        if len(items) < page_size:
            break

        page += 1

    logger.info(f"Retrieved {len(results)} items from {path} in {page} page(s)")
    return results
