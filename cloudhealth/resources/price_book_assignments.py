import logging

from ..api.models import (
    AccountPriceBookAssignment,
    AccountPriceBookAssignmentsPage,
    CustomerPriceBookAssignment,
    CustomerPriceBookAssignmentsPage,
)
from ..api.pipeline import AuthStyle, decode
from .base import Resource

logger = logging.getLogger(__name__)


class AccountPriceBookAssignments(Resource):
    """Assignments of a customer's price book to individual billing accounts."""

    path = "v1/price_book_account_assignments"
    page_size = 50

    def get(self, assignment_id):
        body = self._request("GET", self._item_path(assignment_id))
        return decode(body, AccountPriceBookAssignment)

    def list(self):
        return self._list(AccountPriceBookAssignmentsPage, "price_book_account_assignments")


class CustomerPriceBookAssignments(Resource):
    """Assignments of custom price books to customers.

    This family lives on the legacy API, which only accepts the credential
    as an ``api_key`` query parameter.
    """

    path = "price_book_assignments"
    auth = AuthStyle.QUERY
    page_size = 50

    def get(self, assignment_id):
        body = self._request("GET", self._item_path(assignment_id))
        return decode(body, CustomerPriceBookAssignment)

    def list(self):
        return self._list(CustomerPriceBookAssignmentsPage, "price_book_assignments")

    def delete(self, assignment_id):
        self._request("DELETE", self._item_path(assignment_id))
        logger.info(f"Deleted price book assignment {assignment_id}")
