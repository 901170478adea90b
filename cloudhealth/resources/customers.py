import logging

from ..api.exceptions import (
    CustomerCreationError,
    CustomerNotFoundError,
    NotFoundError,
    UnprocessableEntityError,
    ValidationError,
)
from ..api.models import Customer, CustomersPage
from ..api.pipeline import decode
from .base import Resource

logger = logging.getLogger(__name__)


class Customers(Resource):
    """Partner customers managed in CloudHealth."""

    path = "v1/customers"
    page_size = 100

    def get(self, customer_id):
        try:
            body = self._request("GET", self._item_path(customer_id))
        except NotFoundError as e:
            raise CustomerNotFoundError(customer_id) from e
        return decode(body, Customer)

    def list(self):
        return self._list(CustomersPage, "customers")

    def create(self, customer):
        """
        Create a new Customer in CloudHealth.

        Raises:
            CustomerCreationError: If a customer with the same name exists or the input is invalid
        """
        customer = self._as_model(customer, Customer)
        try:
            body = self._request("POST", self.path, customer)
        except UnprocessableEntityError as e:
            raise CustomerCreationError(customer.name) from e
        created = decode(body, Customer)
        logger.info(f"Created Customer {created.id} ({created.name})")
        return created

    def update(self, customer):
        customer = self._as_model(customer, Customer)
        if customer.id is None:
            raise ValidationError("A Customer id is required for an update")
        try:
            body = self._request("PUT", self._item_path(customer.id), customer)
        except NotFoundError as e:
            raise CustomerNotFoundError(customer.id) from e
        except UnprocessableEntityError as e:
            raise CustomerCreationError(customer.name) from e
        return decode(body, Customer)

    def delete(self, customer_id):
        try:
            self._request("DELETE", self._item_path(customer_id))
        except NotFoundError as e:
            raise CustomerNotFoundError(customer_id) from e
        logger.info(f"Deleted Customer {customer_id}")
