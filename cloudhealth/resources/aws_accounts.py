import logging

from ..api.exceptions import (
    AccountCreationError,
    AccountNotFoundError,
    NotFoundError,
    UnprocessableEntityError,
    ValidationError,
)
from ..api.models import AwsAccount, AwsAccountsPage, AwsExternalId
from ..api.pipeline import decode
from .base import Resource

logger = logging.getLogger(__name__)


class AwsAccounts(Resource):
    """AWS Accounts enabled in CloudHealth."""

    path = "v1/aws_accounts"
    page_size = 100

    def get(self, account_id):
        """
        Get the AWS Account with the specified CloudHealth ID.

        Raises:
            AccountNotFoundError: If no such account exists
        """
        try:
            body = self._request("GET", self._item_path(account_id))
        except NotFoundError as e:
            raise AccountNotFoundError(account_id) from e
        return decode(body, AwsAccount)

    def list(self):
        """Get all AWS Accounts enabled in CloudHealth."""
        return self._list(AwsAccountsPage, "aws_accounts")

    def create(self, account):
        """
        Enable a new AWS Account in CloudHealth.

        Args:
            account (AwsAccount or dict): Account to create; ``name`` is required

        Returns:
            AwsAccount: The account as stored by CloudHealth

        Raises:
            AccountCreationError: If CloudHealth rejects the account (422)
        """
        account = self._as_model(account, AwsAccount)
        try:
            body = self._request("POST", self.path, account)
        except UnprocessableEntityError as e:
            raise AccountCreationError(account.name) from e
        created = decode(body, AwsAccount)
        logger.info(f"Created AWS Account {created.id} ({created.name})")
        return created

    def update(self, account):
        """Update an existing AWS Account; ``account.id`` selects which one."""
        account = self._as_model(account, AwsAccount)
        if account.id is None:
            raise ValidationError("An AWS Account id is required for an update")
        try:
            body = self._request("PUT", self._item_path(account.id), account)
        except NotFoundError as e:
            raise AccountNotFoundError(account.id) from e
        except UnprocessableEntityError as e:
            raise AccountCreationError(account.name) from e
        return decode(body, AwsAccount)

    def delete(self, account_id):
        """Remove the AWS Account with the specified CloudHealth ID."""
        try:
            self._request("DELETE", self._item_path(account_id))
        except NotFoundError as e:
            raise AccountNotFoundError(account_id) from e
        logger.info(f"Deleted AWS Account {account_id}")

    def get_external_id(self, account_id):
        """Get the external ID used to integrate the account through an IAM role."""
        try:
            body = self._request("GET", f"{self._item_path(account_id)}/generate_external_id")
        except NotFoundError as e:
            raise AccountNotFoundError(account_id) from e
        return decode(body, AwsExternalId)
