from ..api.models import BillingArtifactsPage
from ..api.pagination import with_query
from .base import Resource


class CustomerStatements(Resource):
    """Billing statements (billing artifacts) generated for customers."""

    path = "v1/customer_statements"
    page_size = 100

    def list(self):
        """Get the statements of every customer."""
        return self._list(BillingArtifactsPage, "billing_artifacts")

    def list_for_customer(self, customer_id):
        """Get all statements for one customer."""
        path = with_query(self.path, client_api_id=customer_id)
        return self._list(BillingArtifactsPage, "billing_artifacts", path=path)
