from ..api.exceptions import NotFoundError
from ..api.models import OrganizationsPage
from ..api.pagination import with_query
from ..api.pipeline import decode
from .base import Resource


class Organizations(Resource):
    path = "v2/organizations"
    page_size = 100

    def get(self, org_id):
        """
        Get the Organization with the specified ID.

        The API has no single-organization endpoint; the list endpoint is
        filtered with ``org_id`` and the first match returned.

        Raises:
            NotFoundError: If the filter matches nothing
        """
        body = self._request("GET", with_query(self.path, org_id=org_id))
        organizations = decode(body, OrganizationsPage).organizations
        if not organizations:
            raise NotFoundError(f"Organization `{org_id}` not found")
        return organizations[0]

    def list(self):
        return self._list(OrganizationsPage, "organizations")
