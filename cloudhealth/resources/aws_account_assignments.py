import logging

from ..api.exceptions import ValidationError
from ..api.models import AwsAccountAssignment, AwsAccountAssignmentsPage
from ..api.pipeline import decode
from .base import Resource

logger = logging.getLogger(__name__)


class AwsAccountAssignments(Resource):
    """Assignments of AWS accounts to partner customers."""

    path = "v2/aws_account_assignments"
    page_size = 50

    def get(self, assignment_id):
        body = self._request("GET", self._item_path(assignment_id))
        return decode(body, AwsAccountAssignment)

    def list(self):
        return self._list(AwsAccountAssignmentsPage, "aws_account_assignments")

    def create(self, assignment):
        assignment = self._as_model(assignment, AwsAccountAssignment)
        body = self._request("POST", self.path, assignment)
        created = decode(body, AwsAccountAssignment)
        logger.info(f"Assigned AWS account {created.owner_id} to customer {created.customer_id}")
        return created

    def update(self, assignment):
        assignment = self._as_model(assignment, AwsAccountAssignment)
        if assignment.id is None:
            raise ValidationError("An assignment id is required for an update")
        body = self._request("PUT", self._item_path(assignment.id), assignment)
        return decode(body, AwsAccountAssignment)

    def delete(self, assignment_id):
        self._request("DELETE", self._item_path(assignment_id))
        logger.info(f"Deleted AWS account assignment {assignment_id}")
