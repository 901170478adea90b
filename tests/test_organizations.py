import unittest
from unittest.mock import patch

from cloudhealth.api.client import CloudHealthClient
from cloudhealth.api.exceptions import NotFoundError
from tests.helpers import API_KEY, BASE_URL, REQUEST_PATCH, make_response

ORGANIZATION = {
    "id": "206159212345",
    "parent_organization_id": "206159200001",
    "name": "Engineering",
    "description": "All engineering accounts",
    "flex_org": True,
    "num_aws_accounts": 12,
}


class TestOrganizations(unittest.TestCase):

    def setUp(self):
        self.client = CloudHealthClient(API_KEY, BASE_URL)

    @patch(REQUEST_PATCH)
    def test_get_filters_by_org_id(self, mock_request):
        mock_request.return_value = make_response(200, {"organizations": [ORGANIZATION]})

        organization = self.client.organizations.get("206159212345")

        self.assertEqual(organization.name, "Engineering")
        self.assertEqual(organization.num_aws_accounts, 12)
        self.assertEqual(mock_request.call_args.kwargs['url'],
                         "https://api.example.test/v2/organizations?org_id=206159212345")

    @patch(REQUEST_PATCH)
    def test_get_with_no_match(self, mock_request):
        mock_request.return_value = make_response(200, {"organizations": []})

        with self.assertRaises(NotFoundError):
            self.client.organizations.get("missing")

    @patch(REQUEST_PATCH)
    def test_list(self, mock_request):
        mock_request.return_value = make_response(200, {"organizations": [ORGANIZATION, dict(ORGANIZATION, id="2")]})

        organizations = self.client.organizations.list()

        self.assertEqual([o.id for o in organizations], ["206159212345", "2"])
        self.assertEqual(mock_request.call_args.kwargs['url'],
                         "https://api.example.test/v2/organizations?page=1&per_page=100")


if __name__ == "__main__":
    unittest.main()
