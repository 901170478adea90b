import json
from unittest.mock import MagicMock

BASE_URL = "https://api.example.test"
API_KEY = "key1"
REQUEST_PATCH = 'cloudhealth.api.pipeline.requests.request'


def make_response(status_code=200, payload=None):
    """Build a mocked requests.Response with a JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    return response


def sent_body(call):
    """Decode the JSON body of a recorded requests.request call."""
    return json.loads(call.kwargs['data'].decode("utf-8"))


COST_REPORT = {
    "report": "AWS Cost History",
    "cube_id": "cost",
    "status": "success",
    "interval": "monthly",
    "updated_at": "2023-02-01T10:00:00Z",
    "dimensions": [{
        "AWS-Service-Category": [
            {"name": "ec2_compute", "label": "EC2 - Compute", "direct": True, "extended": False, "parent": -1},
            {"name": "s3", "label": "S3", "direct": True, "extended": False, "parent": -1},
        ]
    }],
    "measures": [
        {"name": "cost", "label": "Cost ($)", "metadata": {"units": "$", "type": "float"}},
    ],
    "data": [[120.5], [30.25]],
    "filters": ["time:select:2023-01"],
}
