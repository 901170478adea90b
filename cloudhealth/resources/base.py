from pydantic import ValidationError as PydanticValidationError

from ..api.exceptions import ValidationError
from ..api.pagination import fetch_all
from ..api.pipeline import AuthStyle, RequestDescriptor, decode, execute


class Resource:
    """Common plumbing for a CloudHealth resource family."""

    path = None
    auth = AuthStyle.HEADER
    page_size = 100

    def __init__(self, client):
        self._client = client

    def _item_path(self, resource_id):
        return f"{self.path}/{resource_id}"

    def _request(self, method, relative_path, body=None):
        return execute(self._client, RequestDescriptor(method, relative_path, body, self.auth))

    def _list(self, page_model, key, path=None):
        def decode_page(body):
            return getattr(decode(body, page_model), key)

        return fetch_all(self._client, path or self.path, self.page_size, decode_page, auth=self.auth)

    @staticmethod
    def _as_model(value, model):
        """
        Coerce a request payload into ``model``.

        Raises:
            ValidationError: If the payload does not match the model; nothing is sent
        """
        if isinstance(value, model):
            return value
        try:
            return model.model_validate(value)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {model.__name__}: {e}") from e
