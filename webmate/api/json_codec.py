"""
JSON Codec
Single place where request bodies are encoded and responses decoded
"""

from typing import Any, Generic, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_json

from webmate.api.exceptions import WebmateDeserializationError

T = TypeVar('T')


class ApiValue(BaseModel, Generic[T]):
    """Envelope used by endpoints that answer with {"value": ...}"""
    value: T


class JsonCodec:
    """
    Encodes request bodies and decodes response bodies

    Identifiers are written as plain UUID strings, datetimes as ISO-8601,
    enums as their value. Model fields and top-level dict entries set to None
    are left out.
    """

    def encode(self, body: Any) -> str:
        if isinstance(body, BaseModel):
            return body.model_dump_json(exclude_none=True)
        if isinstance(body, dict):
            body = {key: value for key, value in body.items() if value is not None}
        return to_json(body, exclude_none=True).decode('utf-8')

    def decode(self, text: str, target: Any, what: str = 'data') -> Any:
        """
        Parse text into target (a model class or a typing construct such as List[TestInfo])

        Args:
            text: JSON document
            target: Expected type
            what: Name of the expected data, used in the error message

        Raises:
            WebmateDeserializationError: If text is not valid JSON or does not match target
        """
        try:
            return TypeAdapter(target).validate_json(text)
        except ValidationError as e:
            raise WebmateDeserializationError(f"Error reading {what}: {e}", e) from e

    def decode_response(self, response: requests.Response, target: Any, what: str = 'data') -> Any:
        return self.decode(response.text, target, what)

    def decode_value(self, response: requests.Response, target: Type[T], what: str = 'data') -> T:
        """Decode a {"value": ...} envelope and return its content"""
        return self.decode(response.text, ApiValue[target], what).value


JSON_CODEC = JsonCodec()
