"""Wire-ready request descriptor handed to an HTTP transport."""

import json
from typing import Any, Dict, Optional
import httpx
from pydantic import BaseModel, Field

from .config import get_settings
from .exceptions import InvalidArgument


JSON_CONTENT_TYPE = "application/x-amz-json-1.1"


def encode_json_body(payload: Dict[str, Any]) -> bytes:
    """Encode a payload as compact UTF-8 JSON; an empty payload becomes ``{}``."""
    if not payload:
        return b"{}"
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class Request(BaseModel):
    """Method, path, query, headers and body of a single API call."""
    method: str = Field(..., description="HTTP method")
    uri: str = Field("/", description="Request path")
    query: Dict[str, str] = Field(default_factory=dict, description="Query string parameters")
    headers: Dict[str, str] = Field(default_factory=dict, description="HTTP headers")
    body: bytes = Field(b"", description="Encoded request body")

    def json_body(self) -> Any:
        """Decode the body back into Python objects."""
        return json.loads(self.body.decode("utf-8"))

    def to_httpx(self, endpoint: Optional[str] = None) -> httpx.Request:
        """Build an ``httpx.Request`` for this descriptor without sending it.

        Uses ``TRANSLATE_ENDPOINT`` from the settings when no endpoint is passed.
        """
        base = endpoint or get_settings().translate_endpoint
        if not base:
            raise InvalidArgument("No endpoint given and TRANSLATE_ENDPOINT is not set")
        url = base.rstrip("/") + "/" + self.uri.lstrip("/")
        return httpx.Request(
            self.method,
            url,
            params=self.query or None,
            headers=self.headers,
            content=self.body,
        )
