"""Request description handed to hooks and rendered per attempt."""

from dataclasses import dataclass, field
from typing import Any

import httpx
import pydantic

from .headers import merge_headers, project_header


@dataclass
class Request:
    """A single API call.

    The object is rendered into an :class:`httpx.Request` for every attempt,
    with the current default headers merged underneath ``headers``. Changes
    made by a ``before`` hook therefore carry over to a retried attempt.
    """

    method: str
    url: str
    body: Any = None
    params: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def set_header(self, name: str, value: str) -> "Request":
        self.headers[name] = value
        return self

    def apply_headers(self, *values: Any) -> "Request":
        """Merge projected routing headers into this request."""
        for value in values:
            self.headers.update(project_header(value))
        return self

    def json_body(self) -> Any:
        """Return the body in a JSON-serialisable form."""
        if isinstance(self.body, pydantic.BaseModel):
            return self.body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return self.body

    def build(
        self,
        http_client: httpx.Client,
        default_headers: dict[str, str],
    ) -> httpx.Request:
        """Render the request for one attempt."""
        return http_client.build_request(
            self.method,
            self.url,
            params=self.params,
            json=self.json_body(),
            headers=merge_headers(default_headers, self.headers),
        )
