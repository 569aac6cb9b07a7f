from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlsplit

from expo_updates_manifest.core.common.exceptions import MalformedRequestError
from expo_updates_manifest.core.interfaces.model_bases import InternalDTO


@dataclass(frozen=True)
class IncomingRequest(InternalDTO):
    """Transport-agnostic view of an HTTP request.

    ``url`` is the request target (path plus optional query string). Header
    names are stored lower-cased so lookups are case-insensitive.
    """

    url: str | None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "headers",
            {name.lower(): value for name, value in self.headers.items()},
        )

    def _require_url(self) -> str:
        if not self.url:
            raise MalformedRequestError()
        return self.url

    @property
    def path(self) -> str:
        return urlsplit(self._require_url()).path

    @property
    def query_params(self) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self._require_url()).query)

    def query_param(self, name: str) -> str | None:
        """Return the first value of a query parameter, if any."""
        values = self.query_params.get(name)
        return values[0] if values else None

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())
