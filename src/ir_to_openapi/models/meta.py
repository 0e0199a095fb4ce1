"""Caller-supplied API metadata (``info`` and ``servers`` sections)."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INFO = 'title="API",version="1.0.0"'
DEFAULT_SERVERS = 'url="https://api.example.com"'


class ApiInfo(BaseModel):
    """The ``info`` section of the generated document.

    ``title`` and ``version`` are always present; any other key given on the
    command line (``description``, ``termsOfService``...) is kept as-is.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    title: Annotated[str, Field(default="API")]
    version: Annotated[str, Field(default="1.0.0")]

    def to_document(self) -> dict[str, str]:
        """Return the ``info`` mapping with title and version first."""
        data = {"title": self.title, "version": self.version}
        extra = self.model_extra or {}
        for key in sorted(extra):
            data[key] = str(extra[key])
        return data


class Server(BaseModel):
    """A single entry of the ``servers`` section."""

    model_config = ConfigDict(extra="allow", frozen=True)

    url: Annotated[str, Field(min_length=1)]
    description: Annotated[str | None, Field(default=None)]

    def to_document(self) -> dict[str, str]:
        """Return the server mapping, omitting empty keys."""
        data = {"url": self.url}
        if self.description:
            data["description"] = self.description
        extra = self.model_extra or {}
        for key in sorted(extra):
            data[key] = str(extra[key])
        return data


def _parse_pairs(text: str) -> dict[str, str]:
    """Parse ``key="value",key2=value2`` into a mapping.

    Parts without ``=`` are skipped; surrounding quotes are stripped.
    """
    pairs: dict[str, str] = {}
    for part in text.split(","):
        key, sep, value = part.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        pairs[key] = value.strip().strip('"')
    return pairs


def parse_info(text: str) -> ApiInfo:
    """Parse an info flag value.

    Examples
    --------
        >>> parse_info('title="My API",version="2.1.0"').title
        'My API'

    """
    return ApiInfo(**_parse_pairs(text))


def parse_servers(text: str) -> list[Server]:
    """Parse a servers flag value.

    Servers are separated by ``;`` and their keys by ``,``. Entries without a
    ``url`` are skipped.

    Examples
    --------
        >>> [s.url for s in parse_servers('url="https://a";url="https://b"')]
        ['https://a', 'https://b']

    """
    servers: list[Server] = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        pairs = _parse_pairs(chunk)
        if not pairs.get("url"):
            continue
        servers.append(Server(**pairs))
    return servers
