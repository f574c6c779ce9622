"""DSN parsing helpers used by connection configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse

from .redaction import REDACTED_VALUE, redact_query_params


@dataclass(frozen=True)
class DSNConfig:
    scheme: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    path: str
    query: dict[str, str] = field(default_factory=dict)

    @property
    def database(self) -> Optional[str]:
        return self.path.lstrip("/") or None

    def redacted(self) -> str:
        """
        Render the DSN with the password and sensitive query values masked.
        """
        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += f":{REDACTED_VALUE}"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        result = f"{self.scheme}://{netloc}{self.path}"
        if self.query:
            result += f"?{urlencode(redact_query_params(self.query), safe='*')}"
        return result


def parse_dsn(dsn: str) -> DSNConfig:
    parsed = urlparse(dsn)
    if not parsed.scheme:
        raise ValueError(f"DSN {dsn!r} has no scheme")
    query = {key: values[0] for key, values in parse_qs(parsed.query).items()}
    return DSNConfig(
        scheme=parsed.scheme,
        username=parsed.username,
        password=parsed.password,
        host=parsed.hostname,
        port=parsed.port,
        path=parsed.path or "",
        query=query,
    )
