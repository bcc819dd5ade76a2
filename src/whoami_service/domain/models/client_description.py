"""Client description domain models."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Lower-cased header name -> header value, as supplied by the HTTP layer.
HeaderMap = Mapping[str, str]


class ProxiedAddress(BaseModel):
    """Client address reached through a chain of forwarding proxies."""

    model_config = ConfigDict(frozen=True)

    client: str
    proxies: list[str] = Field(default_factory=list)


# Either the raw remote address or the forwarded client plus its proxies.
IpResult = str | ProxiedAddress


class OsInfo(BaseModel):
    """Operating system details parsed from a user agent.

    Only ``mobile`` is always present. The remaining fields are ``None`` when
    detection did not produce them and are left out of the serialized form.
    """

    model_config = ConfigDict(frozen=True)

    mobile: bool
    name: str | None = None
    version: str | None = None
    device: str | None = None
    architecture: str | None = None

    @property
    def recognized(self) -> bool:
        """Whether any operating system rule matched."""
        return self.name is not None


class ClientDescription(BaseModel):
    """Everything the service reports about a client."""

    model_config = ConfigDict(frozen=True)

    ip: IpResult
    os: OsInfo
    language: str

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize, omitting fields that were not detected."""
        return self.model_dump(exclude_none=True)
