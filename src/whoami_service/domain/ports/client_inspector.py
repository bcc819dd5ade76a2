"""Client inspector port."""

from typing import Protocol

from whoami_service.domain.models.client_description import ClientDescription, HeaderMap


class ClientInspector(Protocol):
    """Port for turning request headers into a client description."""

    def inspect(self, headers: HeaderMap, fallback_remote_address: str) -> ClientDescription:
        """Describe the client that sent the given headers.

        Args:
            headers: Request headers keyed by lower-cased name.
            fallback_remote_address: Transport-level peer address, used when no
                forwarding header is present.

        Returns:
            Description of the client's address, operating system and language.

        Raises:
            MissingRequiredHeaderError: If ``accept-language`` is absent.
        """
        ...
