"""Application services (use cases) for inspecting request headers."""

import logging

from whoami_service.application.operating_system_rules import (
    MOBILE_PATTERN,
    find_matching_rule,
)
from whoami_service.domain.errors import MissingRequiredHeaderError
from whoami_service.domain.models import (
    ClientDescription,
    HeaderMap,
    IpResult,
    OsInfo,
    ProxiedAddress,
)

logger = logging.getLogger(__name__)

FORWARDED_FOR_HEADER = "x-forwarded-for"
USER_AGENT_HEADER = "user-agent"
ACCEPT_LANGUAGE_HEADER = "accept-language"


def resolve_client_ip(headers: HeaderMap, fallback_remote_address: str) -> IpResult:
    """Resolve the client address, following the X-Forwarded-For chain if present.

    X-Forwarded-For has the form "client, proxy1, proxy2". Entries are kept
    exactly as sent, including any whitespace after the commas. Without the
    header (or with an empty one) the transport's remote address is returned
    as a plain string.
    """
    forwarded_for = headers.get(FORWARDED_FOR_HEADER)
    if not forwarded_for:
        return fallback_remote_address

    client, *proxies = forwarded_for.split(",")
    return ProxiedAddress(client=client, proxies=proxies)


def classify_operating_system(user_agent: str | None) -> OsInfo:
    """Classify the operating system and device a user agent describes.

    The mobile flag is computed independently of the operating system. When no
    rule matches, or a matched rule cannot find its version, the corresponding
    fields are simply left unset. This never raises; an absent user agent is
    treated as an empty one.
    """
    user_agent = user_agent or ""
    mobile = MOBILE_PATTERN.search(user_agent) is not None

    rule = find_matching_rule(user_agent)
    if rule is None:
        logger.debug(f"Unrecognized operating system in user agent {user_agent!r}")
        return OsInfo(mobile=mobile)

    fields = rule.extract(user_agent)
    if "version" not in fields and "architecture" not in fields:
        logger.debug(f"Matched {rule.name} but found no version in {user_agent!r}")
    return OsInfo(mobile=mobile, name=rule.name, **fields)


def extract_browser_language(accept_language: str | None) -> str:
    """Return the first entry of Accept-Language verbatim.

    Raises:
        MissingRequiredHeaderError: If the header is absent.
    """
    if accept_language is None:
        raise MissingRequiredHeaderError(ACCEPT_LANGUAGE_HEADER)
    return accept_language.split(",")[0]


class HeaderInspectionService:
    """Service describing a client from its request headers."""

    def inspect(self, headers: HeaderMap, fallback_remote_address: str) -> ClientDescription:
        """Describe the client's address, operating system and language."""
        return ClientDescription(
            ip=resolve_client_ip(headers, fallback_remote_address),
            os=classify_operating_system(headers.get(USER_AGENT_HEADER)),
            language=extract_browser_language(headers.get(ACCEPT_LANGUAGE_HEADER)),
        )
