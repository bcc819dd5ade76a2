"""Ordered rules for recognising an operating system in a user agent string.

Rules are evaluated top to bottom and the first whose marker matches wins. iOS
must come before Macintosh because iOS user agents also carry "Mac OS X" as a
compatibility token.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

# Fields an extractor may contribute besides ``name``.
OsFields = dict[str, str]

MOBILE_PATTERN = re.compile(r"mobi", re.IGNORECASE)

_IOS_VERSION = re.compile(r"CPU( iPhone)? OS ([0-9._]+) like Mac OS X")
_ANDROID_VERSION = re.compile(r"Android ([0-9.]+)[);]")
_WEBOS_VERSION = re.compile(r"webOS/([0-9.]+)[);]")
_MAC_VERSION = re.compile(r"(Intel|PPC) Mac OS X ?([0-9._]*)[);]")
_WINDOWS_VERSION = re.compile(r"Windows NT ([0-9._]+)[);]")
_LINUX_ARCHITECTURE = re.compile(r"Linux ([0-9a-zA-Z_]+)")

UNKNOWN_MAC_VERSION = "???"


@dataclass(frozen=True)
class OperatingSystemRule:
    """One entry of the classification table."""

    name: str
    marker: re.Pattern[str]
    extract: Callable[[str], OsFields]

    def matches(self, user_agent: str) -> bool:
        """Check whether the user agent carries this rule's marker."""
        return self.marker.search(user_agent) is not None


def _capture(pattern: re.Pattern[str], user_agent: str, group: int = 1) -> str | None:
    """Return a capture group, or None when the pattern does not match."""
    match = pattern.search(user_agent)
    if match is None:
        return None
    return match.group(group)


def _dotted(version: str | None) -> str | None:
    if version is None:
        return None
    return version.replace("_", ".")


def _only_present(**fields: str | None) -> OsFields:
    return {key: value for key, value in fields.items() if value is not None}


def _extract_ios(user_agent: str) -> OsFields:
    device = None
    if "iPhone" in user_agent:
        device = "iPhone"
    elif "iPad" in user_agent:
        device = "iPad"
    return _only_present(
        version=_dotted(_capture(_IOS_VERSION, user_agent, group=2)),
        device=device,
    )


def _extract_android(user_agent: str) -> OsFields:
    return _only_present(version=_capture(_ANDROID_VERSION, user_agent))


def _extract_webos(user_agent: str) -> OsFields:
    return _only_present(version=_capture(_WEBOS_VERSION, user_agent))


def _extract_mac(user_agent: str) -> OsFields:
    version = _dotted(_capture(_MAC_VERSION, user_agent, group=2))
    if version == "":
        version = UNKNOWN_MAC_VERSION
    return _only_present(version=version)


def _extract_windows(user_agent: str) -> OsFields:
    return _only_present(version=_capture(_WINDOWS_VERSION, user_agent))


def _extract_linux(user_agent: str) -> OsFields:
    # User agents never reveal the kernel version, report the CPU architecture instead.
    return _only_present(architecture=_capture(_LINUX_ARCHITECTURE, user_agent))


OPERATING_SYSTEM_RULES: tuple[OperatingSystemRule, ...] = (
    OperatingSystemRule("iOS", re.compile(r"like Mac OS X"), _extract_ios),
    OperatingSystemRule("Android", re.compile(r"Android"), _extract_android),
    OperatingSystemRule("WebOS", re.compile(r"webOS/"), _extract_webos),
    OperatingSystemRule("Macintosh OS X", re.compile(r"(Intel|PPC) Mac OS X"), _extract_mac),
    OperatingSystemRule("Microsoft Windows", re.compile(r"Windows NT"), _extract_windows),
    OperatingSystemRule("Linux", re.compile(r"Linux"), _extract_linux),
)


def find_matching_rule(
    user_agent: str, rules: tuple[OperatingSystemRule, ...] = OPERATING_SYSTEM_RULES
) -> OperatingSystemRule | None:
    """Return the first rule matching the user agent, if any."""
    for rule in rules:
        if rule.matches(user_agent):
            return rule
    return None
