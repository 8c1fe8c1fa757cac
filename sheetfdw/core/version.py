"""Host protocol version negotiation.

The connector declares a caret requirement against the host's plugin
protocol version, the same way Cargo reads ``^x.y.z``: the left-most
non-zero component may not change.
"""

import re

from sheetfdw.core.exceptions import ConfigError, NotSupportedError

HOST_VERSION_REQUIREMENT = "^0.1.0"

_VERSION_RE = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:[-+].*)?$")


def parse_version(version: str) -> tuple[int, int, int]:
    match = _VERSION_RE.match(version.strip())
    if match is None:
        raise ConfigError(f"Invalid version: {version}", context={"version": version})
    major, minor, patch = (int(part) if part else 0 for part in match.groups())
    return major, minor, patch


def _caret_upper_bound(lower: tuple[int, int, int]) -> tuple[int, int, int]:
    major, minor, patch = lower
    if major > 0:
        return major + 1, 0, 0
    if minor > 0:
        return 0, minor + 1, 0
    return 0, 0, patch + 1


def version_matches(requirement: str, version: str) -> bool:
    """Check ``version`` against a caret (``^``) or exact (``=``) requirement."""
    requirement = requirement.strip()
    candidate = parse_version(version)

    if requirement.startswith("^"):
        lower = parse_version(requirement[1:])
        return lower <= candidate < _caret_upper_bound(lower)
    if requirement.startswith("="):
        return candidate == parse_version(requirement[1:])
    # Cargo treats a bare version as a caret requirement
    lower = parse_version(requirement)
    return lower <= candidate < _caret_upper_bound(lower)


def check_host_version(host_version: str, requirement: str = HOST_VERSION_REQUIREMENT) -> None:
    """Raise NotSupportedError if the host version falls outside the requirement."""
    if not version_matches(requirement, host_version):
        raise NotSupportedError(
            f"host version {host_version} does not satisfy {requirement}",
            context={"host_version": host_version, "requirement": requirement},
        )
