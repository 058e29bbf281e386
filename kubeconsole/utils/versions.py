"""Kubelet version ordering."""

from __future__ import annotations

from functools import total_ordering

import semver


def parse_version(raw: str) -> semver.Version | None:
    """Parse a kubelet version such as ``v1.28.0-eks-1234567``.

    Returns None when the string is not a semantic version.
    """
    candidate = str(raw or "").strip()
    if candidate[:1] in ("v", "V"):
        candidate = candidate[1:]
    try:
        return semver.Version.parse(candidate)
    except (ValueError, TypeError):
        return None


@total_ordering
class VersionKey:
    """Sort key ordering versions by semantic-version precedence.

    Unparsable versions sort before every valid version and compare
    lexicographically among themselves.
    """

    __slots__ = ("raw", "version")

    def __init__(self, raw: str) -> None:
        self.raw = str(raw or "")
        self.version = parse_version(self.raw)

    def _key(self) -> tuple[int, str]:
        return (0 if self.version is None else 1, self.raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionKey):
            return NotImplemented
        if self.version is not None and other.version is not None:
            return self.version.compare(other.version) == 0
        return self._key() == other._key()

    def __lt__(self, other: VersionKey) -> bool:
        if self.version is not None and other.version is not None:
            return self.version.compare(other.version) < 0
        return self._key() < other._key()

    def __hash__(self) -> int:
        if self.version is not None:
            v = self.version
            return hash((v.major, v.minor, v.patch, v.prerelease))
        return hash(self.raw)

