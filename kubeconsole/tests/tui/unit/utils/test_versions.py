"""Tests for kubelet version ordering."""

from __future__ import annotations

import pytest

from kubeconsole.utils.versions import VersionKey, parse_version


class TestParseVersion:
    """Tests for parse_version."""

    def test_strips_leading_v(self) -> None:
        version = parse_version("v1.28.4")
        assert version is not None
        assert (version.major, version.minor, version.patch) == (1, 28, 4)

    def test_keeps_prerelease(self) -> None:
        version = parse_version("v1.28.0-eks-1234567")
        assert version is not None
        assert version.prerelease == "eks-1234567"

    @pytest.mark.parametrize("raw", ["", "unknown", "1.28", "v"])
    def test_invalid(self, raw: str) -> None:
        assert parse_version(raw) is None


class TestVersionKey:
    """Tests for VersionKey ordering."""

    def test_semantic_precedence(self) -> None:
        raw = ["1.10.0", "1.2.0", "1.9.3"]
        assert sorted(raw, key=VersionKey) == ["1.2.0", "1.9.3", "1.10.0"]

    def test_prerelease_before_release(self) -> None:
        assert VersionKey("1.28.0-rc.1") < VersionKey("1.28.0")

    def test_invalid_sorts_first(self) -> None:
        raw = ["1.2.0", "zeta", "alpha"]
        assert sorted(raw, key=VersionKey) == ["alpha", "zeta", "1.2.0"]

    def test_equal_ignoring_prefix(self) -> None:
        assert VersionKey("v1.28.4") == VersionKey("1.28.4")
        assert hash(VersionKey("v1.28.4")) == hash(VersionKey("1.28.4"))

