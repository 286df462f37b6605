from __future__ import annotations

import pytest

from buildver.utils.version_utils import is_pep440_version, versions_equivalent


@pytest.mark.unit
class TestIsPep440Version:
    """Tests for is_pep440_version."""

    @pytest.mark.parametrize("value", ["1.3.37", "0.0.9", "1.3.14+dirty", "2024.1rc1", "1.0"])
    def test_valid_versions(self, value: str) -> None:
        assert is_pep440_version(value) is True

    @pytest.mark.parametrize("value", ["none", "dashed-version", "", "1.0-", None, 7])
    def test_invalid_versions(self, value: object) -> None:
        assert is_pep440_version(value) is False


@pytest.mark.unit
class TestVersionsEquivalent:
    """Tests for versions_equivalent."""

    @pytest.mark.parametrize(
        "left, right",
        [("1.3", "1.3.0"), ("1.3.0", "1.3.0"), ("v1.3", "1.3.0")],
    )
    def test_equivalent(self, left: str, right: str) -> None:
        assert versions_equivalent(left, right) is True

    @pytest.mark.parametrize(
        "left, right",
        [("1.3.1", "1.3.0"), ("1.3.0+dirty", "1.3.0"), ("none", "none")],
    )
    def test_not_equivalent(self, left: str, right: str) -> None:
        assert versions_equivalent(left, right) is False
