"""Tests for data models."""

from pathlib import Path

import pytest

from versions_check.errors import InvalidPinPattern, ValidationFailure
from versions_check.models import (
    BootstrapResult,
    BootstrapStatus,
    CheckResult,
    CheckStatus,
    Conflict,
    ConflictKind,
    Pin,
    ResolverInfo,
)


class TestPin:
    """Tests for Pin."""

    def test_line_not_part_of_equality(self):
        assert Pin("foo:bar", "1.0", line=3) == Pin("foo:bar", "1.0")

    def test_regex_is_anchored_by_fullmatch(self):
        regex = Pin("com.foo:*", "1.0").regex
        assert regex.fullmatch("com.foo:bar")
        assert not regex.fullmatch("org.com.foo:bar:extra")

    def test_str(self):
        assert str(Pin("foo:bar", "1.0")) == "foo:bar = 1.0"

    def test_invalid_pattern_names_pin_and_line(self):
        pin = Pin("com.foo:bar(", "1.0", line=4)

        with pytest.raises(InvalidPinPattern, match=r"'com.foo:bar\(' on line 4") as exc_info:
            pin.regex

        assert exc_info.value.pattern == "com.foo:bar("
        assert exc_info.value.line == 4


class TestConflict:
    """Tests for Conflict."""

    def test_override(self):
        conflict = Conflict(Pin("foo:*", "1.0"), "foo:bar", "2.0")
        assert conflict.kind is ConflictKind.OVERRIDE
        assert conflict.describe() == "foo:* = 1.0 conflicts with foo:bar = 2.0 from BOM"

    def test_redundant(self):
        conflict = Conflict(Pin("foo:bar", "2.0"), "foo:bar", "2.0")
        assert conflict.kind is ConflictKind.REDUNDANT
        assert conflict.describe() == "foo:bar = 2.0 is already recommended by a BOM for foo:bar"


class TestCheckResult:
    """Tests for CheckResult."""

    def test_passed(self):
        result = CheckResult.passed("no-unused-pin")
        assert result.ok
        assert result.status == CheckStatus.PASSED
        assert result.message == ""
        result.raise_for_status()

    def test_failed_message_lists_entries(self):
        result = CheckResult.failed("no-unused-pin", "Header: ", ["a:b", "c:*"])
        assert not result.ok
        assert result.message == "Header: \na:b\nc:*"

    def test_raise_for_status(self):
        result = CheckResult.failed("no-unused-pin", "Header: ", ["a:b"])
        with pytest.raises(ValidationFailure) as exc_info:
            result.raise_for_status()
        assert exc_info.value.check_name == "no-unused-pin"
        assert exc_info.value.entries == ["a:b"]
        assert str(exc_info.value) == "Header: \na:b"


class TestBootstrapResult:
    def test_degraded(self):
        result = BootstrapResult(Path("versions.props"), BootstrapStatus.DEGRADED, "denied")
        assert result.degraded

    def test_created_is_not_degraded(self):
        assert not BootstrapResult(Path("versions.props"), BootstrapStatus.CREATED).degraded


class TestResolverInfo:
    def test_from_dict_defaults(self):
        info = ResolverInfo.from_dict({"name": "gradle-lockfile", "description": "Lockfiles"})
        assert info.build_files == []
        assert info.available is True
