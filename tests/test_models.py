# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Tests for core data models."""

import pytest

from dockerfile_lint.core.models import (
    WHOLE_FILE_LINE,
    BaseImage,
    Check,
    Metadata,
    Severity,
    link,
)

META = Metadata("DL3003", Severity.WARNING, "Use WORKDIR to switch to a directory")


class TestSeverity:
    @pytest.mark.parametrize("raw", ["warning", "WARNING", " Warning "])
    def test_parse_case_insensitive(self, raw):
        assert Severity.parse(raw) is Severity.WARNING

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Severity.parse("critical")

    def test_rank_order(self):
        ranked = sorted(Severity, key=lambda s: s.rank)
        assert ranked == [Severity.INFO, Severity.WARNING, Severity.ERROR, Severity.STYLE]

    def test_string_value(self):
        assert Severity.ERROR == "error"


class TestCheck:
    def test_orders_by_line_only(self):
        a = Check(META, "Dockerfile", 5, False)
        b = Check(Metadata("DL3000", Severity.ERROR, "x"), "Dockerfile", 2, False)
        assert sorted([a, b]) == [b, a]

    def test_whole_file_sorts_first(self):
        whole = Check(META, "Dockerfile", WHOLE_FILE_LINE, False)
        line = Check(META, "Dockerfile", 1, False)
        assert sorted([line, whole]) == [whole, line]
        assert whole.is_whole_file and not line.is_whole_file

    def test_sort_is_stable_for_equal_lines(self):
        first = Check(META, "Dockerfile", 3, False)
        second = Check(Metadata("SC2164", Severity.WARNING, "y"), "Dockerfile", 3, False)
        assert sorted([first, second]) == [first, second]
        assert sorted([second, first]) == [second, first]

    def test_compare_with_other_type(self):
        with pytest.raises(TypeError):
            Check(META, "Dockerfile", 1, False) < 1  # noqa: B015

    def test_to_dict(self):
        check = Check(META, "app/Dockerfile", 12, False)
        assert check.to_dict() == {
            "code": "DL3003",
            "severity": "warning",
            "message": "Use WORKDIR to switch to a directory",
            "filename": "app/Dockerfile",
            "linenumber": 12,
            "link": "https://github.com/hadolint/hadolint/wiki/DL3003",
        }

    def test_immutable(self):
        check = Check(META, "Dockerfile", 1, False)
        with pytest.raises(AttributeError):
            check.linenumber = 2


class TestLink:
    def test_shellcheck_code(self):
        meta = Metadata("SC2086", Severity.INFO, "quote")
        assert link(meta) == "https://github.com/koalaman/shellcheck/wiki/SC2086"

    def test_catalog_code(self):
        assert link(META) == "https://github.com/hadolint/hadolint/wiki/DL3003"

    def test_unknown_code(self):
        assert link(Metadata("X1", Severity.INFO, "x")) == "https://github.com/hadolint/hadolint"


class TestBaseImage:
    @pytest.mark.parametrize(
        "image,untagged",
        [
            (BaseImage("ubuntu"), True),
            (BaseImage("ubuntu", tag="22.04"), False),
            (BaseImage("ubuntu", digest="sha256:abc"), False),
            (BaseImage("ubuntu", alias="builder"), True),
        ],
    )
    def test_is_untagged(self, image, untagged):
        assert image.is_untagged is untagged
