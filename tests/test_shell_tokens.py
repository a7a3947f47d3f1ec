# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Tests for the flat-token command splitter."""

import pytest

from dockerfile_lint.core.shell_tokens import (
    contains_sequence,
    drop_flagged_args,
    invokes_program,
    split_commands,
)


class TestSplitCommands:
    """Test splitting word lists on control operators."""

    @pytest.mark.parametrize(
        "tokens",
        [
            ["apt-get", "install", "-y", "curl"],
            ["echo", "hello"],
            ["ls"],
            [],
        ],
    )
    def test_no_operators_is_single_segment(self, tokens):
        assert split_commands(tokens) == [tokens]

    def test_all_three_operators(self):
        assert split_commands(["a", ";", "b", "|", "c", "&&", "d"]) == [["a"], ["b"], ["c"], ["d"]]

    def test_adjacent_operators_keep_empty_segment(self):
        assert split_commands(["a", ";", ";", "b"]) == [["a"], [], ["b"]]

    def test_trailing_operator(self):
        assert split_commands(["a", "&&"]) == [["a"], []]

    def test_logical_or_is_not_a_separator(self):
        """Only ``;``, ``|`` and ``&&`` split; ``||`` stays a word."""
        assert split_commands(["a", "||", "b"]) == [["a", "||", "b"]]

    def test_operator_glued_to_word_is_not_split(self):
        """Heuristic only: ``cd /tmp;`` is one word, not an operator."""
        assert split_commands(["cd", "/tmp;", "ls"]) == [["cd", "/tmp;", "ls"]]


class TestInvokesProgram:
    """Test detection of a program at the start of any segment."""

    def test_first_segment(self):
        assert invokes_program(["cd", "/app"], "cd") is True

    def test_later_segment(self):
        assert invokes_program(["apt-get", "update", "&&", "cd", "/app"], "cd") is True

    def test_argument_is_not_invocation(self):
        assert invokes_program(["echo", "cd"], "cd") is False

    def test_exact_match_only(self):
        assert invokes_program(["sudoedit", "file"], "sudo") is False

    def test_empty_segments_never_match(self):
        assert invokes_program([";", "&&"], "cd") is False


class TestDropFlaggedArgs:
    """Test removal of option flags together with their values."""

    def test_drops_flag_and_value(self):
        assert drop_flagged_args(["x", "-t", "foo", "y"], ["-t"]) == ["x", "y"]

    def test_multiple_flags(self):
        tokens = ["apk", "add", "--virtual", "build-deps", "-t", ".tmp", "gcc"]
        assert drop_flagged_args(tokens, ["-t", "--virtual"]) == ["apk", "add", "gcc"]

    def test_flag_at_end_without_value(self):
        assert drop_flagged_args(["x", "-t"], ["-t"]) == ["x"]

    def test_no_flags_present(self):
        assert drop_flagged_args(["a", "b"], ["-t"]) == ["a", "b"]


class TestContainsSequence:
    """Test contiguous sub-list matching."""

    def test_contiguous_pair(self):
        assert contains_sequence(["apt-get", "install", "curl"], ["apt-get", "install"]) is True

    def test_non_contiguous_pair(self):
        assert contains_sequence(["apt-get", "-y", "install"], ["apt-get", "install"]) is False

    def test_longer_sequence(self):
        tokens = ["apt-get", "update", "&&", "rm", "-rf", "/var/lib/apt/lists/*"]
        assert contains_sequence(tokens, ["rm", "-rf", "/var/lib/apt/lists/*"]) is True

    def test_sequence_longer_than_tokens(self):
        assert contains_sequence(["rm"], ["rm", "-rf"]) is False
