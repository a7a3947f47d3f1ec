# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Whole-Dockerfile checks, reported at ``WHOLE_FILE_LINE``.

Rules: DL4000, DL4001, DL4003, DL4004.
"""

from __future__ import annotations

from dockerfile_lint.core.models import Cmd, Entrypoint, Instruction, Maintainer, Run, Severity
from dockerfile_lint.core.rule_registry import dockerfile_rule


def _count(instructions: list[Instruction], kind: type) -> int:
    return sum(1 for instruction in instructions if isinstance(instruction, kind))


def _check_has_no_maintainer(instructions: list[Instruction]) -> bool:
    return _count(instructions, Maintainer) == 0


has_no_maintainer = dockerfile_rule("DL4000", Severity.ERROR, "MAINTAINER is deprecated", _check_has_no_maintainer)


def _check_multiple_cmds(instructions: list[Instruction]) -> bool:
    return _count(instructions, Cmd) <= 1


multiple_cmds = dockerfile_rule(
    "DL4003",
    Severity.WARNING,
    "Multiple `CMD` instructions found. If you list more than one `CMD` then only the last `CMD` will take effect.",
    _check_multiple_cmds,
)


def _check_multiple_entrypoints(instructions: list[Instruction]) -> bool:
    return _count(instructions, Entrypoint) <= 1


multiple_entrypoints = dockerfile_rule(
    "DL4004",
    Severity.ERROR,
    "Multiple `ENTRYPOINT` instructions found. If you list more than one `ENTRYPOINT` then only the last "
    "`ENTRYPOINT` will take effect.",
    _check_multiple_entrypoints,
)


def _uses_command(instructions: list[Instruction], command: str) -> bool:
    return any(isinstance(instruction, Run) and command in instruction.arguments for instruction in instructions)


def _check_wget_or_curl(instructions: list[Instruction]) -> bool:
    return not (_uses_command(instructions, "curl") and _uses_command(instructions, "wget"))


wget_or_curl = dockerfile_rule(
    "DL4001", Severity.WARNING, "Either use Wget or Curl but not both", _check_wget_or_curl
)
