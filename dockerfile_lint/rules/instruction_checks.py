# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Checks on non-RUN instructions.

Rules: DL3000 (WORKDIR), DL3002 (USER), DL3006/DL3007 (FROM),
       DL3010/DL3022 (COPY), DL3020 (ADD), DL3011/DL3021 (EXPOSE).
"""

from __future__ import annotations

from dockerfile_lint.core.models import Add, Copy, Expose, From, Instruction, Severity, User, Workdir
from dockerfile_lint.core.rule_registry import instruction_rule

MAX_PORT = 65535

# Suffixes ADD knows how to extract
ARCHIVE_SUFFIXES = (
    ".tar",
    ".gz",
    ".bz2",
    ".xz",
    ".zip",
    ".tgz",
    ".tb2",
    ".tbz",
    ".tbz2",
    ".lz",
    ".lzma",
    ".tlz",
    ".txz",
    ".Z",
    ".tZ",
)

# Narrower list used when COPY looks like it should have been ADD
_COPY_ARCHIVE_SUFFIXES = (".tar", ".gz", ".bz2", "xz")

_URL_SCHEMES = ("https://", "http://")


def is_archive(path: str) -> bool:
    return path.endswith(ARCHIVE_SUFFIXES)


def is_url(path: str) -> bool:
    return path.startswith(_URL_SCHEMES)


# ---------------------------------------------------------------------------
# WORKDIR / USER
# ---------------------------------------------------------------------------


def _check_absolute_workdir(instruction: Instruction) -> bool:
    if isinstance(instruction, Workdir):
        return instruction.directory[:1] in ("/", "$")
    return True


absolute_workdir = instruction_rule("DL3000", Severity.ERROR, "Use absolute WORKDIR", _check_absolute_workdir)


def _check_no_root_user(instruction: Instruction) -> bool:
    if isinstance(instruction, User):
        user = instruction.user
        return not (user in ("root", "0") or user.startswith(("root:", "0:")))
    return True


no_root_user = instruction_rule("DL3002", Severity.WARNING, "Do not switch to root USER", _check_no_root_user)


# ---------------------------------------------------------------------------
# FROM
# ---------------------------------------------------------------------------


def _check_no_untagged(instruction: Instruction) -> bool:
    if isinstance(instruction, From) and instruction.image.is_untagged:
        return instruction.image.image == "scratch"
    return True


no_untagged = instruction_rule(
    "DL3006", Severity.WARNING, "Always tag the version of an image explicitly.", _check_no_untagged
)


def _check_no_latest_tag(instruction: Instruction) -> bool:
    if isinstance(instruction, From) and instruction.image.tag is not None:
        return instruction.image.tag != "latest"
    return True


no_latest_tag = instruction_rule(
    "DL3007",
    Severity.WARNING,
    "Using latest is prone to errors if the image will ever update. Pin the version explicitly to a release tag.",
    _check_no_latest_tag,
)


# ---------------------------------------------------------------------------
# COPY / ADD
# ---------------------------------------------------------------------------


def _check_use_add(instruction: Instruction) -> bool:
    if isinstance(instruction, Copy):
        return not instruction.source.endswith(_COPY_ARCHIVE_SUFFIXES)
    return True


use_add = instruction_rule("DL3010", Severity.INFO, "Use ADD for extracting archives into an image", _check_use_add)


def _check_copy_instead_add(instruction: Instruction) -> bool:
    if isinstance(instruction, Add):
        return is_archive(instruction.source) or is_url(instruction.source)
    return True


copy_instead_add = instruction_rule(
    "DL3020", Severity.ERROR, "Use COPY instead of ADD for files and folders", _check_copy_instead_add
)


def _check_copy_missing_args(instruction: Instruction) -> bool:
    if isinstance(instruction, Copy):
        return bool(instruction.source) and bool(instruction.target)
    return True


copy_missing_args = instruction_rule(
    "DL3022", Severity.ERROR, "COPY requires source and target", _check_copy_missing_args
)


# ---------------------------------------------------------------------------
# EXPOSE
# ---------------------------------------------------------------------------


def _check_invalid_port(instruction: Instruction) -> bool:
    if isinstance(instruction, Expose) and isinstance(instruction.ports, list):
        return all(port <= MAX_PORT for port in instruction.ports)
    return True


invalid_port = instruction_rule(
    "DL3011", Severity.ERROR, "Valid UNIX ports range from 0 to 65535", _check_invalid_port
)


def _check_expose_missing_args(instruction: Instruction) -> bool:
    if isinstance(instruction, Expose):
        # An unparsed port string only fails when it is empty
        return len(instruction.ports) > 0
    return True


expose_missing_args = instruction_rule(
    "DL3021", Severity.ERROR, "EXPOSE requires at least one argument", _check_expose_missing_args
)
