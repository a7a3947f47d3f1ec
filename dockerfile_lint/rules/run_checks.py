# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""RUN instruction checks.

Rules: DL3001, DL3003, DL3004, DL3005, DL3017, DL3008, DL3009, DL3018,
       DL3019, DL3013, DL3016, DL3014, DL3015, DL4005.
"""

from __future__ import annotations

from dockerfile_lint.core.models import Instruction, Run, Severity
from dockerfile_lint.core.rule_registry import instruction_rule
from dockerfile_lint.core.shell_tokens import contains_sequence, invokes_program, split_commands

from . import packages


def _run_args(instruction: Instruction) -> list[str] | None:
    """Return the RUN word list, or ``None`` for any other instruction."""
    if isinstance(instruction, Run):
        return instruction.arguments
    return None


# ---------------------------------------------------------------------------
# Forbidden programs
# ---------------------------------------------------------------------------

_INVALID_COMMANDS = frozenset({"ssh", "vim", "shutdown", "service", "ps", "free", "top", "kill", "mount"})


def _check_invalid_cmd(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if not args:
        return True
    return args[0] not in _INVALID_COMMANDS


invalid_cmd = instruction_rule(
    "DL3001",
    Severity.INFO,
    "For some bash commands it makes no sense running them in a Docker container like `ssh`, "
    "`vim`, `shutdown`, `service`, `ps`, `free`, `top`, `kill`, `mount`, `ifconfig`",
    _check_invalid_cmd,
)


def _check_no_cd(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    return args is None or not invokes_program(args, "cd")


no_cd = instruction_rule("DL3003", Severity.WARNING, "Use WORKDIR to switch to a directory", _check_no_cd)


def _check_no_sudo(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    return args is None or not invokes_program(args, "sudo")


no_sudo = instruction_rule(
    "DL3004",
    Severity.ERROR,
    "Do not use sudo as it leads to unpredictable behavior. Use a tool like gosu to enforce root.",
    _check_no_sudo,
)


def _check_no_apt_get_upgrade(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None:
        return True
    return not (
        contains_sequence(args, ["apt-get", "upgrade"]) or contains_sequence(args, ["apt-get", "dist-upgrade"])
    )


no_apt_get_upgrade = instruction_rule(
    "DL3005", Severity.ERROR, "Do not use apt-get upgrade or dist-upgrade.", _check_no_apt_get_upgrade
)


def _check_no_apk_upgrade(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    return args is None or not contains_sequence(args, ["apk", "upgrade"])


no_apk_upgrade = instruction_rule("DL3017", Severity.ERROR, "Do not use apk upgrade", _check_no_apk_upgrade)


def _check_use_shell(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None:
        return True
    return not any(
        invokes_program(segment, "ln") and "/bin/sh" in segment for segment in split_commands(args)
    )


use_shell = instruction_rule("DL4005", Severity.WARNING, "Use SHELL to change the default shell", _check_use_shell)


# ---------------------------------------------------------------------------
# apt-get
# ---------------------------------------------------------------------------


def _check_apt_get_version_pinned(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None:
        return True
    return all(packages.apt_get_version_pinned(p) for p in packages.apt_get_packages(args))


apt_get_version_pinned = instruction_rule(
    "DL3008",
    Severity.WARNING,
    "Pin versions in apt get install. Instead of `apt-get install <package>` use "
    "`apt-get install <package>=<version>`",
    _check_apt_get_version_pinned,
)


def _check_apt_get_cleanup(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None or not contains_sequence(args, ["apt-get", "update"]):
        return True
    return contains_sequence(args, ["rm", "-rf", "/var/lib/apt/lists/*"])


apt_get_cleanup = instruction_rule(
    "DL3009", Severity.INFO, "Delete the apt-get lists after installing something", _check_apt_get_cleanup
)


def _mentions_apt_get_install(args: list[str]) -> bool:
    # Looser than packages.is_apt_get_install: `apt-get -y install` counts too
    return "apt-get" in args and "install" in args


def _check_apt_get_yes(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None or not _mentions_apt_get_install(args):
        return True
    if "-y" in args or "--yes" in args or "-qq" in args:
        return True
    # Combined short flags such as -qy
    return any("-y" in arg for arg in args)


apt_get_yes = instruction_rule(
    "DL3014",
    Severity.WARNING,
    "Use the `-y` switch to avoid manual input `apt-get -y install <package>`",
    _check_apt_get_yes,
)


def _check_apt_get_no_recommends(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None or not _mentions_apt_get_install(args):
        return True
    return "--no-install-recommends" in args


apt_get_no_recommends = instruction_rule(
    "DL3015",
    Severity.INFO,
    "Avoid additional packages by specifying `--no-install-recommends`",
    _check_apt_get_no_recommends,
)


# ---------------------------------------------------------------------------
# apk
# ---------------------------------------------------------------------------


def _check_apk_add_version_pinned(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None:
        return True
    return all(packages.apk_version_pinned(p) for p in packages.apk_add_packages(args))


apk_add_version_pinned = instruction_rule(
    "DL3018",
    Severity.WARNING,
    "Pin versions in apk add. Instead of `apk add <package>` use `apk add <package>=<version>`",
    _check_apk_add_version_pinned,
)


def _check_apk_add_no_cache(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    return args is None or packages.apk_uses_no_cache(args)


apk_add_no_cache = instruction_rule(
    "DL3019",
    Severity.INFO,
    "Use the `--no-cache` switch to avoid the need to use `--update` and remove "
    "`/var/cache/apk/*` when done installing packages",
    _check_apk_add_no_cache,
)


# ---------------------------------------------------------------------------
# pip / npm
# ---------------------------------------------------------------------------


def _check_pip_version_pinned(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None or packages.pip_install_exempt(args):
        return True
    return all(packages.pip_version_pinned(p) for p in packages.pip_packages(args))


pip_version_pinned = instruction_rule(
    "DL3013",
    Severity.WARNING,
    "Pin versions in pip. Instead of `pip install <package>` use `pip install <package>==<version>`",
    _check_pip_version_pinned,
)


def _check_npm_version_pinned(instruction: Instruction) -> bool:
    args = _run_args(instruction)
    if args is None:
        return True
    return all(packages.npm_version_pinned(p) for p in packages.npm_packages(args))


npm_version_pinned = instruction_rule(
    "DL3016",
    Severity.WARNING,
    "Pin versions in npm. Instead of `npm install <package>` use `npm install <package>@<version>`",
    _check_npm_version_pinned,
)
