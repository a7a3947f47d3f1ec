# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Package-manager heuristics for version pinning.

Each tool follows the same three steps on every command segment of a RUN:

1. decide whether the segment is an install invocation for that tool,
2. strip the tool name and known options to leave package specifiers,
3. judge each specifier as pinned or floating.

Used by rules DL3008 (apt-get), DL3018/DL3019 (apk), DL3013 (pip) and
DL3016 (npm).
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from dockerfile_lint.core.shell_tokens import contains_sequence, drop_flagged_args, split_commands

# ---------------------------------------------------------------------------
# apt-get
# ---------------------------------------------------------------------------

_APT_GET_OPTIONS = frozenset({"apt-get", "install", "-d", "-f", "-m", "-q", "-y", "-qq"})


def is_apt_get_install(segment: Sequence[str]) -> bool:
    return contains_sequence(segment, ["apt-get", "install"])


def apt_get_packages(args: Sequence[str]) -> list[str]:
    """Package specifiers passed to ``apt-get install`` anywhere in *args*."""
    return [
        arg
        for segment in split_commands(args)
        if is_apt_get_install(segment)
        for arg in segment
        if arg not in _APT_GET_OPTIONS and not arg.startswith("--")
    ]


def apt_get_version_pinned(package: str) -> bool:
    """``curl=7.58.0-2ubuntu3`` is pinned, ``curl`` is not."""
    return "=" in package


# ---------------------------------------------------------------------------
# apk
# ---------------------------------------------------------------------------

_APK_OPTIONS = frozenset({"apk", "add", "-q", "-p", "-v", "-f", "-t"})
_APK_OPTIONS_WITH_ARG = ("-t", "--virtual")


def is_apk_add(tokens: Sequence[str]) -> bool:
    """Both ``apk`` and ``add`` appear, in any order."""
    return "apk" in tokens and "add" in tokens


def apk_add_packages(args: Sequence[str]) -> list[str]:
    """Package specifiers passed to ``apk add`` anywhere in *args*.

    The virtual package name given to ``-t``/``--virtual`` is not a package.
    """
    return [
        arg
        for segment in split_commands(args)
        if is_apk_add(segment)
        for arg in drop_flagged_args(segment, _APK_OPTIONS_WITH_ARG)
        if arg not in _APK_OPTIONS and not arg.startswith("--")
    ]


def apk_version_pinned(package: str) -> bool:
    return "=" in package


def apk_uses_no_cache(args: Sequence[str]) -> bool:
    """Checked on the raw RUN tokens, not per segment."""
    return not is_apk_add(args) or "--no-cache" in args


# ---------------------------------------------------------------------------
# pip
# ---------------------------------------------------------------------------

_PIP_PROGRAMS = ("pip", "pip2", "pip3")
_PIP_OPTIONS = frozenset(
    {
        "pip",
        "pip2",
        "pip3",
        "install",
        "--user",
        "--disable-pip-version-check",
        "--no-cache-dir",
    }
)
_PIP_VERSION_SYMBOLS = ("==", ">=", "<=", ">", "<", "!=")


def is_pip_install(segment: Sequence[str]) -> bool:
    return any(contains_sequence(segment, [program, "install"]) for program in _PIP_PROGRAMS)


def is_requirements_install(segment: Sequence[str]) -> bool:
    """``pip install -r requirements.txt`` delegates pinning to the file."""
    return "-r" in segment


def pip_packages(args: Sequence[str]) -> list[str]:
    """Package specifiers passed to ``pip install`` anywhere in *args*."""
    return [
        arg
        for segment in split_commands(args)
        if is_pip_install(segment)
        for arg in segment
        if arg not in _PIP_OPTIONS
    ]


def pip_version_pinned(package: str) -> bool:
    """Pinned by a version specifier or by a git URL with an ``@ref``."""
    if any(symbol in package for symbol in _PIP_VERSION_SYMBOLS):
        return True
    return "git+http" in package and "@" in package


def pip_install_exempt(args: Sequence[str]) -> bool:
    """True when any pip install in *args* reads a requirements file."""
    return any(is_pip_install(segment) and is_requirements_install(segment) for segment in split_commands(args))


# ---------------------------------------------------------------------------
# npm
#
# Supported forms:
#   npm install                      (no args, in package dir)
#   npm install [<@scope>/]<name>[@<tag>|@<version>]
#   npm install git[+http|+https]://<host>/<user>/<repo>[#<commit>|#semver:<range>]
#   npm install git+ssh://<host>:<user>/<repo>[#<commit>|#semver:<range>]
# ---------------------------------------------------------------------------

_NPM_OPTIONS = frozenset({"npm", "install", "--global"})
_NPM_GIT_PREFIXES = ("git://", "git+ssh://", "git+http://", "git+https://")


def is_npm_install(segment: Sequence[str]) -> bool:
    return contains_sequence(segment, ["npm", "install"])


def npm_packages(args: Sequence[str]) -> list[str]:
    """Package specifiers passed to ``npm install`` anywhere in *args*."""
    return [
        arg
        for segment in split_commands(args)
        if is_npm_install(segment)
        for arg in segment
        if arg not in _NPM_OPTIONS
    ]


def _drop_scope(package: str) -> str:
    """``@types/node@18`` -> ``/node@18``.

    The scope is every leading character that sorts after ``/``, so a
    slash-less ``@foo@1.0`` keeps only ``.0``.
    """
    if not package.startswith("@"):
        return package
    return "".join(itertools.dropwhile(lambda char: char > "/", package))


def npm_version_pinned(package: str) -> bool:
    if package.startswith(_NPM_GIT_PREFIXES):
        return "#" in package
    return "@" in _drop_scope(package)
