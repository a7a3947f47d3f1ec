# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""
ShellCheck integration.

The linter never talks to ShellCheck directly.  It receives a *shell
analyzer*: any callable that maps one shell script string to a sequence of
:class:`ShellComment` records.  :class:`ShellCheckRunner` is the production
analyzer that shells out to the ``shellcheck`` executable; tests inject plain
functions instead.
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Callable, Iterable
from typing import NamedTuple

from ..config.config import Config
from .exceptions import ShellAnalyzerError
from .models import Check, Dockerfile, Metadata, Run, Severity

logger = logging.getLogger(__name__)

# ShellCheck exits with 1 when it reports comments; that is not a failure
_SHELLCHECK_OK_EXIT_CODES = (0, 1)


class ShellComment(NamedTuple):
    """One diagnostic reported by the shell analyzer."""

    severity: Severity
    code: int
    message: str


ShellAnalyzer = Callable[[str], Iterable[ShellComment]]


def comment_metadata(comment: ShellComment) -> Metadata:
    """Metadata for a ShellCheck comment, e.g. code ``2086`` -> ``SC2086``."""
    return Metadata(f"SC{comment.code}", comment.severity, comment.message)


def shellcheck_rule(analyzer: ShellAnalyzer) -> Callable[[Dockerfile], list[Check]]:
    """Wrap *analyzer* as a rule over every RUN instruction.

    Each comment becomes a failed check at the RUN's line.  Within one RUN,
    repeated comments with identical metadata are reported once, keeping the
    first occurrence.
    """

    def rule(dockerfile: Dockerfile) -> list[Check]:
        checks: list[Check] = []
        for pos in dockerfile:
            if not isinstance(pos.instruction, Run):
                continue
            script = " ".join(pos.instruction.arguments)
            # dict preserves insertion order, so this keeps first occurrences
            unique = dict.fromkeys(comment_metadata(c) for c in analyzer(script))
            logger.debug("Shell analyzer reported %d distinct comments on line %d", len(unique), pos.linenumber)
            checks.extend(Check(metadata, pos.source, pos.linenumber, False) for metadata in unique)
        return checks

    return rule


class ShellCheckRunner:
    """Shell analyzer backed by the ``shellcheck`` executable."""

    def __init__(self, config: Config | None = None):
        """
        Initialize runner.

        Args:
            config: Linter configuration.  Supplies the executable path, the
                shell dialect passed to ``--shell`` and the timeout.
        """
        self.config = config or Config()

    def command(self) -> list[str]:
        return [self.config.shellcheck_path, "--format=json", f"--shell={self.config.shell}", "-"]

    def __call__(self, script: str) -> list[ShellComment]:
        """
        Run ShellCheck on *script*.

        Raises:
            ShellAnalyzerError: If ShellCheck is missing, times out, exits
                abnormally or prints something other than a JSON list.
        """
        try:
            result = subprocess.run(
                self.command(),
                input=script,
                capture_output=True,
                text=True,
                timeout=self.config.shellcheck_timeout,
            )
        except FileNotFoundError as e:
            raise ShellAnalyzerError(f"shellcheck executable not found: {self.config.shellcheck_path}") from e
        except subprocess.TimeoutExpired as e:
            raise ShellAnalyzerError(f"shellcheck timed out after {self.config.shellcheck_timeout}s") from e

        if result.returncode not in _SHELLCHECK_OK_EXIT_CODES:
            raise ShellAnalyzerError(
                f"shellcheck exited with status {result.returncode}: {result.stderr.strip()}"
            )

        return parse_shellcheck_json(result.stdout)


def parse_shellcheck_json(output: str) -> list[ShellComment]:
    """Parse ``shellcheck --format=json`` output into comments."""
    try:
        raw = json.loads(output or "[]")
    except json.JSONDecodeError as e:
        raise ShellAnalyzerError(f"shellcheck returned invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ShellAnalyzerError("shellcheck JSON output is not a list of comments")

    comments: list[ShellComment] = []
    for entry in raw:
        try:
            comments.append(ShellComment(Severity.parse(entry["level"]), int(entry["code"]), entry["message"]))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ShellAnalyzerError(f"Malformed shellcheck comment {entry!r}: {e}") from e
    return comments
