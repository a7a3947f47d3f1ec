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
Data models for parsed Dockerfiles and lint checks.

The parser that turns Dockerfile text into these structures lives outside this
package; the linter only consumes ``InstructionPos`` sequences and produces
``Check`` values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ..config.constants import DockerfileLintConstants

WHOLE_FILE_LINE = DockerfileLintConstants.WHOLE_FILE_LINE


class Severity(str, Enum):
    """Severity levels for lint checks."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    STYLE = "style"

    @property
    def rank(self) -> int:
        """Display rank: INFO < WARNING < ERROR < STYLE."""
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, value: str) -> Severity:
        """Parse a severity name case-insensitively (``"Warning"``, ``"ERROR"``...)."""
        return cls(value.strip().lower())


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
    Severity.STYLE: 3,
}


@dataclass(frozen=True)
class Metadata:
    """Identity of a kind of rule violation."""

    code: str  # e.g. "DL3008" for catalog rules, "SC2086" for ShellCheck
    severity: Severity
    message: str


@dataclass(frozen=True)
class Check:
    """The outcome of applying one rule to one part of a Dockerfile.

    Only the line number is recorded as a position.  Negative line numbers
    (``WHOLE_FILE_LINE``) refer to the Dockerfile as a whole.  Checks order by
    line number alone, so ``sorted()`` keeps evaluation order for ties.
    """

    metadata: Metadata
    filename: str
    linenumber: int
    success: bool

    def __lt__(self, other: Check) -> bool:
        if not isinstance(other, Check):
            return NotImplemented
        return self.linenumber < other.linenumber

    @property
    def is_whole_file(self) -> bool:
        return self.linenumber < 0

    def to_dict(self) -> dict[str, Any]:
        """Convert check to the downstream finding record."""
        return {
            "code": self.metadata.code,
            "severity": self.metadata.severity.value,
            "message": self.metadata.message,
            "filename": self.filename,
            "linenumber": self.linenumber,
            "link": link(self.metadata),
        }


def link(metadata: Metadata) -> str:
    """Return the documentation URL for a rule code."""
    code = metadata.code
    if code.startswith(DockerfileLintConstants.SHELLCHECK_CODE_PREFIX):
        return DockerfileLintConstants.SHELLCHECK_WIKI_URL + code
    if code.startswith(DockerfileLintConstants.CATALOG_CODE_PREFIX):
        return DockerfileLintConstants.RULES_WIKI_URL + code
    return DockerfileLintConstants.HOMEPAGE_URL


# ---------------------------------------------------------------------------
# Parsed Dockerfile instructions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BaseImage:
    """Image reference of a FROM instruction."""

    image: str
    tag: str | None = None
    digest: str | None = None
    alias: str | None = None

    @property
    def is_untagged(self) -> bool:
        return self.tag is None and self.digest is None


@dataclass(frozen=True)
class From:
    image: BaseImage


@dataclass(frozen=True)
class Run:
    """RUN with its argument string already split into words."""

    arguments: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Workdir:
    directory: str


@dataclass(frozen=True)
class User:
    user: str


@dataclass(frozen=True)
class Copy:
    source: str
    target: str


@dataclass(frozen=True)
class Add:
    source: str
    target: str


@dataclass(frozen=True)
class Expose:
    """EXPOSE with either parsed numeric ports or the raw, unparsed port string."""

    ports: list[int] | str = field(default_factory=list)


@dataclass(frozen=True)
class Cmd:
    arguments: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Entrypoint:
    arguments: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Maintainer:
    name: str


@dataclass(frozen=True)
class OtherInstruction:
    """Any instruction kind no rule inspects (ENV, LABEL, HEALTHCHECK, ...)."""

    keyword: str
    arguments: list[str] = field(default_factory=list)


Instruction = Union[From, Run, Workdir, User, Copy, Add, Expose, Cmd, Entrypoint, Maintainer, OtherInstruction]


@dataclass(frozen=True)
class InstructionPos:
    """An instruction together with the file and line it came from."""

    instruction: Instruction
    source: str
    linenumber: int


Dockerfile = list[InstructionPos]
