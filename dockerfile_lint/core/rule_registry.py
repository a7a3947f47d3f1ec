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
Rule values and the rule catalog registry.

Architecture
~~~~~~~~~~~~

A rule is a plain value pairing :class:`Metadata` with a predicate.  There
are two shapes:

* **Instruction rules** – the predicate sees one instruction and must return
  ``True`` for instruction kinds it does not target.  One :class:`Check` is
  produced per instruction, at that instruction's line.
* **Dockerfile rules** – the predicate sees the full list of instructions
  once.  One :class:`Check` is produced at ``WHOLE_FILE_LINE``.

Anything callable as ``rule(dockerfile) -> list[Check]`` can be evaluated by
the linter; the ShellCheck adapter uses that to plug in next to the catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from .models import WHOLE_FILE_LINE, Check, Dockerfile, Instruction, Metadata, Severity

logger = logging.getLogger(__name__)

RuleFunction = Callable[[Dockerfile], list[Check]]


class RuleScope(Enum):
    """What a rule's predicate is applied to."""

    INSTRUCTION = "instruction"
    DOCKERFILE = "dockerfile"


@dataclass(frozen=True)
class Rule:
    """A catalog rule: identity plus a pure predicate."""

    metadata: Metadata
    scope: RuleScope
    predicate: Callable

    @property
    def code(self) -> str:
        return self.metadata.code

    def __call__(self, dockerfile: Dockerfile) -> list[Check]:
        if self.scope is RuleScope.INSTRUCTION:
            return [
                Check(self.metadata, pos.source, pos.linenumber, bool(self.predicate(pos.instruction)))
                for pos in dockerfile
            ]

        filename = dockerfile[0].source if dockerfile else ""
        instructions = [pos.instruction for pos in dockerfile]
        return [Check(self.metadata, filename, WHOLE_FILE_LINE, bool(self.predicate(instructions)))]


def instruction_rule(
    code: str, severity: Severity, message: str, predicate: Callable[[Instruction], bool]
) -> Rule:
    """Build a rule evaluated independently for every instruction."""
    return Rule(Metadata(code, severity, message), RuleScope.INSTRUCTION, predicate)


def dockerfile_rule(
    code: str, severity: Severity, message: str, predicate: Callable[[list[Instruction]], bool]
) -> Rule:
    """Build a rule evaluated once over the whole Dockerfile."""
    return Rule(Metadata(code, severity, message), RuleScope.DOCKERFILE, predicate)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class RuleRegistry:
    """Ordered catalog of rules keyed by code.

    The registry is built once at startup and is **read-only** afterwards.
    Registration order is evaluation order.
    """

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def register(self, rule: Rule) -> None:
        """Register *rule*.

        Raises :class:`ValueError` if a different rule already uses the same
        code.  Re-registering the identical rule is a no-op.
        """
        existing = self._rules.get(rule.code)
        if existing is not None and existing != rule:
            raise ValueError(f"Rule code collision: '{rule.code}' is already registered")
        self._rules[rule.code] = rule

    def register_all(self, rules: list[Rule]) -> None:
        for rule in rules:
            self.register(rule)
        logger.debug("Registered %d rules", len(rules))

    # -- Read-only accessors ------------------------------------------------

    def get(self, code: str) -> Rule | None:
        """Look up a rule by code."""
        return self._rules.get(code)

    def all_rules(self) -> list[Rule]:
        """Return the rules in registration order."""
        return list(self._rules.values())

    def codes(self) -> list[str]:
        return list(self._rules.keys())

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.all_rules())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, code: str) -> bool:
        return code in self._rules
