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
Core linter engine for evaluating rules against a parsed Dockerfile.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from ..config.config import Config
from ..rules import build_core_registry
from .lint_policy import LintPolicy
from .models import Check, Dockerfile, Severity
from .rule_registry import RuleFunction, RuleRegistry
from .shellcheck import ShellAnalyzer, ShellCheckRunner, shellcheck_rule

logger = logging.getLogger(__name__)

# Catalog rule the ShellCheck rule is evaluated after
_SHELLCHECK_AFTER = "DL3000"


def analyze(rules: Iterable[RuleFunction], dockerfile: Dockerfile) -> list[Check]:
    """Apply every rule to *dockerfile* and return the failed checks.

    Checks come back in evaluation order: rule by rule, and within a rule in
    instruction order.
    """
    failed: list[Check] = []
    for rule in rules:
        failed.extend(check for check in rule(dockerfile) if not check.success)
    return failed


class Linter:
    """Runs the rule catalog and the shell analyzer over Dockerfiles."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        shell_analyzer: ShellAnalyzer | None = None,
        policy: LintPolicy | None = None,
        config: Config | None = None,
    ):
        """
        Initialize linter.

        Args:
            registry: Rule catalog.  If None, uses the core catalog.
            shell_analyzer: Callable returning ShellCheck comments for a RUN
                script.  If None and ShellCheck is enabled in *config*, the
                ``shellcheck`` executable is used.
            policy: Lint policy for disabled rules and severity overrides.
                If None, loads ``config.policy_path`` or the built-in defaults.
            config: Runtime configuration.  If None, read from environment.
        """
        self.config = config or Config()

        if policy is None:
            policy = LintPolicy.from_yaml(self.config.policy_path) if self.config.policy_path else LintPolicy.default()
        self.policy = policy

        self.registry = registry if registry is not None else build_core_registry()

        if shell_analyzer is None and self.config.enable_shellcheck:
            shell_analyzer = ShellCheckRunner(self.config)
        self.shell_analyzer = shell_analyzer

    def rules(self) -> list[RuleFunction]:
        """Rules evaluated by :meth:`lint`, in order.

        The ShellCheck rule runs right after ``DL3000`` (or first when that
        rule is absent), so on a shared line its findings precede the other
        catalog findings.
        """
        rules: list[RuleFunction] = [rule for rule in self.registry if not self.policy.is_disabled(rule.code)]
        if self.shell_analyzer is not None:
            position = next((i + 1 for i, rule in enumerate(rules) if rule.code == _SHELLCHECK_AFTER), 0)
            rules.insert(position, shellcheck_rule(self.shell_analyzer))
        return rules

    def lint(self, dockerfile: Dockerfile) -> list[Check]:
        """
        Lint a parsed Dockerfile.

        Args:
            dockerfile: Instructions with their source file and line

        Returns:
            Failed checks ordered by line number; whole-file checks first

        Raises:
            ShellAnalyzerError: If the shell analyzer fails on a RUN instruction
        """
        rules = self.rules()
        logger.debug("Linting %d instructions with %d rules", len(dockerfile), len(rules))

        findings = analyze(rules, dockerfile)

        # ShellCheck codes are dynamic and bypass the registry filter
        if self.policy.disabled_rules:
            findings = [f for f in findings if not self.policy.is_disabled(f.metadata.code)]

        findings = [self._apply_severity_override(f) for f in findings]
        return sorted(findings)

    def _apply_severity_override(self, check: Check) -> Check:
        """Return *check* with its severity replaced per policy, if any."""
        override = self.policy.get_severity_override(check.metadata.code)
        if not override:
            return check
        try:
            severity = Severity.parse(override)
        except ValueError:
            logger.warning("Invalid severity override '%s' for rule %s", override, check.metadata.code)
            return check
        metadata = dataclasses.replace(check.metadata, severity=severity)
        return dataclasses.replace(check, metadata=metadata)


def lint_dockerfile(
    dockerfile: Dockerfile,
    shell_analyzer: ShellAnalyzer | None = None,
    policy: LintPolicy | None = None,
    config: Config | None = None,
) -> list[Check]:
    """
    Convenience function to lint a single parsed Dockerfile.

    Args:
        dockerfile: Instructions with their source file and line
        shell_analyzer: Optional shell analyzer capability
        policy: Optional lint policy
        config: Optional runtime configuration

    Returns:
        Failed checks ordered by line number
    """
    linter = Linter(shell_analyzer=shell_analyzer, policy=policy, config=config)
    return linter.lint(dockerfile)
