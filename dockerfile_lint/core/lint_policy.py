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
Lint policy: which rules run and how severe their findings are.

Usage
-----
    from dockerfile_lint.core.lint_policy import LintPolicy

    # Load built-in defaults
    policy = LintPolicy.default()

    # Load a project policy (merges on top of defaults)
    policy = LintPolicy.from_yaml(".dockerfile-lint.yaml")

    # Dump the current (including default) policy for editing
    policy.to_yaml("generated_policy.yaml")

Policy files are YAML::

    policy_name: my-project
    disabled_rules:
      - DL3008
      - SC2086
    severity_overrides:
      - rule_id: DL3013
        severity: error
        reason: pip pinning is mandatory here
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..config.constants import DockerfileLintConstants

logger = logging.getLogger(__name__)

_DEFAULT_POLICY_PATH = DockerfileLintConstants.DEFAULT_POLICY_PATH


@dataclass
class SeverityOverride:
    """A per-rule severity override."""

    rule_id: str
    severity: str  # info / warning / error / style
    reason: str = ""


@dataclass
class LintPolicy:
    """Project lint policy."""

    policy_name: str = "default"
    policy_version: str = "1.0"
    # Rule codes never reported (catalog "DL..." or ShellCheck "SC...")
    disabled_rules: set[str] = field(default_factory=set)
    severity_overrides: list[SeverityOverride] = field(default_factory=list)

    def get_severity_override(self, rule_id: str) -> str | None:
        """Return the overridden severity for *rule_id*, or ``None``."""
        for ovr in self.severity_overrides:
            if ovr.rule_id == rule_id:
                return ovr.severity
        return None

    def is_disabled(self, rule_id: str) -> bool:
        return rule_id in self.disabled_rules

    # -----------------------------------------------------------------------
    # Construction helpers
    # -----------------------------------------------------------------------

    @classmethod
    def default(cls) -> LintPolicy:
        """Load the built-in default policy that ships with the package."""
        return cls.from_yaml(_DEFAULT_POLICY_PATH)

    @classmethod
    def from_yaml(cls, path: str | Path) -> LintPolicy:
        """
        Load a policy from a YAML file.

        The YAML is merged on top of the built-in defaults so that users only
        need to specify the sections they want to override.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the file is not a YAML mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Policy file not found: {path}")

        with open(path, encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Policy file must contain a YAML mapping: {path}")

        if path.resolve() == _DEFAULT_POLICY_PATH.resolve():
            return cls._from_dict(raw)

        merged = cls._deep_merge(cls._load_default_raw(), raw)
        policy = cls._from_dict(merged)
        logger.debug("Loaded lint policy %s from %s", policy.policy_name, path)
        return policy

    def to_yaml(self, path: str | Path) -> None:
        """Dump the full policy to a YAML file for editing."""
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("# Dockerfile Lint – Lint Policy\n")
            fh.write("# Only include sections you want to override; omitted sections\n")
            fh.write("# will use the built-in defaults.\n\n")
            yaml.dump(self._to_dict(), fh, default_flow_style=False, sort_keys=False, width=120)

    # -----------------------------------------------------------------------
    # Internal parsing
    # -----------------------------------------------------------------------

    @classmethod
    def _load_default_raw(cls) -> dict[str, Any]:
        if _DEFAULT_POLICY_PATH.exists():
            with open(_DEFAULT_POLICY_PATH, encoding="utf-8") as fh:
                return yaml.safe_load(fh) or {}
        return {}

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Recursively merge *override* into *base*; lists in *override* replace."""
        result = dict(base)
        for key, val in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(val, dict):
                result[key] = LintPolicy._deep_merge(result[key], val)
            else:
                result[key] = val
        return result

    @classmethod
    def _from_dict(cls, d: dict[str, Any]) -> LintPolicy:
        # YAML turns bare yes/no/1 into bool/int; keep every field a string
        severity_overrides = [
            SeverityOverride(str(ovr["rule_id"]), str(ovr["severity"]), str(ovr.get("reason", "")))
            for ovr in d.get("severity_overrides") or []
        ]
        return cls(
            policy_name=d.get("policy_name", "default"),
            policy_version=str(d.get("policy_version", "1.0")),
            disabled_rules={str(code) for code in d.get("disabled_rules") or []},
            severity_overrides=severity_overrides,
        )

    def _to_dict(self) -> dict[str, Any]:
        return {
            "policy_name": self.policy_name,
            "policy_version": self.policy_version,
            "disabled_rules": sorted(self.disabled_rules),
            "severity_overrides": [
                {"rule_id": o.rule_id, "severity": o.severity, "reason": o.reason} for o in self.severity_overrides
            ],
        }
