# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from dockerfile_lint.config.config import Config
from dockerfile_lint.core.lint_policy import LintPolicy
from dockerfile_lint.core.linter import Linter
from dockerfile_lint.core.models import Dockerfile, Instruction, InstructionPos, Run
from dockerfile_lint.core.shellcheck import ShellComment

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer environment variables from leaking into tests."""
    for var in (
        "ENABLE_SHELLCHECK",
        "DOCKERFILE_LINT_SHELLCHECK_PATH",
        "DOCKERFILE_LINT_SHELL",
        "DOCKERFILE_LINT_SHELLCHECK_TIMEOUT",
        "DOCKERFILE_LINT_POLICY",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_dockerfile():
    """Factory fixture for building parsed Dockerfiles.

    Usage::

        dockerfile = make_dockerfile(
            From(BaseImage("ubuntu", tag="22.04")),
            "apt-get install -y curl",   # plain strings become RUN instructions
        )

    Instructions get consecutive line numbers starting at 1 unless a
    ``(line, instruction)`` tuple is given.
    """

    def _make(*instructions: Instruction | str | tuple[int, Instruction | str], source: str = "Dockerfile") -> Dockerfile:
        dockerfile: Dockerfile = []
        line = 0
        for item in instructions:
            if isinstance(item, tuple):
                line, item = item
            else:
                line += 1
            if isinstance(item, str):
                item = Run(item.split())
            dockerfile.append(InstructionPos(item, source, line))
        return dockerfile

    return _make


@pytest.fixture
def fake_shell_analyzer():
    """Factory fixture for shell analyzers that never run ShellCheck.

    Usage::

        analyzer = fake_shell_analyzer({"cd /tmp": [ShellComment(Severity.WARNING, 2164, "...")]})

    Scripts not in the mapping produce no comments.  Every script the
    analyzer sees is recorded on ``analyzer.calls``.
    """

    def _make(responses: dict[str, list[ShellComment]] | None = None):
        responses = responses or {}

        def analyzer(script: str) -> list[ShellComment]:
            analyzer.calls.append(script)
            return list(responses.get(script, []))

        analyzer.calls = []
        return analyzer

    return _make


@pytest.fixture
def make_policy(tmp_path: Path):
    """Factory fixture for creating :class:`LintPolicy` from a YAML string.

    Usage::

        policy = make_policy('''
            disabled_rules:
              - DL3008
        ''')
    """
    _counter = [0]

    def _make(yaml_str: str) -> LintPolicy:
        _counter[0] += 1
        p = tmp_path / f"policy-{_counter[0]}.yaml"
        p.write_text(textwrap.dedent(yaml_str))
        return LintPolicy.from_yaml(p)

    return _make


@pytest.fixture
def make_linter(fake_shell_analyzer):
    """Factory fixture for a :class:`Linter` that never shells out.

    Usage::

        linter = make_linter(policy=my_policy)
        findings = linter.lint(dockerfile)
    """

    def _make(policy: LintPolicy | None = None, shell_analyzer=None, **kwargs) -> Linter:
        config = Config(enable_shellcheck=False)
        return Linter(
            shell_analyzer=shell_analyzer or fake_shell_analyzer(),
            policy=policy or LintPolicy.default(),
            config=config,
            **kwargs,
        )

    return _make
