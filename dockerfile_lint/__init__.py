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
Dockerfile Lint - rule-based linter for parsed Dockerfiles.
"""

from ._version import __version__


def __getattr__(name: str):
    """Lazy-load public API symbols on first access."""
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "DockerfileLintConstants": (".config.constants", "DockerfileLintConstants"),
        "Check": (".core.models", "Check"),
        "InstructionPos": (".core.models", "InstructionPos"),
        "Metadata": (".core.models", "Metadata"),
        "Severity": (".core.models", "Severity"),
        "link": (".core.models", "link"),
        "LintPolicy": (".core.lint_policy", "LintPolicy"),
        "Linter": (".core.linter", "Linter"),
        "analyze": (".core.linter", "analyze"),
        "lint_dockerfile": (".core.linter", "lint_dockerfile"),
        "ShellCheckRunner": (".core.shellcheck", "ShellCheckRunner"),
        "ShellComment": (".core.shellcheck", "ShellComment"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Linter",
    "lint_dockerfile",
    "analyze",
    "Check",
    "InstructionPos",
    "Metadata",
    "Severity",
    "link",
    "LintPolicy",
    "ShellCheckRunner",
    "ShellComment",
    "Config",
    "DockerfileLintConstants",
]
