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

"""Dockerfile Lint exceptions.

Rules never raise: a violated rule is a ``Check`` with ``success=False``.
Exceptions are reserved for collaborators that can actually fail, which
today means the external shell analyzer.

Example:
    >>> from dockerfile_lint.core.linter import Linter
    >>> from dockerfile_lint.core.exceptions import ShellAnalyzerError
    >>>
    >>> linter = Linter()
    >>>
    >>> try:
    ...     findings = linter.lint(dockerfile)
    ... except ShellAnalyzerError as e:
    ...     print(f"shellcheck failed: {e}")
"""


class DockerfileLintError(Exception):
    """Base exception for all Dockerfile Lint errors."""

    pass


class ShellAnalyzerError(DockerfileLintError):
    """Raised when the external shell analyzer cannot produce diagnostics.

    This can indicate:
    - The ``shellcheck`` executable is missing
    - The analyzer crashed or timed out
    - The analyzer returned output that is not valid JSON
    """

    pass
