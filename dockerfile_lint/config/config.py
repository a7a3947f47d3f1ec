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
Configuration class for Dockerfile Lint.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .constants import DockerfileLintConstants


@dataclass
class Config:
    """
    Runtime configuration for the linter.

    Rule selection and severities live in :class:`LintPolicy`; this class only
    covers how the external shell analyzer is reached.
    """

    # ShellCheck Configuration
    enable_shellcheck: bool = True
    shellcheck_path: str = DockerfileLintConstants.DEFAULT_SHELLCHECK_PATH
    shell: str = DockerfileLintConstants.DEFAULT_SHELL
    shellcheck_timeout: float | None = DockerfileLintConstants.DEFAULT_SHELLCHECK_TIMEOUT

    # Policy Configuration
    policy_path: str | None = None

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if os.getenv("ENABLE_SHELLCHECK", "").lower() in ("false", "0"):
            self.enable_shellcheck = False

        if self.shellcheck_path == DockerfileLintConstants.DEFAULT_SHELLCHECK_PATH:
            if env_path := os.getenv("DOCKERFILE_LINT_SHELLCHECK_PATH"):
                self.shellcheck_path = env_path

        if self.shell == DockerfileLintConstants.DEFAULT_SHELL:
            if env_shell := os.getenv("DOCKERFILE_LINT_SHELL"):
                self.shell = env_shell

        if self.shellcheck_timeout == DockerfileLintConstants.DEFAULT_SHELLCHECK_TIMEOUT:
            if env_timeout := os.getenv("DOCKERFILE_LINT_SHELLCHECK_TIMEOUT"):
                # 0 means wait for the analyzer indefinitely
                self.shellcheck_timeout = float(env_timeout) or None

        if self.policy_path is None:
            self.policy_path = os.getenv("DOCKERFILE_LINT_POLICY")

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from a .env file.

        Values already present in the environment take precedence over the
        file.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if Path(config_file).exists():
            load_dotenv(config_file)

        return cls.from_env()
