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
Constants for Dockerfile Lint.
"""

from pathlib import Path

from .. import data


class DockerfileLintConstants:
    """Constants used throughout the linter."""

    # Resource paths
    DATA_DIR = data.DATA_DIR
    DEFAULT_POLICY_PATH = data.DEFAULT_POLICY_PATH

    # Line number used by checks that reason about the whole Dockerfile
    WHOLE_FILE_LINE = -1

    # Rule code prefixes
    CATALOG_CODE_PREFIX = "DL"
    SHELLCHECK_CODE_PREFIX = "SC"

    # Documentation links
    SHELLCHECK_WIKI_URL = "https://github.com/koalaman/shellcheck/wiki/"
    RULES_WIKI_URL = "https://github.com/hadolint/hadolint/wiki/"
    HOMEPAGE_URL = "https://github.com/hadolint/hadolint"

    # ShellCheck defaults
    DEFAULT_SHELLCHECK_PATH = "shellcheck"
    DEFAULT_SHELL = "sh"
    DEFAULT_SHELLCHECK_TIMEOUT = 30

    @classmethod
    def get_data_path(cls) -> Path:
        """Get path to data directory."""
        return cls.DATA_DIR
