# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Tests for runtime configuration and constants."""

import os

import pytest

from dockerfile_lint.config.config import Config
from dockerfile_lint.config.constants import DockerfileLintConstants


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()
        assert config.enable_shellcheck is True
        assert config.shellcheck_path == "shellcheck"
        assert config.shell == "sh"
        assert config.shellcheck_timeout == 30
        assert config.policy_path is None

    def test_from_env_matches_constructor(self):
        assert Config.from_env() == Config()


class TestConfigEnvironment:
    @pytest.mark.parametrize("value", ["false", "False", "0"])
    def test_disable_shellcheck(self, monkeypatch, value):
        monkeypatch.setenv("ENABLE_SHELLCHECK", value)
        assert Config().enable_shellcheck is False

    def test_enable_shellcheck_other_values(self, monkeypatch):
        monkeypatch.setenv("ENABLE_SHELLCHECK", "yes")
        assert Config().enable_shellcheck is True

    def test_shellcheck_settings(self, monkeypatch):
        monkeypatch.setenv("DOCKERFILE_LINT_SHELLCHECK_PATH", "/usr/local/bin/shellcheck")
        monkeypatch.setenv("DOCKERFILE_LINT_SHELL", "bash")
        monkeypatch.setenv("DOCKERFILE_LINT_SHELLCHECK_TIMEOUT", "2.5")
        config = Config()
        assert config.shellcheck_path == "/usr/local/bin/shellcheck"
        assert config.shell == "bash"
        assert config.shellcheck_timeout == 2.5

    def test_zero_timeout_means_no_timeout(self, monkeypatch):
        monkeypatch.setenv("DOCKERFILE_LINT_SHELLCHECK_TIMEOUT", "0")
        assert Config().shellcheck_timeout is None

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("DOCKERFILE_LINT_SHELL", "bash")
        monkeypatch.setenv("DOCKERFILE_LINT_POLICY", "/env/policy.yaml")
        config = Config(shell="dash", policy_path="/explicit/policy.yaml")
        assert config.shell == "dash"
        assert config.policy_path == "/explicit/policy.yaml"

    def test_policy_path(self, monkeypatch):
        monkeypatch.setenv("DOCKERFILE_LINT_POLICY", "/env/policy.yaml")
        assert Config().policy_path == "/env/policy.yaml"


class TestConfigFromFile:
    @pytest.fixture(autouse=True)
    def _isolated_environ(self, monkeypatch):
        # load_dotenv writes straight into os.environ
        monkeypatch.setattr(os, "environ", os.environ.copy())

    def test_loads_dotenv(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DOCKERFILE_LINT_SHELL=bash\nENABLE_SHELLCHECK=false\n")
        config = Config.from_file(env_file)
        assert config.shell == "bash"
        assert config.enable_shellcheck is False

    def test_environment_takes_precedence(self, tmp_path):
        os.environ["DOCKERFILE_LINT_SHELL"] = "zsh"
        env_file = tmp_path / ".env"
        env_file.write_text("DOCKERFILE_LINT_SHELL=bash\n")
        assert Config.from_file(env_file).shell == "zsh"

    def test_missing_file_uses_environment(self, tmp_path):
        assert Config.from_file(tmp_path / "missing.env") == Config()


class TestConstants:
    def test_default_policy_ships_with_package(self):
        assert DockerfileLintConstants.DEFAULT_POLICY_PATH.is_file()
        assert DockerfileLintConstants.get_data_path() == DockerfileLintConstants.DATA_DIR

    def test_whole_file_line_is_negative(self):
        assert DockerfileLintConstants.WHOLE_FILE_LINE < 0
