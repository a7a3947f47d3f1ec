# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""
Core rule catalog.

Each module groups related checks by the instruction they inspect:

* ``run_checks`` – RUN word lists, including package pinning
* ``instruction_checks`` – FROM, USER, WORKDIR, COPY, ADD, EXPOSE
* ``dockerfile_checks`` – rules over the whole Dockerfile

Every rule is a module-level :class:`~dockerfile_lint.core.rule_registry.Rule`
value built with ``instruction_rule`` or ``dockerfile_rule``.  ``CORE_RULES``
fixes the evaluation order.
"""

from __future__ import annotations

from dockerfile_lint.core.rule_registry import Rule, RuleRegistry

from . import dockerfile_checks, instruction_checks, run_checks

CORE_RULES: list[Rule] = [
    instruction_checks.absolute_workdir,
    run_checks.invalid_cmd,
    instruction_checks.copy_instead_add,
    instruction_checks.no_root_user,
    run_checks.no_cd,
    run_checks.no_sudo,
    run_checks.no_apt_get_upgrade,
    run_checks.no_apk_upgrade,
    instruction_checks.no_latest_tag,
    instruction_checks.no_untagged,
    run_checks.apt_get_version_pinned,
    run_checks.apt_get_cleanup,
    run_checks.apk_add_version_pinned,
    run_checks.apk_add_no_cache,
    instruction_checks.use_add,
    run_checks.pip_version_pinned,
    run_checks.npm_version_pinned,
    instruction_checks.invalid_port,
    run_checks.apt_get_no_recommends,
    run_checks.apt_get_yes,
    dockerfile_checks.wget_or_curl,
    dockerfile_checks.has_no_maintainer,
    dockerfile_checks.multiple_cmds,
    dockerfile_checks.multiple_entrypoints,
    run_checks.use_shell,
    instruction_checks.expose_missing_args,
    instruction_checks.copy_missing_args,
]


def build_core_registry() -> RuleRegistry:
    """Return a registry populated with the core catalog."""
    registry = RuleRegistry()
    registry.register_all(CORE_RULES)
    return registry


__all__ = ["CORE_RULES", "build_core_registry"]
