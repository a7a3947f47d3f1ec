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
Flat-token helpers for RUN argument lists.

RUN arguments arrive already split into words.  These helpers cut that word
list into independent command segments on shell control operators and answer
simple questions about them.  This is a heuristic, not a shell grammar:
quoting, subshells and escapes are not interpreted.
"""

from collections.abc import Iterable, Sequence

# Tokens that separate independent commands: sequence, pipe, logical AND
CONTROL_OPERATORS = frozenset({";", "|", "&&"})


def split_commands(tokens: Sequence[str]) -> list[list[str]]:
    """Split *tokens* into segments on control operators.

    Operators are dropped.  Adjacent operators are not merged, so an empty
    segment between them is kept::

        >>> split_commands(["a", ";", "b", "|", "c", "&&", "d"])
        [['a'], ['b'], ['c'], ['d']]
        >>> split_commands(["a", ";", ";", "b"])
        [['a'], [], ['b']]
    """
    segments: list[list[str]] = [[]]
    for token in tokens:
        if token in CONTROL_OPERATORS:
            segments.append([])
        else:
            segments[-1].append(token)
    return segments


def invokes_program(tokens: Sequence[str], name: str) -> bool:
    """True if some command segment starts with exactly *name*."""
    return any(segment and segment[0] == name for segment in split_commands(tokens))


def drop_flagged_args(tokens: Sequence[str], flag_names: Iterable[str]) -> list[str]:
    """Remove every flag in *flag_names* together with the value after it."""
    flags = frozenset(flag_names)
    kept: list[str] = []
    skip_next = False
    for token in tokens:
        if skip_next:
            skip_next = False
            continue
        if token in flags:
            skip_next = True
            continue
        kept.append(token)
    return kept


def contains_sequence(tokens: Sequence[str], sequence: Sequence[str]) -> bool:
    """True if *sequence* occurs in *tokens* as a contiguous run."""
    width = len(sequence)
    if width == 0:
        return True
    sequence = list(sequence)
    return any(list(tokens[i : i + width]) == sequence for i in range(len(tokens) - width + 1))
