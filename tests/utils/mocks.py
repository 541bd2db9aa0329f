from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable


class ScriptedRandomSource:
    """
    Random source replaying fixed uniform and normal sequences.

    Used to pin every draw of an algorithm and check its arithmetic exactly.
    Running out of scripted values raises ``IndexError``.
    """

    def __init__(self, uniforms: Iterable[float] = (), normals: Iterable[float] = ()) -> None:
        self._uniforms = list(uniforms)
        self._normals = list(normals)
        self.uniform_calls = 0
        self.normal_calls = 0

    def random(self) -> float:
        self.uniform_calls += 1
        return self._uniforms.pop(0)

    def standard_normal(self) -> float:
        self.normal_calls += 1
        return self._normals.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._uniforms and not self._normals


class CountingCancellation:
    """Cancellation check that fires after ``allowed`` polls."""

    def __init__(self, allowed: int) -> None:
        self.allowed = allowed
        self.polls = 0

    def __call__(self) -> bool:
        self.polls += 1
        return self.polls > self.allowed
