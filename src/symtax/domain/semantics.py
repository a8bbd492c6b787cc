"""Occurrence bounds for repeatable template positions.

A ruleset attached to a template position says how many times the
bundle starting at that position may repeat, and which sibling types
repeat together with it.

Construction is permissive: out-of-range values are clamped, never
rejected.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _clamp_min(min_occurrences: int) -> int:
    return 0 if min_occurrences < 0 else min_occurrences


def _clamp_max(max_occurrences: int, min_occurrences: int) -> int:
    # Negative means unbounded; anything below min (including 0) is raised to min.
    if max_occurrences < 0:
        return 0
    if max_occurrences < min_occurrences:
        return min_occurrences
    return max_occurrences


@dataclass(frozen=True)
class SemanticRuleset:
    """Immutable occurrence bounds for one bundle.

    Attributes:
        bundle_with: Types of the template entries that follow the
            annotated position and repeat together with it.
        min_occurrences: Minimum number of complete repetitions (>= 0).
        max_occurrences: Maximum number of repetitions, 0 for unbounded.
    """

    bundle_with: tuple[int, ...] = field(default=())
    min_occurrences: int = 0
    max_occurrences: int = 0

    def __post_init__(self) -> None:
        minimum = _clamp_min(int(self.min_occurrences))
        object.__setattr__(self, "bundle_with", tuple(int(t) for t in self.bundle_with))
        object.__setattr__(self, "min_occurrences", minimum)
        object.__setattr__(self, "max_occurrences", _clamp_max(int(self.max_occurrences), minimum))

    @property
    def repeatable(self) -> bool:
        """Whether the bundle may appear more than once."""
        return self.max_occurrences == 0 or self.max_occurrences > 1

    @property
    def bundle_length(self) -> int:
        """Number of template positions covered by one repetition."""
        return 1 + len(self.bundle_with)

    def allows(self, occurrences: int) -> bool:
        """Check *occurrences* against both bounds."""
        if occurrences < self.min_occurrences:
            return False
        return not self.max_occurrences or occurrences <= self.max_occurrences


def optional_entry(
    bundle_with: Iterable[int] = (),
    max_occurrences: int = 0,
) -> SemanticRuleset:
    """Bounds for a bundle that may be absent from the contract."""
    return SemanticRuleset(tuple(bundle_with), 0, max_occurrences)


def required_entry(
    bundle_with: Iterable[int] = (),
    min_occurrences: int = 1,
    max_occurrences: int = 0,
) -> SemanticRuleset:
    """Bounds for a bundle that must appear at least once.

    *min_occurrences* is forced to be greater than or equal to 1.
    """
    return SemanticRuleset(tuple(bundle_with), max(1, min_occurrences), max_occurrences)
