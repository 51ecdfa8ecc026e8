# statfmt/core/selectors.py
"""
Row/column exclusion specs.

An exclusion is either a list of positions (:class:`ByIndex`) or a
regular expression searched in the row/column labels
(:class:`ByNamePattern`). Both resolve to a concrete set of positions
before any rounding starts.
"""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Optional, Pattern, Sequence, Type, Union

from statfmt.core.exceptions import ConfigurationError, ExclusionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ByIndex:
    """
    Exclude rows/columns by 0-based position.

    Negative positions count from the end, as in Python indexing.
    Positions outside the axis are ignored.
    """

    indices: Sequence[int]

    def __post_init__(self):
        positions = []
        for i in self.indices:
            try:
                if isinstance(i, bool):
                    raise TypeError(i)
                positions.append(operator.index(i))
            except TypeError:
                raise ConfigurationError(
                    "exclude",
                    f"positions must be integers, got {i!r}",
                    expected="int",
                    actual=type(i).__name__,
                ) from None
        object.__setattr__(self, "indices", tuple(positions))

    def resolve(self, size: int, labels: Optional[Sequence[Any]] = None) -> FrozenSet[int]:
        out = set()
        for i in self.indices:
            pos = i + size if i < 0 else i
            if 0 <= pos < size:
                out.add(pos)
            else:
                logger.debug("Ignoring out-of-range position %d for axis of size %d", i, size)
        return frozenset(out)


@dataclass(frozen=True)
class ByNamePattern:
    """
    Exclude rows/columns whose label matches a regular expression.

    The pattern is searched (not fully matched) in ``str(label)``. An axis
    without labels has nothing to match.
    """

    pattern: Union[str, Pattern[str]]

    @property
    def regex(self) -> Pattern[str]:
        if isinstance(self.pattern, str):
            return re.compile(self.pattern)
        return self.pattern

    def resolve(self, size: int, labels: Optional[Sequence[Any]] = None) -> FrozenSet[int]:
        if labels is None:
            logger.debug("Pattern %r ignored: axis has no labels", self.pattern)
            return frozenset()
        regex = self.regex
        return frozenset(
            pos for pos, label in enumerate(labels) if regex.search(str(label))
        )


ExclusionSpec = Union[ByIndex, ByNamePattern]


def as_exclusion(spec: Any) -> Optional[ExclusionSpec]:
    """
    Coerce a caller-friendly exclusion into :class:`ByIndex` / :class:`ByNamePattern`.

    Args:
        spec: None, an ExclusionSpec, a string or compiled pattern,
            an int, or an iterable of ints

    Returns:
        The exclusion spec, or None when nothing is excluded

    Examples:
        >>> as_exclusion("^Total")
        ByNamePattern(pattern='^Total')
        >>> as_exclusion(1)
        ByIndex(indices=(1,))
    """
    if spec is None:
        return None
    if isinstance(spec, (ByIndex, ByNamePattern)):
        return spec
    if isinstance(spec, (str, re.Pattern)):
        return ByNamePattern(spec)
    if isinstance(spec, bool):
        raise ConfigurationError(
            "exclude", "expected positions or a name pattern", actual=spec
        )
    if isinstance(spec, Iterable):
        return ByIndex(tuple(spec))
    if hasattr(spec, "__index__"):
        return ByIndex((spec,))
    raise ConfigurationError(
        "exclude",
        "expected positions or a name pattern",
        expected="ByIndex | ByNamePattern | str | int | sequence of int",
        actual=type(spec).__name__,
    )


def working_positions(
    size: int,
    exclude: Any,
    labels: Optional[Sequence[Any]],
    error_cls: Type[ExclusionError],
) -> List[int]:
    """
    Resolve an exclusion against an axis and return the positions left to round.

    Args:
        size: Length of the axis
        exclude: Anything accepted by :func:`as_exclusion`
        labels: Axis labels, or None when the axis is unlabelled
        error_cls: Raised when no position is left

    Returns:
        Sorted list of positions that should be rounded

    Raises:
        NoRowsError / NoColumnsError: If every position is excluded
    """
    spec = as_exclusion(exclude)
    excluded = spec.resolve(size, labels) if spec is not None else frozenset()
    positions = [pos for pos in range(size) if pos not in excluded]
    if not positions:
        raise error_cls(size, excluded)
    if excluded:
        logger.debug("Excluding %s positions %s", error_cls.axis, sorted(excluded))
    return positions
