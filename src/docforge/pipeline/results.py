# topmark:header:start
#
#   project      : DocForge
#   file         : results.py
#   file_relpath : src/docforge/pipeline/results.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Value returned by the parse phase of a generator backend."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

_FIELD_COUNT = 8


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Element counts found in the sources and selected for documentation.

    The four ``doc_*`` counts are the documented subset of the four
    ``found_*`` counts, so each is at most its ``found_*`` counterpart.

    Attributes:
        found_classes (int): Classes declared in the scanned sources.
        found_constants (int): Constants declared in the scanned sources.
        found_functions (int): Functions declared in the scanned sources.
        found_internal_classes (int): Built-in classes referenced by the sources.
        doc_classes (int): Classes that will be documented.
        doc_constants (int): Constants that will be documented.
        doc_functions (int): Functions that will be documented.
        doc_internal_classes (int): Built-in classes that will be documented.

    Raises:
        ValueError: If a count is negative or not an int, or a documented count
            exceeds the matching found count.
    """

    found_classes: int
    found_constants: int
    found_functions: int
    found_internal_classes: int
    doc_classes: int
    doc_constants: int
    doc_functions: int
    doc_internal_classes: int

    def __post_init__(self) -> None:
        values: tuple[object, ...] = astuple(self)
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Parse result counts must be non-negative integers: {values}")
        for found, documented in zip(self.found, self.documented):
            if documented > found:
                raise ValueError(
                    f"Documented counts {self.documented} exceed found counts {self.found}"
                )

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> ParseResult:
        """Build a result from 8 counts in field order.

        Raises:
            ValueError: If ``values`` does not hold exactly 8 items, or on any
                violation checked at construction.
        """
        items: list[int] = list(values)
        if len(items) != _FIELD_COUNT:
            raise ValueError(f"Parse result needs {_FIELD_COUNT} counts, got {len(items)}")
        return cls(*items)

    @property
    def found(self) -> tuple[int, int, int, int]:
        """Return the counts found in the sources."""
        return (
            self.found_classes,
            self.found_constants,
            self.found_functions,
            self.found_internal_classes,
        )

    @property
    def documented(self) -> tuple[int, int, int, int]:
        """Return the counts that will be documented."""
        return (
            self.doc_classes,
            self.doc_constants,
            self.doc_functions,
            self.doc_internal_classes,
        )
