"""Exception hierarchy.

Every error raised while generating or sampling a city derives from
:class:`CityGridError`. Each subclass also derives from the builtin exception
a caller would naturally catch for that condition. Malformed plain values
(a negative ``Position`` component, unknown ``CityConfig`` keys) raise a bare
``ValueError``.
"""

from typing import Optional, Sequence

from city_grid.position import Position


class CityGridError(Exception):
    """Base class for all city_grid errors."""


class InvalidLayout(CityGridError, ValueError):
    """Block counts or block size are not positive integers."""


class UnsupportedVariant(CityGridError, NotImplementedError):
    """An operation was requested for a layout variant that does not define it.

    Also raised for a variant name that is not a known layout family, in
    which case ``operation`` is ``None``.

    Attributes:
        variant: The layout variant name.
        operation: The operation name, or ``None`` for an unknown variant.
    """

    def __init__(self, variant: str, operation: Optional[str] = None) -> None:
        variant = str(variant)
        if operation is None:
            super().__init__(f"Unknown layout variant {variant!r}")
        else:
            operation = str(operation)
            super().__init__(f"Variant {variant!r} does not support {operation!r}")
        self.variant = variant
        self.operation = operation


class ClassificationGap(CityGridError, AssertionError):
    """One or more cells classified to ``Unknown``.

    Never expected for valid default-variant input; signals a defect in the
    intent combination table or residue mapping.
    """

    def __init__(self, positions: Sequence[Position]) -> None:
        preview = ", ".join(f"({p.x}, {p.y})" for p in positions[:8])
        more = f" (+{len(positions) - 8} more)" if len(positions) > 8 else ""
        super().__init__(f"{len(positions)} unclassified cell(s): {preview}{more}")
        self.positions = tuple(positions)


class DegenerateSampling(CityGridError, IndexError):
    """A sampler was asked to pick from an empty sequence."""

    def __init__(self, source: str) -> None:
        super().__init__(f"Cannot sample from empty {source}")
        self.source = source
