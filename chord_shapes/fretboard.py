"""Queries over string positions, muted strings and barres."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_shapes.models import ChordDiagram, Finger, Nut, StringPosition


@dataclass(frozen=True)
class BarreInfo:
    """A barre inferred from a diagram.

    Parameters
    ----------
    fret : int
        Fret the barre stops.
    from_string : int
        Lowest string covered.
    to_string : int
        Highest string covered.
    finger : int | str | None
        Finger holding the barre, if known.
    """

    fret: int
    from_string: int
    to_string: int
    finger: Finger | None = None


def lowest_and_highest_fretted_position(
    positions: Mapping[int, StringPosition],
    avoid: Collection[int],
    nut: Nut | None = None,
) -> tuple[int, int]:
    """Return the lowest and highest fretted positions of a shape.

    Only strings with a fret above 0 that are not avoided count. A visible
    nut seeds both bounds with its own position, so a barre acts as a floor
    even when no finger sits below it.

    Parameters
    ----------
    positions : Mapping[int, StringPosition]
        Finger placements keyed by string.
    avoid : Collection[int]
        Muted strings.
    nut : Nut | None
        Optional barre.

    Returns
    -------
    tuple[int, int]
        ``(min, max)``; ``min`` is 0 when nothing qualifies.

    Examples
    --------
    >>> from chord_shapes.models import StringPosition
    >>> lowest_and_highest_fretted_position(
    ...     {2: StringPosition(2), 3: StringPosition(2), 4: StringPosition(1)}, ()
    ... )
    (1, 2)
    """
    if nut is not None and nut.visible:
        low: float = nut.position
        high = nut.position
    else:
        low = float("inf")
        high = 0

    for string, pos in positions.items():
        if string in avoid or pos.fret <= 0:
            continue
        low = min(low, pos.fret)
        high = max(high, pos.fret)

    return (0 if low == float("inf") else int(low), high)


def unplayed_strings(
    positions: Mapping[int, StringPosition],
    avoid: Collection[int],
    string_count: int = 6,
) -> list[int]:
    """Return strings that are neither positioned nor avoided.

    Examples
    --------
    >>> from chord_shapes.models import StringPosition
    >>> unplayed_strings({2: StringPosition(2), 3: StringPosition(2)}, {6})
    [1, 4, 5]
    """
    return [
        string
        for string in range(1, string_count + 1)
        if string not in positions and string not in avoid
    ]


def detect_barre(diagram: ChordDiagram) -> BarreInfo | None:
    """Find the barre of a diagram.

    A visible nut is returned as-is. Otherwise the lowest fret on which two
    or more fingered strings are pressed is treated as a barre.

    Parameters
    ----------
    diagram : ChordDiagram
        The diagram to inspect.

    Returns
    -------
    BarreInfo | None
        The barre, or None if the shape has none.
    """
    nut = diagram.nut
    if nut.visible:
        low, high = sorted(nut.strings)
        return BarreInfo(fret=nut.position, from_string=low, to_string=high, finger=nut.finger)

    by_fret: dict[int, list[int]] = {}
    for string, pos in diagram.positions.items():
        if pos.fret > 0 and pos.finger:
            by_fret.setdefault(pos.fret, []).append(string)

    for fret in sorted(by_fret):
        strings = by_fret[fret]
        if len(strings) >= 2:
            low = min(strings)
            return BarreInfo(
                fret=fret,
                from_string=low,
                to_string=max(strings),
                finger=diagram.positions[low].finger,
            )

    return None
