"""Render-time framing of chord diagrams.

Diagrams are drawn in a window of a few frets. A shape that reaches past the
window is shifted down so that it starts at fret 1, and the shift is reported
as a position label. The stored diagram is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chord_shapes.config import get_settings
from chord_shapes.fretboard import lowest_and_highest_fretted_position
from chord_shapes.models import ChordDiagram, Nut, Positions


@dataclass(frozen=True)
class DisplayView:
    """Positions, nut and position label of a framed diagram.

    Parameters
    ----------
    positions : dict[int, StringPosition]
        Finger placements relative to the displayed window.
    nut : Nut
        Barre relative to the displayed window.
    transport : int
        Position label ("Xª"); 0 when no label is shown.
    """

    positions: Positions
    nut: Nut
    transport: int

    def apply(self, diagram: ChordDiagram) -> ChordDiagram:
        """Return ``diagram`` carrying this view's framing."""
        return replace(diagram, positions=self.positions, nut=self.nut, transport=self.transport)


def normalize_for_display(
    diagram: ChordDiagram, *, window: int | None = None, compact: bool = False
) -> DisplayView:
    """Frame a diagram for rendering.

    Parameters
    ----------
    diagram : ChordDiagram
        Diagram to frame, transposed or not.
    window : int | None
        Number of frets the rendered grid shows. Overrides the configured
        window.
    compact : bool
        Use the narrower ``list_window`` of the compact list mode instead of
        ``display_window``.

    Returns
    -------
    DisplayView
        The framed view. Framing an already framed diagram is a no-op.

    Examples
    --------
    >>> from chord_shapes.models import Chord
    >>> d = ChordDiagram.from_library(Chord(note=2), {2: (7, 1, 0), 3: (9, 3, 0)})
    >>> view = normalize_for_display(d)
    >>> view.transport, {s: p.fret for s, p in view.positions.items()}
    (7, {2: 1, 3: 3})
    """
    if window is None:
        settings = get_settings()
        window = settings.list_window if compact else settings.display_window

    nut = diagram.nut
    min_fret, max_fret = lowest_and_highest_fretted_position(
        diagram.positions, diagram.avoid, nut
    )

    if max_fret <= window and (not nut.visible or nut.position <= window):
        return DisplayView(
            positions=diagram.positions, nut=nut, transport=diagram.transport or 0
        )

    if nut.visible:
        shift = max(nut.position - 1, 0)
    else:
        shift = max(min_fret - 1, 0)
    positions = {
        string: replace(pos, fret=max(pos.fret - shift, 0)) if pos.fret > 0 else pos
        for string, pos in diagram.positions.items()
    }
    if nut.visible:
        nut = replace(nut, position=max(nut.position - shift, 0))

    base = diagram.transport if diagram.transport > 0 else 1
    return DisplayView(positions=positions, nut=nut, transport=base + shift)


def position_label(transport: int) -> str:
    """Format a position label, e.g. ``8`` -> ``"8ª"``; empty for 0."""
    return f"{transport}ª" if transport > 0 else ""
