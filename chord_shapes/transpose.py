"""Shape-preserving transposition of chord diagrams.

A fingering authored for one root is moved along the neck to sound another
root. Every fretted string receives the same fret delta, so the hand shape is
kept; strings the shape leaves open are covered by a barre once the shape is
moved off its natural position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from chord_shapes.config import get_settings
from chord_shapes.fretboard import lowest_and_highest_fretted_position, unplayed_strings
from chord_shapes.models import Chord, ChordDiagram, Nut, Positions, StringPosition
from chord_shapes.vocabulary import (
    NOT_FOUND,
    bass_name,
    extension_name,
    index_of_pitch,
    quality_name,
)

logger = logging.getLogger(__name__)

# Quality families used by the library filter
QUALITY_FAMILIES: dict[str, tuple[str, ...]] = {
    "major": ("Major", "7", "7+", "6", "7(#5)"),
    "minor": ("m", "m7", "m6", "m7(9)", "m7(b5)"),
    "dim": ("°",),
}


def _shift_positions(positions: Positions, delta: int, aux: int) -> Positions:
    shifted: Positions = {}
    for string, pos in positions.items():
        fret = max(pos.fret + delta, 0) if pos.fret > 0 else pos.fret
        finger = pos.finger
        if isinstance(finger, int):
            finger += aux * pos.add
        shifted[string] = StringPosition(fret, finger, pos.add)
    return shifted


def _rebase(
    positions: Positions, nut: Nut, avoid: frozenset[int], window: int
) -> tuple[Positions, Nut, int]:
    """Pull a shape sitting above ``window`` down to fret 1.

    Returns the new positions, nut and transport label.
    """
    final_min, _ = lowest_and_highest_fretted_position(positions, avoid, nut)
    if final_min <= window:
        return positions, nut, 0

    transport = nut.position if nut.visible else final_min
    offset = transport - 1
    if nut.visible:
        nut = replace(nut, position=1)
    rebased = {
        string: replace(pos, fret=max(pos.fret - offset, 0)) if pos.fret > 0 else pos
        for string, pos in positions.items()
    }
    logger.debug("Re-based shape by %d frets, transport %d", offset, transport)
    return rebased, nut, transport


def transpose(
    diagram: ChordDiagram,
    target: Chord | int,
    *,
    window: int | None = None,
) -> ChordDiagram:
    """Move a diagram's hand shape so that it sounds ``target``.

    Parameters
    ----------
    diagram : ChordDiagram
        Source diagram. Its shape was authored for ``diagram.origin``.
    target : Chord | int
        Target chord, or a bare root pitch index (quality, bass and
        extensions are then kept from ``diagram.chord``).
    window : int | None
        Highest fret a shape may start on before it is re-based to fret 1
        with a position label. Defaults to the configured display window.

    Returns
    -------
    ChordDiagram
        A new diagram; ``diagram`` is left untouched. When ``target`` is the
        natural root of an unmoved shape, ``diagram`` itself is returned.

    Examples
    --------
    >>> from chord_shapes.models import Chord
    >>> e_major = ChordDiagram.from_library(
    ...     Chord(note=4), {2: (2, 2, 1), 3: (2, 3, 1), 4: (1, 1, 1)}
    ... )
    >>> g_major = transpose(e_major, 7)
    >>> g_major.nut.position, g_major.frets()
    (4, {2: 5, 3: 5, 4: 4})
    """
    if isinstance(target, int):
        target = replace(diagram.chord, note=target)
    if window is None:
        window = get_settings().display_window

    min_fret, _ = lowest_and_highest_fretted_position(
        diagram.positions, diagram.avoid, diagram.nut
    )
    nut = diagram.nut

    if diagram.origin == target.note:
        if diagram.is_natural:
            return diagram
        # Moving back to the authored root: drop finger offsets added earlier
        nut = replace(nut, visible=nut.add)
        aux = -1
        new_offset = 0
    else:
        new_offset = min_fret + target.note - diagram.origin
        if new_offset < 0:
            new_offset += 12
        if diagram.is_natural:
            open_strings = unplayed_strings(
                diagram.positions, diagram.avoid, diagram.string_count
            )
            first = open_strings[0] if open_strings else 1
            last = first if len(diagram.avoid) >= 2 else diagram.string_count
            nut = replace(nut, strings=(first, last), visible=True)
            aux = 1
            logger.debug(
                "Synthesized barre over strings %d-%d for %s", first, last, target.name
            )
        else:
            nut = replace(nut, visible=target.note != diagram.chord.note or nut.add)
            aux = 0

    nut = replace(nut, position=nut.position + new_offset)
    positions = _shift_positions(diagram.positions, new_offset - min_fret, aux)
    positions, nut, transport = _rebase(positions, nut, diagram.avoid, window)

    return replace(
        diagram,
        chord=target,
        positions=positions,
        nut=nut,
        transport=transport,
    )


def transpose_library(diagrams: Iterable[ChordDiagram], root: int) -> list[ChordDiagram]:
    """Move every library shape to ``root``.

    Unique shapes only match their own root and are never transposed; the
    rest are moved by the interval between ``root`` and their origin.

    Parameters
    ----------
    diagrams : Iterable[ChordDiagram]
        Library entries.
    root : int
        Target root pitch index.

    Returns
    -------
    list[ChordDiagram]
        Transposed entries, in library order.
    """
    result: list[ChordDiagram] = []
    for diagram in diagrams:
        if diagram.unique:
            if diagram.chord.note == root:
                result.append(diagram)
            continue
        note = (diagram.chord.note + root - diagram.origin) % 12
        result.append(transpose(diagram, replace(diagram.chord, note=note)))
    return result


def filter_library(
    diagrams: Sequence[ChordDiagram],
    *,
    root: str | None = None,
    quality: str | None = None,
    extensions: Sequence[str] = (),
    bass: str | None = None,
    tuning: Sequence[str] | None = None,
) -> list[ChordDiagram]:
    """Select library diagrams matching the picker state.

    Parameters
    ----------
    diagrams : Sequence[ChordDiagram]
        Library entries.
    tuning : Sequence[str] | None
        String names of the selected instrument tuning. Only diagrams
        authored for exactly this tuning are kept. None or empty keeps all.
    root : str | None
        Pitch name; matching shapes are transposed to it. None keeps all
        roots as authored.
    quality : str | None
        Quality family: "major", "minor" or "dim".
    extensions : Sequence[str]
        Extension names that must all be present.
    bass : str | None
        Bass vocabulary name (e.g., "/3").

    Returns
    -------
    list[ChordDiagram]
        Matching diagrams.
    """
    selected = list(diagrams)
    if tuning:
        wanted = tuple(tuning)
        selected = [d for d in selected if d.string_names == wanted]

    if root is not None:
        root_index = index_of_pitch(root)
        if root_index == NOT_FOUND:
            logger.debug("Unknown root %r, no library match", root)
            return []
        selected = transpose_library(selected, root_index)

    if quality is not None:
        family = QUALITY_FAMILIES.get(quality)
        if family is not None:
            selected = [
                d for d in selected if quality_name(d.chord.complement) in family
            ]

    if extensions:
        selected = [
            d
            for d in selected
            if all(
                ext in {extension_name(e) for e in d.chord.extensions} for ext in extensions
            )
        ]

    if bass is not None:
        selected = [d for d in selected if bass_name(d.chord.bass) == bass]

    return selected


