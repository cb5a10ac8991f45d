"""Built-in library of guitar chord shapes.

Each entry is a natural shape (``origin == chord.note``) in standard guitar
tuning. Shapes that are not flagged ``unique`` are movable and can be
transposed to any root.
"""

from __future__ import annotations

from chord_shapes.models import Chord, ChordDiagram, Finger, Nut
from chord_shapes.tuning import STANDARD_TUNING
from chord_shapes.vocabulary import index_of_extension, index_of_pitch, index_of_quality


def _shape(
    root: str,
    quality: str,
    positions: dict[int, tuple[int, Finger, int]],
    *,
    extensions: tuple[str, ...] = (),
    avoid: tuple[int, ...] = (),
    nut: Nut | None = None,
    unique: bool = False,
) -> ChordDiagram:
    chord = Chord(
        note=index_of_pitch(root),
        complement=index_of_quality(quality),
        extensions=tuple(index_of_extension(ext) for ext in extensions),
    )
    return ChordDiagram.from_library(
        chord, positions, avoid=avoid, nut=nut, string_names=STANDARD_TUNING, unique=unique
    )


CHORD_LIBRARY: tuple[ChordDiagram, ...] = (
    _shape("E", "Major", {2: (2, 2, 1), 3: (2, 3, 1), 4: (1, 1, 1)}),
    _shape("E", "Major", {2: (2, 2, 1), 3: (2, 3, 1), 4: (1, 1, 1), 5: (3, 4, 1)}, unique=True),
    _shape("E", "Major", {2: (2, 2, 1), 4: (1, 1, 1), 5: (3, 4, 1)}),
    _shape("B", "m7(9)", {2: (2, 2, 1), 4: (2, 3, 1), 5: (2, 4, 1)}, avoid=(1, 6)),
    _shape(
        "E",
        "m7",
        {2: (2, 2, 0)},
        nut=Nut(visible=True, strings=(1, 6), position=0, finger=1, add=True),
    ),
    _shape("A", "m7(b5)", {3: (1, 2, 1), 4: (0, 1, 0), 5: (1, 3, 1)}, avoid=(1, 6)),
    _shape("F", "m6", {1: (1, 2, 1), 4: (1, 3, 1), 5: (1, 4, 1)}, avoid=(2, 6)),
    _shape("A", "Major", {3: (2, 2, 1), 4: (2, 3, 1), 5: (2, 1, 1)}, avoid=(1,)),
    _shape("D", "Major", {4: (2, 1, 1), 5: (3, 3, 1), 6: (2, 2, 1)}, avoid=(1, 2)),
    _shape("G", "Major", {1: (3, 3, 1), 2: (2, 2, 1), 6: (3, 4, 1)}),
    _shape("F", "°", {1: (1, 1, 1), 3: (1, 2, 1), 5: (1, 3, 1)}, avoid=(2, 4, 6)),
    _shape("A", "m", {2: (1, 1, 1), 3: (2, 2, 1), 4: (2, 3, 1)}, avoid=(6,)),
    _shape("A", "Major", {3: (2, 2, 1), 4: (2, 1, 1)}, extensions=("sus2",), avoid=(6,)),
    _shape(
        "A", "Major", {2: (3, 3, 1), 3: (2, 2, 1), 4: (2, 1, 1)}, extensions=("sus4",), avoid=(6,)
    ),
)
