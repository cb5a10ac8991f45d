"""Data models for chord diagrams.

A :class:`ChordDiagram` pairs *what* is played (a :class:`Chord`) with *how*
it is fingered (string positions, an optional barre and muted strings).
All models are frozen; transformations build new values with
:func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chord_shapes.config import DEFAULT_STRING_COUNT, get_settings
from chord_shapes.vocabulary import format_name

# Finger sentinel for notes stopped with the thumb
THUMB = "T"

Finger = int | str


@dataclass(frozen=True)
class Chord:
    """Index-based chord identity.

    Parameters
    ----------
    note : int
        Root pitch index (0-11).
    complement : int
        Index into the quality vocabulary.
    bass : int
        Index into the bass vocabulary; 0 means root position.
    extensions : tuple[int, ...]
        Indices into the extension vocabulary, in display order.

    Examples
    --------
    >>> Chord(note=9, complement=1).name
    'Am'
    """

    note: int
    complement: int = 0
    bass: int = 0
    extensions: tuple[int, ...] = ()

    @property
    def name(self) -> str:
        """Printable chord name."""
        return format_name(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class StringPosition:
    """Finger placement on a single string.

    Parameters
    ----------
    fret : int
        Fret number; 0 is the open string.
    finger : int | str
        Finger number, or :data:`THUMB`.
    add : int
        1 if the finger number carries an offset introduced by a previous
        transposition, else 0.
    """

    fret: int
    finger: Finger = 0
    add: int = 0

    def __post_init__(self) -> None:
        if self.fret < 0:
            msg = f"Fret must be non-negative, got {self.fret}"
            raise ValueError(msg)
        if self.add not in (0, 1):
            msg = f"Add flag must be 0 or 1, got {self.add}"
            raise ValueError(msg)

    @property
    def is_fretted(self) -> bool:
        return self.fret > 0


@dataclass(frozen=True)
class Nut:
    """Barre or capo marker drawn across ``strings[0]..strings[1]``.

    Parameters
    ----------
    visible : bool
        Whether the barre is drawn.
    strings : tuple[int, int]
        First and last string covered.
    position : int
        Fret of the barre.
    finger : int
        Finger holding the barre.
    add : bool
        True if a transposition introduced the barre.
    origin : int
        1 if the barre belongs to the authored shape, else 0.
    """

    visible: bool = False
    strings: tuple[int, int] = (0, 0)
    position: int = 0
    finger: int = 0
    add: bool = False
    origin: int = 0

    def __post_init__(self) -> None:
        if self.position < 0:
            msg = f"Nut position must be non-negative, got {self.position}"
            raise ValueError(msg)


Positions = dict[int, StringPosition]


@dataclass(frozen=True)
class ChordDiagram:
    """A chord together with the fingering that produces it.

    Parameters
    ----------
    chord : Chord
        The chord being played.
    positions : dict[int, StringPosition]
        Finger placements keyed by string number (1 = lowest string).
        Strings missing from the mapping are not part of the shape.
    nut : Nut
        Optional barre.
    avoid : frozenset[int]
        Strings that must not sound.
    origin : int
        Root pitch the finger shape was authored for.
    transport : int
        Fret label ("Xª") shown for re-based diagrams; 0 when not re-based.
    string_count : int
        Number of strings on the instrument.
    string_names : tuple[str, ...]
        Tuning the shape was authored for, lowest string first; empty when
        unknown.
    unique : bool
        Library shapes flagged unique are never transposed.
    """

    chord: Chord
    positions: Positions = field(default_factory=dict)
    nut: Nut = field(default_factory=Nut)
    avoid: frozenset[int] = frozenset()
    origin: int = 0
    transport: int = 0
    string_count: int = DEFAULT_STRING_COUNT
    string_names: tuple[str, ...] = ()
    unique: bool = False

    @classmethod
    def from_library(
        cls,
        chord: Chord,
        positions: dict[int, tuple[int, Finger, int]],
        *,
        avoid: tuple[int, ...] = (),
        nut: Nut | None = None,
        string_count: int | None = None,
        string_names: tuple[str, ...] = (),
        unique: bool = False,
    ) -> ChordDiagram:
        """Build a natural (untransposed) diagram from plain tuples.

        Without an explicit ``string_count`` the length of ``string_names`` is
        used, falling back to the configured instrument string count.

        Examples
        --------
        >>> d = ChordDiagram.from_library(Chord(note=4), {4: (1, 1, 1)})
        >>> d.origin, d.positions[4].fret
        (4, 1)
        """
        if string_count is None:
            string_count = len(string_names) or get_settings().string_count
        return cls(
            chord=chord,
            positions={
                string: StringPosition(fret, finger, add)
                for string, (fret, finger, add) in positions.items()
            },
            nut=nut if nut is not None else Nut(),
            avoid=frozenset(avoid),
            origin=chord.note,
            string_count=string_count,
            string_names=tuple(string_names),
            unique=unique,
        )

    @property
    def is_natural(self) -> bool:
        """True when the shape sits at the root it was authored for."""
        return self.origin == self.chord.note

    @property
    def name(self) -> str:
        return self.chord.name

    def frets(self) -> dict[int, int]:
        """Return ``{string: fret}`` for every positioned string."""
        return {string: pos.fret for string, pos in self.positions.items()}
