"""Fixed pitch, quality, bass and extension vocabularies.

Chords are stored as index triples into the tables below. Lookups never
raise: a miss is reported as ``NOT_FOUND`` and formats as an empty string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_shapes.models import Chord

NOT_FOUND = -1

# Chromatic scale, sharps only (C# and Db share index 1)
PITCH_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

QUALITY_NAMES: tuple[str, ...] = (
    "Major",
    "m",
    "7",
    "m7",
    "7+",
    "m7(b5)",
    "6",
    "m6",
    "m7(9)",
    "7(#5)",
    "°",
)

BASS_NAMES: tuple[str, ...] = (
    "Tonic",
    "/2",
    "/3",
    "/4",
    "/5",
    "/6",
    "/7",
    "/8",
    "/9",
    "/10",
    "/11",
    "/12",
)

EXTENSION_NAMES: tuple[str, ...] = (
    "sus2",
    "sus4",
    "aug",
    "5",
    "b5",
    "#5",
    "6",
    "b6",
    "#6",
    "7",
    "b7",
    "#7",
    "7+",
    "b7+",
    "#7+",
    "9",
    "b9",
    "#9",
    "11",
    "b11",
    "#11",
    "13",
    "b13",
    "#13",
)

# Note name to pitch class, flats and enharmonic spellings included
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

MAJOR_SCALE_INTERVALS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


def _index_of(table: tuple[str, ...], name: str) -> int:
    try:
        return table.index(name)
    except ValueError:
        return NOT_FOUND


def _name_at(table: tuple[str, ...], index: int) -> str:
    if 0 <= index < len(table):
        return table[index]
    return ""


def index_of_pitch(name: str) -> int:
    """Return the pitch index of ``name`` or ``NOT_FOUND``.

    Examples
    --------
    >>> index_of_pitch("E")
    4
    >>> index_of_pitch("H")
    -1
    """
    return _index_of(PITCH_NAMES, name)


def index_of_quality(name: str) -> int:
    """Return the quality index of ``name`` or ``NOT_FOUND``."""
    return _index_of(QUALITY_NAMES, name)


def index_of_bass(name: str) -> int:
    """Return the bass/inversion index of ``name`` or ``NOT_FOUND``."""
    return _index_of(BASS_NAMES, name)


def index_of_extension(name: str) -> int:
    """Return the extension index of ``name`` or ``NOT_FOUND``."""
    return _index_of(EXTENSION_NAMES, name)


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Unlike :func:`index_of_pitch` this accepts flat spellings and raises on
    unknown names.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("Bb")
    10
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def prettify_accidentals(name: str) -> str:
    """Replace ASCII accidentals with the music symbols.

    Examples
    --------
    >>> prettify_accidentals("Bb/F#")
    'B♭/F♯'
    """
    return name.replace("#", "♯").replace("b", "♭")


def format_name(chord: Chord) -> str:
    """Format a chord as a printable name.

    The quality ``Major`` is implicit and renders as nothing. Out-of-range
    indices render as an empty segment, so ``NOT_FOUND`` never raises.

    Parameters
    ----------
    chord : Chord
        Index-based chord.

    Returns
    -------
    str
        Chord name (e.g., "Em", "C7/5").

    Examples
    --------
    >>> from chord_shapes.models import Chord
    >>> format_name(Chord(note=4, complement=1))
    'Em'
    >>> format_name(Chord(note=0, complement=0, bass=4))
    'C/5'
    """
    quality = quality_name(chord.complement)
    if quality == "Major":
        quality = ""
    extensions = "".join(extension_name(ext) for ext in chord.extensions)
    bass = bass_name(chord.bass) if chord.bass > 0 else ""
    return pitch_name(chord.note) + quality + extensions + bass


def format_display_name(chord: Chord) -> str:
    """Format a chord name with ``♯``/``♭`` symbols."""
    return prettify_accidentals(format_name(chord))


def scale_notes(root: str) -> list[str]:
    """Return the major scale built on ``root``.

    Examples
    --------
    >>> scale_notes("G")
    ['G', 'A', 'B', 'C', 'D', 'E', 'F#']
    """
    start = note_to_pc(root)
    return [PITCH_NAMES[(start + interval) % 12] for interval in MAJOR_SCALE_INTERVALS]


def bass_options(root: str) -> list[str]:
    """Return the bass picker entries for a chord rooted on ``root``.

    The first entry is ``"Root"``; the other eleven name every remaining
    chromatic note as a slash bass, ascending from the root.

    Examples
    --------
    >>> bass_options("A")[:3]
    ['Root', '/A♯', '/B']
    """
    start = note_to_pc(root)
    slashes = [
        "/" + prettify_accidentals(PITCH_NAMES[(start + step) % 12]) for step in range(1, 12)
    ]
    return ["Root", *slashes]


def pitch_name(index: int) -> str:
    """Return the pitch name at ``index``, or "" when out of range."""
    return _name_at(PITCH_NAMES, index)


def quality_name(index: int) -> str:
    return _name_at(QUALITY_NAMES, index)


def bass_name(index: int) -> str:
    return _name_at(BASS_NAMES, index)


def extension_name(index: int) -> str:
    return _name_at(EXTENSION_NAMES, index)
