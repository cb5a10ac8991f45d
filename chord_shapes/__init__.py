"""Chord shape library for fretted-instrument chord diagrams.

This library models chord diagrams (which strings are fretted where, with
an optional barre) and moves a hand shape authored for one root to any
other root while keeping the shape intact.

Examples
--------
>>> from chord_shapes import Chord, ChordDiagram, transpose, normalize_for_display

>>> # Open E major shape
>>> e_major = ChordDiagram.from_library(
...     Chord(note=4), {2: (2, 2, 1), 3: (2, 3, 1), 4: (1, 1, 1)}
... )

>>> # Moved up to B: the barre sits at the 8th fret, drawn from fret 1
>>> b_major = transpose(e_major, 11)
>>> b_major.name, b_major.transport, b_major.nut.position
('B', 8, 1)

>>> # Chord symbols
>>> from chord_shapes import parse_symbol
>>> parse_symbol("Cmaj7/E").quality
'maj'
"""

from chord_shapes.config import Settings, configure_logging, get_settings
from chord_shapes.display import DisplayView, normalize_for_display, position_label
from chord_shapes.fretboard import (
    BarreInfo,
    detect_barre,
    lowest_and_highest_fretted_position,
    unplayed_strings,
)
from chord_shapes.library import CHORD_LIBRARY
from chord_shapes.models import THUMB, Chord, ChordDiagram, Nut, StringPosition
from chord_shapes.symbols import (
    ManualChordData,
    chord_tones,
    parse_symbol,
    sort_extensions,
    toggle_extension,
    transpose_symbol,
)
from chord_shapes.transpose import filter_library, transpose, transpose_library
from chord_shapes.tuning import (
    INSTRUMENTS,
    STANDARD_TUNING,
    InstrumentPreset,
    get_instrument,
    shifted_tuning,
)
from chord_shapes.vocabulary import (
    NOT_FOUND,
    bass_options,
    format_display_name,
    format_name,
    index_of_bass,
    index_of_extension,
    index_of_pitch,
    index_of_quality,
    note_to_pc,
    scale_notes,
)

__all__ = [
    "CHORD_LIBRARY",
    "INSTRUMENTS",
    "NOT_FOUND",
    "STANDARD_TUNING",
    "THUMB",
    "BarreInfo",
    "Chord",
    "ChordDiagram",
    "DisplayView",
    "InstrumentPreset",
    "ManualChordData",
    "Nut",
    "Settings",
    "StringPosition",
    "bass_options",
    "chord_tones",
    "configure_logging",
    "detect_barre",
    "filter_library",
    "format_display_name",
    "format_name",
    "get_instrument",
    "get_settings",
    "index_of_bass",
    "index_of_extension",
    "index_of_pitch",
    "index_of_quality",
    "lowest_and_highest_fretted_position",
    "normalize_for_display",
    "note_to_pc",
    "parse_symbol",
    "position_label",
    "scale_notes",
    "shifted_tuning",
    "sort_extensions",
    "toggle_extension",
    "transpose",
    "transpose_library",
    "transpose_symbol",
    "unplayed_strings",
]
