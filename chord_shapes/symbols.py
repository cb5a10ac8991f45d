"""Free-text chord symbol handling.

This module splits chord symbols such as ``"Cmaj7/E"`` into the fields the
chord builder edits (root, quality, bass, extensions) and composes them back
into a name. Transposition and chord tones of a symbol are delegated to
pychord.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "C"
ROOT_BASS = "Root"

# Checked in order; the first prefix that matches wins
QUALITY_PREFIXES: tuple[str, ...] = ("dim", "aug", "sus2", "sus4", "maj", "m")

# Optional accidental followed by a degree; 7+ is the major seventh
EXTENSION_RE = re.compile(r"([b#])?(5|6|7\+?|9|11|13)")

ROOT_RE = re.compile(r"^[A-G]")

EXTENSION_ORDER: tuple[str, ...] = (
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


@dataclass(frozen=True)
class ManualChordData:
    """Chord builder state.

    Parameters
    ----------
    root : str
        Root note as written (e.g., "C", "Bb", "F#").
    quality : str
        One of the quality prefixes, or "" for major.
    bass : str
        ``"Root"`` or a slash bass such as ``"/E"``.
    extensions : tuple[str, ...]
        Extensions such as ``"7"``, ``"b9"``, ``"7+"``.

    Examples
    --------
    >>> ManualChordData(root="C", quality="m", extensions=("7",), bass="/G").name
    'Cm7/G'
    """

    root: str = DEFAULT_ROOT
    quality: str = ""
    bass: str = ROOT_BASS
    extensions: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Compose the chord symbol."""
        bass = "" if not self.bass or self.bass == ROOT_BASS else self.bass
        return f"{self.root}{self.quality}{''.join(self.extensions)}{bass}"

    def __str__(self) -> str:
        return self.name


def parse_symbol(text: str) -> ManualChordData:
    """Split a chord symbol into builder fields.

    Parsing is best-effort and never raises. Extensions are reported in the
    order they appear in ``text``; use :func:`sort_extensions` for musical
    order.

    Parameters
    ----------
    text : str
        Chord symbol (e.g., "Cmaj7/E", "F#m7b5").

    Returns
    -------
    ManualChordData
        Parsed fields, or the defaults (C, major, root bass) when ``text``
        has no recognizable root.

    Examples
    --------
    >>> parse_symbol("Cmaj7/E")
    ManualChordData(root='C', quality='maj', bass='/E', extensions=('7',))
    >>> parse_symbol("Bbm9b5").extensions
    ('9', 'b5')
    >>> parse_symbol("???")
    ManualChordData(root='C', quality='', bass='Root', extensions=())
    """
    symbol = text.strip() if text else ""
    if not ROOT_RE.match(symbol):
        logger.debug("Unparseable chord symbol %r, using defaults", text)
        return ManualChordData()

    bass = ROOT_BASS
    rest = symbol
    if "/" in symbol:
        parts = symbol.split("/")
        rest = parts[0]
        if parts[1]:
            bass = "/" + parts[1]

    if len(rest) > 1 and rest[1] in "#b":
        root, remainder = rest[:2], rest[2:]
    else:
        root, remainder = rest[:1], rest[1:]

    quality = ""
    for prefix in QUALITY_PREFIXES:
        if remainder.startswith(prefix):
            quality = prefix
            remainder = remainder[len(prefix) :]
            break

    extensions = tuple(match.group(0) for match in EXTENSION_RE.finditer(remainder))
    return ManualChordData(root=root, quality=quality, bass=bass, extensions=extensions)


def _extension_rank(extension: str) -> int:
    try:
        return EXTENSION_ORDER.index(extension)
    except ValueError:
        return len(EXTENSION_ORDER)


def sort_extensions(extensions: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Sort extensions into musical order; unknown entries go last.

    Examples
    --------
    >>> sort_extensions(["9", "b5", "7"])
    ('b5', '7', '9')
    """
    return tuple(sorted(extensions, key=_extension_rank))


def _same_degree(extension: str, base: str) -> bool:
    return re.fullmatch(rf"[b#]?{re.escape(base)}", extension) is not None


def toggle_extension(data: ManualChordData, base: str, accidental: str = "") -> ManualChordData:
    """Switch an extension on or off.

    Any other spelling of the same degree (e.g., ``b9`` when toggling ``#9``)
    is removed. The result is kept in musical order.

    Parameters
    ----------
    data : ManualChordData
        Current builder state.
    base : str
        Degree, e.g. "9" or "7+".
    accidental : str
        "", "b" or "#".

    Returns
    -------
    ManualChordData
        Updated builder state.

    Examples
    --------
    >>> state = ManualChordData(extensions=("7", "b9"))
    >>> toggle_extension(state, "9", "#").extensions
    ('7', '#9')
    >>> toggle_extension(state, "9", "b").extensions
    ('7',)
    """
    extension = accidental + base
    active = extension in data.extensions
    kept = [ext for ext in data.extensions if not _same_degree(ext, base)]
    if not active:
        kept.append(extension)
    return replace(data, extensions=sort_extensions(kept))


def transpose_symbol(text: str, semitones: int) -> str | None:
    """Transpose a chord symbol with pychord.

    Parameters
    ----------
    text : str
        Chord symbol in pychord notation (e.g., "Am7", "C/E").
    semitones : int
        Number of semitones (positive = up).

    Returns
    -------
    str | None
        Transposed symbol, or None if pychord cannot parse ``text``.

    Examples
    --------
    >>> transpose_symbol("Am", 3)
    'Cm'
    """
    from pychord import Chord as PyChord

    try:
        chord = PyChord(text)
    except Exception:  # pychord may raise various exceptions
        logger.debug("pychord rejected %r", text)
        return None
    chord.transpose(semitones)
    return str(chord)


def chord_tones(text: str) -> list[str] | None:
    """Return the note names of a chord symbol.

    Examples
    --------
    >>> chord_tones("Am")
    ['A', 'C', 'E']
    """
    from pychord import Chord as PyChord

    try:
        return list(PyChord(text).components())
    except Exception:  # pychord may raise various exceptions
        logger.debug("pychord rejected %r", text)
        return None
