"""Instrument presets and alternate tunings."""

from __future__ import annotations

from dataclasses import dataclass

from chord_shapes.vocabulary import NOTE_TO_PC, PITCH_NAMES

SHARP_TO_FLAT: dict[str, str] = {
    "C#": "Db",
    "D#": "Eb",
    "F#": "Gb",
    "G#": "Ab",
    "A#": "Bb",
}

STANDARD_TUNING: tuple[str, ...] = ("E", "A", "D", "G", "B", "e")


@dataclass(frozen=True)
class InstrumentPreset:
    """A fretted instrument and its common tunings.

    Parameters
    ----------
    id : str
        Stable identifier.
    name : str
        Display name.
    tunings : tuple[tuple[str, ...], ...]
        Tunings, each listing string notes from the lowest string up.
    """

    id: str
    name: str
    tunings: tuple[tuple[str, ...], ...]

    @property
    def string_count(self) -> int:
        return len(self.tunings[0])


INSTRUMENTS: tuple[InstrumentPreset, ...] = (
    InstrumentPreset(
        id="guitar",
        name="Guitar (6 strings)",
        tunings=(
            STANDARD_TUNING,
            ("D", "A", "D", "G", "B", "e"),
            ("D", "A", "D", "G", "A", "D"),
            ("E", "B", "E", "G#", "B", "E"),
        ),
    ),
    InstrumentPreset(
        id="bass-4",
        name="Bass (4 strings)",
        tunings=(
            ("E", "A", "D", "G"),
            ("D", "A", "D", "G"),
            ("B", "E", "A", "D"),
        ),
    ),
    InstrumentPreset(
        id="bass-5",
        name="Bass (5 strings)",
        tunings=(
            ("B", "E", "A", "D", "G"),
            ("E", "A", "D", "G", "C"),
        ),
    ),
    InstrumentPreset(
        id="ukulele",
        name="Ukulele",
        tunings=(
            ("G", "C", "E", "A"),
            ("A", "D", "F#", "B"),
        ),
    ),
    InstrumentPreset(
        id="cavaquinho",
        name="Cavaquinho",
        tunings=(
            ("D", "G", "B", "D"),
            ("D", "G", "B", "E"),
        ),
    ),
)


def get_instrument(instrument_id: str) -> InstrumentPreset:
    """Look up a preset by id.

    Raises
    ------
    ValueError
        If no preset has that id.
    """
    for preset in INSTRUMENTS:
        if preset.id == instrument_id:
            return preset
    msg = f"Unknown instrument: {instrument_id}"
    raise ValueError(msg)


def shifted_tuning(tuning: tuple[str, ...] | list[str], shift: int) -> list[str]:
    """Respell a tuning tuned down by ``shift`` semitones.

    Non-negative shifts (a capo) keep the string names. Negative shifts move
    every string down and spell accidentals as flats. The lower-case high
    ``e`` keeps its case and unknown names are passed through.

    Parameters
    ----------
    tuning : tuple[str, ...] | list[str]
        String notes, lowest first.
    shift : int
        Semitone shift.

    Returns
    -------
    list[str]
        Respelled tuning.

    Examples
    --------
    >>> shifted_tuning(["E", "A", "D", "G", "B", "e"], -1)
    ['Eb', 'Ab', 'Db', 'Gb', 'Bb', 'eb']
    """
    if shift >= 0:
        return list(tuning)

    result: list[str] = []
    for note in tuning:
        high_e = note == "e"
        base = "E" if high_e else note
        if base not in NOTE_TO_PC:
            result.append(note)
            continue
        name = PITCH_NAMES[(NOTE_TO_PC[base] + shift) % 12]
        name = SHARP_TO_FLAT.get(name, name)
        result.append(name.lower() if high_e else name)
    return result
