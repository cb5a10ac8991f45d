"""Tests for render-time diagram framing."""

import pytest

from chord_shapes import display
from chord_shapes.config import Settings
from chord_shapes.display import DisplayView, normalize_for_display, position_label
from chord_shapes.library import CHORD_LIBRARY
from chord_shapes.models import Chord, ChordDiagram, Nut, StringPosition
from chord_shapes.transpose import transpose


def frets(view: DisplayView) -> dict[int, int]:
    return {s: p.fret for s, p in view.positions.items()}


@pytest.fixture
def a_minor_seventh() -> ChordDiagram:
    """Am7 voiced high on the neck without a barre."""
    return ChordDiagram.from_library(
        Chord(note=9, complement=3),
        {4: (6, 1, 1), 5: (8, 3, 1), 6: (9, 4, 1)},
        avoid=(1, 3),
    )


class TestWithinWindow:
    """Diagrams that fit are rendered as stored."""

    def test_open_shape_unchanged(self) -> None:
        diagram = CHORD_LIBRARY[0]
        view = normalize_for_display(diagram)
        assert view.positions is diagram.positions
        assert view.nut is diagram.nut
        assert view.transport == 0

    def test_rebased_transposition_keeps_label(self) -> None:
        b_major = transpose(CHORD_LIBRARY[0], 11)
        view = normalize_for_display(b_major)
        assert view.transport == 8
        assert frets(view) == {2: 2, 3: 2, 4: 1}


class TestShifted:
    """Diagrams reaching past the window are shifted to fret 1."""

    def test_high_shape_without_barre(self, a_minor_seventh: ChordDiagram) -> None:
        view = normalize_for_display(a_minor_seventh)
        assert frets(view) == {4: 1, 5: 3, 6: 4}
        assert view.transport == 6
        assert view.nut == a_minor_seventh.nut

    def test_visible_nut_moves_to_first_fret(self) -> None:
        diagram = ChordDiagram.from_library(
            Chord(note=2),
            {2: (9, 3, 1), 3: (9, 4, 1), 4: (8, 2, 1)},
            nut=Nut(visible=True, strings=(1, 6), position=7, finger=1),
        )
        view = normalize_for_display(diagram)
        assert view.nut.position == 1
        assert frets(view) == {2: 3, 3: 3, 4: 2}
        assert view.transport == 7

    def test_finger_below_visible_nut(self) -> None:
        """The barre, not the lowest finger, is pinned to fret 1."""
        diagram = ChordDiagram.from_library(
            Chord(note=2),
            {2: (6, 1, 0), 3: (9, 4, 0)},
            nut=Nut(visible=True, strings=(1, 6), position=7, finger=2),
        )
        view = normalize_for_display(diagram)
        assert view.nut.position == 1
        assert frets(view) == {2: 0, 3: 3}
        assert view.transport == 7

    def test_open_strings_stay_open(self) -> None:
        diagram = ChordDiagram.from_library(Chord(note=7), {1: (0, 0, 0), 2: (7, 1, 0)})
        view = normalize_for_display(diagram)
        assert frets(view) == {1: 0, 2: 1}
        assert view.transport == 7

    def test_existing_label_is_base(self) -> None:
        """A re-based diagram that still overflows keeps its label."""
        diagram = ChordDiagram(
            chord=Chord(note=11),
            positions={2: StringPosition(1, 1), 3: StringPosition(7, 4)},
            nut=Nut(visible=True, strings=(1, 6), position=1),
            origin=4,
            transport=8,
        )
        view = normalize_for_display(diagram)
        assert view.transport == 8
        assert frets(view) == {2: 1, 3: 7}

    def test_stored_diagram_untouched(self, a_minor_seventh: ChordDiagram) -> None:
        normalize_for_display(a_minor_seventh)
        assert a_minor_seventh.positions[6].fret == 9
        assert a_minor_seventh.transport == 0


class TestWindow:
    """Test window size handling."""

    def test_narrow_list_window(self) -> None:
        diagram = ChordDiagram.from_library(Chord(note=0), {2: (3, 1, 0), 3: (5, 3, 0)})
        assert normalize_for_display(diagram, window=5).transport == 0
        view = normalize_for_display(diagram, window=4)
        assert view.transport == 3
        assert frets(view) == {2: 1, 3: 3}

    def test_compact_mode_uses_list_window(self, monkeypatch: pytest.MonkeyPatch) -> None:
        settings = Settings(
            CHORD_SHAPES_DISPLAY_WINDOW=5, CHORD_SHAPES_LIST_WINDOW=3, _env_file=None
        )
        monkeypatch.setattr(display, "get_settings", lambda: settings)
        diagram = ChordDiagram.from_library(Chord(note=0), {2: (3, 1, 0), 3: (4, 3, 0)})

        assert normalize_for_display(diagram).transport == 0
        view = normalize_for_display(diagram, compact=True)
        assert view.transport == 3
        assert frets(view) == {2: 1, 3: 2}

    def test_nut_above_window(self) -> None:
        diagram = ChordDiagram.from_library(
            Chord(note=0), {}, nut=Nut(visible=True, strings=(1, 6), position=6)
        )
        view = normalize_for_display(diagram)
        assert view.nut.position == 1
        assert view.transport == 6


class TestIdempotence:
    """Framing a framed diagram changes nothing."""

    @pytest.mark.parametrize("root", range(12))
    @pytest.mark.parametrize("window", [4, 5])
    def test_transposed_library(self, root: int, window: int) -> None:
        for diagram in CHORD_LIBRARY:
            moved = transpose(diagram, root)
            first = normalize_for_display(moved, window=window)
            second = normalize_for_display(first.apply(moved), window=window)
            assert second == first

    def test_finger_below_barre(self) -> None:
        diagram = ChordDiagram.from_library(
            Chord(note=2),
            {2: (6, 1, 0), 3: (9, 4, 0)},
            nut=Nut(visible=True, strings=(1, 6), position=7, finger=2),
        )
        first = normalize_for_display(diagram)
        assert normalize_for_display(first.apply(diagram)) == first

    def test_high_shape(self, a_minor_seventh: ChordDiagram) -> None:
        first = normalize_for_display(a_minor_seventh)
        assert normalize_for_display(first.apply(a_minor_seventh)) == first


class TestPositionLabel:
    def test_label(self) -> None:
        assert position_label(8) == "8ª"

    def test_no_label(self) -> None:
        assert position_label(0) == ""
