"""Unit tests for scale kinds, scales and pages."""

import pytest

from auditionprep.models import (
    DEFAULT_STARTING_PITCH,
    Clef,
    Instrument,
    Orchestra,
    Page,
    Scale,
    scales_for,
)
from auditionprep.theory import SCALE_TABLE, ScaleKind, check_complete


def _sample_page(scales: list[Scale]) -> Page:
    return Page(Instrument.VIOLIN, Clef.TREBLE, Orchestra.CHAMBER_STRINGS, scales)


def test_every_kind_has_a_spelling() -> None:
    assert set(SCALE_TABLE) == set(ScaleKind)


@pytest.mark.parametrize("kind", list(ScaleKind))
def test_name_and_key_signature_are_non_empty(kind: ScaleKind) -> None:
    assert kind.display_name
    assert kind.key_signature
    assert len(kind.pattern.split()) == 7


@pytest.mark.parametrize("kind", list(ScaleKind))
def test_name_does_not_depend_on_octaves_or_tempo(kind: ScaleKind) -> None:
    one = Scale(kind, 1, 60)
    three = Scale(kind, 3, 144)
    assert one.display_name == three.display_name
    assert one.key_signature == three.key_signature


def test_known_names_and_key_signatures() -> None:
    assert Scale(ScaleKind.Ees, 1, 80).display_name == "E-flat Major"
    assert Scale(ScaleKind.cis, 1, 80).display_name == "C-sharp Harmonic Minor"
    assert Scale(ScaleKind.cis, 1, 80).key_signature == r"cis \minor"
    assert Scale(ScaleKind.Bes, 1, 80).key_signature == r"bes \major"


def test_check_complete_reports_missing_kinds() -> None:
    partial = {ScaleKind.C: SCALE_TABLE[ScaleKind.C]}
    with pytest.raises(RuntimeError, match="cis"):
        check_complete(partial, ScaleKind, "partial")


@pytest.mark.parametrize(
    ("octaves", "expected"),
    [(1, "1 Octave"), (2, "2 Octaves"), (3, "3 Octaves")],
)
def test_octave_description(octaves: int, expected: str) -> None:
    assert Scale(ScaleKind.C, octaves, 80).octave_description == expected


@pytest.mark.parametrize("octaves", [1, 2, 3])
def test_note_sequence_token_count(octaves: int) -> None:
    scale = Scale(ScaleKind.fis, octaves, 80)
    tokens = scale.note_sequence(Instrument.CELLO, octaves).split()
    assert len(tokens) == 7 * octaves + 1
    assert tokens[-1] == "fis"


def test_note_sequence_closes_on_tonic() -> None:
    scale = Scale(ScaleKind.C, 2, 80)
    assert scale.note_sequence(Instrument.FLUTE) == "c d e f g a b c d e f g a b c"


def test_note_sequence_zero_octaves_is_closing_tonic_only() -> None:
    assert Scale(ScaleKind.C, 0, 80).note_sequence(Instrument.FLUTE) == " c"


def test_note_sequence_negative_octaves_is_closing_tonic_only() -> None:
    assert Scale(ScaleKind.Bes, -2, 80).note_sequence(Instrument.OBOE) == " bes"


def test_note_sequence_explicit_octaves_overrides_scale() -> None:
    scale = Scale(ScaleKind.C, 2, 80)
    assert scale.note_sequence(Instrument.FLUTE, 1) == "c d e f g a b c"


def test_flute_whitelist_raises_starting_pitch() -> None:
    assert Scale(ScaleKind.Bes, 2, 116).starting_pitch(Instrument.FLUTE) == "c''"
    assert Scale(ScaleKind.g, 2, 116).starting_pitch(Instrument.FLUTE) == "c''"
    assert Scale(ScaleKind.Bes, 2, 116).starting_pitch(Instrument.FLUTE) != DEFAULT_STARTING_PITCH


def test_default_starting_pitch_elsewhere() -> None:
    assert Scale(ScaleKind.C, 2, 116).starting_pitch(Instrument.FLUTE) == "c'"
    assert Scale(ScaleKind.Bes, 2, 116).starting_pitch(Instrument.OBOE) == "c'"


def test_scales_for_builds_one_per_kind() -> None:
    scales = scales_for([ScaleKind.G, ScaleKind.A], 2, 80)
    assert scales == [Scale(ScaleKind.G, 2, 80), Scale(ScaleKind.A, 2, 80)]


def test_page_keeps_highest_octave_of_duplicate_kind() -> None:
    page = _sample_page([Scale(ScaleKind.C, 1, 80), Scale(ScaleKind.C, 2, 80)])
    assert page.scales == [Scale(ScaleKind.C, 2, 80)]


def test_page_orders_by_note_pattern() -> None:
    page = _sample_page([Scale(ScaleKind.d, 1, 80), Scale(ScaleKind.C, 1, 80)])
    assert [scale.kind for scale in page.scales] == [ScaleKind.C, ScaleKind.d]


def test_page_orders_by_pattern_not_display_name() -> None:
    # "D Major" < "D Melodic Minor" by name, but "d e f g" < "d e fis" by pattern.
    page = _sample_page([Scale(ScaleKind.D, 1, 80), Scale(ScaleKind.d, 1, 80)])
    assert [scale.kind for scale in page.scales] == [ScaleKind.d, ScaleKind.D]
    page = _sample_page([Scale(ScaleKind.Ees, 1, 80), Scale(ScaleKind.e, 1, 80)])
    assert [scale.kind for scale in page.scales] == [ScaleKind.e, ScaleKind.Ees]


def test_page_scales_is_idempotent() -> None:
    page = _sample_page(scales_for(list(ScaleKind), 2, 80) + scales_for(list(ScaleKind), 1, 80))
    first = page.scales
    second = page.scales
    assert first == second
    assert len(first) == len(ScaleKind)


def test_page_empty_scales() -> None:
    assert _sample_page([]).scales == []


def test_page_scales_setter_replaces_raw_list() -> None:
    page = _sample_page([Scale(ScaleKind.C, 1, 80)])
    page.scales = [Scale(ScaleKind.G, 2, 80)]
    assert page.scales == [Scale(ScaleKind.G, 2, 80)]


def test_page_title() -> None:
    page = Page(Instrument.FLUTE, Clef.TREBLE, Orchestra.PHILHARMONIC, [])
    assert page.title == "Flute / Philharmonic Orchestra"


@pytest.mark.parametrize("orchestra", list(Orchestra))
def test_every_orchestra_has_a_description(orchestra: Orchestra) -> None:
    assert orchestra.long_description.endswith(".")
