"""Definitions of the audition packets this program can render."""

from __future__ import annotations

from collections.abc import Iterable

from auditionprep.models import Clef, Instrument, Orchestra, Page, Scale, scales_for
from auditionprep.theory import FOUR_SHARPS_AND_FLATS, ScaleKind

PHILHARMONIC_OCTAVES = 2
PHILHARMONIC_TEMPO = 116
CHAMBER_STRINGS_TEMPO = 80

#: Clef each instrument reads in its Philharmonic packet.
PHILHARMONIC_CLEFS: dict[Instrument, Clef] = {
    Instrument.FLUTE: Clef.TREBLE,
    Instrument.CLARINET: Clef.TREBLE,
    Instrument.OBOE: Clef.TREBLE,
    Instrument.BASSOON: Clef.TREBLE,
    Instrument.HORN: Clef.TREBLE,
    Instrument.TRUMPET: Clef.TREBLE,
    Instrument.TROMBONE: Clef.TREBLE,
    Instrument.TUBA: Clef.TREBLE,
    Instrument.PERCUSSION: Clef.TREBLE,
    Instrument.VIOLIN: Clef.TREBLE,
    Instrument.VIOLA: Clef.ALTO,
    Instrument.CELLO: Clef.BASS,
    Instrument.BASS: Clef.BASS,
}


def philharmonic_scales() -> list[Scale]:
    return scales_for(FOUR_SHARPS_AND_FLATS, PHILHARMONIC_OCTAVES, PHILHARMONIC_TEMPO)


def beginner_violin_scales() -> list[Scale]:
    return scales_for(
        [ScaleKind.G, ScaleKind.A, ScaleKind.Bes], 2, CHAMBER_STRINGS_TEMPO
    ) + scales_for([ScaleKind.F, ScaleKind.d, ScaleKind.C], 1, CHAMBER_STRINGS_TEMPO)


def chamber_strings_violin() -> Page:
    """
    Chamber Strings violin packet.

    C major appears at one and two octaves; the page keeps the two-octave one.
    """
    scales = beginner_violin_scales() + scales_for(
        [ScaleKind.C, ScaleKind.D, ScaleKind.g], 2, CHAMBER_STRINGS_TEMPO
    )
    return Page(Instrument.VIOLIN, Clef.TREBLE, Orchestra.CHAMBER_STRINGS, scales)


def philharmonic_pages() -> list[Page]:
    return [
        Page(instrument, clef, Orchestra.PHILHARMONIC, philharmonic_scales())
        for instrument, clef in PHILHARMONIC_CLEFS.items()
    ]


def available_pages() -> list[Page]:
    """Every packet defined, Philharmonic pages first."""
    return philharmonic_pages() + [chamber_strings_violin()]


def audition_materials() -> list[Page]:
    """The packets rendered when no selection is given: flute for Philharmonic."""
    return [
        page
        for page in philharmonic_pages()
        if page.instrument is Instrument.FLUTE
    ]


def select_pages(
    instruments: Iterable[Instrument] = (),
    orchestras: Iterable[Orchestra] = (),
) -> list[Page]:
    """
    Filter available_pages() by instrument and/or orchestra.

    An empty filter matches everything. Definition order is preserved.

    Raises:
        ValueError: If no defined page matches the filters.
    """
    wanted_instruments = set(instruments)
    wanted_orchestras = set(orchestras)
    pages = [
        page
        for page in available_pages()
        if (not wanted_instruments or page.instrument in wanted_instruments)
        and (not wanted_orchestras or page.orchestra in wanted_orchestras)
    ]
    if not pages:
        raise ValueError("No audition packet matches the given filters.")
    return pages
