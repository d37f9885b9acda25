"""Data models for audition packets: scales, instruments, orchestras and pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from auditionprep.theory import ScaleKind, check_complete


class Instrument(Enum):
    """Orchestral instrument; the value is its display name."""

    FLUTE = "Flute"
    OBOE = "Oboe"
    CLARINET = "Clarinet"
    BASSOON = "Bassoon"
    HORN = "Horn"
    TRUMPET = "Trumpet"
    TROMBONE = "Trombone"
    TUBA = "Tuba"
    PERCUSSION = "Percussion"
    HARP = "Harp"
    VIOLIN = "Violin"
    VIOLA = "Viola"
    CELLO = "Cello"
    BASS = "Bass"


class Clef(Enum):
    TREBLE = "treble"
    ALTO = "alto"
    BASS = "bass"


class Orchestra(Enum):
    """Ensemble level; the value is its display name."""

    CHAMBER_STRINGS = "Chamber Strings"
    PHILHARMONIC = "Philharmonic Orchestra"
    CONCERT = "Concert Orchestra"

    @property
    def long_description(self) -> str:
        return ORCHESTRA_DESCRIPTIONS[self]


ORCHESTRA_DESCRIPTIONS: dict[Orchestra, str] = {
    Orchestra.CHAMBER_STRINGS: (
        "SEMYO’s beginning string ensemble is open to string players with a minimum of "
        "one or two years of playing experience. Orchestra members will be introduced to "
        "basic ensemble playing and will learn teamwork while playing a well-rounded "
        "selection of repertoire."
    ),
    Orchestra.PHILHARMONIC: (
        "Philharmonic Orchestra is a full orchestra experience for students of all ages on "
        "string, woodwind, brass, and percussion instruments. String players typically need "
        "a minimum of 3-4 years of experience, and wind players typically need between 1 to "
        "2 years of experience. Literature includes arranged and original works."
    ),
    Orchestra.CONCERT: (
        "Concert Orchestra is a full orchestra experience for advanced students on string, "
        "woodwind, brass, and percussion instruments. Literature includes original "
        "masterworks for full symphony orchestra. Students will play music in all keys and "
        "utilize advanced bowing and string techniques."
    ),
}

check_complete(ORCHESTRA_DESCRIPTIONS, Orchestra, "ORCHESTRA_DESCRIPTIONS")


# ── Starting pitches ────────────────────────────────────────────────────────

DEFAULT_STARTING_PITCH = "c'"

#: Sparse (instrument, kind) exceptions to DEFAULT_STARTING_PITCH.
STARTING_PITCH_OVERRIDES: dict[tuple[Instrument, ScaleKind], str] = {
    (Instrument.FLUTE, kind): "c''"
    for kind in (ScaleKind.A, ScaleKind.a, ScaleKind.Aes, ScaleKind.Bes, ScaleKind.G, ScaleKind.g)
}


@dataclass(frozen=True)
class Scale:
    """
    One scale exercise in an audition packet.

    Attributes:
        kind:    The key/mode of the scale.
        octaves: How many octaves to play (expected >= 1, not validated).
        tempo:   Suggested tempo in BPM.
    """

    kind: ScaleKind
    octaves: int
    tempo: int

    @property
    def display_name(self) -> str:
        return self.kind.display_name

    @property
    def key_signature(self) -> str:
        return self.kind.key_signature

    @property
    def octave_description(self) -> str:
        """'1 Octave' or 'N Octaves'."""
        suffix = "s" if self.octaves > 1 else ""
        return f"{self.octaves} Octave{suffix}"

    def starting_pitch(self, instrument: Instrument) -> str:
        """Pitch that anchors LilyPond's ``\\relative`` block for *instrument*."""
        return STARTING_PITCH_OVERRIDES.get((instrument, self.kind), DEFAULT_STARTING_PITCH)

    def note_sequence(self, instrument: Instrument, octaves: int | None = None) -> str:
        """
        Write the scale out over *octaves* (defaults to the scale's own count).

        The one-octave pattern is repeated and the tonic is appended to close
        the scale. *instrument* is where per-instrument or per-clef spellings
        would hook in; none are needed yet.

        With ``octaves <= 0`` only the closing tonic remains, preceded by a
        space.
        """
        count = self.octaves if octaves is None else octaves
        pattern = self.kind.pattern
        return " ".join([pattern] * count) + " " + self.kind.tonic


def scales_for(kinds: Iterable[ScaleKind], octaves: int, tempo: int) -> list[Scale]:
    """Build one Scale per kind, all at the same octave count and tempo."""
    return [Scale(kind, octaves, tempo) for kind in kinds]


class Page:
    """
    One instrument's audition packet for one orchestra.

    The ``scales`` property never exposes the raw list: every read sorts it by
    the kind's note pattern (ascending) then octave count (descending), and
    keeps only the first scale of each kind, i.e. the one with the most
    octaves.
    """

    def __init__(
        self,
        instrument: Instrument,
        clef: Clef,
        orchestra: Orchestra,
        scales: Iterable[Scale],
    ) -> None:
        self.instrument = instrument
        self.clef = clef
        self.orchestra = orchestra
        self._scales: list[Scale] = list(scales)

    @property
    def scales(self) -> list[Scale]:
        ordered = sorted(self._scales, key=lambda scale: (scale.kind.pattern, -scale.octaves))
        seen: set[ScaleKind] = set()
        unique: list[Scale] = []
        for scale in ordered:
            if scale.kind in seen:
                continue
            seen.add(scale.kind)
            unique.append(scale)
        return unique

    @scales.setter
    def scales(self, value: Iterable[Scale]) -> None:
        self._scales = list(value)

    @property
    def title(self) -> str:
        return f"{self.instrument.value} / {self.orchestra.value}"

    def __repr__(self) -> str:
        return (
            f"Page({self.instrument.name}, clef={self.clef.name}, "
            f"orchestra={self.orchestra.name}, scales={len(self._scales)})"
        )
