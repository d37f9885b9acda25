"""Music theory tables: scale kinds, their spellings, names and key signatures."""

from dataclasses import dataclass
from enum import Enum


class ScaleKind(Enum):
    """
    One musical key/mode used in the audition packets.

    Member names follow LilyPond pitch names; an upper-case tonic is a major
    key, a lower-case tonic is a minor key.
    """

    C = "C"
    c = "c"
    cis = "cis"
    D = "D"
    d = "d"
    E = "E"
    e = "e"
    Ees = "Ees"
    F = "F"
    f = "f"
    fis = "fis"
    G = "G"
    g = "g"
    A = "A"
    a = "a"
    Aes = "Aes"
    Bes = "Bes"
    b = "b"

    @property
    def pattern(self) -> str:
        """Space-separated LilyPond pitches of one octave, tonic first."""
        return SCALE_TABLE[self].pattern

    @property
    def display_name(self) -> str:
        return SCALE_TABLE[self].display_name

    @property
    def key_signature(self) -> str:
        return SCALE_TABLE[self].key_signature

    @property
    def tonic(self) -> str:
        return self.pattern.split(" ", maxsplit=1)[0]


@dataclass(frozen=True)
class ScaleSpelling:
    """
    How a scale kind is written out.

    Attributes:
        pattern:       One octave of pitches in LilyPond notation, e.g. "c d e f g a b".
        display_name:  Human-readable name, e.g. "C Major".
        key_signature: Argument of LilyPond's ``\\key`` command, e.g. "c \\major".
    """

    pattern: str
    display_name: str
    key_signature: str


SCALE_TABLE: dict[ScaleKind, ScaleSpelling] = {
    ScaleKind.C: ScaleSpelling("c d e f g a b", "C Major", r"c \major"),
    ScaleKind.c: ScaleSpelling("c d ees f g a b", "C Melodic Minor", r"c \minor"),
    ScaleKind.cis: ScaleSpelling("cis dis e fis gis a bis", "C-sharp Harmonic Minor", r"cis \minor"),
    ScaleKind.D: ScaleSpelling("d e fis g a b cis", "D Major", r"d \major"),
    ScaleKind.d: ScaleSpelling("d e f g a b cis", "D Melodic Minor", r"d \minor"),
    ScaleKind.E: ScaleSpelling("e fis gis a b cis dis", "E Major", r"e \major"),
    ScaleKind.e: ScaleSpelling("e fis g a b cis dis", "E Melodic Minor", r"e \minor"),
    ScaleKind.Ees: ScaleSpelling("ees f g aes bes c d", "E-flat Major", r"ees \major"),
    ScaleKind.F: ScaleSpelling("f g a bes c d e", "F Major", r"f \major"),
    ScaleKind.f: ScaleSpelling("f g aes bes c d e", "F Melodic Minor", r"f \minor"),
    ScaleKind.fis: ScaleSpelling("fis gis a b cis dis e", "F-sharp Melodic Minor", r"fis \minor"),
    ScaleKind.G: ScaleSpelling("g a b c d e fis", "G Major", r"g \major"),
    ScaleKind.g: ScaleSpelling("g a bes c d e fis", "G Melodic Minor", r"g \minor"),
    ScaleKind.A: ScaleSpelling("a b cis d e fis gis", "A Major", r"a \major"),
    ScaleKind.a: ScaleSpelling("a b c d e fis gis", "A Melodic Minor", r"a \minor"),
    ScaleKind.Aes: ScaleSpelling("aes bes c des ees f g", "A-flat Major", r"aes \major"),
    ScaleKind.Bes: ScaleSpelling("bes c d ees f g a", "B-flat Major", r"bes \major"),
    ScaleKind.b: ScaleSpelling("b cis d e fis gis ais", "B Melodic Minor", r"b \minor"),
}

#: Every key up to four sharps or flats, majors first.
FOUR_SHARPS_AND_FLATS: list[ScaleKind] = [
    ScaleKind.C, ScaleKind.G, ScaleKind.D, ScaleKind.E, ScaleKind.A,
    ScaleKind.F, ScaleKind.Bes, ScaleKind.Ees, ScaleKind.Aes,
    ScaleKind.a, ScaleKind.e, ScaleKind.b, ScaleKind.cis, ScaleKind.fis,
    ScaleKind.d, ScaleKind.g, ScaleKind.c, ScaleKind.f,
]


def check_complete(table: dict, enum_type: type[Enum], table_name: str) -> None:
    """
    Raise RuntimeError unless *table* has an entry for every member of *enum_type*.

    Lookup tables keyed by an enum are checked once at import so a missing
    entry stops the program immediately instead of surfacing mid-render.
    """
    missing = [member.name for member in enum_type if member not in table]
    if missing:
        raise RuntimeError(f"{table_name} has no entry for: {', '.join(missing)}")


check_complete(SCALE_TABLE, ScaleKind, "SCALE_TABLE")
