"""Assemble audition pages into one LilyPond document."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, TextIO

from auditionprep.fragments import BulletList, Header, Paragraph, Spacer, Title, bold
from auditionprep.logger_config import logger
from auditionprep.models import Instrument, Page, Scale

PRELUDE: Final[str] = r"""\paper {
  top-margin = 1\in
  left-margin = 1\in
  right-margin = 1\in
  bottom-margin = 1\in
  indent = 0\in
  print-page-number = ##f
  #(define fonts
    (set-global-fonts
     #:roman "Helvetica"
    ))
  tagline = ""
}
"""

# Scales are unmetered: no time signature, no bar lines.
SCORE_SUFFIX: Final[str] = r"""\layout {
    \context { \Staff \remove Time_signature_engraver }
    \context { \Staff \remove "Bar_engraver" }
}"""

SIGHTREADING_TEXT: Final[str] = (
    "You will be asked to sightread several excerpts. It will begin with easier excerpts "
    "and become more difficult. Those who wish to audition for concert orchestra should be "
    "familiar with famous orchestral excerpts for their instrument."
)

SOLO_INSTRUCTIONS: Final[list[str]] = [
    "Prepare one solo that best demonstrates your abilities.",
    "Choose your selection with guidance from your private teacher or orchestra/band director.",
    "Solos need not be memorized.",
    "You will be asked to stop before you reach the end of the piece.",
]

SCALE_INSTRUCTIONS: Final[list[str]] = [
    "Memorization of the scales is not required.",
    "At the audition students will choose the first scale and conductors will choose a second scale.",
    "See below for specific suggested (listed rhythms and tempos are general guidelines – "
    "please play scales in the range and tempo with which you are most comfortable).",
]

SCALES_LEAD_IN: Final[str] = "Here are the scales you should prepare:"


def _lines(*chunks: str) -> str:
    """Join chunks as lines, each terminated by a newline."""
    return "".join(chunk + "\n" for chunk in chunks)


def render_score(scale: Scale, instrument: Instrument) -> str:
    """Render one scale as a LilyPond ``\\score`` block."""
    return _lines(
        r"    \score {",
        r"    \header { " + f'piece = "{scale.display_name}, {scale.octave_description}" }}',
        r"        \relative " + scale.starting_pitch(instrument) + " {",
        r"        \key " + scale.key_signature,
        "            " + scale.note_sequence(instrument, scale.octaves),
        "        }",
        SCORE_SUFFIX,
        "    }",
    )


def render_page(page: Page) -> str:
    """Render one page as a LilyPond ``\\bookpart``."""
    scales = page.scales
    logger.info("%r keeps %d unique scale(s)", page, len(scales))

    parts = [
        _lines(
            r"\bookpart {",
            Title(page.title).lilypond_code,
            Paragraph(page.orchestra.long_description).lilypond_code,
            Header("1. Sightreading").lilypond_code,
            Paragraph(SIGHTREADING_TEXT).lilypond_code,
            Header("2. Solo").lilypond_code,
            BulletList(SOLO_INSTRUCTIONS).lilypond_code,
            Header("3. Scales").lilypond_code,
            BulletList(SCALE_INSTRUCTIONS).lilypond_code,
            Spacer().lilypond_code,
            Paragraph(bold(SCALES_LEAD_IN)).lilypond_code,
        )
    ]
    for scale in scales:
        parts.append(_lines(Spacer().lilypond_code))
        parts.append(render_score(scale, page.instrument))
    parts.append(_lines("}"))
    return "".join(parts)


def generate_lilypond_code(pages: Sequence[Page]) -> str:
    """
    Build the complete LilyPond document for *pages*.

    The prelude comes first, then one ``\\bookpart`` per page in the given
    order. With no pages the result is exactly PRELUDE.
    """
    chunks = [PRELUDE]
    for page in pages:
        logger.info("Rendering %s", page.title)
        chunks.append(render_page(page))
    return "".join(chunks)


class LilypondExporter:
    """Write generated LilyPond documents to a file or stream."""

    default_extension: Final[str] = ".ly"

    def __init__(self, pages: Sequence[Page]) -> None:
        self.pages = list(pages)

    def render(self) -> str:
        return generate_lilypond_code(self.pages)

    def write(self, stream: TextIO) -> None:
        stream.write(self.render())

    def export(self, output_path: str) -> None:
        """
        Render all pages and write the document to *output_path*.

        Raises:
            OSError: If the output file cannot be written.
        """
        content = self.render()
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
        logger.info("Wrote %d page(s) to %s", len(self.pages), output_path)
