"""Document fragments that render plain text into LilyPond markup."""

from __future__ import annotations

from abc import ABC, abstractmethod


def bold(text: str) -> str:
    """Wrap *text* in a LilyPond ``\\bold`` markup command."""
    return r"\bold { " + text + "}"


class Fragment(ABC):
    """Abstract document fragment."""

    @property
    @abstractmethod
    def lilypond_code(self) -> str:
        """LilyPond markup for this fragment."""


class Title(Fragment):
    """Book-part subtitle followed by a blank line."""

    def __init__(self, text: str) -> None:
        self.text = text

    @property
    def lilypond_code(self) -> str:
        return r'\header { subtitle = "' + self.text + r'"} \markup { \vspace #1 }'


class Header(Fragment):
    """Enlarged section heading with vertical space above and below."""

    def __init__(self, text: str) -> None:
        self.text = text

    @property
    def lilypond_code(self) -> str:
        return (
            r"\markup { \vspace #1 } "
            r'\markup { \fontsize #3 { "' + self.text + r'"} } '
            r"\markup { \vspace #1 }"
        )


class Paragraph(Fragment):
    """Word-wrapped block of body text."""

    def __init__(self, text: str) -> None:
        self.text = text

    @property
    def lilypond_code(self) -> str:
        return r"\markup { \wordwrap { " + self.text + " } }"


class BulletList(Fragment):
    """One bulleted, word-wrapped markup line per item."""

    def __init__(self, items: list[str]) -> None:
        self.items = list(items)

    @property
    def lilypond_code(self) -> str:
        return "\n".join(
            r"\markup { • \hspace #1 \wordwrap { " + item + r"} \vspace #1 }"
            for item in self.items
        )


class Spacer(Fragment):
    """One line of vertical space."""

    @property
    def lilypond_code(self) -> str:
        return r"\markup { \vspace #1 }"
