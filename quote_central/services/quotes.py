"""The fixed quote table and the uniform random selector over it."""

from __future__ import annotations

import random
from typing import NamedTuple, Optional, Sequence

from quote_central.core.config import config
from quote_central.core.exceptions import EmptyQuoteTableError


class Quote(NamedTuple):
    """A quote with the synthesized voice used to read it.

    ``lead`` is any text preceding the voice tag in the served string.
    """

    voice: str
    text: str
    author: str
    lead: str = ""

    def to_ssml(self, audio_url: str) -> str:
        """Render as a voice-tagged sentence followed by the shared audio clip."""
        return (
            f'{self.lead}<voice name = "{self.voice}"> {self.text} By {self.author}.</voice>'
            f'{audio_tag(audio_url)}'
        )


def audio_tag(url: str) -> str:
    """Speech markup that plays the clip at ``url``."""
    return f"<audio src ='{url}'/>"


QUOTES: tuple[Quote, ...] = (
    Quote(
        "Joey",
        "Just because something doesn’t do what you planned it to do, "
        "doesn’t mean it’s useless.",
        "Thomas Edison",
    ),
    Quote(
        "Matthew",
        "One machine can do the work of fifty ordinary men. "
        "No machine can do the work of one extraordinary man.",
        "Elbert Hubbard",
        lead=" ",
    ),
    Quote(
        "Brian",
        "Tell me and I forget. Teach me and I remember. Involve me and I learn.",
        "Benjamin Franklin",
    ),
    Quote(
        "Matthew",
        "It does not matter how slowly you go as long as you do not stop.",
        "Confucius",
    ),
    Quote("Kendra", "Set your goals high, and dont stop till you get there.", "Bo Jackson"),
    Quote(
        "Joey",
        "Our greatest weakness lies in giving up. "
        "The most certain way to succeed is always to try just one more time.",
        "Thomas Edison",
    ),
    Quote("Matthew", "If you can dream it, you can do it.", "Walt Disney"),
    Quote(
        "Brian",
        "You cannot cross the sea merely by standing and staring at the water.",
        "Rabindranath Tagore",
    ),
    Quote(
        "Joey",
        "If you want to conquer fear, dont sit at home and think about it. "
        "Go out and get busy.",
        "Dale Carnegie",
    ),
    Quote("Matthew", "The secret of getting ahead is getting started.", "Mark Twain"),
    Quote("Brian", "Without hard work, nothing grows but weeds.", "Gordon B. Hinckley"),
    Quote("Joey", "Quality is not an act, it is a habit.", "Aristotle"),
    Quote(
        "Matthew",
        "Start where you are. Use what you have. Do what you can.",
        "Arthur Ashe",
    ),
    Quote("Brian", "What you do today can improve all your tomorrows.", "Ralph Marston"),
    Quote("Joey", "Dont watch the Clock. Do what it does. Keep going.", "Sam Levenson"),
    Quote("Matthew", "Aim for the moon. If you miss, you may hit a star.", "W. Clement Stone"),
)


def build_quote_table(
    quotes: Sequence[Quote] = QUOTES, audio_url: Optional[str] = None
) -> tuple[str, ...]:
    """Flatten quotes into the speech strings served by the quote intent."""
    url = audio_url or config.QUOTE_AUDIO_URL
    return tuple(quote.to_ssml(url) for quote in quotes)


QUOTE_TABLE: tuple[str, ...] = build_quote_table()


def select_quote(
    table: Sequence[str] = QUOTE_TABLE, rng: Optional[random.Random] = None
) -> str:
    """Return one entry of ``table`` chosen uniformly at random."""
    if not table:
        raise EmptyQuoteTableError("quote table is empty")
    source = rng if rng is not None else random
    return table[source.randrange(len(table))]


__all__ = [
    "Quote",
    "QUOTES",
    "QUOTE_TABLE",
    "audio_tag",
    "build_quote_table",
    "select_quote",
]
