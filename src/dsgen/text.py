"""
Generated English text and syllable words.

random_text fills a drawn target length with sentences. Each sentence is a
weighted grammar template whose letters are replaced by weighted words; the
last sentence is cut to fit. Words are spelled from syllables by reading a
number in base len(syllables) and draw nothing from any stream.

Usage:
    text = TextGenerator(store)
    text.random_text(20, 100, stream)   # "The good time be. An old week..."
    text.word(6, 10)                    # "cally"
"""

from __future__ import annotations

from .distributions import Distribution, DistributionStore
from .random.stream import RngStream
from .random.values import uniform_int

# Template letter -> distribution whose words replace it
GRAMMAR = {
    "A": "articles",
    "D": "adverbs",
    "J": "adjectives",
    "N": "nouns",
    "P": "prepositions",
    "T": "terminators",
    "V": "verbs",
    "X": "auxiliaries",
}

# Every generated web page points at the same placeholder
WEB_PAGE_URL = "http://www.foo.com"


class TextGenerator:
    """Text helpers bound to the English distributions of a store."""

    def __init__(self, store: DistributionStore) -> None:
        self.sentences = store.require("sentences", "template")
        self.syllables = store.require("syllables", "syllable")
        self.words = {letter: store.require(name, "word") for letter, name in GRAMMAR.items()}

    def sentence(self, stream: RngStream) -> str:
        """One template draw, then one draw per word in the template."""
        template = self.sentences.pick_random("template", stream)
        parts = []
        for char in template:
            words = self.words.get(char)
            parts.append(char if words is None else words.pick_random("word", stream))
        return "".join(parts)

    def random_text(self, min_length: int, max_length: int, stream: RngStream) -> str:
        """
        Text of a length drawn from [min_length, max_length].

        Sentences that follow a full stop start with a capital letter. The
        draw count varies with the sentences picked, so callers rely on the
        column's per-row budget to stay row-aligned.
        """
        target = uniform_int(min_length, max_length, stream)
        parts = []
        at_sentence_start = True
        while target > 0:
            generated = self.sentence(stream)
            if at_sentence_start and generated:
                generated = generated[0].upper() + generated[1:]
            at_sentence_start = generated.endswith(".")
            parts.append(generated[:target])
            target -= len(generated)
            if target > 0:
                parts.append(" ")
                target -= 1
        return "".join(parts)

    def word(self, seed: int, max_length: int) -> str:
        """
        Spell a number with syllables, lowest digit first.

        Stops at the first syllable that would push the word past
        ``max_length``; a seed of 0 gives an empty word.
        """
        size = self.syllables.size
        word = ""
        while seed > 0:
            syllable = self.syllables.value_at("syllable", seed % size)
            seed //= size
            if len(word) + len(syllable) > max_length:
                break
            word += syllable
        return word


def full_name(first_names: Distribution, last_names: Distribution, stream: RngStream) -> str:
    """First and last name drawn from one stream; first names use the combined frequencies."""
    first = first_names.pick_random("name", stream, "general")
    last = last_names.pick_random("name", stream)
    return f"{first} {last}"
