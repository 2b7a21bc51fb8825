from typing import Sequence, TextIO

from .markov_chain import PhraseGenerator
from .train import learn_patterns


def generate_phrase(length, patterns, rng=None) -> str:
    return PhraseGenerator(rng=rng).generate(length, patterns)


def write_random_phrase(sample_size, length, sources: Sequence[TextIO], sink: TextIO, rng=None, progress=False,
                        strict=False) -> str:
    """
    Learns from `sources`, then writes a generated phrase of at least `length`
    characters to `sink`.

    Nothing is written unless learning and generation both succeed. The
    sources are read but not closed; whoever opened them owns them.
    """
    patterns = learn_patterns(sample_size, sources, progress=progress, strict=strict)
    phrase = generate_phrase(length, patterns, rng=rng)
    sink.write(phrase)
    return phrase
