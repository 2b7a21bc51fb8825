import logging
import random
from typing import Dict, Iterable, List, Optional, TextIO

from randomwriter import config
from randomwriter.errors import EmptyTableError, InvalidArgumentError, StreamReadError

logger = logging.getLogger(__name__)

# Context string of exactly `sample_size` characters -> every character seen
# right after it, in reading order, duplicates kept.
PatternTable = Dict[str, List[str]]


def _require_positive_int(value, name):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


def _iter_chars(stream, chunk_size):
    """Yields the characters of a text stream one at a time, reading in chunks."""
    while True:
        try:
            chunk = stream.read(chunk_size)
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(f"Unable to read from provided stream: {e}") from e
        if not chunk:
            return
        yield from chunk


class PatternLearner:
    """
    Scans character streams into a table of fixed-length contexts and the
    characters observed to follow each of them.
    """
    def __init__(self, sample_size, chunk_size=None, strict=False):
        self.sample_size = _require_positive_int(sample_size, "Sample size")
        self.chunk_size = chunk_size or config.READ_CHUNK_SIZE
        self.strict = strict

    def learn(self, streams: Iterable[TextIO]) -> PatternTable:
        """
        Builds the pattern table from every stream, in order.

        The sliding context is reset between streams, so no context ever spans
        two inputs. A stream too short to prime a full context adds nothing and
        is logged; with `strict` it raises InvalidArgumentError instead, so a
        lenient run only fails later, with EmptyTableError, when nothing at all
        was learned. Any read failure aborts the whole pass.
        """
        patterns: PatternTable = {}
        observations = 0

        for index, stream in enumerate(streams):
            chars = _iter_chars(stream, self.chunk_size)
            key = ''.join(c for _, c in zip(range(self.sample_size), chars))
            if len(key) < self.sample_size:
                message = (
                    f"Input #{index + 1} holds {len(key)} characters, fewer than the sample size of "
                    f"{self.sample_size}"
                )
                if self.strict:
                    raise InvalidArgumentError(f"{message}.")
                logger.warning(f"{message}; nothing learned from it.")
                continue

            for value in chars:
                values = patterns.get(key)
                if values is None:
                    patterns[key] = [value]
                else:
                    values.append(value)
                key = key[1:] + value
                observations += 1

        logger.info(f"Learned {len(patterns)} contexts from {observations} observations.")
        return patterns


class PhraseGenerator:
    """
    Random walk over a pattern table.

    `rng` is anything with a `choice(sequence)` method; a `random.Random` is
    created when none is given.
    """
    def __init__(self, rng=None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, length, patterns: PatternTable) -> str:
        _require_positive_int(length, "Length")
        if not patterns:
            raise EmptyTableError(
                "No patterns were learned. Every input was shorter than the sample size plus one character."
            )

        # Insertion order keeps seeded runs reproducible
        keys = list(patterns)

        key = self.rng.choice(keys)
        phrase = [key]
        printed = len(key)

        while printed <= length:
            values = patterns.get(key)

            # Dead end: jump to a random context and print it whole
            while values is None:
                key = self.rng.choice(keys)
                values = patterns.get(key)
                if values is not None:
                    logger.debug(f"Context dead end, restarting from {key!r}")
                    phrase.append(key)
                    printed += len(key)

            value = self.rng.choice(values)
            phrase.append(value)
            key = key[1:] + value
            printed += 1

        return ''.join(phrase)
