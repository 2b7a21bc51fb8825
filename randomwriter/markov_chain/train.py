import logging
from contextlib import ExitStack
from pathlib import Path
from typing import List, Sequence

from tqdm import tqdm

from randomwriter import config
from randomwriter.errors import FileUnreadableError
from .markov_chain import PatternLearner, PatternTable

logger = logging.getLogger(__name__)


def open_training_files(stack: ExitStack, paths: Sequence[Path], encoding=None) -> List:
    """
    Opens every training file up front and registers it on `stack`.

    Fails on the first file that cannot be opened, before anything is read.
    Files opened so far are closed when the stack unwinds.
    """
    encoding = encoding or config.ENCODING
    streams = []
    for path in paths:
        try:
            streams.append(stack.enter_context(open(path, 'r', encoding=encoding)))
        except OSError as e:
            raise FileUnreadableError(path, e.strerror or e) from e
        logger.debug(f"Opened {path}")
    return streams


def learn_patterns(sample_size, streams, progress=False, strict=False) -> PatternTable:
    learner = PatternLearner(sample_size, strict=strict)
    return learner.learn(
        tqdm(streams, desc="Learning patterns", unit="input", disable=not progress)
    )

