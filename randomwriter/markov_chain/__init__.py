from .markov_chain import PatternLearner, PatternTable, PhraseGenerator
from .train import learn_patterns, open_training_files
from .generate import generate_phrase, write_random_phrase

__all__ = [
    'PatternLearner',
    'PatternTable',
    'PhraseGenerator',
    'generate_phrase',
    'learn_patterns',
    'open_training_files',
    'write_random_phrase',
]
