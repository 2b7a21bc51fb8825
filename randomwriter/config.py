import os
import logging

# Problems found while reading the environment. Logging is not configured yet
# at import time, so the command line reports these once it is.
ENV_WARNINGS = []

# --- Input Configuration ---
# Encoding used when opening the training files named on the command line.
# Standard input keeps whatever encoding the terminal hands us.
ENCODING = os.environ.get('RANDOMWRITER_ENCODING', 'utf-8')

DEFAULT_CHUNK_SIZE = 4096
# Number of characters pulled from a stream per read call while learning.
try:
    READ_CHUNK_SIZE = int(os.environ.get('RANDOMWRITER_CHUNK_SIZE', DEFAULT_CHUNK_SIZE))
    if READ_CHUNK_SIZE <= 0:
        raise ValueError(READ_CHUNK_SIZE)
except ValueError:
    ENV_WARNINGS.append(
        f"RANDOMWRITER_CHUNK_SIZE must be a positive integer. Using the default of {DEFAULT_CHUNK_SIZE}."
    )
    READ_CHUNK_SIZE = DEFAULT_CHUNK_SIZE

# --- Generation Configuration ---
# Seed for the random source. Unset means seed from OS entropy, so every run differs.
try:
    SEED = int(os.environ['RANDOMWRITER_SEED']) if os.environ.get('RANDOMWRITER_SEED') else None
except ValueError:
    ENV_WARNINGS.append("RANDOMWRITER_SEED is not an integer. Ignoring it.")
    SEED = None

# --- Logging Configuration ---
LOG_FORMAT = '%(levelname)s: %(message)s'
LOG_LEVEL = os.environ.get('RANDOMWRITER_LOG_LEVEL', 'WARNING').upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    ENV_WARNINGS.append(f"Unknown RANDOMWRITER_LOG_LEVEL '{LOG_LEVEL}'. Using WARNING.")
    LOG_LEVEL = 'WARNING'
