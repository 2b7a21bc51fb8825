"""
Command-line entry point: learns the character patterns of some text and
prints a random phrase that follows them.

    random-writer SEED_SIZE LENGTH [FILE]...

With no files, the training text is read from standard input.
"""
import logging
import random
import sys
from contextlib import ExitStack
from pathlib import Path

import click

from randomwriter import config
from randomwriter.errors import RandomWriterError
from randomwriter.markov_chain import open_training_files, write_random_phrase

logger = logging.getLogger(__name__)


def _positive_int(message):
    def callback(ctx, param, value):
        try:
            number = int(value)
        except ValueError:
            raise click.BadParameter(message)
        if number <= 0:
            raise click.BadParameter(message)
        return number
    return callback


def _configure_logging(verbose):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = config.LOG_LEVEL
    logging.basicConfig(level=level, format=config.LOG_FORMAT, force=True)
    for warning in config.ENV_WARNINGS:
        logger.warning(warning)


@click.command()
@click.argument('sample_size', metavar='SEED_SIZE',
                callback=_positive_int("Seed size not a valid positive integer."))
@click.argument('length', metavar='LENGTH',
                callback=_positive_int("Length not a valid positive integer."))
@click.argument('files', nargs=-1,
                type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path))
@click.option('--seed', type=int, default=config.SEED, show_default=True,
              help="Seed for the random source (defaults to $RANDOMWRITER_SEED).")
@click.option('--encoding', default=config.ENCODING, show_default=True,
              help="Encoding of the training files.")
@click.option('--progress/--no-progress', default=False,
              help="Show a progress bar over the training inputs on stderr.")
@click.option('--strict/--no-strict', default=False,
              help="Fail when any input is shorter than SEED_SIZE instead of skipping it.")
@click.option('--verbose', '-v', count=True, help="Log more detail to stderr (repeat for debug output).")
@click.pass_context
def main(ctx, sample_size, length, files, seed, encoding, progress, strict, verbose):
    """
    Learns which character follows every SEED_SIZE-character context in the
    training text, then prints a random phrase of at least LENGTH characters.
    """
    _configure_logging(verbose)

    try:
        with ExitStack() as stack:
            if files:
                sources = open_training_files(stack, files, encoding=encoding)
            else:
                sources = [sys.stdin]

            stdout = sys.stdout
            write_random_phrase(
                sample_size, length, sources, stdout,
                rng=random.Random(seed), progress=progress, strict=strict,
            )
            stdout.flush()
    except RandomWriterError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)


if __name__ == '__main__':
    main()
