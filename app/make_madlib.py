"""
make_madlib.py - Produce a madlib story from a word dictionary and a story template.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

import argparse
import logging
import random
import sys

from madlib.dictionary import DictionaryLoader
from madlib.errors import EXIT_OK, EXIT_USAGE, MadLibError
from madlib.logger import Logger
from madlib.substitution import PhraseMaker

USAGE = "USAGE: make_madlib.py <dictionary file> <story template file> <output file> [--seed N] [--verbose]"


class UsageParser(argparse.ArgumentParser):
    """
    Argument parser that reports mistakes with a single usage line.
    """
    def error(self, message):
        sys.stderr.write(USAGE + "\n")
        self.exit(EXIT_USAGE)


class MadLib(object):
    """
    Encapsulates one run: load the dictionary, then fill in the story.
    """
    def __init__(self, dictionary_path:str, story_path:str, output_path:str, seed:int=None):
        """
        Class initializer.

        Args:
            dictionary_path (str): JSON (or CSV) word dictionary.
            story_path (str): Story template with [category] placeholders.
            output_path (str): Where the finished story goes.
            seed (int): Seed for the random word choices. Default = unseeded.
        """
        self.dictionary_path = dictionary_path
        self.story_path = story_path
        self.output_path = output_path
        self.rng = random.Random(seed)
        self.logger = Logger.get_logger()

    def create(self)->int:
        """
        Create the output file with random words inserted into the story file.

        Returns:
            (int): Exit code. 0 on success, otherwise the code of the failure's kind.
        """
        try:
            dictionary = DictionaryLoader(self.dictionary_path).load()
            phrase_maker = PhraseMaker(dictionary, rng=self.rng)
            phrase_maker.write_story(self.story_path, self.output_path)
        except MadLibError as e:
            self.logger.error("%s", e)
            return e.exit_code

        self.logger.info("Output file generated '%s'", self.output_path)
        return EXIT_OK


def get_options(argv:list=None)->argparse.Namespace:
    """
    Read command line options.

    Args:
        argv (list): Arguments to parse. Default = sys.argv[1:].

    Returns:
        (argparse.Namespace): Contains one entry for each command line option.
    """
    parser = UsageParser(description="Fill a story template with random words.", usage=USAGE)
    parser.add_argument("dictionary", help="JSON array of {\"word\": ..., \"type\": ...} entries, or a CSV with word,type columns.")
    parser.add_argument("story", help="Story template. Placeholders look like [noun], [verb], [person].")
    parser.add_argument("output", help="File to write the finished story to.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random word choices for a repeatable story.")
    parser.add_argument("--verbose", "-v", action="store_true", default=False, help="Log debugging detail.")
    return parser.parse_args(argv)


def main(argv:list=None)->int:
    """
    main routine for this app.

    Command line args:
        dictionary . . . . . Word dictionary file.
        story  . . . . . . . Story template file.
        output . . . . . . . Output file. Replaced only if the whole story is generated.

        --seed N . . . . . . Seed for the random word choices.

        --verbose  . . . . . Log debugging detail, including the parsed dictionary.
    """
    options = get_options(argv)

    if options.verbose:
        Logger.get_logger().setLevel(logging.DEBUG)

    madlib = MadLib(options.dictionary, options.story, options.output, seed=options.seed)
    return madlib.create()


if __name__ == "__main__":
    sys.exit(main())
