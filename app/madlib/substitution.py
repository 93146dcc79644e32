"""
substitution.py - Create stories from templates and a word dictionary.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

import os
import random
import stat
import tempfile

from madlib.category import Category
from madlib.errors import EmptyPool, InputNotFound, IOFailure
from madlib.logger import Logger
from madlib.scanner import Placeholder, scan_line

ENCODING = "utf-8"


class PhraseMaker(object):
    """
    Encapsulates a phrase maker's behavior.
    """
    def __init__(self, dictionary, rng:random.Random=None):
        """
        Class initializer.

        Args:
            dictionary (WordDictionary): Key is a Category. Value is the words of that category.
            rng (random.Random): Source of randomness. Pass a seeded instance for repeatable
                stories. Default = a new, unseeded random.Random.
        """
        self.dictionary = dictionary
        self.rng = rng if rng is not None else random.Random()
        self.logger = Logger.get_logger("madlib.substitution")

    def random_word(self, name:str, path:str=None, line:int=None)->str:
        """
        Pick a random word for a placeholder name.

        Args:
            name (str): Placeholder name, e.g. "verb" from "[verb]".
            path (str): Template path, for diagnostics.
            line (int): Template line number, for diagnostics.

        Raises:
            UnknownCategory: If the name is not a known category.
            EmptyPool: If the dictionary has no words of that category.

        Returns:
            (str): A word from the category's pool.
        """
        category = Category.resolve(name, path, line)
        words = self.dictionary.get(category)
        if not words:
            raise EmptyPool("The dictionary has no words of type '{}'.".format(category.name.lower()), path, line)
        return words[self.rng.randrange(len(words))]

    def make(self, template:str, path:str=None, line:int=None)->str:
        """
        Substitute each placeholder in a template line with a randomly selected word.

        Every placeholder is drawn independently, so "[person] met [person]" may name
        the same person twice.

        Args:
            template (str): Line with square brackets around categories, "[person] was [adverb] [verb]ing."
            path (str): Template path, for diagnostics.
            line (int): Template line number, for diagnostics.

        Returns:
            (str): The final phrase.
        """
        parts = []
        for segment in scan_line(template):
            if isinstance(segment, Placeholder):
                parts.append(self.random_word(segment.name, path, line))
            else:
                parts.append(segment.text)
        return "".join(parts)

    def write_story(self, template_path:str, output_path:str)->int:
        """
        Fill in every line of a template file and write the result to the output file.

        Empty template lines produce no output. The output file is replaced only when the
        whole template has been processed; on failure it is left untouched. A symlinked
        output is written through to its target.

        Args:
            template_path (str): Story template to read.
            output_path (str): Where to write the story.

        Raises:
            InputNotFound: If the template or the output location cannot be opened.
            IOFailure: If reading or writing fails part way.
            UnknownCategory, EmptyPool: If a placeholder cannot be filled.

        Returns:
            (int): Number of lines written.
        """
        template_path = str(template_path)
        output_path = str(output_path)
        target_path = os.path.realpath(output_path)
        temp_path = None
        count = 0

        if os.path.isdir(target_path):
            raise InputNotFound("Output path is a directory.", output_path)

        try:
            with open(template_path, "r", encoding=ENCODING) as reader:
                try:
                    writer = tempfile.NamedTemporaryFile(
                        mode="w", encoding=ENCODING, delete=False,
                        dir=os.path.dirname(target_path),
                        prefix=".{}.".format(os.path.basename(target_path)), suffix=".tmp")
                except OSError as e:
                    raise InputNotFound("Output file could not be created ({}).".format(e.strerror), output_path) from e

                temp_path = writer.name
                with writer:
                    os.chmod(temp_path, output_mode(target_path))
                    for line_number, line in enumerate(reader, start=1):
                        if line.endswith("\n"):
                            line = line[:-1]
                        if not line:
                            continue
                        writer.write(self.make(line, template_path, line_number))
                        writer.write("\n")
                        count += 1

            os.replace(temp_path, target_path)
            temp_path = None
        except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
            if e.filename is not None and os.path.abspath(str(e.filename)) == os.path.abspath(template_path):
                raise InputNotFound("Template file could not be opened ({}).".format(e.strerror), template_path) from e
            if e.filename2 is not None and os.path.abspath(str(e.filename2)) == target_path:
                raise InputNotFound("Output file could not be replaced ({}).".format(e.strerror), output_path) from e
            raise IOFailure("There was a problem writing the output file ({}).".format(e), output_path) from e
        except UnicodeDecodeError as e:
            raise IOFailure("Template file is not valid {} text.".format(ENCODING), template_path) from e
        except OSError as e:
            raise IOFailure("There was a problem reading file '{}' or writing file '{}' ({})."
                            .format(template_path, output_path, e), output_path) from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)

        self.logger.debug("Wrote %s lines to %s", count, output_path)
        return count


def output_mode(path:str)->int:
    """
    Permission bits for a new story file: those of the file being replaced, or the
    default for a new file under the current umask.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
