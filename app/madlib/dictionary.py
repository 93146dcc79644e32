"""
dictionary.py - Load word dictionaries into category-indexed word pools.

A dictionary is a JSON array of objects, each naming a word and its type:

    [
        {"word": "Alice", "type": "person"},
        {"word": 42, "type": "number"},
        . . .
    ]

Dictionaries whose file name ends in ".csv" are read as a table with "word" and
"type" columns instead, unless the file holds a JSON array.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

from collections.abc import Mapping
from decimal import Decimal
import io
import json
import re

import pandas as pd

from madlib.category import Category
from madlib.errors import InputNotFound, IOFailure, MalformedInput, MissingField
from madlib.logger import Logger

WORD = "word"
TYPE = "type"
ENCODING = "utf-8"

# JSON insignificant whitespace.
WHITESPACE = re.compile(r"[ \t\n\r]*")


class WordDictionary(Mapping):
    """
    Read-only mapping of Category to the words declared for it, in declaration order.
    Categories without words are simply absent.
    """
    def __init__(self, pools:dict=None):
        """
        Class initializer.

        Args:
            pools (dict): Key is a Category, value is an iterable of words.
        """
        self._pools = {category: tuple(words) for category, words in (pools or {}).items() if words}

    def __getitem__(self, category:Category)->tuple:
        return self._pools[category]

    def __iter__(self):
        return iter(self._pools)

    def __len__(self)->int:
        return len(self._pools)

    def __repr__(self)->str:
        counts = ", ".join("{}={}".format(category.name, len(words)) for category, words in self._pools.items())
        return "WordDictionary({})".format(counts)


class DictionaryLoader(object):
    """
    Builds a WordDictionary from a dictionary file, validating every entry.
    """
    def __init__(self, path:str):
        """
        Class initializer.

        Args:
            path (str): Path to a JSON (or CSV) dictionary file.
        """
        self.path = str(path)
        self.logger = Logger.get_logger("madlib.dictionary")
        self.pools = {}

    def load(self)->WordDictionary:
        """
        Read and validate the dictionary file.

        Raises:
            InputNotFound: If the file cannot be opened.
            IOFailure: If the file cannot be read or decoded.
            MalformedInput: If the file is not a well-formed document.
            MissingField: If an entry lacks a usable word or type.
            UnknownCategory: If an entry's type is not a known category.

        Returns:
            (WordDictionary): The word pools.
        """
        self.pools = {}
        text = self.read_text()
        if self.path.lower().endswith(".csv") and not text.lstrip().startswith("["):
            self.load_csv(text)
        else:
            self.load_json(text)

        dictionary = WordDictionary(self.pools)
        self.logger.debug("Parsed dictionary %s: %s", self.path, dictionary)
        return dictionary

    def read_text(self)->str:
        """
        Read the whole dictionary file as text.
        """
        try:
            with open(self.path, "r", encoding=ENCODING) as infile:
                return infile.read()
        except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
            raise InputNotFound("Dictionary file could not be opened ({}).".format(e.strerror), self.path) from e
        except UnicodeDecodeError as e:
            raise IOFailure("Dictionary file is not valid {} text.".format(ENCODING), self.path) from e
        except OSError as e:
            raise IOFailure("There was a problem reading the dictionary file ({}).".format(e), self.path) from e

    def load_json(self, text:str):
        """
        Walk the top-level array one element at a time, adding each entry to our pools.

        Args:
            text (str): Contents of the dictionary file.
        """
        decoder = json.JSONDecoder(parse_float=Decimal, parse_constant=reject_constant)

        position = self.skip_whitespace(text, 0)
        if not text.startswith("[", position):
            raise MalformedInput("Dictionary must be a JSON array of word entries.",
                                 self.path, self.line_at(text, position))

        position = self.skip_whitespace(text, position + 1)
        if text.startswith("]", position):
            position += 1
        else:
            while True:
                entry_line = self.line_at(text, position)
                try:
                    entry, position = decoder.raw_decode(text, position)
                except json.JSONDecodeError as e:
                    raise MalformedInput("Dictionary is not formatted correctly. {}.".format(e.msg),
                                         self.path, e.lineno) from e
                except ValueError as e:
                    raise MalformedInput("Dictionary is not formatted correctly. {}.".format(e),
                                         self.path, entry_line) from e

                if not isinstance(entry, dict):
                    raise MalformedInput("Dictionary entries must be objects.", self.path, entry_line)
                self.add_entry(entry.get(WORD), entry.get(TYPE), entry_line)

                position = self.skip_whitespace(text, position)
                if text.startswith(",", position):
                    position = self.skip_whitespace(text, position + 1)
                elif text.startswith("]", position):
                    position += 1
                    break
                else:
                    raise MalformedInput("Dictionary is not formatted correctly. Expecting ',' or ']'.",
                                         self.path, self.line_at(text, position))

        position = self.skip_whitespace(text, position)
        if position != len(text):
            raise MalformedInput("Dictionary has extra data after the word array.",
                                 self.path, self.line_at(text, position))

    def load_csv(self, text:str):
        """
        Read a table of words with "word" and "type" columns.

        Args:
            text (str): Contents of the dictionary file.
        """
        try:
            df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise MalformedInput("Dictionary table is empty.", self.path, 1) from e
        except pd.errors.ParserError as e:
            raise MalformedInput("Dictionary table is not formatted correctly. {}.".format(e), self.path) from e

        for column in [WORD, TYPE]:
            if column not in df.columns:
                raise MissingField("Dictionary table has no '{}' column.".format(column), self.path, 1)

        # Row 0 sits on line 2, under the header.
        for i, row in df.iterrows():
            self.add_entry(row[WORD] or None, row[TYPE] or None, i + 2)

    def add_entry(self, word, word_type, line:int):
        """
        Validate one entry and append its word to the pool for its category.

        Args:
            word: Value found for "word" (str, int, Decimal, or anything else the input held).
            word_type: Value found for "type".
            line (int): Line where the entry begins.
        """
        word = plain_text(word)
        if word is None:
            raise MissingField("Dictionary entry is missing a usable '{}' value.".format(WORD), self.path, line)
        if not isinstance(word_type, str):
            raise MissingField("Dictionary entry is missing a usable '{}' value.".format(TYPE), self.path, line)

        category = Category.resolve(word_type, self.path, line)
        self.pools.setdefault(category, []).append(word)

    @staticmethod
    def skip_whitespace(text:str, position:int)->int:
        return WHITESPACE.match(text, position).end()

    @staticmethod
    def line_at(text:str, position:int)->int:
        return text.count("\n", 0, position) + 1


def plain_text(value)->str:
    """
    Convert a word value to the text that goes into a story.

    Strings are used as-is, numbers in plain decimal notation (no exponent).

    Returns:
        (str): The word, or None if the value cannot be used as a word.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return None


def reject_constant(name:str):
    raise ValueError("{} is not a number".format(name))


def load_dictionary(path:str)->WordDictionary:
    """
    Convenience wrapper around DictionaryLoader.
    """
    return DictionaryLoader(path).load()
