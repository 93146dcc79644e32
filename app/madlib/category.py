"""
category.py - The closed set of word categories.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

from enum import Enum

from madlib.errors import UnknownCategory


class Category(Enum):
    """
    Grammatical category of a word. Templates refer to these as [noun], [verb], etc.
    """
    NUMBER = "NUMBER"
    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"
    PLACE = "PLACE"
    PERSON = "PERSON"
    NOUN = "NOUN"
    VERB = "VERB"

    @classmethod
    def resolve(cls, name:str, path:str=None, line:int=None)->"Category":
        """
        Find the category for a name, ignoring ASCII case.

        Args:
            name (str): Category name from a dictionary entry or template placeholder.
            path (str): File the name came from, for diagnostics.
            line (int): Line the name came from, for diagnostics.

        Raises:
            UnknownCategory: If the name is not one of our categories.

        Returns:
            (Category): The matching category.
        """
        if isinstance(name, str) and name.isascii():
            try:
                return cls[name.upper()]
            except KeyError:
                pass
        raise UnknownCategory("Unknown word type '{}'.".format(name), path, line)
