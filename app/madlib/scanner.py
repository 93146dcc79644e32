"""
scanner.py - Split template lines into literal text and placeholders.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

from collections import namedtuple
import re

# Tokens being:  [person] [adverb] [verb] [place] [noun] [adjective] [number]
# Example:   My friend [person] was [adverb] [verb]ing until arriving at [place].
PLACEHOLDER = re.compile(r"\[([^\]]*)\]")

Literal = namedtuple("Literal", ["text"])
Placeholder = namedtuple("Placeholder", ["name"])


def scan_line(line:str)->list:
    """
    Break a template line into its parts, left to right.

    Only the brackets of a placeholder are dropped; everything around them is kept
    exactly, including any "[" that has no closing "]" on the line.

    Args:
        line (str): One line of the template, without its line terminator.

    Returns:
        (list): Literal and Placeholder segments in order. Empty literals are omitted.
    """
    segments = []
    position = 0
    for match in PLACEHOLDER.finditer(line):
        if match.start() > position:
            segments.append(Literal(line[position:match.start()]))
        segments.append(Placeholder(match.group(1)))
        position = match.end()

    if position < len(line):
        segments.append(Literal(line[position:]))

    return segments
