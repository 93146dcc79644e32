"""
madlib - Fill story templates with random words from a typed dictionary.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"
