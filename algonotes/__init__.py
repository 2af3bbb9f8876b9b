"""Classic algorithms: sorting, searching, array problems, primes, dynamic
programming, a crossword solver and minimum spanning trees."""

__version__ = "0.1.0"