"""Random fake data for tests: numbers, words, passwords, card details, addresses, dates and more."""

__version__ = "0.1.0"