"""Small interactive console programs: quizzes, games, patterns, tables and calculators."""

__version__ = "0.1.0"