"""AI quiz generator: turns a free-text prompt into a multiple-choice quiz."""

__version__ = "0.1.0"
