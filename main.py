#!/usr/bin/env python
"""CLI for meaning-words."""

from meaning_words.cli import main

if __name__ == "__main__":
    main()
