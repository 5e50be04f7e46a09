"""Command-line entry points for rae-lexicon."""
