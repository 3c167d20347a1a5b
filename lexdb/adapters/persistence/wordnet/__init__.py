# lexdb/adapters/persistence/wordnet/__init__.py
"""Readers for the WordNet flat-file format (index.* / data.*)."""
