"""Tagger and lexicon capabilities."""
