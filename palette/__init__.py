"""Bilingual (Persian/English) search pipeline for the store dashboard."""

__version__ = "0.1.0"
