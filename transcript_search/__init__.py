"""Keyword and AI search over long-form interview transcripts"""

__version__ = "0.1.0"
