"""FreeSEO: page-audit scoring, recommendations, and printable reports."""

__version__ = "0.1.0"
