"""
freeseo.reporting — Report synthesis, rendering, and export.

Synthesis builds the immutable ``Report`` value; every other module here is
a renderer that only reads a ``Report`` and never touches the raw audit.

Modules:
  synthesizer — ``synthesize_report()`` + ``summarize_audit()`` (pure).
  formatters  — ASCII terminal cards and report text for Typer CLI output.
  printable   — Self-contained, escaped HTML document for print/PDF.
  export      — JSON dict/file and flat CSV export helpers.
"""
