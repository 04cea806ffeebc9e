"""CLI layer — argument parsing, rendering, and error boundary.

This package is the outermost layer.  It may import from ``core`` and
``utils``, but no other layer may import from ``cli``.
"""
