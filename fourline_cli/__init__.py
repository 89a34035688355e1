"""
Fourline CLI - Command-line interface for the letter grader.

Usage:
    fourline grade A strokes.json
    fourline grade g strokes.json --mode quiz --overlay attempt.png
    fourline classify o strokes.json
    fourline letters
"""

__version__ = "1.0.0"
