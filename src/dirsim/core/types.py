"""
Core type definitions for the directory simulator.

This module contains type aliases shared by the executor, the renderers and
the transcript runner.
"""

OutputLines = list[str]
