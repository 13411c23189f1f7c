"""
commit-iter

Incremental commit message tracking for editor working copies.
"""

__version__ = "0.1.0"
