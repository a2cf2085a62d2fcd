"""
crossplat — decide which OS/Arch pairs a cross-build should target.
"""

__version__ = "0.1.0"
