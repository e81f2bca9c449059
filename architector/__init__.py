"""
Architector - local document store for project architecture metadata.
"""

from .__version__ import __version__

__all__ = ["__version__"]
