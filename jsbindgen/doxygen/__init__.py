"""
Doxygen integration for loading the native class structure.
"""

from .doxygen_parser import DoxygenParser

__all__ = ['DoxygenParser']
