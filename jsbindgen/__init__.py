"""
jsbindgen - generates Duktape JavaScript bindings for C++ classes described by Doxygen.
"""

__version__ = '0.1.0'
