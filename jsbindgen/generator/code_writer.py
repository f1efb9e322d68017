"""
Code writing helper with indentation support for the emitted C++ sources.
"""

from typing import List

INDENT = '    '


class CodeWriter:
    """Accumulates lines of generated code"""

    def __init__(self):
        self._lines: List[str] = []
        self._indent: int = 0

    def line(self, text: str = ''):
        """Add a line with current indentation"""
        if text:
            self._lines.append(INDENT * self._indent + text)
        else:
            self._lines.append('')

    def indent(self):
        self._indent += 1

    def dedent(self):
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str, footer: str = '}'):
        """Context manager for a brace-on-own-line block"""
        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Get generated code as string"""
        return '\n'.join(self._lines) + '\n'


class _BlockContext:
    def __init__(self, writer: CodeWriter, header: str, footer: str):
        self._writer = writer
        self._header = header
        self._footer = footer

    def __enter__(self):
        self._writer.line(self._header)
        self._writer.line('{')
        self._writer.indent()
        return self

    def __exit__(self, *args):
        self._writer.dedent()
        self._writer.line(self._footer)
