"""
Dispatcher synthesis for overload sets with more than one member.
"""

from typing import List

from .code_writer import CodeWriter
from .marshaling import MarshalingEmitter
from .naming import DUK_SIGNATURE
from .overloads import OverloadSet

OVERLOAD_FAILURE_MESSAGE = 'Could not select function overload'


class DispatcherSynthesizer:
    """
    Emits selector functions choosing an overload by argument count and runtime types.

    Candidates are tried in declaration order and the first match wins, so a less
    specific overload declared first shadows a later one with the same arity.
    """

    def __init__(self, emitter: MarshalingEmitter):
        self.emitter = emitter

    def match_condition(self, overload) -> str:
        checks = [f'numArgs == {len(overload.parameters)}']
        for i, param in enumerate(overload.parameters):
            checks.append(self.emitter.arg_check(param, i))
        return ' && '.join(checks)

    def generate(self, overload_set: OverloadSet, writer: CodeWriter):
        if not overload_set.needs_selector:
            return

        with writer.block(f'static duk_ret_t {overload_set.selector_name}{DUK_SIGNATURE}'):
            writer.line('int numArgs = duk_get_top(ctx);')
            for overload in overload_set.overloads:
                writer.line(f'if ({self.match_condition(overload)})')
                writer.indent()
                writer.line(f'return {overload.mangled_name}(ctx);')
                writer.dedent()
            writer.line(f'duk_error(ctx, DUK_ERR_ERROR, "{OVERLOAD_FAILURE_MESSAGE}");')
        writer.line()

    def generate_all(self, overload_sets: List[OverloadSet], writer: CodeWriter):
        for overload_set in overload_sets:
            self.generate(overload_set, writer)
