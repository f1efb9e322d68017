"""
Per-member binding functions: finalizer, property accessors and overload wrappers.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import List, Optional

from ..symbols import Symbol, SymbolKind, Visibility
from .code_writer import CodeWriter
from .generation_context import GenerationContext
from .marshaling import MarshalingEmitter, UnsupportedTypeError
from .naming import DUK_SIGNATURE, class_identifier, finalizer_name, getter_name, local_name, setter_name
from .overloads import Overload, OverloadSet
from .type_classifier import TypeCategory, is_void

PROPERTY_CATEGORIES = (TypeCategory.NUMERIC, TypeCategory.BOOLEAN)


@dataclass(frozen=True)
class Property:
    name: str
    read_only: bool
    getter: str
    setter: Optional[str] = None


@contextmanager
def member_context(class_symbol: Symbol, member: Symbol):
    """Attach the offending member to unsupported type failures."""
    try:
        yield
    except UnsupportedTypeError as e:
        raise UnsupportedTypeError(e.type_name, e.operation,
                                   member=f'{class_symbol.name}::{member.name}') from e


class MemberBindingGenerator:
    """Generates the C functions wrapping one class's members"""

    def __init__(self, context: GenerationContext, emitter: MarshalingEmitter):
        self.context = context
        self.emitter = emitter

    def generate_finalizer(self, class_symbol: Symbol, writer: CodeWriter):
        class_name = class_symbol.unqualified_name
        with writer.block(f'duk_ret_t {finalizer_name(class_name)}{DUK_SIGNATURE}'):
            writer.line(self.emitter.get_from_stack(class_name, 0, 'obj'))
            with writer.block('if (obj)'):
                writer.line('delete obj;')
                writer.line(f'SetObject(ctx, 0, 0, {class_identifier(class_name)});')
            writer.line('return 0;')
        writer.line()

    def is_property(self, class_symbol: Symbol, member: Symbol) -> bool:
        return (member.kind == SymbolKind.VARIABLE
                and not member.is_static
                and member.visibility == Visibility.PUBLIC
                and self.context.scriptability.is_exposable(member, class_symbol)
                and self.context.classifier.classify(member.type) in PROPERTY_CATEGORIES)

    def property_for(self, class_symbol: Symbol, member: Symbol) -> Property:
        class_name = class_symbol.unqualified_name
        if member.is_const():
            return Property(member.name, True, getter_name(class_name, member.name))
        return Property(member.name, False, getter_name(class_name, member.name),
                        setter_name(class_name, member.name))

    def find_properties(self, class_symbol: Symbol) -> List[Property]:
        return [self.property_for(class_symbol, member) for member in class_symbol.children
                if self.is_property(class_symbol, member)]

    def generate_property_accessors(self, class_symbol: Symbol, writer: CodeWriter) -> List[Property]:
        class_name = class_symbol.unqualified_name
        properties = []

        for member in class_symbol.children:
            if not self.is_property(class_symbol, member):
                continue

            prop = self.property_for(class_symbol, member)
            with member_context(class_symbol, member):
                if not prop.read_only:
                    with writer.block(f'static duk_ret_t {prop.setter}{DUK_SIGNATURE}'):
                        writer.line(self.emitter.get_this(class_name))
                        value = local_name(member.name, 0)
                        writer.line(self.emitter.get_from_stack(member.type, 0, value))
                        writer.line(f'thisObj->{member.name} = {value};')
                        writer.line('return 0;')
                    writer.line()

                with writer.block(f'static duk_ret_t {prop.getter}{DUK_SIGNATURE}'):
                    writer.line(self.emitter.get_this(class_name))
                    writer.line(self.emitter.push_to_stack(member.type, f'thisObj->{member.name}'))
                    writer.line('return 1;')
                writer.line()

            properties.append(prop)

        return properties

    def generate_overload(self, class_symbol: Symbol, overload_set: OverloadSet,
                          overload: Overload, writer: CodeWriter):
        class_name = class_symbol.unqualified_name
        function = overload.source_function

        with member_context(class_symbol, function):
            with writer.block(f'static duk_ret_t {overload.mangled_name}{DUK_SIGNATURE}'):
                if not overload_set.is_constructor and not function.is_static:
                    writer.line(self.emitter.get_this(class_name))

                for i, param in enumerate(overload.parameters):
                    writer.line(self.emitter.get_parameter(param, i))
                args = self.emitter.call_arguments(overload.parameters)

                if overload_set.is_constructor:
                    writer.line(f'{class_name}* newObj = new {class_name}({args});')
                    writer.line(self.emitter.push_constructor_result(class_name, 'newObj'))
                    writer.line('return 0;')
                else:
                    call_prefix = f'{class_name}::' if function.is_static else 'thisObj->'
                    call = f'{call_prefix}{function.name}({args})'
                    if is_void(function.type):
                        writer.line(f'{call};')
                        writer.line('return 0;')
                    else:
                        writer.line(f'{function.type} ret = {call};')
                        writer.line(self.emitter.push_to_stack(function.type, 'ret'))
                        writer.line('return 1;')
            writer.line()

    def generate_overload_set(self, class_symbol: Symbol, overload_set: OverloadSet,
                              writer: CodeWriter):
        for overload in overload_set.overloads:
            self.generate_overload(class_symbol, overload_set, overload, writer)
