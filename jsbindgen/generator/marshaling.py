"""
Marshaling code emitter.

Produces the stack-read and stack-write fragments for each type category.
"""

from typing import Optional

from ..symbols import Parameter
from .type_classifier import TypeCategory, TypeClassifier, is_pod, sanitize_type_name
from .naming import class_identifier, finalizer_name, local_name


class UnsupportedTypeError(ValueError):
    """A type reached the emitter that it cannot marshal."""

    def __init__(self, type_name: str, operation: str, member: Optional[str] = None):
        self.type_name = type_name
        self.operation = operation
        self.member = member
        message = f"Unsupported type {type_name} for {operation}"
        if member:
            message += f" in {member}"
        super().__init__(message)


class MarshalingEmitter:
    """Emits argument extraction and return value push code"""

    def __init__(self, classifier: TypeClassifier):
        self.classifier = classifier

    def get_from_stack(self, type_name: str, stack_index: int, var_name: str,
                       null_check: bool = False) -> str:
        category = self.classifier.classify(type_name)
        t = sanitize_type_name(type_name)

        if category == TypeCategory.NUMERIC:
            if t == 'double':
                return f'{t} {var_name} = duk_require_number(ctx, {stack_index});'
            return f'{t} {var_name} = ({t})duk_require_number(ctx, {stack_index});'
        elif category == TypeCategory.BOOLEAN:
            return f'{t} {var_name} = duk_require_boolean(ctx, {stack_index});'
        elif category == TypeCategory.STRING:
            return f'{t} {var_name}(duk_require_string(ctx, {stack_index}));'
        elif category == TypeCategory.CLASS_BY_VALUE and null_check:
            return f'{t}* {var_name} = GetCheckedObject<{t}>(ctx, {stack_index}, {class_identifier(t)});'
        elif category in (TypeCategory.CLASS_BY_VALUE, TypeCategory.CLASS_BY_POINTER):
            return f'{t}* {var_name} = GetObject<{t}>(ctx, {stack_index}, {class_identifier(t)});'
        raise UnsupportedTypeError(type_name, 'get_from_stack')

    def get_parameter(self, param: Parameter, stack_index: int) -> str:
        """Extraction for a function argument; class objects not passed by pointer are null checked."""
        return self.get_from_stack(param.basic_type(), stack_index, local_name(param.name, stack_index),
                                   null_check=not param.is_pointer())

    def push_to_stack(self, type_name: str, source: str) -> str:
        category = self.classifier.classify(type_name)
        t = sanitize_type_name(type_name)

        if category == TypeCategory.NUMERIC:
            return f'duk_push_number(ctx, {source});'
        elif category == TypeCategory.BOOLEAN:
            return f'duk_push_boolean(ctx, {source});'
        elif category == TypeCategory.STRING:
            return f'duk_push_string(ctx, {source}.c_str());'
        elif category == TypeCategory.CLASS_BY_VALUE:
            return f'PushValueObjectCopy<{t}>(ctx, {source}, {class_identifier(t)}, {finalizer_name(t)});'
        elif category == TypeCategory.CLASS_BY_POINTER:
            # Script always owns a copy, never the native pointer itself
            return (f'if ({source}) PushValueObjectCopy<{t}>(ctx, *{source}, {class_identifier(t)}, {finalizer_name(t)}); '
                    f'else duk_push_null(ctx);')
        raise UnsupportedTypeError(type_name, 'push_to_stack')

    def push_constructor_result(self, class_name: str, source: str) -> str:
        return f'PushConstructorResult<{class_name}>(ctx, {source}, {class_identifier(class_name)}, {finalizer_name(class_name)});'

    def get_this(self, class_name: str, var_name: str = 'thisObj') -> str:
        return f'{class_name}* {var_name} = GetThisObject<{class_name}>(ctx, {class_identifier(class_name)});'

    def arg_check(self, param: Parameter, stack_index: int) -> str:
        """Runtime predicate telling whether the argument at stack_index fits the parameter."""
        category = self.classifier.classify(param.basic_type())
        t = sanitize_type_name(param.basic_type())

        if category == TypeCategory.NUMERIC:
            return f'duk_is_number(ctx, {stack_index})'
        elif category == TypeCategory.BOOLEAN:
            return f'duk_is_boolean(ctx, {stack_index})'
        elif category == TypeCategory.STRING:
            return f'duk_is_string(ctx, {stack_index})'
        elif category in (TypeCategory.CLASS_BY_VALUE, TypeCategory.CLASS_BY_POINTER):
            return f'GetObject<{t}>(ctx, {stack_index}, {class_identifier(t)})'
        raise UnsupportedTypeError(param.type, 'arg_check')

    def needs_dereference(self, param: Parameter) -> bool:
        """Objects are extracted as pointers; only non-pointer class parameters are dereferenced."""
        if param.is_pointer():
            return False
        category = self.classifier.classify(param.basic_type())
        if is_pod(category) or category == TypeCategory.STRING:
            return False
        return True

    def call_arguments(self, parameters) -> str:
        return ', '.join(('*' if self.needs_dereference(p) else '') + local_name(p.name, i)
                         for i, p in enumerate(parameters))
