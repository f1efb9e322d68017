"""
Exposition assembler: composes a class's bindings into one generated source unit.

Layout of a unit, which downstream builds rely on:
    header, includes, using directives, externs for dependencies, class identifier,
    finalizer, property accessors, instance methods, instance selectors,
    static methods, static selectors, instance function table,
    static function table, Expose_<Class> registration routine.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .. import logger
from ..symbols import Symbol
from .code_writer import CodeWriter
from .dependencies import DependencyResolver
from .dispatcher import DispatcherSynthesizer
from .generation_context import GenerationContext
from .marshaling import MarshalingEmitter
from .member_bindings import MemberBindingGenerator, Property
from .naming import DUK_SIGNATURE, class_identifier, finalizer_name
from .overloads import OverloadSet, OverloadSetBuilder

GENERATED_BANNER = '// This file has been autogenerated with jsbindgen, do not edit'


def function_table_name(class_name: str, static: bool) -> str:
    return f'{class_name}_StaticFunctions' if static else f'{class_name}_Functions'


def table_sets(overload_sets: Sequence[OverloadSet]) -> List[OverloadSet]:
    """Sets that go into a function table; constructors are registered separately."""
    return [s for s in overload_sets if not s.is_constructor]


def constructor_set(overload_sets: Sequence[OverloadSet]) -> Optional[OverloadSet]:
    for overload_set in overload_sets:
        if overload_set.is_constructor:
            return overload_set
    return None


@dataclass(frozen=True)
class ClassBindingPlan:
    """What will be exposed for one class, before any code is written"""
    class_name: str
    dependencies: Tuple[str, ...]
    instance_sets: Tuple[OverloadSet, ...]
    static_sets: Tuple[OverloadSet, ...]
    properties: Tuple[Property, ...]

    @property
    def constructor(self) -> Optional[OverloadSet]:
        return constructor_set(self.instance_sets)

    @property
    def selectors(self) -> List[str]:
        return [s.selector_name for s in self.instance_sets + self.static_sets if s.needs_selector]


class ExpositionAssembler:
    """Assembles the complete bindings source for one class"""

    def __init__(self, context: GenerationContext):
        self.context = context
        self.emitter = MarshalingEmitter(context.classifier)
        self.overload_builder = OverloadSetBuilder(context)
        self.dispatcher = DispatcherSynthesizer(self.emitter)
        self.members = MemberBindingGenerator(context, self.emitter)
        self.dependency_resolver = DependencyResolver(context)

    def plan(self, class_symbol: Symbol) -> ClassBindingPlan:
        return ClassBindingPlan(
            class_name=class_symbol.unqualified_name,
            dependencies=self.dependency_resolver.find_dependencies(class_symbol),
            instance_sets=tuple(self.overload_builder.build_instance(class_symbol)),
            static_sets=tuple(self.overload_builder.build_static(class_symbol)),
            properties=tuple(self.members.find_properties(class_symbol)),
        )

    def assemble(self, class_symbol: Symbol) -> str:
        class_name = class_symbol.unqualified_name
        writer = CodeWriter()

        plan = self.plan(class_symbol)
        dependencies = plan.dependencies
        instance_sets = plan.instance_sets
        static_sets = plan.static_sets
        logger.debug(f"{class_name}: {len(instance_sets)} instance sets, {len(static_sets)} static sets, "
                     f"dependencies {list(dependencies)}")

        self.write_preamble(class_symbol, dependencies, writer)

        writer.line(f'namespace {self.context.bindings_namespace}')
        writer.line('{')
        writer.line()
        for dependency in dependencies:
            writer.line(f'extern const char* {class_identifier(dependency)};')
        writer.line()
        for dependency in dependencies:
            writer.line(f'duk_ret_t {finalizer_name(dependency)}{DUK_SIGNATURE};')
        writer.line()
        writer.line(f'const char* {class_identifier(class_name)} = "{class_name}";')
        writer.line()

        self.members.generate_finalizer(class_symbol, writer)
        properties = self.members.generate_property_accessors(class_symbol, writer)
        for overload_set in instance_sets:
            self.members.generate_overload_set(class_symbol, overload_set, writer)
        self.dispatcher.generate_all(instance_sets, writer)
        for overload_set in static_sets:
            self.members.generate_overload_set(class_symbol, overload_set, writer)
        self.dispatcher.generate_all(static_sets, writer)
        self.write_function_table(class_name, instance_sets, False, writer)
        self.write_function_table(class_name, static_sets, True, writer)
        self.write_expose_function(class_name, instance_sets, static_sets, properties, writer)

        writer.line('}')
        return writer.output()

    def write_preamble(self, class_symbol: Symbol, dependencies: Sequence[str], writer: CodeWriter):
        writer.line(GENERATED_BANNER)
        writer.line()
        for include in self.context.prelude_includes:
            writer.line(f'#include "{include}"')
        writer.line(f'#include "{self.context.include_for_class(class_symbol.name)}"')
        for dependency in dependencies:
            writer.line(f'#include "{self.context.include_for_class(dependency)}"')
        writer.line()

        namespaces = []
        if class_symbol.namespace:
            namespaces.append(class_symbol.namespace)
        namespaces.extend(ns for ns in self.context.using_namespaces if ns not in namespaces)
        for namespace in namespaces:
            writer.line(f'using namespace {namespace};')
        writer.line('using namespace std;')
        writer.line()

    def write_function_table(self, class_name: str, overload_sets: Sequence[OverloadSet],
                             static: bool, writer: CodeWriter):
        entries = table_sets(overload_sets)
        if not entries:
            return

        writer.line(f'static const duk_function_list_entry {function_table_name(class_name, static)}[] = {{')
        writer.indent()
        for i, overload_set in enumerate(entries):
            prefix = ',' if i > 0 else ''
            if overload_set.needs_selector:
                nargs = 'DUK_VARARGS'
            else:
                nargs = str(len(overload_set.overloads[0].parameters))
            writer.line(f'{prefix}{{"{overload_set.exposed_name}", {overload_set.entry_point}, {nargs}}}')
        writer.line(',{nullptr, nullptr, 0}')
        writer.dedent()
        writer.line('};')
        writer.line()

    def write_expose_function(self, class_name: str, instance_sets: Sequence[OverloadSet],
                              static_sets: Sequence[OverloadSet], properties: Sequence[Property],
                              writer: CodeWriter):
        ctor = constructor_set(instance_sets)

        with writer.block(f'void Expose_{class_name}{DUK_SIGNATURE}'):
            if ctor is None:
                writer.line('duk_push_object(ctx);')
            elif ctor.needs_selector:
                writer.line(f'duk_push_c_function(ctx, {ctor.entry_point}, DUK_VARARGS);')
            else:
                writer.line(f'duk_push_c_function(ctx, {ctor.entry_point}, {len(ctor.overloads[0].parameters)});')

            if table_sets(static_sets):
                writer.line(f'duk_put_function_list(ctx, -1, {function_table_name(class_name, True)});')
            writer.line('duk_push_object(ctx);')
            if table_sets(instance_sets):
                writer.line(f'duk_put_function_list(ctx, -1, {function_table_name(class_name, False)});')
            for prop in properties:
                setter = prop.setter if not prop.read_only else 'nullptr'
                writer.line(f'DefineProperty(ctx, "{prop.name}", {prop.getter}, {setter});')
            writer.line('duk_put_prop_string(ctx, -2, "prototype");')
            writer.line(f'duk_put_global_string(ctx, {class_identifier(class_name)});')
        writer.line()
