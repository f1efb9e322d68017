"""
Binding synthesis engine: turns exposed class symbols into Duktape binding sources.
"""

from .type_classifier import TypeCategory, TypeClassifier, sanitize_type_name
from .exclusions import ExclusionRule, ExclusionTable
from .scriptability import ScriptabilityFilter, is_bad_type
from .generation_context import GenerationContext
from .overloads import Overload, OverloadSet, OverloadSetBuilder
from .marshaling import MarshalingEmitter, UnsupportedTypeError
from .dispatcher import DispatcherSynthesizer
from .dependencies import DependencyResolver
from .member_bindings import MemberBindingGenerator, Property
from .exposition import ClassBindingPlan, ExpositionAssembler
from .class_bindings import ClassBindingsGenerator, GeneratedUnit
from .bindings_generator import BindingsGenerator

__all__ = [
    'TypeCategory', 'TypeClassifier', 'sanitize_type_name',
    'ExclusionRule', 'ExclusionTable',
    'ScriptabilityFilter', 'is_bad_type',
    'GenerationContext',
    'Overload', 'OverloadSet', 'OverloadSetBuilder',
    'MarshalingEmitter', 'UnsupportedTypeError',
    'DispatcherSynthesizer',
    'DependencyResolver',
    'MemberBindingGenerator', 'Property',
    'ClassBindingPlan', 'ExpositionAssembler',
    'ClassBindingsGenerator', 'GeneratedUnit',
    'BindingsGenerator',
]
