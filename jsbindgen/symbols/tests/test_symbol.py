import pytest
from unittest.mock import patch

from jsbindgen.symbols import (
    Parameter, Symbol, SymbolKind, SymbolTable, Visibility, extract_namespace, strip_namespace,
)


class TestParameter:
    @pytest.mark.parametrize('declared, expected', [
        ('float', 'float'),
        ('const float3&', 'float3'),
        ('const float3 &', 'float3'),
        ('const Entity*', 'Entity*'),
        ('Entity *', 'Entity *'),
        ('float3 const&', 'float3'),
    ])
    def test_basic_type(self, declared, expected):
        assert Parameter(declared, 'p').basic_type() == expected

    def test_pointer_and_reference(self):
        assert Parameter('Entity*').is_pointer()
        assert not Parameter('Entity*').is_reference()
        assert Parameter('const Vec2 &').is_reference()
        assert not Parameter('int').is_pointer()

    def test_to_string(self):
        assert Parameter('const Vec2&', 'other').to_string() == 'const Vec2& other'
        assert Parameter('int').to_string() == 'int'


class TestSymbol:
    def test_defaults(self):
        symbol = Symbol(SymbolKind.FUNCTION, 'Length', type='float')
        assert symbol.visibility == Visibility.PUBLIC
        assert not symbol.is_static
        assert symbol.documentation_tags == set()
        assert symbol.arg_list == '()'
        assert symbol.return_comment == ''

    def test_arg_list_derived_from_parameters(self):
        symbol = Symbol(SymbolKind.FUNCTION, 'Set', parameters=[Parameter('float', 'x'), Parameter('float', 'y')])
        assert symbol.arg_list == '(float x, float y)'

    def test_variable_has_empty_arg_list(self):
        assert Symbol(SymbolKind.VARIABLE, 'x', type='float').arg_list == ''

    def test_declared_arg_list_is_kept(self):
        symbol = Symbol(SymbolKind.FUNCTION, 'Length', type='float', arg_list='() const')
        assert symbol.arg_list == '() const'

    def test_only_classes_have_children(self):
        child = Symbol(SymbolKind.VARIABLE, 'x')
        with pytest.raises(ValueError):
            Symbol(SymbolKind.FUNCTION, 'f', children=[child])

    def test_only_functions_have_parameters(self):
        with pytest.raises(ValueError):
            Symbol(SymbolKind.VARIABLE, 'x', parameters=[Parameter('int', 'i')])

    def test_qualified_name(self):
        symbol = Symbol(SymbolKind.CLASS, 'Tundra::Math::Vec2')
        assert symbol.unqualified_name == 'Vec2'
        assert symbol.namespace == 'Tundra::Math'

    def test_unqualified_name_without_namespace(self):
        symbol = Symbol(SymbolKind.CLASS, 'Vec2')
        assert symbol.unqualified_name == 'Vec2'
        assert symbol.namespace == ''

    @pytest.mark.parametrize('declared, expected', [
        ('const int', True),
        ('float const', True),
        ('float', False),
        ('constant_t', False),
    ])
    def test_is_const(self, declared, expected):
        assert Symbol(SymbolKind.VARIABLE, 'v', type=declared).is_const() == expected

    def test_find_child_by_name(self):
        refs = Symbol(SymbolKind.VARIABLE, 'Refs', type='int')
        cls = Symbol(SymbolKind.CLASS, 'Entity', children=[refs])
        assert cls.find_child_by_name('Refs') is refs
        assert cls.find_child_by_name('WeakRefs') is None

    def test_namespace_helpers(self):
        assert strip_namespace('A::B::C') == 'C'
        assert extract_namespace('A::B::C') == 'A::B'
        assert strip_namespace('::C') == '::C'
        assert extract_namespace('C') == ''


class TestSymbolTable:
    def test_classes_in_discovery_order(self):
        table = SymbolTable([
            Symbol(SymbolKind.CLASS, 'Quat'),
            Symbol(SymbolKind.FUNCTION, 'FreeFunction'),
            Symbol(SymbolKind.CLASS, 'Vec2'),
        ])
        assert [c.name for c in table.classes()] == ['Quat', 'Vec2']
        assert len(table) == 3

    def test_duplicate_keeps_first(self):
        first = Symbol(SymbolKind.CLASS, 'Vec2')
        table = SymbolTable([first, Symbol(SymbolKind.CLASS, 'Vec2')])
        assert table.get_symbol('Vec2') is first
        assert len(table) == 1

    def test_get_missing_symbol(self):
        assert SymbolTable().get_symbol('Nope') is None

    def test_load_from_doxygen_uses_parser(self, temp_dir):
        classes = [Symbol(SymbolKind.CLASS, 'Vec2')]
        with patch('jsbindgen.doxygen.doxygen_parser.DoxygenParser.parse_classes', return_value=classes):
            table = SymbolTable.load_from_doxygen(temp_dir)
        assert list(table.classes()) == classes
