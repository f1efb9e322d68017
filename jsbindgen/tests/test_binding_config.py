import json
import pytest
from pathlib import Path

from jsbindgen.binding_config import BindingConfig
from jsbindgen.generator.exclusions import ExclusionRule
from jsbindgen.symbols import Parameter, Symbol, SymbolKind, SymbolTable


@pytest.fixture
def symbol_table():
    return SymbolTable([
        Symbol(SymbolKind.CLASS, 'float4', children=[
            Symbol(SymbolKind.FUNCTION, 'Orthogonalize', type='void'),
            Symbol(SymbolKind.FUNCTION, 'Length', type='float'),
        ]),
        Symbol(SymbolKind.CLASS, 'Plane', children=[
            Symbol(SymbolKind.FUNCTION, 'Distance', type='float', parameters=[Parameter('const float4&', 'p')]),
        ]),
        Symbol(SymbolKind.CLASS, 'Entity'),
    ])


def write_config(temp_dir, data):
    path = Path(temp_dir) / 'bindings.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


class TestBindingConfig:
    def test_defaults(self):
        config = BindingConfig()
        assert config.classes == []
        assert config.header_paths == {}
        assert config.value_types == []
        assert len(config.exclusions) == 0
        assert config.opt_out_marker == '[noscript]'
        assert config.context_options() == {}

    def test_load_missing_file_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError) as exc_info:
            BindingConfig.load(Path(temp_dir) / 'missing.json')
        assert "not found" in str(exc_info.value)

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError) as exc_info:
            BindingConfig({'classes': [], 'clases': []})
        assert 'clases' in str(exc_info.value)

    def test_load(self, temp_dir):
        path = write_config(temp_dir, {
            'classes': ['float4'],
            'value_types': ['Color'],
            'exclusions': [{'class': 'float4', 'member': 'Orthogonalize'}],
            'opt_out_marker': '[hidden]',
        })
        config = BindingConfig.load(path)

        assert config.classes == ['float4']
        assert config.value_types == ['Color']
        assert config.exclusions.rules == (ExclusionRule('float4', 'Orthogonalize'),)
        assert config.opt_out_marker == '[hidden]'

    def test_context_options(self):
        config = BindingConfig({
            'refcount_members': ['RefCount', 'WeakRefCount'],
            'prelude_includes': ['StableHeaders.h', 'BindingsHelpers.h'],
            'using_namespaces': ['Tundra'],
            'bindings_namespace': 'ScriptBindings',
        })
        assert config.context_options() == {
            'refcount_members': ('RefCount', 'WeakRefCount'),
            'prelude_includes': ('StableHeaders.h', 'BindingsHelpers.h'),
            'using_namespaces': ('Tundra',),
            'bindings_namespace': 'ScriptBindings',
        }

    def test_refcount_members_needs_two_names(self):
        with pytest.raises(ValueError):
            BindingConfig({'refcount_members': ['Refs']}).context_options()

    def test_to_context_uses_configured_classes(self, symbol_table):
        context = BindingConfig({'classes': ['float4', 'Plane']}).to_context(symbol_table)
        assert context.exposed_classes == ('float4', 'Plane')

    def test_command_line_classes_override_config(self, symbol_table):
        context = BindingConfig({'classes': ['float4']}).to_context(symbol_table, classes=['Entity'])
        assert context.exposed_classes == ('Entity',)

    def test_empty_class_list_exposes_everything(self, symbol_table):
        context = BindingConfig().to_context(symbol_table)
        assert context.exposed_classes == ('float4', 'Plane', 'Entity')

    def test_configured_header_paths_take_precedence(self, symbol_table):
        config = BindingConfig({'header_paths': {'Plane': 'Geometry/Plane.h'}})
        context = config.to_context(symbol_table, header_paths={'Plane': 'src/Plane.h', 'Entity': 'Scene/Entity.h'})

        assert context.include_for_class('Plane') == 'Geometry/Plane.h'
        assert context.include_for_class('Entity') == 'Scene/Entity.h'
        assert context.include_for_class('float4') == 'float4.h'

    def test_exclusions_reach_the_filter(self, symbol_table):
        config = BindingConfig({'exclusions': [
            {'class': 'float4', 'member': 'Orthogonalize'},
            {'class': 'Plane', 'member': 'Distance', 'parameters': ['float4']},
        ]})
        context = config.to_context(symbol_table)
        float4 = symbol_table.get_symbol('float4')
        plane = symbol_table.get_symbol('Plane')

        assert not context.scriptability.is_exposable(float4.find_child_by_name('Orthogonalize'), float4)
        assert context.scriptability.is_exposable(float4.find_child_by_name('Length'), float4)
        assert not context.scriptability.is_exposable(plane.find_child_by_name('Distance'), plane)

    def test_example_config_loads(self, symbol_table):
        example = Path(__file__).resolve().parents[2] / 'bindings.example.json'
        config = BindingConfig.load(example)

        assert len(config.exclusions) == 3
        context = config.to_context(symbol_table)
        assert context.using_namespaces == ('Tundra',)
