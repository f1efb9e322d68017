import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .generator.exclusions import ExclusionRule, ExclusionTable
from .generator.generation_context import GenerationContext
from .generator.scriptability import DEFAULT_OPT_OUT_MARKER
from .symbols import SymbolTable

CONFIG_KEYS = {
    'classes', 'header_paths', 'value_types', 'exclusions', 'opt_out_marker',
    'refcount_members', 'prelude_includes', 'using_namespaces', 'bindings_namespace',
}


class BindingConfig:
    """Generation settings, read from a JSON file or built with defaults"""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        data = data or {}
        unknown = set(data) - CONFIG_KEYS
        if unknown:
            raise KeyError(f"Unknown binding config keys: {', '.join(sorted(unknown))}")
        self._config: Dict[str, Any] = data

    @classmethod
    def load(cls, config_path: Path) -> 'BindingConfig':
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Binding config not found at {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            return cls(json.load(f))

    @property
    def classes(self) -> list:
        return list(self._config.get('classes', []))

    @property
    def header_paths(self) -> Dict[str, str]:
        return dict(self._config.get('header_paths', {}))

    @property
    def value_types(self) -> list:
        return list(self._config.get('value_types', []))

    @property
    def exclusions(self) -> ExclusionTable:
        return ExclusionTable(ExclusionRule.from_dict(rule) for rule in self._config.get('exclusions', []))

    @property
    def opt_out_marker(self) -> str:
        return self._config.get('opt_out_marker', DEFAULT_OPT_OUT_MARKER)

    def context_options(self) -> Dict[str, Any]:
        """Optional GenerationContext fields that are set in the config file."""
        options = {}
        if 'refcount_members' in self._config:
            refcount_members = tuple(self._config['refcount_members'])
            if len(refcount_members) != 2:
                raise ValueError("refcount_members needs exactly two member names")
            options['refcount_members'] = refcount_members
        for key in ('prelude_includes', 'using_namespaces'):
            if key in self._config:
                options[key] = tuple(self._config[key])
        if 'bindings_namespace' in self._config:
            options['bindings_namespace'] = self._config['bindings_namespace']
        return options

    def to_context(self, symbol_table: SymbolTable, classes: Iterable[str] = (),
                   header_paths: Optional[Dict[str, str]] = None) -> GenerationContext:
        """
        Build the generation context.

        Args:
            symbol_table: Symbols of the program being bound
            classes: Allow-list overriding the configured one when non-empty
            header_paths: Discovered include paths; configured entries take precedence
        """
        allow_list = list(classes) or self.classes
        paths = dict(header_paths or {})
        paths.update(self.header_paths)
        return GenerationContext.create(
            symbol_table,
            allow_list,
            header_paths=paths,
            value_types=self.value_types,
            exclusions=self.exclusions,
            opt_out_marker=self.opt_out_marker,
            **self.context_options(),
        )
