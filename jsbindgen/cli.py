"""
jsbindgen command line - generate Duktape bindings from Doxygen XML

Usage:
    python -m jsbindgen XML_DIR OUTPUT_DIR [--source-root PATH] [--config FILE] [--json] [CLASS ...]

When classes are listed only those are exposed, and members referring to other
classes are skipped. Without a list every class found is exposed.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from . import logger
from .binding_config import BindingConfig
from .generator import BindingsGenerator
from .symbols import SymbolTable, strip_namespace


def find_header_paths(source_root: Path, class_names: Iterable[str]) -> Dict[str, str]:
    """Map each class to the first '<Class>.h' under source_root, relative with forward slashes."""
    source_root = Path(source_root)
    headers = sorted(source_root.rglob('*.h'))
    header_paths = {}
    for class_name in class_names:
        name = strip_namespace(class_name)
        for header in headers:
            if header.name == f'{name}.h':
                header_paths[name] = header.relative_to(source_root).as_posix()
                break
    return header_paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='jsbindgen', description='Generate Duktape bindings for C++ classes')
    parser.add_argument('xml_dir', type=Path,
                        help='Directory where Doxygen generated the documentation XML files')
    parser.add_argument('output_dir', type=Path,
                        help='Directory for the generated bindings sources')
    parser.add_argument('--source-root', type=Path, default=None,
                        help='Root of the exposed code, used to find include paths')
    parser.add_argument('--config', type=Path, default=None,
                        help='JSON binding config (exclusions, value types, includes, ...)')
    parser.add_argument('--json', action='store_true',
                        help='Print the per-class results as JSON')
    parser.add_argument('classes', nargs='*',
                        help='Classes to expose; all classes when omitted')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = BindingConfig.load(args.config) if args.config else BindingConfig()
    symbol_table = SymbolTable.load_from_doxygen(args.xml_dir)

    header_paths = {}
    if args.source_root:
        header_paths = find_header_paths(args.source_root, [s.name for s in symbol_table.classes()])

    context = config.to_context(symbol_table, args.classes, header_paths)
    results = BindingsGenerator(symbol_table, context).write_all(args.output_dir)

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for result in results:
            print(f'{result.class_name}: {result.status.value} - {result.message}')

    failed = [r for r in results if not r.succeeded]
    if failed:
        logger.error(f"{len(failed)} classes failed: {', '.join(r.class_name for r in failed)}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
