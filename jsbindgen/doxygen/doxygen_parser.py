"""
Parser for Doxygen XML output, building the class symbol tree the generator consumes.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Set

from .. import logger
from ..symbols import Parameter, Symbol, SymbolKind, Visibility

# Annotation markers such as [noscript] written into documentation comments
TAG_PATTERN = re.compile(r'\[[A-Za-z_][\w-]*\]')

MEMBER_KINDS = {
    'function': SymbolKind.FUNCTION,
    'variable': SymbolKind.VARIABLE,
}

VISIBILITIES = {
    'public': Visibility.PUBLIC,
    'protected': Visibility.PROTECTED,
    'private': Visibility.PRIVATE,
}


class DoxygenParser:
    """
    Parses Doxygen XML output into class symbols with their member functions and variables.

    Only class and struct compounds are read; both become CLASS symbols. Members are
    ordered by their declaration line so overload discovery follows the header.
    """

    def __init__(self, xml_dir: Path):
        self.xml_dir = Path(xml_dir)

    def parse_classes(self) -> List[Symbol]:
        """Parse index.xml and every class compound it lists."""
        index_file = self.xml_dir / 'index.xml'
        if not index_file.exists():
            raise FileNotFoundError(f"Doxygen index.xml not found at {index_file}")

        logger.info(f"Parsing Doxygen XML from {self.xml_dir}")

        root = ET.parse(index_file).getroot()
        classes = []
        for compound in root.findall('compound'):
            if compound.get('kind') not in ('class', 'struct'):
                continue
            compound_file = self.xml_dir / f"{compound.get('refid')}.xml"
            if not compound_file.exists():
                logger.warning(f"Compound file {compound_file} listed in index but missing")
                continue
            symbol = self._parse_compound_file(compound_file)
            if symbol is not None:
                classes.append(symbol)

        logger.info(f"Parsed {len(classes)} classes from Doxygen XML")
        return classes

    def _parse_compound_file(self, file_path: Path) -> Optional[Symbol]:
        try:
            root = ET.parse(file_path).getroot()
        except ET.ParseError as e:
            logger.warning(f"Failed to parse {file_path}: {e}")
            return None

        compounddef = root.find('compounddef')
        if compounddef is None:
            return None
        return self.parse_compounddef(compounddef)

    def parse_compounddef(self, compounddef: ET.Element) -> Optional[Symbol]:
        """Parse a class/struct compounddef element into a CLASS symbol."""
        name = self._get_element_text(compounddef.find('compoundname'))
        if not name:
            return None

        members = []
        for memberdef in compounddef.findall('sectiondef/memberdef'):
            kind = MEMBER_KINDS.get(memberdef.get('kind', ''))
            if kind is None:
                continue
            member = self._parse_memberdef(memberdef, kind)
            if member is not None:
                members.append((self._get_line(memberdef), member))

        # Sections group members by access level; restore declaration order
        members.sort(key=lambda item: item[0])

        return Symbol(SymbolKind.CLASS, name, children=[m for _, m in members])

    def _parse_memberdef(self, memberdef: ET.Element, kind: SymbolKind) -> Optional[Symbol]:
        name = self._get_element_text(memberdef.find('name'))
        if not name:
            return None

        parameters = []
        if kind == SymbolKind.FUNCTION:
            for param in memberdef.findall('param'):
                param_type = self._get_element_text(param.find('type'))
                if not param_type or param_type == 'void':
                    continue
                array = self._get_element_text(param.find('array'))
                if array:
                    param_type += array
                param_name = self._get_element_text(param.find('declname'))
                parameters.append(Parameter(param_type, param_name))

        arg_list = self._get_element_text(memberdef.find('argsstring'))

        return Symbol(
            kind,
            name,
            type=self._get_element_text(memberdef.find('type')),
            is_static=memberdef.get('static') == 'yes',
            visibility=VISIBILITIES.get(memberdef.get('prot', ''), Visibility.PRIVATE),
            parameters=parameters,
            documentation_tags=self._extract_tags(memberdef),
            arg_list=arg_list,
            return_comment=self._extract_return_comment(memberdef),
        )

    def _extract_tags(self, memberdef: ET.Element) -> Set[str]:
        tags = set()
        for tag in ('briefdescription', 'detaileddescription', 'inbodydescription'):
            tags.update(TAG_PATTERN.findall(self._get_element_text(memberdef.find(tag))))
        return tags

    def _extract_return_comment(self, memberdef: ET.Element) -> str:
        for simplesect in memberdef.iter('simplesect'):
            if simplesect.get('kind') == 'return':
                return self._get_element_text(simplesect)
        return ''

    @staticmethod
    def _get_line(memberdef: ET.Element) -> int:
        location = memberdef.find('location')
        if location is None:
            return 0
        return int(location.get('line', 0))

    @staticmethod
    def _get_element_text(element: Optional[ET.Element]) -> str:
        """Extract all text content from an element, including nested refs."""
        if element is None:
            return ''
        return re.sub(r'\s+', ' ', ''.join(element.itertext())).strip()
