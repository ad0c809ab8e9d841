from typing import Dict, List, Optional, Sequence

from loguru import logger
from tree_sitter import Language, Parser, Tree
from tree_sitter_language_pack import get_language

from tsmock.analyzers.base_analyzer import BaseSchemaAnalyzer
from tsmock.config.typescript_constants import TypeScriptSourceConstants
from tsmock.exceptions import ParseFailure
from tsmock.extractors.typescript.typescript_extractor import TypeScriptSchemaExtractor
from tsmock.models.domain_models import SourceUnit


class TypeScriptSchemaAnalyzer(BaseSchemaAnalyzer):
    def __init__(self, route_marker: str = "route", strict_parse: bool = True,
                 ignore_dirs: Sequence[str] = ()):
        super().__init__(TypeScriptSchemaExtractor(route_marker), strict_parse, ignore_dirs)

        # .tsx needs its own grammar, JSX is a syntax error in plain TypeScript
        typescript: Language = get_language(TypeScriptSourceConstants.TYPESCRIPT_GRAMMAR)
        tsx: Language = get_language(TypeScriptSourceConstants.TSX_GRAMMAR)
        self._parsers: Dict[str, Parser] = {
            TypeScriptSourceConstants.TYPESCRIPT_GRAMMAR: Parser(typescript),
            TypeScriptSourceConstants.TSX_GRAMMAR: Parser(tsx),
        }

    def _get_source_extensions(self) -> List[str]:
        return sorted(TypeScriptSourceConstants.SOURCE_EXTENSIONS)

    def _parser_for(self, unit: SourceUnit) -> Parser:
        if unit.suffix in TypeScriptSourceConstants.TSX_EXTENSIONS:
            return self._parsers[TypeScriptSourceConstants.TSX_GRAMMAR]
        return self._parsers[TypeScriptSourceConstants.TYPESCRIPT_GRAMMAR]

    def parse_unit(self, unit: SourceUnit, source: bytes) -> Optional[Tree]:
        tree = self._parser_for(unit).parse(source)
        if tree is None or tree.root_node is None:
            raise ParseFailure(unit.path, "parser produced no tree")

        if tree.root_node.has_error:
            if self.strict_parse:
                raise ParseFailure(unit.path, "source contains syntax errors")
            logger.warning(f"Skipping {unit.path}: source contains syntax errors")
            return None
        return tree
