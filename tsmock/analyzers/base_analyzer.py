import json
from abc import ABC, abstractmethod
from functools import reduce
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger
from tree_sitter import Tree

from tsmock.extractors.typescript.typescript_extractor import TypeScriptSchemaExtractor
from tsmock.models.domain_models import Entity, SourceUnit
from tsmock.utils.common import convert, iter_source_units


class BaseSchemaAnalyzer(ABC):

    def __init__(self, extractor: TypeScriptSchemaExtractor, strict_parse: bool = True,
                 ignore_dirs: Sequence[str] = ()):
        self.extractor = extractor
        self.strict_parse = strict_parse
        self.ignore_dirs = tuple(ignore_dirs)

    def parse_project(self, root: Path) -> Tuple[Entity, ...]:
        """Build the schema catalog for every source file under ``root``."""
        logger.info(f"Starting schema extraction at {root}")
        units = iter_source_units(Path(root), self._get_source_extensions(), self.ignore_dirs)
        catalog = self.aggregate(units)
        logger.info(f"Extracted {len(catalog)} entities total")
        return catalog

    def aggregate(self, units: Iterable[SourceUnit]) -> Tuple[Entity, ...]:
        """
        Fold source units into a catalog, keeping unit order and per-unit entity order.

        Duplicate routes are kept. Any SourceReadError or ParseFailure aborts the fold.
        """
        return reduce(lambda catalog, unit: catalog + tuple(self.process_unit(unit)), units, ())

    def process_unit(self, unit: SourceUnit) -> List[Entity]:
        source = bytes(unit.text, 'utf8')
        tree = self.parse_unit(unit, source)
        if tree is None:
            return []

        entities = self.extractor.extract(tree, source, str(unit.path))
        logger.debug(f"Extracted {len(entities)} entities from {unit.path}")
        return entities

    def export_catalog(self, catalog: Sequence[Entity], output_path: Path) -> Path:
        """Export catalog to JSON file"""
        logger.info(f"Exporting {len(catalog)} entities to {output_path}")
        output_path.mkdir(parents=True, exist_ok=True)

        catalog_file = output_path / "catalog.json"
        with open(catalog_file, "w", encoding="utf-8") as f:
            json.dump(convert(list(catalog)), f, indent=2, ensure_ascii=False)

        logger.info(f"✅ Exported {len(catalog)} entities to: {catalog_file}")
        return catalog_file

    @abstractmethod
    def _get_source_extensions(self) -> List[str]:
        pass

    @abstractmethod
    def parse_unit(self, unit: SourceUnit, source: bytes) -> Optional[Tree]:
        """Parse a unit; return None to skip it, raise ParseFailure to abort."""
        pass
