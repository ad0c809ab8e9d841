from typing import Dict, List, Optional

from loguru import logger
from tree_sitter import Node, Tree

from tsmock.config.typescript_constants import TypeScriptNodeTypes
from tsmock.extractors.base_extractor import PropertyBagExtractor
from tsmock.extractors.typescript.interface_extractor import InterfaceDeclarationExtractor
from tsmock.extractors.typescript.route_annotation import parse_route_annotation
from tsmock.extractors.typescript.type_alias_extractor import ObjectTypeAliasExtractor
from tsmock.models.domain_models import Entity
from tsmock.utils.tree_sitter_helper import (
    extract_content, iter_nodes_of_type, next_non_comment_sibling, prev_non_comment_sibling,
)


class TypeScriptSchemaExtractor:
    """Extracts mock endpoint schemas from route-annotated TypeScript declarations."""

    def __init__(self, route_marker: str = "route", extractors: List[PropertyBagExtractor] = None):
        """
        Initialize the extractor.

        Args:
            route_marker: Substring the first comment token must contain.
            extractors: Optional list of property-bag extractors. If None, defaults to
                interfaces and object type aliases.
        """
        self.route_marker = route_marker
        if extractors is None:
            self.extractors = [
                InterfaceDeclarationExtractor(),
                ObjectTypeAliasExtractor(),
            ]
        else:
            self.extractors = extractors

    def extract(self, tree: Tree, source: bytes, file_path: Optional[str] = None) -> List[Entity]:
        """
        Extract one Entity per route comment attached to a property-bag declaration.

        Args:
            tree: Parsed syntax tree of the source unit.
            source: The exact bytes the tree was parsed from.
            file_path: Path recorded on each Entity for diagnostics.

        Returns:
            Entities in comment order.
        """
        root = tree.root_node
        statements = self._index_statements(root)
        entities: List[Entity] = []

        for comment in iter_nodes_of_type(root, TypeScriptNodeTypes.COMMENT):
            route = parse_route_annotation(extract_content(comment, source), self.route_marker)
            if route is None:
                continue

            attached_to = self._attachment_point(comment)
            if attached_to is None:
                logger.debug(f"Route comment '{route}' in {file_path} is not attached to a declaration")
                continue

            statement = statements.get(attached_to)
            if statement is None:
                logger.debug(f"Route comment '{route}' in {file_path} is not attached to a top-level statement")
                continue

            entity = self._build_entity(route, self._unwrap_declaration(statement), source, file_path)
            if entity is None:
                logger.debug(f"Route comment '{route}' in {file_path} precedes a {statement.type}, skipping")
                continue
            entities.append(entity)

        return entities

    def _index_statements(self, root: Node) -> Dict[int, Node]:
        return {
            child.start_byte: child
            for child in root.named_children
            if child.type != TypeScriptNodeTypes.COMMENT
        }

    def _attachment_point(self, comment: Node) -> Optional[int]:
        """Start byte of the token a leading comment annotates; None for trailing comments."""
        previous = prev_non_comment_sibling(comment, TypeScriptNodeTypes.COMMENT)
        if previous is not None and previous.end_point[0] == comment.start_point[0]:
            return None
        following = next_non_comment_sibling(comment, TypeScriptNodeTypes.COMMENT)
        return following.start_byte if following is not None else None

    def _unwrap_declaration(self, statement: Node) -> Node:
        """Strip `export` and `declare` wrappers down to the declaration they carry."""
        node = statement
        while True:
            if node.type == TypeScriptNodeTypes.EXPORT_STATEMENT:
                inner = node.child_by_field_name("declaration")
            elif node.type == TypeScriptNodeTypes.AMBIENT_DECLARATION:
                inner = next((child for child in node.named_children
                              if child.type != TypeScriptNodeTypes.COMMENT), None)
            else:
                return node
            if inner is None:
                return node
            node = inner

    def _build_entity(self, route: str, declaration: Node, source: bytes,
                      file_path: Optional[str]) -> Optional[Entity]:
        for extractor in self.extractors:
            if extractor.supports(declaration):
                return Entity(
                    route=route,
                    properties=tuple(extractor.extract(declaration, source)),
                    name=extractor.extract_name(declaration, source),
                    file_path=file_path,
                )
        return None
