from typing import List, Optional

from tree_sitter import Node

from tsmock.config.typescript_constants import TypeScriptNodeTypes
from tsmock.extractors.typescript.interface_extractor import extract_property_signatures
from tsmock.models.domain_models import Property
from tsmock.utils.tree_sitter_helper import extract_content


class ObjectTypeAliasExtractor:
    """Handles ``type Name = { ... }`` aliases; aliases to anything else are not property bags."""

    def supports(self, declaration_node: Node) -> bool:
        if declaration_node.type != TypeScriptNodeTypes.TYPE_ALIAS_DECLARATION:
            return False
        value = declaration_node.child_by_field_name("value")
        return value is not None and value.type == TypeScriptNodeTypes.OBJECT_TYPE

    def extract_name(self, declaration_node: Node, source: bytes) -> Optional[str]:
        name_node = declaration_node.child_by_field_name("name")
        return extract_content(name_node, source) if name_node is not None else None

    def extract(self, declaration_node: Node, source: bytes) -> List[Property]:
        return extract_property_signatures(declaration_node.child_by_field_name("value"), source)
