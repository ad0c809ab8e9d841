from typing import List, Optional

from loguru import logger
from tree_sitter import Node

from tsmock.config.typescript_constants import TypeScriptNodeTypes
from tsmock.models.domain_models import PrimitiveType, Property
from tsmock.utils.tree_sitter_helper import extract_content, find_child_by_type


def extract_property_signatures(body_node: Node, source: bytes) -> List[Property]:
    """Reduce the members of an interface or object type body to primitive properties."""
    properties = []
    for member in body_node.named_children:
        prop = to_primitive_property(member, source)
        if prop is not None:
            properties.append(prop)
    return properties


def to_primitive_property(member: Node, source: bytes) -> Optional[Property]:
    """
    Map one body member to a Property.

    Only property signatures with an identifier name, no optional marker and a
    ``boolean``/``number``/``string`` keyword annotation qualify; anything else
    yields None.
    """
    if member.type != TypeScriptNodeTypes.PROPERTY_SIGNATURE:
        return None

    name_node = member.child_by_field_name("name")
    if name_node is None or name_node.type != TypeScriptNodeTypes.PROPERTY_IDENTIFIER:
        return None
    name = extract_content(name_node, source)

    if find_child_by_type(member, TypeScriptNodeTypes.OPTIONAL_MARKER) is not None:
        logger.debug(f"Dropping optional property '{name}'")
        return None

    annotation = member.child_by_field_name("type")
    if annotation is None or annotation.type != TypeScriptNodeTypes.TYPE_ANNOTATION:
        logger.debug(f"Dropping property '{name}' without type annotation")
        return None

    type_node = annotation.named_children[0] if annotation.named_children else None
    if type_node is None or type_node.type != TypeScriptNodeTypes.PREDEFINED_TYPE:
        logger.debug(f"Dropping property '{name}' with non-primitive type")
        return None

    primitive = PrimitiveType.from_keyword(extract_content(type_node, source))
    if primitive is None:
        logger.debug(f"Dropping property '{name}' with unsupported keyword type")
        return None
    return Property(name=name, type=primitive)


class InterfaceDeclarationExtractor:
    def supports(self, declaration_node: Node) -> bool:
        return declaration_node.type == TypeScriptNodeTypes.INTERFACE_DECLARATION

    def extract_name(self, declaration_node: Node, source: bytes) -> Optional[str]:
        name_node = declaration_node.child_by_field_name("name")
        return extract_content(name_node, source) if name_node is not None else None

    def extract(self, declaration_node: Node, source: bytes) -> List[Property]:
        body = declaration_node.child_by_field_name("body")
        if body is None or body.type not in TypeScriptNodeTypes.INTERFACE_BODY_TYPES:
            return []
        return extract_property_signatures(body, source)
