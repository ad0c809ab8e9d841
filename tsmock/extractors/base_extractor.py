from typing import List, Optional, Protocol

from tree_sitter import Node

from tsmock.models.domain_models import Property


class PropertyBagExtractor(Protocol):
    def supports(self, declaration_node: Node) -> bool: ...
    def extract_name(self, declaration_node: Node, source: bytes) -> Optional[str]: ...
    def extract(self, declaration_node: Node, source: bytes) -> List[Property]: ...
