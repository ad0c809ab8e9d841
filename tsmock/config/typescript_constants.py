from typing import FrozenSet


class TypeScriptSourceConstants:
    SOURCE_EXTENSIONS: FrozenSet[str] = frozenset({".ts", ".tsx", ".mts", ".cts"})
    TSX_EXTENSIONS: FrozenSet[str] = frozenset({".tsx"})

    # tree-sitter-language-pack grammar names
    TYPESCRIPT_GRAMMAR = "typescript"
    TSX_GRAMMAR = "tsx"


class TypeScriptNodeTypes:
    COMMENT = "comment"

    EXPORT_STATEMENT = "export_statement"
    AMBIENT_DECLARATION = "ambient_declaration"
    INTERFACE_DECLARATION = "interface_declaration"
    TYPE_ALIAS_DECLARATION = "type_alias_declaration"

    # Older grammars expose the interface body as object_type
    INTERFACE_BODY_TYPES: FrozenSet[str] = frozenset({"interface_body", "object_type"})
    OBJECT_TYPE = "object_type"

    PROPERTY_SIGNATURE = "property_signature"
    PROPERTY_IDENTIFIER = "property_identifier"
    TYPE_ANNOTATION = "type_annotation"
    PREDEFINED_TYPE = "predefined_type"
    OPTIONAL_MARKER = "?"


class TypeScriptCommentDelimiters:
    LINE_COMMENT_START = "//"
    BLOCK_COMMENT_START = "/*"
    BLOCK_COMMENT_END = "*/"
