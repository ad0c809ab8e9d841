"""
Test cases for schema extraction from route-annotated TypeScript declarations.

Each test parses a small TypeScript snippet with the real tree-sitter grammar
and checks the Entities the extractor produces.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from typing import List
from tsmock.analyzers.typescript_analyzer import TypeScriptSchemaAnalyzer
from tsmock.models.domain_models import Entity, PrimitiveType, Property, SourceUnit


B = PrimitiveType.BOOLEAN
N = PrimitiveType.NUMBER
S = PrimitiveType.STRING


class TestSchemaExtractor:
    """Test comment-to-declaration matching and property reduction."""

    @pytest.fixture(scope="class")
    def analyzer(self) -> TypeScriptSchemaAnalyzer:
        return TypeScriptSchemaAnalyzer()

    @pytest.fixture
    def extract(self, analyzer):
        def _extract(text: str, file_name: str = "sample.ts") -> List[Entity]:
            return analyzer.process_unit(SourceUnit(path=Path(file_name), text=text))
        return _extract

    def test_single_annotated_interface(self, extract):
        entities = extract(
            "// route /users\n"
            "interface User { id: number; name: string; active: boolean }\n"
        )

        assert len(entities) == 1
        entity = entities[0]
        assert entity.route == "/users"
        assert entity.name == "User"
        assert entity.file_path == "sample.ts"
        assert entity.properties == (
            Property("id", N),
            Property("name", S),
            Property("active", B),
        )

    def test_unsupported_property_is_dropped(self, extract):
        entities = extract("// route /x\ninterface X { a: number; b: string[] }\n")

        assert len(entities) == 1
        assert entities[0].properties == (Property("a", N),)

    def test_mixed_members_keep_relative_order(self, extract):
        source = """
// route /mixed
interface Mixed {
  first: string;
  maybe?: number;
  either: string | number;
  ref: User;
  nested: { x: number };
  second: boolean;
  loose: any;
  literal: "fixed";
  untyped;
  method(): void;
  [key: string]: unknown;
  "quoted": string;
  third: number;
}
"""
        entities = extract(source)

        assert len(entities) == 1
        assert entities[0].properties == (
            Property("first", S),
            Property("second", B),
            Property("third", N),
        )

    def test_readonly_property_is_kept(self, extract):
        entities = extract("// route /ro\ninterface Ro { readonly id: number }\n")

        assert entities[0].properties == (Property("id", N),)

    def test_duplicate_property_names_are_preserved(self, extract):
        entities = extract("// route /dup\ninterface Dup { a: number; a: string }\n")

        assert entities[0].properties == (Property("a", N), Property("a", S))

    def test_interface_without_primitive_members_still_yields_entity(self, extract):
        entities = extract(
            "// route /empty\ninterface Empty {}\n"
            "// route /complex\ninterface Complex { tags: string[]; owner: User }\n"
        )

        assert [e.route for e in entities] == ["/empty", "/complex"]
        assert all(e.properties == () for e in entities)

    def test_comment_without_route_token(self, extract):
        assert extract("// route\ninterface User { id: number }\n") == []

    def test_ordinary_comment(self, extract):
        assert extract("// the user model\ninterface User { id: number }\n") == []

    @pytest.mark.parametrize("declaration", [
        "function users(): void {}",
        "class User { id: number = 1 }",
        "const users = { id: 1 };",
        "type UserId = string;",
        "type Either = { a: number } | { b: string };",
        "enum Role { Admin, User }",
    ])
    def test_non_property_bag_declaration(self, extract, declaration):
        assert extract(f"// route /users\n{declaration}\n") == []

    def test_comment_at_end_of_file_is_not_attached(self, extract):
        assert extract("interface User { id: number }\n// route /users\n") == []

    def test_trailing_comment_is_not_attached(self, extract):
        source = "const a = 1; // route /t\ninterface T { a: number }\n"
        assert extract(source) == []

    def test_trailing_comment_after_inline_block_comment(self, extract):
        source = "const a = 1; /* note */ // route /t\ninterface T { a: number }\n"
        assert extract(source) == []

    def test_leading_comment_after_inline_block_comment(self, extract):
        entities = extract("/* gen */ // route /users\ninterface User { id: number }\n")

        assert [(e.route, e.name) for e in entities] == [("/users", "User")]

    def test_nested_declaration_is_not_matched(self, extract):
        source = """
function build() {
  // route /inner
  interface Inner { a: number }
  return 1;
}
"""
        assert extract(source) == []

    def test_comment_attaches_across_blank_lines_and_comments(self, extract):
        source = """
// route /users

// Users returned by the admin API
/* keep in sync with the backend */
interface User { id: number }
"""
        entities = extract(source)

        assert len(entities) == 1
        assert entities[0].route == "/users"

    def test_block_comment_annotation(self, extract):
        entities = extract("/* route /block */\ninterface Block { ok: boolean }\n")

        assert [(e.route, e.properties) for e in entities] == [("/block", (Property("ok", B),))]

    def test_exported_interface(self, extract):
        entities = extract("// route /users\nexport interface User { id: number }\n")

        assert len(entities) == 1
        assert entities[0].name == "User"

    def test_ambient_interface(self, extract):
        entities = extract("// route /users\ndeclare interface User { id: number; name: string }\n")

        assert len(entities) == 1
        assert entities[0].name == "User"
        assert entities[0].properties == (Property("id", N), Property("name", S))

    def test_exported_ambient_interface(self, extract):
        entities = extract("// route /users\nexport declare interface User { id: number }\n")

        assert [(e.route, e.name, e.properties) for e in entities] == [
            ("/users", "User", (Property("id", N),))
        ]

    def test_ambient_object_type_alias(self, extract):
        entities = extract("// route /alias\ndeclare type Alias = { ok: boolean };\n")

        assert [(e.name, e.properties) for e in entities] == [("Alias", (Property("ok", B),))]

    def test_object_type_alias(self, extract):
        entities = extract("// route /alias\ntype Alias = { a: number; b: boolean };\n")

        assert len(entities) == 1
        assert entities[0].name == "Alias"
        assert entities[0].properties == (Property("a", N), Property("b", B))

    def test_two_annotations_on_one_declaration(self, extract):
        source = "// route /a\n// route /b\ninterface Shared { id: number }\n"
        entities = extract(source)

        assert [e.route for e in entities] == ["/a", "/b"]
        assert entities[0].properties == entities[1].properties

    def test_multiple_entities_in_source_order(self, extract):
        source = """
// route /users
interface User { id: number }

function helper() {}

// route /posts
interface Post { title: string }

// route /comments
interface Comment { body: string; likes: number }
"""
        entities = extract(source)

        assert [e.route for e in entities] == ["/users", "/posts", "/comments"]
        assert [e.name for e in entities] == ["User", "Post", "Comment"]

    def test_tsx_unit_uses_tsx_grammar(self, extract):
        source = """
// route /widget
interface WidgetProps { title: string; count: number }

export const Widget = (props: WidgetProps) => <div>{props.title}</div>;
"""
        entities = extract(source, file_name="Widget.tsx")

        assert len(entities) == 1
        assert entities[0].properties == (Property("title", S), Property("count", N))

    def test_custom_route_marker(self):
        analyzer = TypeScriptSchemaAnalyzer(route_marker="@mock")
        unit = SourceUnit(path=Path("m.ts"), text="// @mock /m\ninterface M { a: number }\n// route /r\ninterface R { a: number }\n")

        entities = analyzer.process_unit(unit)

        assert [e.route for e in entities] == ["/m"]

    def test_extraction_is_repeatable(self, extract):
        source = "// route /users\ninterface User { id: number; name: string }\n"
        assert extract(source) == extract(source)
