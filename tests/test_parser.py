"""Unit tests for entity source parsing."""
import logging
from pathlib import Path
from dtogen.converter.metadata import extract_column_meta
from dtogen.converter.parser import TokenKind, parse_entity, tokenize_lines

TESTS_DIR = Path(__file__).parent
DOC_ENTITY = (TESTS_DIR / "fixtures" / "doc.entity.ts").read_text(encoding="utf-8")


class TestParseEntity:
    """Test class and field extraction."""

    def test_class_and_base_name(self):
        parsed = parse_entity(DOC_ENTITY)

        assert parsed is not None
        assert parsed.class_name == "DocEntity"
        assert parsed.base_name == "Doc"

    def test_base_name_without_entity_suffix(self):
        parsed = parse_entity("export class Invoice {\n  total: number;\n}")
        assert parsed.class_name == "Invoice"
        assert parsed.base_name == "Invoice"

    def test_no_class_returns_none(self):
        assert parse_entity("class DocEntity {\n  id: number;\n}") is None
        assert parse_entity("const x = 1;") is None

    def test_fields_in_declaration_order(self):
        parsed = parse_entity(DOC_ENTITY)

        assert [f.name for f in parsed.fields] == [
            "id", "title", "body", "status", "isPublic",
            "publishedAt", "author", "comments", "createdAt", "updatedAt",
        ]
        comments = parsed.fields[7]
        assert comments.ts_type == "CommentEntity[]"

    def test_decorators_attach_to_next_field_only(self):
        parsed = parse_entity(DOC_ENTITY)
        author = next(f for f in parsed.fields if f.name == "author")
        comments = next(f for f in parsed.fields if f.name == "comments")

        assert author.decorators == [
            "@ManyToOne(() => UserEntity, (user) => user.docs)",
            "@JoinColumn({ name: 'author_id' })",
        ]
        assert comments.decorators == ["@OneToMany(() => CommentEntity, (comment) => comment.doc)"]

    def test_multiline_column_meta_captured(self):
        parsed = parse_entity(DOC_ENTITY)
        title = next(f for f in parsed.fields if f.name == "title")

        assert title.column_meta.splitlines()[0].strip() == "@Column({"
        assert "length: 200," in title.column_meta
        assert title.column_meta.splitlines()[-1].strip() == "})"
        # Lines inside the block are not mistaken for fields
        assert not any(f.name in ("type", "length", "comment") for f in parsed.fields)

    def test_column_meta_not_carried_to_following_field(self):
        parsed = parse_entity(DOC_ENTITY)
        author = next(f for f in parsed.fields if f.name == "author")
        assert author.column_meta is None

    def test_nullable_marks_optional(self):
        parsed = parse_entity(DOC_ENTITY)
        by_name = {f.name: f for f in parsed.fields}

        assert by_name["body"].optional is True
        assert by_name["publishedAt"].optional is True
        assert by_name["title"].optional is False

    def test_optional_marker_and_modifiers(self):
        source = "\n".join([
            "export class TagEntity {",
            "  @Column()",
            "  public readonly label?: string;",
            "  @Column()",
            "  code!: string;",
            "}",
        ])
        parsed = parse_entity(source)

        assert [(f.name, f.optional) for f in parsed.fields] == [("label", True), ("code", False)]

    def test_duplicate_names_are_kept(self):
        parsed = parse_entity("export class AEntity {\n  x: number;\n  x: string;\n}")
        assert [f.ts_type for f in parsed.fields] == ["number", "string"]

    def test_crlf_line_endings(self):
        parsed = parse_entity("export class AEntity {\r\n  @Column()\r\n  name: string;\r\n}\r\n")
        assert parsed.fields[0].name == "name"
        assert parsed.fields[0].decorators == ["@Column()"]

    def test_parse_is_deterministic(self):
        assert parse_entity(DOC_ENTITY) == parse_entity(DOC_ENTITY)


class TestColumnMetadata:
    """Test parenthesis-balanced capture of @Column blocks."""

    def test_single_line_block(self):
        lines = ["  @Column({ type: 'int' })", "  n: number;"]
        block = extract_column_meta(lines, 0)

        assert block.closed is True
        assert block.end == 0
        assert block.text == "  @Column({ type: 'int' })"

    def test_multi_line_block(self):
        lines = ["@Column({", "  type: 'int',", "  transformer: toNumber(),", "})", "n: number;"]
        block = extract_column_meta(lines, 0)

        assert block.closed is True
        assert block.end == 3

    def test_unterminated_block_runs_to_end(self, caplog):
        lines = ["@Column({", "  type: 'int',", "n: number;"]
        with caplog.at_level(logging.WARNING):
            block = extract_column_meta(lines, 0)

        assert block.closed is False
        assert block.end == 2
        assert block.text == "\n".join(lines)
        assert "Unterminated column decorator" in caplog.text

    def test_unterminated_block_does_not_stop_parsing(self):
        source = "export class AEntity {\n  @Column({ type: 'int',\n  n: number;\n}"
        parsed = parse_entity(source)

        assert [f.name for f in parsed.fields] == ["n"]
        assert "type: 'int'" in parsed.fields[0].column_meta


class TestTokenizer:
    """Test line classification."""

    def test_token_kinds(self):
        lines = ["export class AEntity {", "  @Column({", "  })", "  @Index()", "  a: string;", "}"]
        kinds = [t.kind for t in tokenize_lines(lines)]

        assert kinds == [
            TokenKind.OTHER,
            TokenKind.COLUMN_BLOCK,
            TokenKind.DECORATOR,
            TokenKind.PROPERTY,
            TokenKind.OTHER,
        ]
