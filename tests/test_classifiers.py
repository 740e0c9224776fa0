"""Tests for field classification and relation type mapping."""
import pytest
from dtogen.converter.classifiers import (
    enum_type_names,
    is_audit,
    is_date_column,
    is_generated_primary,
    is_relation,
    is_tinyint_boolean,
)
from dtogen.converter.type_resolver import to_response_type
from dtogen.converter.types import Field


def make_field(decorators=None, meta=None, ts_type="string", name="f"):
    return Field(name=name, ts_type=ts_type, optional=False, decorators=decorators or [], column_meta=meta)


class TestClassifiers:
    """Test decorator-pattern predicates."""

    @pytest.mark.parametrize("decorator", [
        "@OneToOne(() => ProfileEntity)",
        "@OneToMany(() => CommentEntity, (c) => c.doc)",
        "@ManyToOne(() => UserEntity)",
        "@ManyToMany(() => TagEntity)",
        "@JoinColumn({ name: 'user_id' })",
        "@JoinTable()",
    ])
    def test_relation_decorators(self, decorator):
        assert is_relation(make_field([decorator])) is True

    def test_plain_column_is_not_relation(self):
        field = make_field(["@Column({ type: 'int' })"])
        assert is_relation(field) is False
        assert is_audit(field) is False
        assert is_generated_primary(field) is False

    def test_generated_primary(self):
        assert is_generated_primary(make_field(["@PrimaryGeneratedColumn()"])) is True
        assert is_generated_primary(make_field(["@PrimaryColumn()"])) is False

    @pytest.mark.parametrize("decorator", ["@CreateDateColumn()", "@UpdateDateColumn()", "@DeleteDateColumn()"])
    def test_audit_decorators(self, decorator):
        assert is_audit(make_field([decorator], ts_type="Date")) is True

    def test_tinyint_boolean(self):
        meta = "@Column({\n  type: 'TINYINT',\n  width: 1,\n})"
        assert is_tinyint_boolean(make_field(meta=meta, ts_type="boolean")) is True

    def test_tinyint_requires_width_one(self):
        assert is_tinyint_boolean(make_field(meta="@Column({ type: 'tinyint', width: 3 })")) is False
        assert is_tinyint_boolean(make_field(meta="@Column({ type: 'tinyint', width: 10 })")) is False
        assert is_tinyint_boolean(make_field(meta="@Column({ type: 'tinyint' })")) is False
        assert is_tinyint_boolean(make_field(meta=None)) is False

    def test_date_column(self):
        assert is_date_column(make_field(ts_type="Date")) is True
        assert is_date_column(make_field(ts_type="string", meta="@Column({ type: 'datetime' })")) is True
        assert is_date_column(make_field(ts_type="string", meta="@Column({ type: 'varchar' })")) is False

    def test_enum_type_names(self):
        assert enum_type_names(make_field(ts_type="DocStatusEnum")) == ["DocStatusEnum"]
        assert enum_type_names(make_field(ts_type="RoleEnum[]")) == ["RoleEnum"]
        assert enum_type_names(make_field(ts_type="string")) == []


class TestToResponseType:
    """Test relation type mapping to response DTO types."""

    def test_plain_entity(self):
        assert to_response_type("DocEntity") == "DocResDto"

    def test_array_suffix(self):
        assert to_response_type("DocEntity[]") == "DocResDto[]"

    def test_generic_array(self):
        assert to_response_type("Array<DocEntity>") == "DocResDto[]"

    def test_nested_arrays(self):
        assert to_response_type("DocEntity[][]") == "DocResDto[][]"
        assert to_response_type("Array<Array<DocEntity>>") == "DocResDto[][]"
        assert to_response_type("Array<DocEntity[]>") == "DocResDto[][]"

    def test_non_entity_unchanged(self):
        assert to_response_type("string") == "string"
        assert to_response_type(" UserDto ") == "UserDto"
        assert to_response_type("EntityManager") == "EntityManager"
