"""Decorator-pattern predicates over parsed entity fields."""
import re
from typing import List

from dtogen.converter.types import Field

RELATION_RE = re.compile(r"@(OneToOne|OneToMany|ManyToOne|ManyToMany|JoinColumn|JoinTable)\b")
GENERATED_PRIMARY_RE = re.compile(r"@PrimaryGeneratedColumn\b")
AUDIT_RE = re.compile(r"@(CreateDateColumn|UpdateDateColumn|DeleteDateColumn)\b")

COLUMN_CALL_RE = re.compile(r"@Column\(")
TINYINT_TYPE_RE = re.compile(r"type\s*:\s*['\"]tinyint['\"]", re.IGNORECASE)
WIDTH_ONE_RE = re.compile(r"width\s*:\s*1\b")
DATE_TYPE_RE = re.compile(r"type\s*:\s*['\"]date")

ENUM_TYPE_RE = re.compile(r"Enum\b")
ENUM_NAME_RE = re.compile(r"\b(\w*Enum)\b")


def _any_decorator(field: Field, pattern: re.Pattern) -> bool:
    return any(pattern.search(d) for d in field.decorators)


def is_relation(field: Field) -> bool:
    return _any_decorator(field, RELATION_RE)


def is_generated_primary(field: Field) -> bool:
    return _any_decorator(field, GENERATED_PRIMARY_RE)


def is_audit(field: Field) -> bool:
    """Check if field is a creation/update/soft-delete timestamp."""
    return _any_decorator(field, AUDIT_RE)


def is_tinyint_boolean(field: Field) -> bool:
    """Check if field is a boolean stored as tinyint(1)."""
    meta = field.column_meta or ""
    return bool(
        COLUMN_CALL_RE.search(meta)
        and TINYINT_TYPE_RE.search(meta)
        and WIDTH_ONE_RE.search(meta)
    )


def is_date_column(field: Field) -> bool:
    """Check if field holds a date, by declared type or column type."""
    return field.ts_type.strip() == "Date" or bool(DATE_TYPE_RE.search(field.column_meta or ""))


def is_enum_type(ts_type: str) -> bool:
    return bool(ENUM_TYPE_RE.search(re.sub(r"\s+", "", ts_type)))


def enum_type_names(field: Field) -> List[str]:
    """Enum type names (``*Enum``) referenced by the field's declared type."""
    return ENUM_NAME_RE.findall(field.ts_type)
