"""Dataclasses for entity-to-DTO conversion."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Field:
    """One declared property of an entity class."""
    name: str
    ts_type: str  # Declared type text as written, e.g. "string", "CommentEntity[]"
    optional: bool
    decorators: List[str] = field(default_factory=list)
    column_meta: Optional[str] = None  # Full @Column({ ... }) block, when present


@dataclass
class ParsedEntity:
    """Result of parsing one entity class."""
    class_name: str  # e.g. DocEntity
    base_name: str  # e.g. Doc
    fields: List[Field] = field(default_factory=list)


@dataclass
class DtoOptions:
    """Options governing request/response DTO rendering."""
    force_optional: bool = True
    strip_audit: bool = True  # Accepted; audit fields are always left out of request DTOs
    common_dto_import: str = "src/common/dto/common.dto"
    transformer_import: str = "src/common/util/transformer"


@dataclass
class ConversionResult:
    """Both rendered artifacts of one conversion, or the reason there are none."""
    request_dto: str = ""
    response_dto: str = ""
    error: Optional[str] = None
    entity: Optional[ParsedEntity] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
