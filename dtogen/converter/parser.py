"""
Line-oriented parser for TypeORM-style entity classes.

Lines are first classified into tokens (decorator, column block, property,
other) and then folded into a ParsedEntity. Lines that are not recognised
are skipped; no full TypeScript grammar is attempted.
"""
import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from dtogen.converter.metadata import extract_column_meta
from dtogen.converter.types import Field, ParsedEntity

log = logging.getLogger(__name__)

CLASS_RE = re.compile(r"export\s+class\s+(\w+)")
LINE_SPLIT_RE = re.compile(r"\r?\n")
PROPERTY_RE = re.compile(
    r"^(?:(?:public|private|protected|readonly)\s+)*"
    r"([A-Za-z_][A-Za-z0-9_]*)([?!])?\s*:\s*([^;]+);"
)
NULLABLE_RE = re.compile(r"nullable\s*:\s*true")


class TokenKind(str, Enum):
    DECORATOR = "DECORATOR"
    COLUMN_BLOCK = "COLUMN_BLOCK"
    PROPERTY = "PROPERTY"
    OTHER = "OTHER"


@dataclass
class LineToken:
    kind: TokenKind
    line_no: int
    text: str
    name: str = ""
    ts_type: str = ""
    optional_marker: bool = False
    column_meta: Optional[str] = None


def strip_entity_suffix(class_name: str) -> str:
    """Remove a trailing "Entity" from a class name."""
    return re.sub(r"Entity$", "", class_name)


def tokenize_lines(lines: List[str]) -> Iterator[LineToken]:
    """Classify trimmed source lines, consuming multi-line column blocks whole."""
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if line.startswith("@"):
            if line.startswith("@Column(") and "{" in line:
                block = extract_column_meta(lines, i)
                yield LineToken(TokenKind.COLUMN_BLOCK, i + 1, line, column_meta=block.text)
                # An unbalanced block keeps its text but the scan carries on below it
                if block.closed:
                    i = block.end
            else:
                yield LineToken(TokenKind.DECORATOR, i + 1, line)
        else:
            match = PROPERTY_RE.match(line)
            if match:
                yield LineToken(
                    TokenKind.PROPERTY,
                    i + 1,
                    line,
                    name=match.group(1),
                    ts_type=match.group(3).strip(),
                    optional_marker=match.group(2) == "?",
                )
            else:
                yield LineToken(TokenKind.OTHER, i + 1, line)
        i += 1


def parse_entity(source: str) -> Optional[ParsedEntity]:
    """
    Parse entity source text into a ParsedEntity.

    Returns None when the text has no ``export class Name`` declaration.
    Decorators collected above a property attach to that property only.
    """
    class_match = CLASS_RE.search(source)
    if not class_match:
        return None
    class_name = class_match.group(1)

    fields: List[Field] = []
    decorator_buf: List[str] = []
    pending_meta: Optional[str] = None

    for token in tokenize_lines(LINE_SPLIT_RE.split(source)):
        if token.kind is TokenKind.DECORATOR:
            decorator_buf.append(token.text)
        elif token.kind is TokenKind.COLUMN_BLOCK:
            decorator_buf.append(token.text)
            pending_meta = token.column_meta
        elif token.kind is TokenKind.PROPERTY:
            context = (pending_meta or "") + "\n" + "\n".join(decorator_buf)
            fields.append(Field(
                name=token.name,
                ts_type=token.ts_type,
                optional=token.optional_marker or bool(NULLABLE_RE.search(context)),
                decorators=list(decorator_buf),
                column_meta=pending_meta,
            ))
            decorator_buf = []
            pending_meta = None
        # Anything else is skipped

    log.debug("Parsed %d fields", len(fields), extra={"entity": class_name, "stage": "PARSE"})
    return ParsedEntity(
        class_name=class_name,
        base_name=strip_entity_suffix(class_name),
        fields=fields,
    )
