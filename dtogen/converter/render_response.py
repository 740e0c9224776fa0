"""Response DTO rendering (@Expose / @Transform)."""
from typing import Optional

from dtogen.converter.classifiers import (
    is_audit,
    is_date_column,
    is_relation,
    is_tinyint_boolean,
)
from dtogen.converter.imports import harvest_enum_imports
from dtogen.converter.type_resolver import to_response_type
from dtogen.converter.types import DtoOptions, Field, ParsedEntity


def response_type(field: Field) -> str:
    """Resolve the type a field is exposed with in the response DTO."""
    if is_relation(field):
        return to_response_type(field.ts_type)
    if is_tinyint_boolean(field):
        return "boolean"
    if is_date_column(field):
        # Audit timestamps stay real dates; other dates leave serialized
        return "Date" if is_audit(field) else "string"
    return field.ts_type.strip()


def render_response_dto(source: str, parsed: ParsedEntity, options: Optional[DtoOptions] = None) -> str:
    """Generate the ``<Base>ResDto`` class exposing every field, relations included."""
    if options is None:
        options = DtoOptions()

    lines = [
        "import { Expose, Transform } from 'class-transformer';",
        f"import {{ boolTransformer, dateTransformer }} from '{options.transformer_import}';",
        *harvest_enum_imports(source, parsed.fields),
        "",
        f"export class {parsed.base_name}ResDto {{",
    ]

    for f in parsed.fields:
        if not is_relation(f):
            if is_tinyint_boolean(f):
                lines.append("  @Transform(({ value }) => boolTransformer.from(value))")
            if is_date_column(f) and not is_audit(f):
                lines.append("  @Transform(({ value }) => dateTransformer.from(value))")
        lines.append("  @Expose()")
        lines.append(f"  {f.name}: {response_type(f)};")
        lines.append("")

    lines.append("}")
    return "\n".join(lines)
