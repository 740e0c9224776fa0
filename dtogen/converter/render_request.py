"""Request DTO rendering (class-validator / class-transformer)."""
import re
from typing import List, Optional

from dtogen.converter.classifiers import (
    is_audit,
    is_date_column,
    is_enum_type,
    is_generated_primary,
    is_relation,
    is_tinyint_boolean,
)
from dtogen.converter.imports import harvest_enum_imports
from dtogen.converter.types import DtoOptions, Field, ParsedEntity


def _validator_decorators(field: Field, required: bool) -> List[str]:
    """Pick validators from the declared type and requiredness."""
    decos = []
    t = re.sub(r"\s+", "", field.ts_type)

    if is_enum_type(t):
        decos.append(f"@IsEnum({field.ts_type.strip()})")
    elif t == "string":
        decos.append("@IsString()")
    elif t == "Date":
        decos.append("@IsDate()")
    elif t == "number":
        decos.append("@IsInt()")

    if required and t == "string":
        decos.append("@IsNotEmpty()")
    if not required:
        decos.append("@IsOptional()")

    return decos


def request_fields(parsed: ParsedEntity) -> List[Field]:
    """Fields kept in the request DTO: no relations, no audit timestamps."""
    return [f for f in parsed.fields if not is_relation(f) and not is_audit(f)]


def render_request_dto(source: str, parsed: ParsedEntity, options: Optional[DtoOptions] = None) -> str:
    """
    Generate the request DTO and its partial-update variant.

    Args:
        source: Original entity source text (scanned for enum imports)
        parsed: Result of parse_entity on ``source``
        options: Rendering options; defaults to DtoOptions()

    Returns:
        TypeScript source with ``<Base>Dto`` and ``<Base>ReqDto``
    """
    if options is None:
        options = DtoOptions()
    class_name = f"{parsed.base_name}Dto"
    fields = request_fields(parsed)

    lines = [
        "import { IsString, IsOptional, IsInt, IsNotEmpty, IsDate, IsEnum } from 'class-validator';",
        "import { Transform } from 'class-transformer';",
        "import { PartialType } from '@nestjs/mapped-types';",
        f"import {{ CommonDto }} from '{options.common_dto_import}';",
        f"import {{ boolTransformer, dateTransformer }} from '{options.transformer_import}';",
        *harvest_enum_imports(source, fields),
        "",
        f"export class {class_name} extends CommonDto {{",
    ]

    for f in fields:
        required = not options.force_optional and not f.optional and not is_generated_primary(f)
        tiny = is_tinyint_boolean(f)

        if tiny:
            lines.append("  @Transform(({ value }) => boolTransformer.to(value))")
        if is_date_column(f):
            lines.append("  @Transform(({ value }) => dateTransformer.to(value))")
        for deco in _validator_decorators(f, required):
            lines.append(f"  {deco}")

        # tinyint(1) columns keep their stored numeric shape on the way in
        lines.append(f"  {f.name}: {'number' if tiny else f.ts_type.strip()};")
        lines.append("")

    lines.append("}")
    lines.append("")
    lines.append(f"export class {parsed.base_name}ReqDto extends PartialType({class_name}) {{}}")

    return "\n".join(lines)
