from fastapi import APIRouter, HTTPException
from dtogen.converter.classifiers import is_audit, is_generated_primary, is_relation, is_tinyint_boolean
from dtogen.core.engine import convert, default_options
from dtogen.schemas.convert import ConvertRequest, ConvertResponse, FieldSummary

router = APIRouter(prefix="/convert")

@router.post("", response_model=ConvertResponse, response_model_by_alias=True)
def convert_entity(req: ConvertRequest):
    result = convert(req.source, default_options(req.force_optional, req.strip_audit))
    if not result.ok:
        raise HTTPException(status_code=422, detail=result.error)
    if result.entity is None:
        return ConvertResponse()

    entity = result.entity
    return ConvertResponse(
        class_name=entity.class_name,
        base_name=entity.base_name,
        request_dto=result.request_dto,
        response_dto=result.response_dto,
        fields=[
            FieldSummary(
                name=f.name,
                ts_type=f.ts_type,
                optional=f.optional,
                decorators=f.decorators,
                relation=is_relation(f),
                audit=is_audit(f),
                generated_primary=is_generated_primary(f),
                tinyint_boolean=is_tinyint_boolean(f),
            )
            for f in entity.fields
        ],
    )
