from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConvertRequest(CamelModel):
    source: str = Field(..., examples=["export class DocEntity {\n  @PrimaryGeneratedColumn()\n  id: number;\n}"])
    force_optional: Optional[bool] = None
    strip_audit: Optional[bool] = None


class FieldSummary(CamelModel):
    name: str
    ts_type: str
    optional: bool
    decorators: List[str] = []
    relation: bool = False
    audit: bool = False
    generated_primary: bool = False
    tinyint_boolean: bool = False


class ConvertResponse(CamelModel):
    class_name: Optional[str] = None
    base_name: Optional[str] = None
    request_dto: str = ""
    response_dto: str = ""
    fields: List[FieldSummary] = []
