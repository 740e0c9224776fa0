from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional
from dtogen.core.config import settings
from dtogen.core.workflow import ConversionStage
from dtogen.converter.exceptions import PARSE_ERROR_MESSAGE
from dtogen.converter.parser import parse_entity
from dtogen.converter.render_request import render_request_dto
from dtogen.converter.render_response import render_response_dto
from dtogen.converter.types import ConversionResult, DtoOptions

log = logging.getLogger(__name__)


def convert(source: str, options: Optional[DtoOptions] = None) -> ConversionResult:
    """Run parse -> request DTO -> response DTO for one entity source text.

    Blank input yields empty artifacts without an error. Input with no class
    declaration yields empty artifacts and the parse error message.
    """
    if options is None:
        options = DtoOptions()
    if not source.strip():
        return ConversionResult()

    log.info("Running stage", extra={"stage": ConversionStage.PARSE.value})
    parsed = parse_entity(source)
    if parsed is None:
        log.warning("No entity class declaration found", extra={"stage": ConversionStage.FAILED.value})
        return ConversionResult(error=PARSE_ERROR_MESSAGE)

    log.info("Running stage", extra={"entity": parsed.class_name, "stage": ConversionStage.RENDER_REQUEST.value})
    request_dto = render_request_dto(source, parsed, options)

    log.info("Running stage", extra={"entity": parsed.class_name, "stage": ConversionStage.RENDER_RESPONSE.value})
    response_dto = render_response_dto(source, parsed, options)

    log.info("Converted %d fields", len(parsed.fields),
             extra={"entity": parsed.class_name, "stage": ConversionStage.DONE.value})
    return ConversionResult(request_dto=request_dto, response_dto=response_dto, entity=parsed)


@dataclass
class ConversionSession:
    """Holds the current inputs and recomputes the result whenever one changes.

    Only the latest result is kept; earlier ones are discarded.
    """
    source: str = ""
    options: DtoOptions = field(default_factory=DtoOptions)
    result: ConversionResult = field(default_factory=ConversionResult)
    recomputations: int = 0

    def update(
        self,
        source: Optional[str] = None,
        force_optional: Optional[bool] = None,
        strip_audit: Optional[bool] = None,
    ) -> ConversionResult:
        new_source = self.source if source is None else source
        new_options = DtoOptions(
            force_optional=self.options.force_optional if force_optional is None else force_optional,
            strip_audit=self.options.strip_audit if strip_audit is None else strip_audit,
            common_dto_import=self.options.common_dto_import,
            transformer_import=self.options.transformer_import,
        )
        if new_source == self.source and new_options == self.options and self.recomputations:
            return self.result

        self.source = new_source
        self.options = new_options
        self.result = convert(new_source, new_options)
        self.recomputations += 1
        return self.result


def default_options(force_optional: Optional[bool] = None, strip_audit: Optional[bool] = None) -> DtoOptions:
    """Build DtoOptions from settings, with per-call overrides."""
    return DtoOptions(
        force_optional=settings.default_force_optional if force_optional is None else force_optional,
        strip_audit=settings.default_strip_audit if strip_audit is None else strip_audit,
        common_dto_import=settings.common_dto_import,
        transformer_import=settings.transformer_import,
    )
