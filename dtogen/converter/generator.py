"""Orchestrator for DTO file generation from entity files."""
import logging
from pathlib import Path
from typing import List, Optional
from dtogen.converter.exceptions import EntityParseError
from dtogen.converter.parser import parse_entity
from dtogen.converter.render_request import render_request_dto
from dtogen.converter.render_response import render_response_dto
from dtogen.converter.types import DtoOptions, GeneratedFile
from dtogen.converter.utils import request_dto_filename, response_dto_filename
from dtogen.converter.writer import write_files

log = logging.getLogger(__name__)


def generate_dto_files(
    entity_path: Path,
    out_dir: Optional[Path] = None,
    options: Optional[DtoOptions] = None,
) -> List[GeneratedFile]:
    """
    Generate request and response DTO files for one entity file.
    
    Args:
        entity_path: Path to the entity ``.ts`` file
        out_dir: Output directory; nothing is written when None
        options: Rendering options
        
    Returns:
        List of GeneratedFile objects (request DTO first)

    Raises:
        EntityParseError: If the file has no exported class declaration
    """
    source = entity_path.read_text(encoding="utf-8")
    parsed = parse_entity(source)
    if parsed is None:
        raise EntityParseError(source_path=str(entity_path))

    files = [
        GeneratedFile(
            path=request_dto_filename(parsed.base_name),
            content=render_request_dto(source, parsed, options),
        ),
        GeneratedFile(
            path=response_dto_filename(parsed.base_name),
            content=render_response_dto(source, parsed, options),
        ),
    ]
    
    if out_dir is not None:
        write_files(files, out_dir)
        log.info("Wrote %d files to %s", len(files), out_dir, extra={"entity": parsed.class_name, "stage": "-"})
    
    return files
