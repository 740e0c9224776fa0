"""Utility functions for DTO file generation."""
import re


def to_kebab_case(name: str) -> str:
    """Convert PascalCase or camelCase to kebab-case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1-\2', name)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1-\2', s1)
    return s2.lower()


def request_dto_filename(base_name: str) -> str:
    """File name for the request DTO, e.g. ``DocComment`` -> ``doc-comment.dto.ts``."""
    return f"{to_kebab_case(base_name)}.dto.ts"


def response_dto_filename(base_name: str) -> str:
    """File name for the response DTO, e.g. ``DocComment`` -> ``doc-comment.res.dto.ts``."""
    return f"{to_kebab_case(base_name)}.res.dto.ts"
