"""Mapping of relation entity types to their response DTO types."""
import re

ARRAY_GENERIC_RE = re.compile(r"^Array<(.+)>$")


def to_response_type(ts_type: str) -> str:
    """
    Map an entity type reference to the matching response DTO type.

    ``Array<X>`` and ``X[]`` are unwrapped one level per call and rebuilt as
    ``[]`` around the mapped inner type; a trailing ``Entity`` becomes
    ``ResDto``. Other names are returned unchanged.
    """
    t = ts_type.strip()
    generic = ARRAY_GENERIC_RE.match(t)
    if generic:
        return to_response_type(generic.group(1)) + "[]"
    if t.endswith("[]"):
        return to_response_type(t[:-2]) + "[]"
    return re.sub(r"Entity$", "ResDto", t)
