"""Carry-forward of enum imports from the entity source."""
from typing import Iterable, List

from dtogen.converter.classifiers import enum_type_names
from dtogen.converter.types import Field


def harvest_enum_imports(source: str, fields: Iterable[Field]) -> List[str]:
    """
    Select the source's import lines that mention an enum used by ``fields``.

    Matching is textual, so a name that is a substring of another import may
    pull that import in too, and aliased imports are missed.
    """
    names = []
    for f in fields:
        for name in enum_type_names(f):
            if name not in names:
                names.append(name)
    if not names:
        return []

    selected: List[str] = []
    for line in source.splitlines():
        if not line.strip().startswith("import"):
            continue
        if any(name in line for name in names) and line not in selected:
            selected.append(line)
    return selected
