"""Import-reference scanning for generated skills."""

from __future__ import annotations

import re
from typing import Iterable

from agentforge.core.generation.models import CodeFile

# ``import x from 'mod'`` / ``import { a } from "mod"`` / ``export * from 'mod'``
_RE_IMPORT_FROM = re.compile(r"""\b(?:import|export)\b[^'";]*?\bfrom\s*['"]([^'"\n]+)['"]""")
# ``import 'mod'`` (side-effect import)
_RE_IMPORT_BARE = re.compile(r"""\bimport\s*['"]([^'"\n]+)['"]""")
# ``require('mod')``
_RE_REQUIRE = re.compile(r"""\brequire\(\s*['"]([^'"\n]+)['"]\s*\)""")

_PATTERNS = (_RE_IMPORT_FROM, _RE_IMPORT_BARE, _RE_REQUIRE)


def _scan(text: str) -> set[str]:
    found: set[str] = set()
    for pattern in _PATTERNS:
        found.update(match.group(1).strip() for match in pattern.finditer(text))
    return found


def extract_dependencies(document: str, code_files: Iterable[CodeFile] = ()) -> list[str]:
    """Collect every module path referenced by the document or code files.

    Each path appears once; the list is sorted so repeated runs compare
    equal, but callers should treat it as a set.
    """
    deps = _scan(document or "")
    for code_file in code_files:
        deps.update(_scan(code_file.content))
    deps.discard("")
    return sorted(deps)
