from typing import List, Sequence, Tuple

from texnumber.constructs import find_construct
from texnumber.diagnostics import Diagnostic, UndefinedReference
from texnumber.labels import LabelTable


def rewrite_refs(
    active: str,
    prefix: str,
    replacement: str,
    table: LabelTable,
    constructs: Sequence[str],
    line_no: int,
) -> Tuple[str, List[Diagnostic]]:
    """Rewrite the body of every construct in `active` that names a known label to `replacement` + index.

    Each construct kind is scanned separately, in order, over the output of the previous kind.
    Bodies which start with `prefix` but aren't in the table are left alone and reported as UndefinedReference.
    Anything else belongs to somebody else's namespace and is left alone silently.
    """
    diagnostics: List[Diagnostic] = []
    for delimiter in constructs:
        pos = 0
        while True:
            construct = find_construct(active, delimiter, line_no, pos)
            if construct is None:
                break
            name = construct.body(active)
            index = table.index_of(name)
            if index is not None:
                new_body = f"{replacement}{index}"
                active = (
                    active[: construct.body_start] + new_body + active[construct.end :]
                )
                # Skip the new body and its closing brace
                pos = construct.body_start + len(new_body) + 1
                continue
            if name.startswith(prefix):
                diagnostics.append(UndefinedReference(line_no, delimiter, name))
            pos = construct.end + 1
    return active, diagnostics
