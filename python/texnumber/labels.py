import dataclasses
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from texnumber.comments import COMMENT_CHAR, split_comment
from texnumber.constructs import LABEL_DELIMITER, find_construct
from texnumber.diagnostics import Diagnostic, DuplicateLabel, PatternNotFoundError


@dataclasses.dataclass(frozen=True)
class Label:
    """A `\\label{name}` definition and the sequential index it was assigned.

    `name` is the full body of the construct, including the prefix."""

    name: str
    index: int


class LabelTable:
    """Maps label names to indices 1..N in order of first definition.

    The table is filled while scanning and then frozen, after which it can only be read.
    """

    _by_name: Dict[str, int]
    _by_index: List[str]
    _frozen: bool

    def __init__(self) -> None:
        super().__init__()
        self._by_name = {}
        self._by_index = []
        self._frozen = False

    def register(self, name: str) -> Optional[int]:
        """Assign the next index to `name`.

        Returns the new index, or None if `name` already had one (in which case nothing changes)."""
        if self._frozen:
            raise RuntimeError(f"Can't register label '{name}' in a frozen LabelTable")
        if name in self._by_name:
            return None
        self._by_index.append(name)
        index = len(self._by_index)
        self._by_name[name] = index
        return index

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def index_of(self, name: str) -> Optional[int]:
        return self._by_name.get(name)

    def name_of(self, index: int) -> str:
        if index < 1 or index > len(self._by_index):
            raise KeyError(index)
        return self._by_index[index - 1]

    def labels(self) -> List[Label]:
        return [Label(name, i) for i, name in enumerate(self._by_index, start=1)]

    def as_dict(self) -> Dict[str, int]:
        return dict(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_index)

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels())

    def __repr__(self) -> str:
        return f"LabelTable({self._by_name!r})"


def scan_labels(
    lines: Iterable[str],
    prefix: str,
    ignore_comments: bool = True,
    comment_char: str = COMMENT_CHAR,
    on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
) -> Tuple[LabelTable, List[Diagnostic]]:
    """Build a frozen LabelTable from every `\\label{<prefix>...}` in `lines`.

    Lines are numbered from 1. Labels are numbered top-to-bottom, left-to-right.
    A label defined twice keeps its first index and produces a DuplicateLabel diagnostic.
    If `on_diagnostic` is given it is called with each diagnostic as soon as it is found,
    so diagnostics from lines before a fatal error are not lost.

    Raises UnterminatedConstructError if a matching label has no closing brace,
    and PatternNotFoundError if no label matches `prefix` at all.
    """
    table = LabelTable()
    diagnostics: List[Diagnostic] = []
    for line_no, line in enumerate(lines, start=1):
        active, _ = split_comment(line, ignore_comments, comment_char)
        pos = 0
        while True:
            construct = find_construct(
                active, LABEL_DELIMITER, line_no, pos, body_prefix=prefix
            )
            if construct is None:
                break
            name = construct.body(active)
            if table.register(name) is None:
                duplicate = DuplicateLabel(line_no, name)
                diagnostics.append(duplicate)
                if on_diagnostic is not None:
                    on_diagnostic(duplicate)
            pos = construct.end + 1

    if not table:
        raise PatternNotFoundError(prefix)
    table.freeze()
    return table, diagnostics
