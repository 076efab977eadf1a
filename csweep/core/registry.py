"""Per-run aggregation of function sites."""

from collections.abc import Iterator

from csweep.core.models import FunctionRecord, SourcePosition


class FunctionRegistry:
    """
    Mapping from function name to its declaration and call sites.

    Records are created lazily on first sighting, so every name present has
    at least one site. One registry belongs to exactly one run.
    """

    def __init__(self) -> None:
        self._records: dict[str, FunctionRecord] = {}

    def _record(self, name: str) -> FunctionRecord:
        record = self._records.get(name)
        if record is None:
            record = FunctionRecord(name=name)
            self._records[name] = record
        return record

    def add_declaration(self, name: str, position: SourcePosition) -> None:
        self._record(name).declarations.append(position)

    def add_call(self, name: str, position: SourcePosition) -> None:
        self._record(name).calls.append(position)

    def merge(self, other: "FunctionRegistry") -> None:
        """Append all sites of another registry, e.g. one built per file."""
        for name, record in other.items():
            target = self._record(name)
            target.declarations.extend(record.declarations)
            target.calls.extend(record.calls)

    def snapshot(self) -> dict[str, FunctionRecord]:
        """Deep copy of the current contents."""
        return {name: record.model_copy(deep=True) for name, record in self._records.items()}

    def items(self) -> Iterator[tuple[str, FunctionRecord]]:
        return iter(self._records.items())

    def __getitem__(self, name: str) -> FunctionRecord:
        return self._records[name]

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
