"""Matrix model - the quality attribute / architecture pattern score matrix."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

from archselect.exceptions import MatrixError


@dataclass
class Matrix:
    """Quality-Architectural Pattern Matrix for optimization.

    Rows are architecture patterns keyed by name, each holding a signed
    score per quality attribute. ``row_groups`` maps every pattern to the
    category (decision axis) it belongs to. The matrix is read-only once
    handed to the optimizer.
    """
    _rows: Dict[str, Dict[str, int]] = field(default_factory=dict)
    row_groups: Dict[str, str] = field(default_factory=dict)

    def set_element(self, row_key: str, column_key: str, value: int) -> None:
        """Set an element in the matrix."""
        if row_key not in self._rows:
            self._rows[row_key] = {}
        self._rows[row_key][column_key] = value

    def get_element(self, row_key: str, column_key: str) -> int:
        """Get an element from the matrix."""
        if row_key in self._rows and column_key in self._rows[row_key]:
            return self._rows[row_key][column_key]
        raise KeyError(f"Row or Column key not found: {row_key}, {column_key}")

    def add_pattern(self, group: str, pattern: str, scores: Dict[str, int]) -> None:
        """Register a pattern under a category with its quality scores."""
        self.row_groups[pattern] = group
        self._rows.setdefault(pattern, {})
        for quality, value in scores.items():
            self.set_element(pattern, quality, value)

    def get_rows(self) -> Iterator[Tuple[str, Dict[str, int]]]:
        """Iterate over all rows."""
        for row_key, row_values in self._rows.items():
            yield row_key, row_values

    def get_rows_by_group(self, group: str) -> Dict[str, Dict[str, int]]:
        """Get all rows belonging to a specific group."""
        group_rows = {}
        for row_key, row_group in self.row_groups.items():
            if row_group == group:
                group_rows[row_key] = self._rows.get(row_key, {})
        return group_rows

    def get_all_groups(self) -> List[str]:
        """Get all unique group names, in order of first appearance."""
        return list(dict.fromkeys(self.row_groups.values()))

    def get_all_qualities(self) -> List[str]:
        """Get every quality attribute used as a column by any row."""
        qualities: Dict[str, None] = {}
        for _, columns in self.get_rows():
            for quality in columns:
                qualities.setdefault(quality, None)
        return list(qualities)

    def validate(self) -> "Matrix":
        """Check that every row has a category and every category has rows."""
        ungrouped = [row for row in self._rows if row not in self.row_groups]
        if ungrouped:
            raise MatrixError(f"Patterns without a category: {', '.join(ungrouped)}")

        unscored = [row for row in self.row_groups if row not in self._rows]
        if unscored:
            raise MatrixError(f"Patterns without scores: {', '.join(unscored)}")

        if not self.row_groups:
            raise MatrixError("Matrix has no patterns")

        for group in self.get_all_groups():
            if not group:
                raise MatrixError("Pattern category name must not be empty")
        return self

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[str, str, Dict[str, int]]]) -> "Matrix":
        """Build a matrix from ``(pattern, category, scores)`` triples."""
        matrix = cls()
        for pattern, group, scores in rows:
            if pattern in matrix.row_groups and matrix.row_groups[pattern] != group:
                raise MatrixError(
                    f"Pattern '{pattern}' listed under both "
                    f"'{matrix.row_groups[pattern]}' and '{group}'"
                )
            matrix.add_pattern(group, pattern, scores)
        return matrix

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rows": self._rows,
            "row_groups": self.row_groups,
        }
