"""Square matrices over a pluggable semiring."""

from __future__ import annotations

from typing import Any, Iterator, List, Sequence, Tuple

from tropicalbound.elements.semiring import Semiring
from tropicalbound.exceptions import InputFaultError


class SemiringMatrix:
    __slots__ = ("semiring", "n", "_rows")
    """
    An n×n matrix whose arithmetic is delegated to a ``Semiring``.

    Matrices are compared and hashed by value (semiring plus all entries), so
    they can be stored in sets. A matrix must not be mutated while it is a
    member of a set or a dictionary key.

    Attributes:
        semiring: The semiring supplying add/multiply/zero/one
        n: Dimension of the matrix
    """

    def __init__(self, data: Sequence[Sequence[Any]], semiring: Semiring):
        if data is None:
            raise InputFaultError("Matrix must be non-null.")
        n = len(data)
        if n == 0:
            raise InputFaultError("Matrix dimension must be non-zero.")
        rows: List[List[Any]] = []
        for row in data:
            if len(row) != n:
                raise InputFaultError(
                    f"Matrix must be a square matrix: {n}×{len(row)}."
                )
            rows.append([semiring.coerce(entry) for entry in row])
        self.semiring = semiring
        self.n = n
        self._rows = rows

    # ------------------------------------------------------------------ #
    # Constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def identity(cls, n: int, semiring: Semiring) -> "SemiringMatrix":
        """Identity of dimension n: ``one`` on the diagonal, ``zero`` elsewhere."""
        cls._check_size(n)
        return cls._trusted(
            [
                [semiring.one if i == j else semiring.zero for j in range(n)]
                for i in range(n)
            ],
            semiring,
        )

    @classmethod
    def filled(cls, n: int, value: Any, semiring: Semiring) -> "SemiringMatrix":
        """Matrix of dimension n with every entry set to ``value``."""
        cls._check_size(n)
        value = semiring.coerce(value)
        return cls._trusted([[value] * n for _ in range(n)], semiring)

    @classmethod
    def _trusted(cls, rows: List[List[Any]], semiring: Semiring) -> "SemiringMatrix":
        # Rows produced by semiring arithmetic are already valid entries.
        matrix = cls.__new__(cls)
        matrix.semiring = semiring
        matrix.n = len(rows)
        matrix._rows = rows
        return matrix

    @staticmethod
    def _check_size(n: int) -> None:
        if not isinstance(n, int) or n <= 0:
            raise InputFaultError("Size must be greater than 0.")

    def copy(self) -> "SemiringMatrix":
        return self._trusted([list(row) for row in self._rows], self.semiring)

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    def size(self) -> int:
        return self.n

    def get(self, i: int, j: int) -> Any:
        return self._rows[i][j]

    def set(self, i: int, j: int, value: Any) -> None:
        self._rows[i][j] = self.semiring.coerce(value)

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        i, j = index
        return self._rows[i][j]

    def rows(self) -> Tuple[Tuple[Any, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        return iter(self.rows())

    def entries(self) -> Iterator[Any]:
        for row in self._rows:
            yield from row

    # ------------------------------------------------------------------ #
    # Semiring operations
    # ------------------------------------------------------------------ #

    def _ensure_compatible(self, other: "SemiringMatrix") -> None:
        if not isinstance(other, SemiringMatrix) or other.semiring is not self.semiring:
            raise InputFaultError("Incompatible matrix type.")
        if other.n != self.n:
            raise InputFaultError("Matrix dimensions differ.")

    def _product_rows(self, other: "SemiringMatrix") -> List[List[Any]]:
        add = self.semiring.add
        multiply = self.semiring.multiply
        zero = self.semiring.zero
        # Columns are materialized before any row is written, so other may alias self.
        columns = list(zip(*other._rows))
        result: List[List[Any]] = []
        for row in self._rows:
            new_row = []
            for column in columns:
                acc = zero
                for a, b in zip(row, column):
                    acc = add(acc, multiply(a, b))
                new_row.append(acc)
            result.append(new_row)
        return result

    def times(self, other: "SemiringMatrix") -> "SemiringMatrix":
        """Return ``self · other`` as a new matrix; both operands stay unchanged."""
        self._ensure_compatible(other)
        return self._trusted(self._product_rows(other), self.semiring)

    def times_in_place(self, other: "SemiringMatrix") -> None:
        """Overwrite ``self`` with ``self · other``."""
        self._ensure_compatible(other)
        self._rows = self._product_rows(other)

    def pow(self, k: int) -> "SemiringMatrix":
        """Raise to the k-th power (k >= 0) by repeated squaring."""
        if isinstance(k, bool) or not isinstance(k, int) or k < 0:
            raise InputFaultError("Power must be non-negative.")
        base = self.copy()
        result = SemiringMatrix.identity(self.n, self.semiring)
        exp = k
        while exp > 0:
            if exp & 1:
                result.times_in_place(base)
            exp >>= 1
            if exp:
                base.times_in_place(base)
        return result

    def __matmul__(self, other: "SemiringMatrix") -> "SemiringMatrix":
        return self.times(other)

    def __pow__(self, k: int) -> "SemiringMatrix":
        return self.pow(k)

    # ------------------------------------------------------------------ #
    # Value semantics
    # ------------------------------------------------------------------ #

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SemiringMatrix):
            return NotImplemented
        return (
            self.semiring is other.semiring
            and self.n == other.n
            and self._rows == other._rows
        )

    def __hash__(self) -> int:
        return hash((self.semiring.name, tuple(tuple(row) for row in self._rows)))

    def __repr__(self) -> str:
        return f"SemiringMatrix({self.semiring.name}, {self.rows()!r})"

    def __str__(self) -> str:
        cells = [[self.semiring.format_entry(v) for v in row] for row in self._rows]
        width = max(len(cell) for row in cells for cell in row)
        return "\n".join(
            "  ".join(cell.ljust(width) for cell in row).rstrip() for row in cells
        )
