from pathlib import Path
from typing import List, Sequence, Union

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.parser.matrix_parser import format_matrices, parse_matrices


def read_matrices(path: Union[str, Path]) -> List[SemiringMatrix]:
    with open(path) as f:
        source: str = f.read()
    return parse_matrices(source)


def write_matrices(matrices: Sequence[SemiringMatrix], path: Union[str, Path]):
    with open(path, mode="w") as f:
        f.write(format_matrices(matrices))
        f.write("\n")
