"""Custom validators for argument parsing."""

import argparse
from typing import Any, Sequence


class PositiveIntegerAction(argparse.Action):
    """Argparse action that validates the value is >= 1."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        """
        Validate and set the value.

        Args:
            parser: The argument parser.
            namespace: The namespace object.
            values: The input value to validate.
            option_string: The option string that triggered this action.

        Raises:
            ArgumentError: If the value is less than 1.
        """
        # type=int has already converted the value
        if not isinstance(values, int):
            parser.error(f"{option_string} must be an integer")
            return

        if values < 1:
            parser.error(f"Minimum value for {option_string} is 1")
        setattr(namespace, self.dest, values)


class NonNegativeFloatAction(argparse.Action):
    """Argparse action that validates a duration is >= 0."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        if not isinstance(values, float) or values < 0:
            parser.error(f"{option_string} must be a non-negative number")
            return
        setattr(namespace, self.dest, values)


def parse_word(text: str) -> list[int]:
    """Parse a comma-separated 1-based word such as '1,2,1' into 0-based indices."""
    letters = [token.strip() for token in text.split(",") if token.strip()]
    try:
        word = [int(token) - 1 for token in letters]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid word {text!r}") from None
    if any(letter < 0 for letter in word):
        raise argparse.ArgumentTypeError("Word letters are 1-based generator numbers")
    return word
