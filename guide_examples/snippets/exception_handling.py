"""
Exception handling.

Covers ``try``/``except``/``else``/``finally``, a custom exception that
carries the offending value, re-raising when a handler decides an error
is not its business (Python's equivalent of exception filters), ``None``
defaults and ``with`` blocks for resource cleanup.
"""

import tempfile
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Tuple


FRIDAY = 4


def basic_exception_handling(index: int = 10, numbers: Sequence[int] = (1, 2, 3)) -> Optional[int]:
    """Read ``numbers[index]``, reporting an out-of-range index instead of failing."""
    value = None
    try:
        value = numbers[index]
    except IndexError as exc:
        print(f"Error: index out of range - {exc}")
    else:
        print(f"Value: {value}")
    finally:
        print("Cleanup code always executes")
    return value


class InvalidAgeError(ValueError):
    """Raised for ages outside the accepted 0-150 range."""

    def __init__(self, age: int) -> None:
        super().__init__(f"Age {age} is invalid")
        self.provided_age = age


def validate_age(age: int) -> int:
    if age < 0 or age > 150:
        raise InvalidAgeError(age)
    print(f"Age {age} is valid")
    return age


def exception_filtering(value: int, today: Optional[date] = None) -> Optional[str]:
    """Handle only the errors this function knows how to report.

    A negative value is always reported.  A zero value is only reported on
    Fridays; any other day the ``ZeroDivisionError`` propagates.
    """
    today = today or date.today()
    try:
        if value < 0:
            raise ValueError("Value cannot be negative")
        if value == 0:
            raise ZeroDivisionError("division by zero")
    except ValueError as exc:
        if "negative" not in str(exc):
            raise
        message = "Argument was negative"
    except ZeroDivisionError:
        if today.weekday() != FRIDAY:
            raise
        message = "Division by zero on Friday!"
    else:
        return None
    print(message)
    return message


def null_handling(text: Optional[str]) -> Tuple[str, Optional[int]]:
    result = text if text is not None else "Default Value"
    length = len(text) if text is not None else None
    print(f"Result: {result}, Length: {length}")
    return result, length


def file_processing(path: Path) -> str:
    """Read ``path``; the ``with`` block closes the file even if reading fails."""
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    print(f"Read {len(content)} characters, file closed: {handle.closed}")
    return content


def main() -> None:
    print("=== Exception Handling Examples ===\n")

    print("1. Basic Exception Handling:")
    basic_exception_handling()

    print("\n2. Custom Exception:")
    try:
        validate_age(25)
        validate_age(200)
    except InvalidAgeError as exc:
        print(f"Caught custom exception: {exc}")

    print("\n3. Exception Filtering:")
    exception_filtering(-5)

    print("\n4. None Handling:")
    null_handling(None)

    print("\n5. Resource Cleanup:")
    with tempfile.TemporaryDirectory() as tmp:
        data_file = Path(tmp) / "data.txt"
        data_file.write_text("example data", encoding="utf-8")
        file_processing(data_file)


if __name__ == "__main__":
    main()
