"""
Variables and data types.

Python integers are arbitrary precision, so the fixed-width limits other
languages name (byte, short, long) are just values here.  ``Decimal`` is
the type to reach for with money, ``float`` for everything else.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional


def integer_examples() -> Dict[str, int]:
    numbers = {
        "Byte": 255,
        "Short": 32_000,
        "Int": 2_000_000,  # underscores for readability
        "Long": 9_223_372_036_854_775_807,
    }
    for label, value in numbers.items():
        print(f"{label}: {value}")
    return numbers


def floating_point_examples() -> Dict[str, object]:
    values = {
        "Float": 3.14,
        "Double": 3.14159265359,
        "Decimal": Decimal("19.99"),
    }
    for label, value in values.items():
        print(f"{label}: {value}")
    return values


def string_examples(first_name: str = "John", last_name: str = "Doe") -> Dict[str, object]:
    full_name = f"{first_name} {last_name}"
    results = {
        "Full Name": full_name,
        "Name Length": len(full_name),
        "Uppercase": full_name.upper(),
        "Lowercase": full_name.lower(),
    }
    for label, value in results.items():
        print(f"{label}: {value}")
    return results


def boolean_examples() -> List[bool]:
    is_active = True
    is_deleted = False
    print(f"Active: {is_active}")
    print(f"Deleted: {is_deleted}")
    return [is_active, is_deleted]


def datetime_examples(now: Optional[datetime] = None) -> Dict[str, str]:
    now = now or datetime.now()
    specific_date = date(2025, 1, 17)
    results = {
        "Current": str(now),
        "Specific": specific_date.isoformat(),
        "Date": f"{now:%Y-%m-%d}",
        "Time": f"{now:%H:%M:%S}",
    }
    for label, value in results.items():
        print(f"{label}: {value}")
    return results


def type_inference_examples() -> Dict[str, str]:
    count = 42
    message = "Hello"
    price = 9.99
    types = {
        "Count": type(count).__name__,
        "Message": type(message).__name__,
        "Price": type(price).__name__,
    }
    for label, name in types.items():
        print(f"{label} type: {name}")
    return types


def main() -> None:
    print("=== Variables and Data Types ===\n")
    integer_examples()
    floating_point_examples()
    string_examples()
    boolean_examples()
    datetime_examples()
    type_inference_examples()


if __name__ == "__main__":
    main()
