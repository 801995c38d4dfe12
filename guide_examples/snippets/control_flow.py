"""Control flow: conditionals, ``match`` and the different loop shapes."""

from typing import List, Sequence, Tuple


def describe_age(age: int) -> str:
    message = "You are an adult" if age >= 18 else "You are a minor"
    print(message)
    return message


def grade_for(score: int) -> str:
    if score >= 90:
        grade = "A"
    elif score >= 80:
        grade = "B"
    elif score >= 70:
        grade = "C"
    else:
        grade = "F"
    print(f"Grade: {grade}")
    return grade


def age_group(age: int) -> str:
    group = "Child" if age < 13 else "Teen" if age < 18 else "Adult"
    print(f"Age Group: {group}")
    return group


def day_name(day_of_week: int) -> str:
    match day_of_week:
        case 1:
            name = "Monday"
        case 2:
            name = "Tuesday"
        case 3:
            name = "Wednesday"
        case 4:
            name = "Thursday"
        case 5:
            name = "Friday"
        case _:
            name = "Weekend"
    print(f"Day: {name}")
    return name


def for_loop(limit: int = 5) -> List[int]:
    counts = []
    for i in range(1, limit + 1):
        print(f"Count: {i}")
        counts.append(i)
    return counts


def while_loop(limit: int = 3) -> List[int]:
    seen = []
    counter = 0
    while counter < limit:
        print(f"Loop: {counter}")
        seen.append(counter)
        counter += 1
    return seen


def do_while_loop(limit: int = 3) -> List[int]:
    """Python has no do-while; ``while True`` with a trailing check runs the body at least once."""
    seen = []
    num = 0
    while True:
        print(f"Do-While: {num}")
        seen.append(num)
        num += 1
        if num >= limit:
            break
    return seen


def foreach_loop(numbers: Sequence[int] = (10, 20, 30, 40, 50)) -> List[int]:
    for number in numbers:
        print(f"Number: {number}")
    return list(numbers)


def nested_loops(size: int = 3) -> List[Tuple[int, int]]:
    cells = []
    for row in range(1, size + 1):
        line = []
        for col in range(1, size + 1):
            line.append(f"({row},{col})")
            cells.append((row, col))
        print(" ".join(line))
    return cells


def break_and_continue() -> List[int]:
    """Skip 3 and stop at 7."""
    kept = []
    for i in range(10):
        if i == 3:
            continue
        if i == 7:
            break
        kept.append(i)
    print(" ".join(str(i) for i in kept))
    return kept


def times_table(table_number: int = 5) -> List[int]:
    products = []
    for i in range(1, 11):
        print(f"{table_number} × {i} = {table_number * i}")
        products.append(table_number * i)
    return products


def main() -> None:
    print("=== IF Statements ===")
    describe_age(25)
    grade_for(85)
    age_group(25)

    print("\n=== Match Statement ===")
    day_name(3)

    print("\n=== For Loop ===")
    for_loop()

    print("\n=== While Loop ===")
    while_loop()

    print("\n=== Do-While Loop ===")
    do_while_loop()

    print("\n=== Foreach Loop ===")
    foreach_loop()

    print("\n=== Nested Loops ===")
    nested_loops()

    print("\n=== Break and Continue ===")
    break_and_continue()

    print("\n=== Times Table ===")
    times_table()


if __name__ == "__main__":
    main()
