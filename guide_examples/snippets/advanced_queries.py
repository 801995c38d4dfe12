"""
Query-style operations over in-memory collections.

Comprehensions cover projection and filtering; ``sorted`` with a key
tuple covers multi-level ordering; grouping uses a dict, which keeps
groups in order of first appearance.
"""

from dataclasses import dataclass, field
from statistics import mean
from typing import Dict, Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class Student:
    id: int
    name: str
    email: str
    age: int
    department_id: int
    course_ids: Sequence[int] = field(default_factory=tuple)


@dataclass(frozen=True)
class Course:
    id: int
    title: str
    credits: int
    instructor: str


@dataclass(frozen=True)
class Department:
    id: int
    name: str


@dataclass(frozen=True)
class DepartmentGroup:
    department_id: int
    department_name: str
    students: List[Student]

    @property
    def count(self) -> int:
        return len(self.students)

    @property
    def names(self) -> str:
        return ", ".join(student.name for student in self.students)


@dataclass(frozen=True)
class AgeStatistics:
    average: float
    maximum: Optional[int]
    minimum: Optional[int]
    total: int


def get_students() -> List[Student]:
    return [
        Student(1, "Alice", "alice@example.com", 20, 1, (1, 2, 3)),
        Student(2, "Bob", "bob@example.com", 21, 1, (1, 4)),
        Student(3, "Charlie", "charlie@example.com", 19, 2, (2, 3, 4)),
        Student(4, "Diana", "diana@example.com", 22, 2, (4,)),
    ]


def get_courses() -> List[Course]:
    return [
        Course(1, "Python Fundamentals", 3, "Dr. Smith"),
        Course(2, "Web Development", 4, "Dr. Jones"),
        Course(3, "Database Design", 3, "Dr. Brown"),
        Course(4, "Cloud Computing", 4, "Dr. Lee"),
    ]


def get_departments() -> List[Department]:
    return [Department(1, "Computer Science"), Department(2, "Information Systems")]


def _print_list(title: str, lines: Iterable[str]) -> None:
    print(title)
    for line in lines:
        print(f"  - {line}")


def select_names(students: Optional[List[Student]] = None) -> List[str]:
    if students is None:
        students = get_students()
    names = [student.name for student in students]
    _print_list("Student Names:", names)
    return names


def adults_from_department(
    department_id: int = 1,
    min_age: int = 21,
    students: Optional[List[Student]] = None,
) -> List[str]:
    if students is None:
        students = get_students()
    matches = [
        f"{student.name} ({student.age})"
        for student in students
        if student.age >= min_age and student.department_id == department_id
    ]
    _print_list(f"Adults from Department {department_id}:", matches)
    return matches


def enrollments(
    students: Optional[List[Student]] = None,
    courses: Optional[List[Course]] = None,
) -> List[str]:
    """Flatten each student's course ids and join them against the courses."""
    if students is None:
        students = get_students()
    if courses is None:
        courses = get_courses()
    courses_by_id = {course.id: course for course in courses}
    lines = [
        f"{student.name} enrolled in {courses_by_id[course_id].title}"
        for student in students
        for course_id in student.course_ids
        if course_id in courses_by_id
    ]
    _print_list("Student-Course Enrollments:", lines)
    return lines


def group_by_department(
    students: Optional[List[Student]] = None,
    departments: Optional[List[Department]] = None,
) -> List[DepartmentGroup]:
    if students is None:
        students = get_students()
    if departments is None:
        departments = get_departments()
    department_names = {department.id: department.name for department in departments}
    grouped: Dict[int, List[Student]] = {}
    for student in students:
        grouped.setdefault(student.department_id, []).append(student)
    groups = [
        DepartmentGroup(department_id, department_names.get(department_id, "Unknown"), members)
        for department_id, members in grouped.items()
    ]
    print("Students by Department:")
    for group in groups:
        print(f"  Department {group.department_id} ({group.department_name}): {group.count} students - {group.names}")
    return groups


def order_by_age_then_name(students: Optional[List[Student]] = None) -> List[Student]:
    """Age descending, then name ascending."""
    if students is None:
        students = get_students()
    ordered = sorted(students, key=lambda student: (-student.age, student.name))
    _print_list(
        "Students sorted by Age (desc) then Name:",
        (f"{student.name} - Age {student.age}" for student in ordered),
    )
    return ordered


def age_statistics(students: Optional[List[Student]] = None) -> AgeStatistics:
    """Average, oldest, youngest and count; an empty input yields 0.0 and ``None``."""
    if students is None:
        students = get_students()
    ages = [student.age for student in students]
    if not ages:
        stats = AgeStatistics(average=0.0, maximum=None, minimum=None, total=0)
    else:
        stats = AgeStatistics(average=mean(ages), maximum=max(ages), minimum=min(ages), total=len(ages))
    print("Student Age Statistics:")
    print(f"  Average Age: {stats.average:.2f}")
    print(f"  Max Age: {stats.maximum}")
    print(f"  Min Age: {stats.minimum}")
    print(f"  Total Students: {stats.total}")
    return stats


def distinct_numbers(numbers: Sequence[int] = (1, 2, 2, 3, 3, 3, 4, 4, 4, 4)) -> List[int]:
    unique = sorted(set(numbers))
    print("Unique Numbers:")
    print(f"  {', '.join(str(n) for n in unique)}")
    return unique


def conditional_checks(students: Optional[List[Student]] = None) -> Dict[str, bool]:
    if students is None:
        students = get_students()
    checks = {
        "has_21_plus": any(student.age >= 21 for student in students),
        "all_18_plus": all(student.age >= 18 for student in students),
    }
    print("Conditional Checks:")
    print(f"  Has students 21+: {checks['has_21_plus']}")
    print(f"  All students 18+: {checks['all_18_plus']}")
    return checks


def main() -> None:
    print("=== Advanced Query Examples ===\n")
    for example in (
        select_names,
        adults_from_department,
        enrollments,
        group_by_department,
        order_by_age_then_name,
        age_statistics,
        distinct_numbers,
        conditional_checks,
    ):
        example()
        print()


if __name__ == "__main__":
    main()
