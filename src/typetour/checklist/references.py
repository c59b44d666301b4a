"""Reference types: strings, arrays, enums, records, and interfaces."""

from __future__ import annotations

import numpy as np

from typetour.types import ConsoleGreeter, Day, Greeter, Person


def demo_1_strings() -> None:
    """String methods return new strings; the original is untouched."""
    course = "Java & Spring Boot"
    updated_course = course.replace("Java", "Java SE")
    print(f"course: {course} | updated_course: {updated_course}")


def demo_2_arrays() -> None:
    scores = np.array([90, 85, 95], dtype=np.int32)
    print(f"scores length: {len(scores)}, first: {scores[0]}")


def demo_3_matrix() -> None:
    matrix = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.int32)
    print(f"matrix[1][2]: {matrix[1, 2]}")


def demo_4_enum() -> None:
    today = Day.WEDNESDAY
    print(f"Enum example, today is: {today}, is_weekend? {today.is_weekend()}")


def demo_5_shared_instance() -> None:
    """Assignment copies the reference, not the object."""
    p1 = Person("Ada", 36)
    p2 = p1
    p2.age = 37
    print(f"Person p1 age after p2 change: {p1.age}")


def demo_6_interface() -> None:
    greeter: Greeter = ConsoleGreeter()
    greeter.greet("developers")


def run_all() -> None:
    demo_1_strings()
    demo_2_arrays()
    demo_3_matrix()
    demo_4_enum()
    demo_5_shared_instance()
    demo_6_interface()


if __name__ == "__main__":
    run_all()
