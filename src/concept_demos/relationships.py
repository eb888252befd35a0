"""Association, aggregation and composition demos."""

from collections.abc import Iterable

import structlog

from concept_demos.models import Book, House, Library, Student, Teacher

logger = structlog.get_logger()


def aggregation_demo(titles: Iterable[str] = ("Java Fundamentals", "Spring Boot Basics")) -> Library:
    """Build books first, then hand them to a library that only references them."""
    books = [Book(title) for title in titles]
    logger.debug("Books created", titles=[book.title for book in books])

    library = Library(books)
    library.display_books()
    return library


def association_demo(
    teacher_name: str = "Mr. Sharma",
    student_names: Iterable[str] = ("Amit", "Riya"),
) -> Teacher:
    """Link independently created students to a teacher."""
    students = [Student(name) for name in student_names]

    teacher = Teacher(teacher_name)
    for student in students:
        teacher.add_student(student)

    teacher.display_students()
    return teacher


def composition_demo() -> House:
    """Build a house, which builds its own room."""
    house = House()
    house.show_room()
    return house
