"""Data models for the object-relationship demos."""

from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class Book:
    """A book that exists independently of any library."""

    title: str

    def display(self) -> None:
        print(f"Book: {self.title}")


@dataclass(frozen=True)
class Student:
    """A student that can be associated with a teacher."""

    name: str

    def display(self) -> None:
        print(f"Student: {self.name}")


@dataclass(frozen=True)
class Room:
    """A room that only exists as part of a house."""

    type: str

    def display(self) -> None:
        print(f"Room type: {self.type}")


@dataclass
class Library:
    """Aggregates books it was given; the books can outlive the library.

    The list is held by reference and stays owned by the caller, so changes
    made to it after construction show up in the library.
    """

    books: list[Book]

    def __post_init__(self) -> None:
        if any(book is None for book in self.books):
            raise ValueError("Library books must not contain None")
        logger.debug("Library created", book_count=len(self.books))

    def display_books(self) -> None:
        if any(book is None for book in self.books):
            raise ValueError("Library books must not contain None")
        print("Library contains:")
        for book in self.books:
            book.display()


@dataclass
class Teacher:
    """Associated with students; neither side owns the other."""

    name: str
    _students: list[Student] = field(default_factory=list, init=False, repr=False)

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    def add_student(self, student: Student) -> None:
        """Add a student to this teacher's class list."""
        if student is None:
            raise ValueError("Cannot associate None with a teacher")
        logger.debug("Associating student", teacher=self.name, student=student.name)
        self._students.append(student)

    def display_students(self) -> None:
        print(f"Teacher: {self.name}")
        for student in self._students:
            student.display()


class House:
    """Composed of a single bedroom that is created with, and owned by, the house."""

    def __init__(self) -> None:
        self.__room = Room("Bedroom")
        logger.debug("House created", room_type=self.__room.type)

    @property
    def room_type(self) -> str:
        return self.__room.type

    def show_room(self) -> None:
        self.__room.display()
