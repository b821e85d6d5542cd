"""Pytest configuration and shared fixtures."""

import logging
from datetime import date

import pytest

from academia import (
    Course,
    Discipline,
    Gender,
    Group,
    IdentityAllocator,
    PersonInfo,
    Student,
    Teacher,
    University,
)

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def make_info(first_name="Alice", last_name="Johnson", birth_day=date(2000, 5, 17),
              gender=Gender.FEMALE, **contact):
    """Build a PersonInfo with sensible defaults."""
    return PersonInfo(
        first_name=first_name,
        last_name=last_name,
        birth_day=birth_day,
        gender=gender,
        **contact,
    )


@pytest.fixture
def allocator():
    """Fresh id allocator starting at 1."""
    return IdentityAllocator()


@pytest.fixture
def algorithms():
    return Course("Algorithms", 5, Discipline.COMPUTER_SCIENCE)


@pytest.fixture
def calculus():
    return Course("Calculus", 4, Discipline.MATHEMATICS)


@pytest.fixture
def teacher(allocator):
    return Teacher(
        make_info("Olena", "Koval", date(1975, 3, 14)),
        ["Algorithms"],
        allocator=allocator,
    )


@pytest.fixture
def students(allocator):
    """Three students with distinct GPAs."""
    people = [
        Student(make_info("Alice", "Johnson", date(2003, 9, 1)), allocator=allocator),
        Student(make_info("Bob", "Smith", date(2002, 1, 20), Gender.MALE), allocator=allocator),
        Student(make_info("Sam", "Lee", date(2004, 6, 5), Gender.OTHER), allocator=allocator),
    ]
    for student, gpa in zip(people, (4.0, 3.0, 2.0)):
        student.set_gpa(gpa)
    return people


@pytest.fixture
def group(algorithms, teacher):
    return Group("CS-101", algorithms, teacher)


@pytest.fixture
def university(allocator):
    return University("Test University", allocator=allocator)
