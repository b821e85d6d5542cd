"""Tests for Course and Group."""

import pytest

from academia import (
    Course,
    Discipline,
    DuplicateEntityError,
    IdentityAllocator,
    ResourceNotFoundError,
    Student,
    UniversityError,
    ValidationError,
)

from .conftest import make_info


class TestCourse:
    def test_attributes(self):
        course = Course("Optics", 3, Discipline.PHYSICS)

        assert course.name == "Optics"
        assert course.credits == 3
        assert course.discipline == Discipline.PHYSICS

    def test_discipline_from_value(self):
        assert Course("Genetics", 2, "Biology").discipline == Discipline.BIOLOGY

    @pytest.mark.parametrize("credits", [0, -3, 2.5, True])
    def test_credits_must_be_positive_int(self, credits):
        with pytest.raises(ValidationError):
            Course("Broken", credits, Discipline.CHEMISTRY)

    def test_immutable(self, algorithms):
        with pytest.raises(AttributeError):
            algorithms.credits = 10

    def test_identity_equality(self, algorithms):
        twin = Course("Algorithms", 5, Discipline.COMPUTER_SCIENCE)

        assert twin != algorithms
        assert algorithms == algorithms

    def test_to_dict(self, calculus):
        assert calculus.to_dict() == {'name': "Calculus", 'credits': 4, 'discipline': "Mathematics"}


class TestGroup:
    def test_construction(self, group, algorithms, teacher):
        assert group.name == "CS-101"
        assert group.course is algorithms
        assert group.teacher is teacher
        assert group.get_students() == []
        assert group.size == 0

    def test_add_distinct_students(self, group, students):
        group.add_student(students[0])
        group.add_student(students[1])

        assert group.get_students() == students[:2]

    def test_add_same_student_twice(self, group, students):
        group.add_student(students[0])

        with pytest.raises(DuplicateEntityError) as exc_info:
            group.add_student(students[0])

        assert isinstance(exc_info.value, UniversityError)
        assert exc_info.value.message == "Student is already in the group"
        assert group.size == 1

    def test_remove_student_by_id(self, group, students):
        for student in students:
            group.add_student(student)

        group.remove_student_by_id(students[1].id)

        assert group.get_students() == [students[0], students[2]]

    def test_remove_missing_student(self, group, students):
        group.add_student(students[0])

        with pytest.raises(ResourceNotFoundError):
            group.remove_student_by_id(999)

        assert group.size == 1

    def test_remove_from_empty_group(self, group):
        with pytest.raises(ResourceNotFoundError):
            group.remove_student_by_id(1)

    def test_average_score_empty(self, group):
        assert group.get_average_group_score() == 0.0

    def test_average_score(self, group, students):
        for student in students:
            group.add_student(student)

        assert group.get_average_group_score() == pytest.approx(3.0)

    def test_average_score_single(self, group, students):
        group.add_student(students[1])

        assert group.get_average_group_score() == pytest.approx(3.0)

    def test_get_students_returns_copy(self, group, students):
        group.add_student(students[0])

        roster = group.get_students()
        roster.append(students[1])
        roster.remove(students[0])

        assert group.get_students() == [students[0]]

    def test_get_student_by_single_id(self, group, students):
        for student in students:
            group.add_student(student)

        assert group.get_student_by_id(students[2].id) is students[2]

    def test_get_student_by_missing_id(self, group, students):
        group.add_student(students[0])

        with pytest.raises(ResourceNotFoundError):
            group.get_student_by_id(students[1].id)

    def test_get_students_by_ids(self, group, students):
        for student in students:
            group.add_student(student)

        found = group.get_student_by_id([students[2].id, students[0].id, 999])

        assert found == [students[0], students[2]]

    def test_get_students_by_ids_none_match(self, group, students):
        group.add_student(students[0])

        assert group.get_student_by_id([999, 1000]) == []
        assert group.get_student_by_id(()) == []

    def test_student_with_same_id_from_other_allocator(self, group, students):
        """Roster membership is by object, not by id."""
        group.add_student(students[0])
        lookalike = Student(make_info(), allocator=IdentityAllocator(start=students[0].id))
        assert lookalike.id == students[0].id

        group.add_student(lookalike)

        assert group.size == 2

    def test_to_dict(self, group, students, teacher):
        group.add_student(students[0])

        assert group.to_dict() == {
            'name': "CS-101",
            'course': "Algorithms",
            'teacher_id': teacher.id,
            'student_ids': [students[0].id],
            'average_score': 4.0,
        }
