"""Tests for the command line entry point."""

import json
import sys

from academia import AcademicStatus, Role
from academia.config import AcademiaConfig
from academia.main import AcademiaApp, main


def test_demo_data():
    app = AcademiaApp(AcademiaConfig(id_start=7))
    app.run_demo()

    university = app.university
    students = university.get_all_people_by_role(Role.STUDENT)
    group = university.find_group_by_course(university.courses[0])

    assert [person.id for person in university.people] == [7, 8, 9, 10]
    assert group.get_students() == students
    assert students[-1].status == AcademicStatus.ACADEMIC_LEAVE
    assert [s.academic_performance.total_credits for s in students] == [5, 5, 5]


def test_main_demo(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["academia", "--demo", "--log-level", "ERROR"])

    main()

    output = capsys.readouterr().out
    assert "Student is already in the group" in output
    assert "Cannot enroll: Student is not in active status" in output
    assert "Demo completed" in output


def test_main_statistics(monkeypatch, capsys, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({'university_name': "Odesa University"}))
    monkeypatch.setattr(sys, "argv", ["academia", "--config", str(path)])

    main()

    output = capsys.readouterr().out
    assert output.startswith("Odesa University: ")
    assert "'students': 0" in output
