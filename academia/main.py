"""
Main entry point for the academia package.
"""

import argparse
from datetime import date
from typing import Optional

from .config import AcademiaConfig, load_config
from .core.academics import Course, Group
from .core.enums import AcademicStatus, Discipline, Gender, Role
from .core.university import University
from .logging import setup_logging
from .services import EnrollmentService


class AcademiaApp:
    """Builds a university from configuration and runs the demonstration."""

    def __init__(self, config: Optional[AcademiaConfig] = None):
        self._config = config or AcademiaConfig()
        self._university = University.from_config(self._config)
        self._enrollment_service = EnrollmentService()

    @property
    def university(self) -> University:
        return self._university

    def create_sample_data(self):
        """Create sample data for demonstration."""
        print("Creating sample data...")
        university = self._university

        algorithms = Course("Algorithms", 5, Discipline.COMPUTER_SCIENCE)
        calculus = Course("Calculus", 4, Discipline.MATHEMATICS)
        university.add_course(algorithms)
        university.add_course(calculus)

        teacher = university.create_teacher(
            {
                'first_name': "Olena",
                'last_name': "Koval",
                'birth_day': date(1975, 3, 14),
                'gender': Gender.FEMALE,
                'email': "o.koval@university.com",
            },
            specializations=["Algorithms", "Graph theory"],
        )
        teacher.assign_course(algorithms)

        students = [
            university.create_student({
                'first_name': first_name,
                'last_name': last_name,
                'birth_day': birth_day,
                'gender': gender,
            })
            for first_name, last_name, birth_day, gender in [
                ("Alice", "Johnson", date(2003, 9, 1), Gender.FEMALE),
                ("Bob", "Smith", date(2002, 1, 20), Gender.MALE),
                ("Sam", "Lee", date(2004, 6, 5), Gender.OTHER),
            ]
        ]
        for student, gpa in zip(students, (3.8, 3.1, 2.6)):
            student.set_gpa(gpa)

        university.add_group(Group("CS-101", algorithms, teacher))
        print("✓ Sample data created")

    def run_demo(self):
        """Run a demonstration of the model."""
        print("Running academia demonstration...")

        self.create_sample_data()
        university = self._university
        service = self._enrollment_service

        algorithms = university.courses[0]
        group = university.find_group_by_course(algorithms)
        students = university.get_all_people_by_role(Role.STUDENT)

        print(f"\n=== Enrollment Demo ===")
        for student in students:
            print(f"{student.full_name}: {service.enroll(student, algorithms).message}")
            service.add_to_group(group, student)

        print(f"Adding {students[0].full_name} again: {service.add_to_group(group, students[0]).message}")

        service.change_status(students[-1], AcademicStatus.ACADEMIC_LEAVE)
        result = service.enroll(students[-1], university.courses[1])
        print(f"{students[-1].full_name} on leave: {result.message}")

        print(f"\n=== Group {group.name} ===")
        print(f"Teacher: {group.teacher.full_name}")
        for student in group.get_students():
            print(f"  - {student.full_name} (id={student.id}, age={student.age}, "
                  f"credits={student.academic_performance.total_credits})")
        print(f"Average score: {group.get_average_group_score():.2f}")

        print("\n=== Statistics ===")
        print(f"University: {university.get_statistics()}")
        print(f"Enrollment Service: {service.get_statistics()}")

        print("\n✓ Demo completed")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="University academic records model")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")

    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(level=args.log_level or config.log_level)

    app = AcademiaApp(config)

    if args.demo:
        app.run_demo()
    else:
        print(f"{app.university.name}: {app.university.get_statistics()}")


if __name__ == "__main__":
    main()
