"""Unit tests for StudentStore operations."""

from dataclasses import replace

import pytest

from collegeapp.student_store import (
    SEED_STUDENTS,
    Student,
    StudentNotFoundError,
    StudentStore,
)


@pytest.mark.unit
class TestSeeding:
    """Tests for the initial store contents."""

    def test_seeded_by_default(self, store: StudentStore) -> None:
        """A new store holds the two sample students."""
        students = store.list_students()

        assert [s.id for s in students] == [1, 2]
        assert students[0].student_name == "Student 1"
        assert students[1].email == "studentemail2@gmail.com"

    def test_unseeded_store_is_empty(self, empty_store: StudentStore) -> None:
        """seed=False starts empty."""
        assert empty_store.list_students() == []
        assert empty_store.count() == 0

    def test_explicit_students_override_seed(self) -> None:
        """Explicit records replace the sample data."""
        store = StudentStore(students=[Student(id=7, student_name="Ann", address="A")])

        assert [s.id for s in store.list_students()] == [7]

    def test_seed_records_are_not_shared(self, store: StudentStore) -> None:
        """Mutating one store never leaks into the module-level seed data."""
        store.update_student(1, lambda s: replace(s, student_name="Changed"))

        assert SEED_STUDENTS[0].student_name == "Student 1"
        assert StudentStore().get_student(1).student_name == "Student 1"


@pytest.mark.unit
class TestGetStudent:
    """Tests for get_student and get_student_by_name."""

    def test_get_by_id(self, store: StudentStore) -> None:
        """Returns the record with that id and no other."""
        student = store.get_student(2)

        assert student.id == 2
        assert student.student_name == "Student 2"

    def test_get_by_id_missing(self, store: StudentStore) -> None:
        """StudentNotFoundError for an unknown id."""
        with pytest.raises(StudentNotFoundError, match="The student with id 99 not found"):
            store.get_student(99)

    def test_get_by_name_exact(self, store: StudentStore) -> None:
        """Exact name match."""
        assert store.get_student_by_name("Student 1").id == 1

    def test_get_by_name_is_case_sensitive(self, store: StudentStore) -> None:
        """Names must match exactly."""
        with pytest.raises(StudentNotFoundError, match="with name student 1"):
            store.get_student_by_name("student 1")

    def test_returned_record_is_a_copy(self, store: StudentStore) -> None:
        """Changing a returned record leaves the store untouched."""
        student = store.get_student(1)
        student.student_name = "Mutated"

        assert store.get_student(1).student_name == "Student 1"


@pytest.mark.unit
class TestCreateStudent:
    """Tests for create_student."""

    def test_assigns_next_id(self, store: StudentStore) -> None:
        """New id is one past the largest existing id."""
        student = store.create_student(student_name="Student 3", address="X", email="a@b.com")

        assert student.id == 3
        assert store.get_student(3) == student

    def test_first_id_is_one(self, empty_store: StudentStore) -> None:
        """An empty store starts numbering at 1."""
        assert empty_store.create_student(student_name="First", address="X").id == 1

    def test_id_uses_max_not_last(self) -> None:
        """Ids are never reused even when the last record is not the largest."""
        store = StudentStore(
            students=[
                Student(id=5, student_name="Five", address="A"),
                Student(id=2, student_name="Two", address="B"),
            ]
        )

        assert store.create_student(student_name="Next", address="C").id == 6

    def test_id_not_reused_after_delete_of_middle(self, store: StudentStore) -> None:
        """Deleting a middle record does not free its id."""
        store.create_student(student_name="Student 3", address="X")
        store.delete_student(2)

        assert store.create_student(student_name="Student 4", address="Y").id == 4

    def test_insertion_order_preserved(self, store: StudentStore) -> None:
        """New records are appended."""
        store.create_student(student_name="Student 3", address="X")

        assert [s.student_name for s in store.list_students()][-1] == "Student 3"


@pytest.mark.unit
class TestUpdateStudent:
    """Tests for update_student."""

    def test_transform_result_is_stored(self, store: StudentStore) -> None:
        """The transformed copy replaces the record."""
        updated = store.update_student(1, lambda s: replace(s, address="New address"))

        assert updated.address == "New address"
        assert store.get_student(1).address == "New address"

    def test_id_cannot_change(self, store: StudentStore) -> None:
        """A transform that changes the id keeps the original id."""
        store.update_student(1, lambda s: replace(s, id=42))

        assert store.get_student(1).id == 1
        with pytest.raises(StudentNotFoundError):
            store.get_student(42)

    def test_missing_raises_without_calling_transform(self, store: StudentStore) -> None:
        """Unknown id raises before the transform runs."""
        calls = []

        def transform(student: Student) -> Student:
            calls.append(student)
            return student

        with pytest.raises(StudentNotFoundError):
            store.update_student(99, transform)
        assert calls == []

    def test_failing_transform_leaves_store_unchanged(self, store: StudentStore) -> None:
        """An exception inside the transform aborts the update."""
        before = store.list_students()

        def transform(student: Student) -> Student:
            student.student_name = "Half-applied"
            raise ValueError("rejected")

        with pytest.raises(ValueError, match="rejected"):
            store.update_student(1, transform)
        assert store.list_students() == before


@pytest.mark.unit
class TestDeleteStudent:
    """Tests for delete_student."""

    def test_returns_removed_record(self, store: StudentStore) -> None:
        """The removed record is returned and gone from the store."""
        removed = store.delete_student(1)

        assert removed.id == 1
        assert removed.student_name == "Student 1"
        with pytest.raises(StudentNotFoundError):
            store.get_student(1)
        assert store.count() == 1

    def test_missing_raises(self, store: StudentStore) -> None:
        """StudentNotFoundError for an unknown id."""
        with pytest.raises(StudentNotFoundError):
            store.delete_student(99)
        assert store.count() == 2
