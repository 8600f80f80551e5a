import pytest

from schemas.students import StudentDraft
from services.student_state import CreateStudent, PageState, UpdateStudent

from conftest import student


def loaded_state():
    return PageState(students=[student(1, "Ana"), student(2, "Luis"), student(3, "Marta")])


def test_apply_created_appends_without_sorting():
    state = PageState(students=[student(5, "Eva")])
    state.apply_created(student(2, "Ana"))
    assert [s.id for s in state.students] == [5, 2]


def test_apply_updated_keeps_position():
    state = loaded_state()
    state.apply_updated(2, student(2, "Luis B", phone="555"))
    assert [s.id for s in state.students] == [1, 2, 3]
    assert state.students[1].name == "Luis B"
    assert state.students[1].phone == "555"


def test_apply_updated_unknown_id_is_noop():
    state = loaded_state()
    before = list(state.students)
    state.apply_updated(99, student(99, "Nadie"))
    assert state.students == before


def test_apply_deleted():
    state = loaded_state()
    state.apply_deleted(2)
    assert [s.id for s in state.students] == [1, 3]
    state.apply_deleted(42)
    assert [s.id for s in state.students] == [1, 3]


def test_set_field_touches_only_one_field():
    state = PageState()
    state.begin_edit(student(7, "Ana", address="Calle 1"))
    state.set_field("phone", "555-1234")
    assert state.draft == StudentDraft(name="Ana", address="Calle 1", phone="555-1234", note="")
    assert state.editing_id == 7


def test_set_field_rejects_unknown_name():
    with pytest.raises(ValueError):
        PageState().set_field("id", "3")


def test_begin_edit_does_not_touch_list():
    state = loaded_state()
    state.begin_edit(state.students[0])
    assert state.editing_id == 1
    assert state.draft.name == "Ana"
    assert len(state.students) == 3


def test_reset_is_idempotent():
    state = PageState()
    state.begin_edit(student(4, "Luis", note="multi\nline"))
    state.reset()
    once = state.model_copy(deep=True)
    state.reset()
    assert state == once
    assert state.draft == StudentDraft()
    assert state.editing_id is None


def test_submission_variant_follows_editing_id():
    state = PageState()
    state.set_field("name", "Ana")
    assert state.submission() == CreateStudent(draft=StudentDraft(name="Ana"))

    state.begin_edit(student(5, "Luis"))
    submission = state.submission()
    assert isinstance(submission, UpdateStudent)
    assert submission.student_id == 5
