from config import messages
from services.renderer import renderer
from services.student_state import PageState

from conftest import student


def test_loading_renders_only_indicator():
    html = renderer.render(PageState(loading=True, error="boom", students=[student(1, "Ana")]))
    assert messages.LOADING in html
    assert "boom" not in html
    assert "<form" not in html
    assert "<table" not in html


def test_error_banner_only_when_error_set():
    assert 'role="alert"' not in renderer.render(PageState())
    html = renderer.render(PageState(error="Error al crear estudiante: duplicate key"))
    assert 'role="alert"' in html
    assert "Error al crear estudiante: duplicate key" in html


def test_create_mode_labels_and_no_cancel():
    html = renderer.render(PageState())
    assert messages.HEADING_NEW in html
    assert messages.SUBMIT_CREATE in html
    assert messages.CANCEL not in html
    assert messages.LIST_EMPTY in html


def test_edit_mode_shows_draft_and_cancel():
    state = PageState(students=[student(5, "Luis", phone="555")])
    state.begin_edit(state.students[0])
    html = renderer.render(state)
    assert messages.HEADING_EDIT in html
    assert messages.SUBMIT_UPDATE in html
    assert messages.CANCEL in html
    assert 'value="Luis"' in html


def test_table_rows_follow_list_order():
    state = PageState(students=[student(9, "Zoe"), student(2, "Ana")])
    html = renderer.render(state)
    for header in messages.TABLE_HEADERS:
        assert header in html
    assert html.index('id="student-9"') < html.index('id="student-2"')
    assert 'action="/students/9/delete"' in html
    assert 'action="/students/2/edit"' in html


def test_values_are_escaped():
    html = renderer.render(PageState(students=[student(1, "<script>x</script>")]))
    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html


def test_name_field_is_required():
    html = renderer.render(PageState())
    assert 'name="name" value="" required' in html
