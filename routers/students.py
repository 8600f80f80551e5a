from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from config.settings import settings
from services.renderer import renderer
from services.sessions import SessionRegistry
from services.student_manager import StudentManager

router = APIRouter(prefix="/students", tags=["학생 관리 화면"])


class PageSession:
    """요청 쿠키로 찾은 세션 토큰 + 화면 컨트롤러"""

    def __init__(self, token: str, manager: StudentManager):
        self.token = token
        self.manager = manager

    def attach(self, response: Response) -> Response:
        response.set_cookie(settings.SESSION_COOKIE_NAME, self.token, httponly=True, samesite="lax")
        return response


async def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


async def get_session(request: Request, registry: SessionRegistry = Depends(get_registry)) -> PageSession:
    token, manager = registry.get(request.cookies.get(settings.SESSION_COOKIE_NAME))
    return PageSession(token, manager)


def _back_to_page(session: PageSession) -> Response:
    # post/redirect/get
    return session.attach(RedirectResponse(url="/students", status_code=303))


# ==========================================================
# [READ] 화면 / 상태
# ==========================================================

# ✅ 학생 관리 화면 (세션 첫 표시 때 목록 로드)
@router.get("", response_class=HTMLResponse)
async def students_page(session: PageSession = Depends(get_session)):
    await session.manager.ensure_loaded()
    html = renderer.render(session.manager.state)
    return session.attach(HTMLResponse(html))


# ✅ 화면 상태 스냅샷 (진단용)
@router.get("/state")
async def students_state(session: PageSession = Depends(get_session)):
    return session.attach(JSONResponse({
        "success": True,
        "data": session.manager.state.model_dump(),
        "message": "화면 상태 조회 완료",
    }))


# ✅ 목록 다시 불러오기
@router.post("/reload")
async def reload_students(session: PageSession = Depends(get_session)):
    await session.manager.load()
    return _back_to_page(session)


# ==========================================================
# [CREATE/UPDATE] 폼 제출
# ==========================================================

# ✅ 폼 값 반영 후 editing_id 유무에 따라 생성 또는 수정
@router.post("/submit")
async def submit_student(
    session: PageSession = Depends(get_session),
    name: str = Form(""),
    address: str = Form(""),
    phone: str = Form(""),
    note: str = Form(""),
):
    # 폼은 항상 네 필드를 모두 보냄. 빈 문자열도 그대로 덮어씀
    posted = {"name": name, "address": address, "phone": phone, "note": note}
    for field, value in posted.items():
        session.manager.set_field(field, value)
    await session.manager.submit()
    return _back_to_page(session)


# ✅ 편집 시작 (목록에 있는 행만)
@router.post("/{student_id}/edit")
async def edit_student(student_id: int, session: PageSession = Depends(get_session)):
    record = session.manager.state.find(student_id)
    if record is not None:
        session.manager.begin_edit(record)
    return _back_to_page(session)


# ✅ 편집 취소 (네트워크 호출 없음)
@router.post("/cancel")
async def cancel_edit(session: PageSession = Depends(get_session)):
    session.manager.cancel()
    return _back_to_page(session)


# ==========================================================
# [DELETE]
# ==========================================================

# ✅ 브라우저 confirm() 결과(confirmed=yes/no)를 받아 삭제
@router.post("/{student_id}/delete")
async def delete_student(
    student_id: int,
    session: PageSession = Depends(get_session),
    confirmed: str = Form("no"),
):
    await session.manager.delete(student_id, confirm=lambda: confirmed == "yes")
    return _back_to_page(session)
