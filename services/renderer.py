from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import messages
from services.student_state import PageState

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class PageRenderer:
    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        # 템플릿 환경 설정 (HTML 자동 이스케이프)
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, state: PageState) -> str:
        """상태 → HTML. loading 중이면 로딩 문구만 렌더링"""
        template = self.env.get_template("students.html")
        return template.render(
            state=state,
            editing=state.editing_id is not None,
            m=messages,
        )


renderer = PageRenderer()
