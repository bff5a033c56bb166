from typing import Callable, Optional

from fastapi.templating import Jinja2Templates
from starlette.requests import Request
from starlette.templating import _TemplateResponse

from encore_assets.services.encore_helper import EncoreHelper


class TemplateService:
    def __init__(
        self,
        jinja_template_directory: str,
        encore_helper_factory: Callable[[], EncoreHelper],
    ):
        self._encore_helper_factory = encore_helper_factory
        self._templates = Jinja2Templates(directory=jinja_template_directory)

    @property
    def templates(self) -> Jinja2Templates:
        return self._templates

    def render_layout(
        self,
        request: Request,
        template_name: str,
        page_title: str,
        page_context: dict,
        status_code: int = 200,
        encore_helper: Optional[EncoreHelper] = None,
    ) -> _TemplateResponse:
        encore = encore_helper
        if encore is None:
            encore = self._encore_helper_factory()
        default_context = {
            "request": request,
            "layout": "layout.html",
            "page_title": page_title,
            "encore": encore,
            "html": encore.html_helper,
        }

        context = {**default_context, **page_context}
        return self.templates.TemplateResponse(
            request, template_name, context, status_code=status_code
        )
