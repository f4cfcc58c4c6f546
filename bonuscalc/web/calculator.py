# bonuscalc/web/calculator.py
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from bonuscalc.api.deps import get_state
from bonuscalc.core.money import format_currency
from bonuscalc.schemas.settings import SettingsOut
from bonuscalc.services.calculator import CalculatorState

router = APIRouter()

BASE_DIR = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = BASE_DIR / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["currency"] = format_currency


def render(request: Request, tpl: str, **ctx):
    return templates.TemplateResponse(request, tpl, {"request": request, **ctx})


@router.get("/", response_class=HTMLResponse)
def calculator_page(request: Request, tab: str = "example1", state: CalculatorState = Depends(get_state)):
    scenarios = state.scenario_results()
    tab_ids = [sc.id for sc, _, _ in scenarios]
    active = tab if tab in tab_ids else tab_ids[0]

    return render(
        request,
        "calculator.html",
        page_title="業績獎金計算機",
        page_subtitle="比較「按月累進」與「按季累進」的獎金差異",
        scenarios=scenarios,
        active_tab=active,
        settings=SettingsOut.build(state.salary, state.tables),
    )
