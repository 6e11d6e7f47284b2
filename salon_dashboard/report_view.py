"""Printable HTML version of the reports page."""
from __future__ import annotations

import html
from typing import Any, Dict, Iterable, List, Mapping

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from salon_dashboard.dependencies.services import get_report_service
from salon_dashboard.schemas.analytics import AggregateResult, DateFilter
from salon_dashboard.services import ReportService
from salon_dashboard.services.exceptions import ServiceError

router = APIRouter()

_PERIOD_TITLES = {
    DateFilter.today: "Hoje",
    DateFilter.this_week: "Esta Semana",
    DateFilter.all_time: "Total Geral",
}


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _build_table(title: str, rows: Iterable[Mapping[str, Any]]) -> str:
    row_list: List[Dict[str, Any]] = [dict(row) for row in rows]
    section_parts = [f"<section><h2>{html.escape(title)}</h2>"]
    if not row_list:
        section_parts.append("<p>Nenhum registro encontrado.</p></section>")
        return "".join(section_parts)

    columns: List[str] = []
    for row in row_list:
        for key in row.keys():
            if key not in columns:
                columns.append(key)

    header = "".join(f"<th>{html.escape(column)}</th>" for column in columns)
    body_rows: List[str] = []
    for row in row_list:
        cells = []
        for column in columns:
            value = _stringify(row.get(column))
            cells.append(f"<td>{html.escape(value)}</td>")
        body_rows.append("<tr>" + "".join(cells) + "</tr>")
    table_html = (
        "<table><thead><tr>"
        + header
        + "</tr></thead><tbody>"
        + "".join(body_rows)
        + "</tbody></table>"
    )
    section_parts.append(table_html)
    section_parts.append("</section>")
    return "".join(section_parts)


def _kpi_rows(summary: AggregateResult) -> List[Dict[str, Any]]:
    return [
        {"Indicador": "Faturamento", "Valor": f"R$ {summary.total_revenue_display}"},
        {"Indicador": "Clientes Atendidos", "Valor": summary.client_count},
        {"Indicador": "Ticket Médio", "Valor": f"R$ {summary.average_ticket_display}"},
        {"Indicador": "Serviços Realizados", "Valor": summary.client_count},
    ]


def _hourly_rows(summary: AggregateResult) -> List[Dict[str, Any]]:
    return [
        {"Horário": label, "Clientes": count}
        for label, count in zip(summary.hourly_labels, summary.hourly_counts)
    ]


def render_report(summary: AggregateResult, period: DateFilter) -> str:
    title = _PERIOD_TITLES[period]
    sections = [
        _build_table("Indicadores", _kpi_rows(summary)),
        _build_table("Horários de Pico", _hourly_rows(summary)),
    ]
    sections_html = "".join(sections)
    return f"""
    <html>
        <head>
            <title>Relatório - {html.escape(title)}</title>
            <style>
                body {{ font-family: Arial, sans-serif; margin: 2rem; }}
                h1 {{ text-align: center; }}
                section {{ margin-bottom: 2rem; }}
                table {{ border-collapse: collapse; width: 100%; }}
                th, td {{ border: 1px solid #ccc; padding: 0.5rem; text-align: left; }}
                th {{ background-color: #f0f0f0; }}
                tbody tr:nth-child(even) {{ background-color: #fafafa; }}
            </style>
        </head>
        <body>
            <h1>Relatório - {html.escape(title)}</h1>
            {sections_html}
        </body>
    </html>
    """


@router.get("/relatorios/imprimir", response_class=HTMLResponse)
async def print_report(
    filtro: DateFilter = DateFilter.all_time,
    service: ReportService = Depends(get_report_service),
) -> HTMLResponse:
    """Render the KPI cards and hourly histogram as printable HTML tables."""
    try:
        summary = await service.summarize(filtro)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return HTMLResponse(content=render_report(summary, filtro))
