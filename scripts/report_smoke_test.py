#!/usr/bin/env python3
"""Run a quick report smoke test against the FastAPI app."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from fastapi.testclient import TestClient

from salon_dashboard.config import get_settings
from salon_dashboard.dependencies.services import get_backend_client_cached
from salon_dashboard.main import app


def run_smoke_test(period: str, request_timeout: float) -> Dict[str, Any]:
    """Fetch ``/relatorios`` for ``period`` and print the KPIs and histogram."""

    # Ensure configuration changes are respected between runs.
    get_settings.cache_clear()
    get_backend_client_cached.cache_clear()

    settings = get_settings()
    source = "local store" if settings.use_local_store else settings.backend_base_url
    print(f"Running report smoke test for '{period}' against {source}")

    with TestClient(app) as client:
        response = client.get(
            "/relatorios",
            params={"filtro": period},
            timeout=request_timeout,
        )

    if response.status_code != 200:
        raise RuntimeError(
            f"Report failed ({response.status_code}): {response.text}"
        )

    payload: Dict[str, Any] = response.json()
    summary = payload.get("summary", {})
    print(f"Faturamento: R$ {summary.get('total_revenue_display')}")
    print(f"Clientes: {summary.get('client_count')}")
    print(f"Ticket médio: R$ {summary.get('average_ticket_display')}")

    print("\nHistogram:")
    histogram = dict(zip(summary.get("hourly_labels", []), summary.get("hourly_counts", [])))
    print(json.dumps(histogram, indent=2, ensure_ascii=False))

    return payload


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the dashboard report computed by the local service."
    )
    parser.add_argument(
        "--filtro",
        choices=["hoje", "semana", "total"],
        default="total",
        help="Date filter to apply to the report.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Timeout (in seconds) for the report request.",
    )

    args = parser.parse_args(argv)

    try:
        run_smoke_test(args.filtro, args.timeout)
    except Exception as exc:  # pragma: no cover - manual diagnostic utility
        print(f"Smoke test failed: {exc}", file=sys.stderr)
        return 1

    print("\nSmoke test completed successfully.")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual diagnostic utility
    raise SystemExit(main())
