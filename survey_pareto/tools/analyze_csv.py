#!/usr/bin/env python3
"""
Survey Pareto CSV report — console summary of a Pareto run over a CSV export.

Outputs: rows analyzed, rows with findings, risk distribution, average impact,
highest impact rows and recurrent vital drivers. Optionally writes the full
JSON result.

Usage:
  python -m survey_pareto.tools.analyze_csv responses.csv [--output result.json] [--top 5]
"""

from __future__ import annotations

import json
import sys
from collections import Counter
from pathlib import Path

from survey_pareto.analytics import AnalysisResult, RiskLevel, analyze
from survey_pareto.core.exceptions import ParetoError
from survey_pareto.ingestion import load_csv_records
from survey_pareto.pareto_logging import get_logger

logger = get_logger(__name__)

SEP = "=" * 52
SEP_THIN = "-" * 52


def _log(msg: str) -> None:
    print(f"[analyze_csv] {msg}")


def format_summary(result: AnalysisResult, top: int = 5) -> list[str]:
    """Render the console summary lines for a result."""
    rows = result.rows
    risk_counts = Counter(r.risk_level for r in rows)
    lines = [
        SEP,
        "  Survey Pareto summary",
        SEP,
        f"  Rows analyzed        : {len(rows)}",
        f"  Rows with findings   : {sum(1 for r in rows if r.drivers)}",
        f"  Risk high/med/low    : {risk_counts[RiskLevel.HIGH]}/{risk_counts[RiskLevel.MEDIUM]}/{risk_counts[RiskLevel.LOW]}",
        f"  Average impact       : {result.aggregate.average_impact:.3f}",
        SEP_THIN,
        "  Highest impact rows",
    ]
    if not result.aggregate.highest_risk_rows:
        lines.append("    (none)")
    for report in result.aggregate.highest_risk_rows[:top]:
        lines.append(
            f"    {report.identifier:<24} impact={report.total_impact:.3f} risk={report.risk_level.value}"
        )
    lines += [SEP_THIN, "  Recurrent vital drivers"]
    if not result.aggregate.recurrent_drivers:
        lines.append("    (none)")
    for driver in result.aggregate.recurrent_drivers[:top]:
        lines.append(f"    {driver.label:<36} x{driver.count}")
    lines.append(SEP)
    return lines


def main(argv: list[str] | None = None) -> int:
    import argparse

    ap = argparse.ArgumentParser(description="Run the Pareto analysis over a survey CSV export")
    ap.add_argument("csv_path", type=Path, help="CSV file with a header row")
    ap.add_argument("--output", type=Path, default=None, help="Write the full JSON result here")
    ap.add_argument("--top", type=int, default=5, help="Rows/drivers to list in the summary")
    args = ap.parse_args(argv)

    logger.info("analyze_csv_start", path=str(args.csv_path))
    try:
        records = load_csv_records(args.csv_path)
    except ParetoError as e:
        logger.error("analyze_csv_failed", error=e.message)
        _log(e.message)
        return 1

    result = analyze(records)
    for line in format_summary(result, top=args.top):
        print(line)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("analyze_csv_saved", path=str(args.output), rows=len(result.rows))
        _log(f"Saved {len(result.rows)} rows to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
