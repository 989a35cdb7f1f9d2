# src/batch/rate.py
"""
Batch premium rating over a table of driver profiles.

What it does:
- Reads a profiles file (CSV or Parquet)
- Rates every row with the rating engine
- Writes the table with premium breakdown columns appended
- Writes a JSON rating report (row count, premium totals, category mix)

Usage:
  python -m src.batch.rate --in_path data/profiles.csv

Optional:
  python -m src.batch.rate --in_path data/profiles.csv \
    --out_path data/profiles_rated.csv \
    --report_path reports/rating_report.json
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from src.rating.classifier import is_recognised_vehicle
from src.rating.engine import RatingEngine
from src.rating.profile import DriverProfile
from src.rating.rules import ACCIDENT_HISTORY_LABEL, AGE_FACTOR_LABEL
from src.utils.config import get_paths, get_settings
from src.utils.io import read_df, require_columns, write_df, write_json
from src.utils.log import configure_logging

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = ["age", "vehicle_make", "vehicle_model", "accidents_in_last_five_years"]
RATED_COLUMNS = ["vehicle_category", "base_rate", "age_adjustment", "accident_adjustment", "total"]


@dataclass
class RatingReport:
    source_path: str
    output_path: str
    currency: str
    rows: int
    premium_sum: float
    premium_mean: float
    category_counts: Dict[str, int]
    unrecognised_vehicles: int


def _rate_row(row: Dict[str, Any], engine: RatingEngine) -> Dict[str, Any]:
    profile = DriverProfile.from_dict(row)
    premium = engine.calculate_premium(profile)

    age_adj = premium.find_adjustment(AGE_FACTOR_LABEL)
    acc_adj = premium.find_adjustment(ACCIDENT_HISTORY_LABEL)

    return {
        "vehicle_category": premium.vehicle_category.value if premium.vehicle_category else None,
        "base_rate": premium.base_rate,
        "age_adjustment": age_adj.amount if age_adj else 0.0,
        "accident_adjustment": acc_adj.amount if acc_adj else 0.0,
        "total": premium.total,
    }


def rate_frame(df: pd.DataFrame, engine: Optional[RatingEngine] = None) -> pd.DataFrame:
    """
    Return a copy of df with RATED_COLUMNS appended.
    Any missing profile column raises ValueError.
    """
    require_columns(df, PROFILE_COLUMNS)
    eng = engine or RatingEngine()

    out = df.copy()

    rated: List[Dict[str, Any]] = [_rate_row(r, eng) for r in out[PROFILE_COLUMNS].to_dict(orient="records")]
    rated_df = pd.DataFrame(rated, columns=RATED_COLUMNS, index=out.index)
    return pd.concat([out, rated_df], axis=1)


def build_report(
    rated: pd.DataFrame,
    source_path: Path,
    output_path: Path,
    currency: str,
) -> RatingReport:
    unrecognised = sum(
        not is_recognised_vehicle(str(make), str(model))
        for make, model in zip(rated["vehicle_make"], rated["vehicle_model"])
    )
    rows = int(len(rated))
    return RatingReport(
        source_path=str(source_path),
        output_path=str(output_path),
        currency=currency,
        rows=rows,
        premium_sum=float(rated["total"].sum()) if rows else 0.0,
        premium_mean=float(rated["total"].mean()) if rows else 0.0,
        category_counts={str(k): int(v) for k, v in rated["vehicle_category"].value_counts().items()},
        unrecognised_vehicles=int(unrecognised),
    )


def _default_out_path(in_path: Path) -> Path:
    return in_path.with_name(f"{in_path.stem}_rated{in_path.suffix}")


def _default_report_path() -> Path:
    return get_paths().reports_dir / "rating_report.json"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rate a table of driver profiles and write premium breakdowns.")
    p.add_argument("--in_path", type=str, required=True, help="Profiles CSV/Parquet path (e.g., data/profiles.csv)")
    p.add_argument("--out_path", type=str, default=None, help="Rated output path. Default: <in_stem>_rated<suffix>")
    p.add_argument("--report_path", type=str, default=None, help="Report JSON path. Default: reports/rating_report.json")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    in_path = Path(args.in_path)
    out_path = Path(args.out_path) if args.out_path else _default_out_path(in_path)
    report_path = Path(args.report_path) if args.report_path else _default_report_path()

    df = read_df(in_path)
    if df.empty:
        logger.warning("Input profiles table is empty: %s", in_path)

    rated = rate_frame(df)
    write_df(rated, out_path)

    report = build_report(rated, source_path=in_path, output_path=out_path, currency=settings.currency)
    write_json(report, report_path)

    print(f"[OK] Rated profiles saved : {out_path}")
    print(f"[OK] Report saved         : {report_path}")
    print(f"Rows: {report.rows} | Total premium: {report.premium_sum:.2f} {report.currency}")
    if report.unrecognised_vehicles:
        print(f"Unrecognised vehicles rated as sedan: {report.unrecognised_vehicles}")


if __name__ == "__main__":
    main()
