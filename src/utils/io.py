from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Union

import pandas as pd

# Table formats the batch CLI reads and writes
TABLE_FORMATS = (".csv", ".parquet")


def _table_suffix(path: Path) -> str:
    suf = path.suffix.lower()
    if suf not in TABLE_FORMATS:
        raise ValueError(f"Unsupported dataframe format: {suf}")
    return suf


def read_df(path: Union[str, Path]) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if _table_suffix(path) == ".parquet":
        return pd.read_parquet(path)
    return pd.read_csv(path)


def write_df(df: pd.DataFrame, path: Union[str, Path]) -> None:
    path = Path(path)
    suf = _table_suffix(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if suf == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)


def write_json(report: Any, path: Path) -> None:
    """Write a report dataclass as indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(report), indent=2, ensure_ascii=False), encoding="utf-8")


def require_columns(df: pd.DataFrame, columns: list[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")
