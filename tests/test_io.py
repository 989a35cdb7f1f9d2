import json
from dataclasses import dataclass

import pandas as pd
import pytest

from src.utils.io import read_df, require_columns, write_df, write_json


@dataclass
class _Report:
    rows: int


def test_csv_round_trip_creates_parent(tmp_path):
    path = tmp_path / "nested" / "profiles.csv"
    write_df(pd.DataFrame({"age": [30]}), path)
    assert list(read_df(path)["age"]) == [30]


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        write_df(pd.DataFrame(), tmp_path / "profiles.xlsx")


def test_write_json_dataclass(tmp_path):
    path = tmp_path / "reports" / "r.json"
    write_json(_Report(rows=3), path)
    assert json.loads(path.read_text(encoding="utf-8")) == {"rows": 3}


def test_require_columns():
    with pytest.raises(ValueError, match="vehicle_make"):
        require_columns(pd.DataFrame({"age": [1]}), ["age", "vehicle_make"])
