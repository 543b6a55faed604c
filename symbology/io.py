from __future__ import annotations

from pathlib import Path

import pandas as pd


def load_symbols_csv(path: str | Path, column: str) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Symbol CSV not found at {path}")
    # raw strings, OSI padding included
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=False)
    if column not in df.columns:
        raise ValueError(f"Column {column!r} not found in {path}")
    return df


def save_csv(df: pd.DataFrame, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
