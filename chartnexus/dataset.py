from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd
from pydantic import BaseModel, Field

from chartnexus.config import get_settings

Row = Dict[str, Any]

# Bookkeeping keys added when rows are persisted next to their dataset
STORAGE_KEYS = ("_id", "dataset_id")


def infer_columns(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    """Column names of a dataset: the keys of its first row, in order."""
    if not rows:
        return []
    return [str(key) for key in rows[0].keys()]


def _is_missing(value: Any) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


class Dataset(BaseModel):
    name: Optional[str] = Field(None, description="Original filename or dataset name")
    rows: List[Row] = Field(default_factory=list, description="Decoded rows in sheet order")

    @property
    def columns(self) -> List[str]:
        return infer_columns(self.rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def preview(self, limit: Optional[int] = None) -> List[Row]:
        if limit is None:
            limit = get_settings().preview_rows
        return self.rows[:limit]

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]], name: Optional[str] = None) -> "Dataset":
        rows = [{k: v for k, v in r.items() if k not in STORAGE_KEYS} for r in records]
        return cls(name=name, rows=rows)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, name: Optional[str] = None) -> "Dataset":
        """Build a dataset from a decoded sheet; NaN/NA cells become None."""
        frame = df.copy()
        frame.columns = frame.columns.astype(str)
        rows = [
            {k: (None if _is_missing(v) else v) for k, v in record.items()}
            for record in frame.to_dict(orient="records")
        ]
        return cls(name=name, rows=rows)
