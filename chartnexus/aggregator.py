"""Turn a loaded dataset and a chart request into a chart-ready series.

Pie charts merge rows by their x-axis value and sum the y-axis column.
Rows are grouped by the text form of the x value, so ``2023`` and ``"2023"``
land in one slice labelled with whichever came first.
Bar, line and scatter charts keep one point per row, in row order, without
merging duplicate labels.
"""

import logging
import math
import numbers
import re
from typing import Any, List, Optional

import pandas as pd

from chartnexus.dataset import Dataset
from chartnexus.schemas import ChartRequest, ChartSeries

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def to_number(value: Any) -> float:
    """Coerce a cell to a float, falling back to 0.0.

    Strings are read up to the longest numeric prefix, so ``"12px"`` is 12.0.
    Blank, non-numeric, NaN and missing cells all count as 0.0.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, numbers.Real):
        out = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.lstrip())
        if not match:
            return 0.0
        out = float(match.group(0).replace("Infinity", "inf"))
    else:
        return 0.0
    if math.isnan(out):
        return 0.0
    return out


def _is_missing(value: Any) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _label_key(value: Any) -> Optional[str]:
    """Text used to decide which pie slice a label belongs to."""
    if _is_missing(value):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _frame(dataset: Dataset, x_axis: str, y_axis: str) -> pd.DataFrame:
    # object dtype keeps labels as they were read; no int -> float upcasting
    labels = pd.Series([row.get(x_axis) for row in dataset.rows], dtype=object)
    values = pd.Series([row.get(y_axis) for row in dataset.rows], dtype=object)
    return pd.DataFrame({"label": labels, "value": values.map(to_number).astype(float)})


def aggregate(dataset: Dataset, request: ChartRequest) -> ChartSeries:
    columns = dataset.columns
    if not request.is_complete or request.x_axis not in columns or request.y_axis not in columns:
        logger.debug(
            "Not aggregating %s chart: x=%r y=%r columns=%s",
            request.chart_type,
            request.x_axis,
            request.y_axis,
            columns,
        )
        return ChartSeries.empty(request.chart_type)

    df = _frame(dataset, request.x_axis, request.y_axis)
    if request.chart_type == "pie":
        df["key"] = df["label"].map(_label_key)
        grouped = df.groupby("key", sort=False, dropna=False).agg(
            label=("label", "first"), value=("value", "sum")
        )
        labels: List[Any] = [None if _is_missing(v) else v for v in grouped["label"].tolist()]
        values: List[float] = [float(v) for v in grouped["value"].tolist()]
    else:
        labels = df["label"].tolist()
        values = [float(v) for v in df["value"].tolist()]

    logger.debug("Aggregated %d rows into %d %s points", dataset.row_count, len(labels), request.chart_type)
    return ChartSeries(chart_type=request.chart_type, labels=labels, values=values)
