from chartnexus.aggregator import aggregate, to_number
from chartnexus.dataset import Dataset, infer_columns
from chartnexus.schemas import ChartRequest, ChartSeries, ChartType, SavedChart
from chartnexus.session import ChartConfigError, ChartNotReadyError, ChartSession

__all__ = [
    "aggregate",
    "to_number",
    "Dataset",
    "infer_columns",
    "ChartRequest",
    "ChartSeries",
    "ChartType",
    "SavedChart",
    "ChartConfigError",
    "ChartNotReadyError",
    "ChartSession",
]
