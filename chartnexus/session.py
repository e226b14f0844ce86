import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from chartnexus.aggregator import aggregate
from chartnexus.dataset import Dataset
from chartnexus.schemas import ChartRequest, ChartSeries, SavedChart

logger = logging.getLogger(__name__)

# Client field name -> ChartRequest attribute
_FIELDS = {
    "type": "chart_type",
    "chart_type": "chart_type",
    "title": "title",
    "xAxis": "x_axis",
    "x_axis": "x_axis",
    "yAxis": "y_axis",
    "y_axis": "y_axis",
}


class ChartConfigError(ValueError):
    pass


class ChartNotReadyError(ChartConfigError):
    pass


class ChartSession:
    """State for one chart-building interaction, owned by the caller.

    Holds the loaded dataset, the chart configuration being edited and the
    last generated series, so a chart can be previewed and then saved.
    """

    def __init__(
        self,
        dataset_id: Optional[str] = None,
        dataset: Optional[Dataset] = None,
        request: Optional[ChartRequest] = None,
    ):
        self.dataset_id = dataset_id
        self.dataset = dataset
        self.request = request or ChartRequest()
        self.series: Optional[ChartSeries] = None

    @property
    def columns(self) -> List[str]:
        if self.dataset is None:
            return []
        return self.dataset.columns

    def load(self, dataset: Dataset, dataset_id: Optional[str] = None) -> None:
        self.dataset = dataset
        self.dataset_id = dataset_id
        self.series = None
        logger.debug("Loaded dataset %s with %d rows", dataset_id, dataset.row_count)

    def update(self, field: str, value: Any) -> ChartRequest:
        attr = _FIELDS.get(field)
        if attr is None:
            raise ChartConfigError(f"Unknown chart config field: {field}")
        payload = self.request.model_dump()
        payload[attr] = value
        try:
            self.request = ChartRequest.model_validate(payload)
        except ValidationError as e:
            raise ChartConfigError(f"Invalid value for {field}: {value!r}") from e
        return self.request

    def generate(self) -> Optional[ChartSeries]:
        """Aggregate the loaded dataset; None until a dataset and both axes are set."""
        if self.dataset is None or not self.request.is_complete:
            return None
        self.series = aggregate(self.dataset, self.request)
        return self.series

    def to_saved_chart(self, owner: Optional[str] = None) -> SavedChart:
        if self.series is None or not self.request.title.strip():
            raise ChartNotReadyError("Please configure the chart and add a title")
        return SavedChart(
            title=self.request.title,
            chart_type=self.request.chart_type,
            config=self.request,
            series=self.series,
            dataset_id=self.dataset_id,
            owner=owner,
        )
