from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any, Literal, get_args

from chartnexus.config import get_settings


ChartType = Literal["bar", "line", "pie", "scatter"]
CHART_TYPES = get_args(ChartType)


def _default_chart_type() -> str:
    return get_settings().default_chart_type


class ChartRequest(BaseModel):
    """Chart type and axis columns chosen by the user."""

    model_config = ConfigDict(populate_by_name=True)

    chart_type: ChartType = Field(
        default_factory=_default_chart_type, alias="type", description="Visualization type"
    )
    x_axis: str = Field("", alias="xAxis", description="Column used for labels or grouping keys")
    y_axis: str = Field("", alias="yAxis", description="Column plotted or summed as values")
    title: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.x_axis) and bool(self.y_axis)


class ChartSeries(BaseModel):
    chart_type: ChartType
    labels: List[Any] = Field(default_factory=list)
    values: List[float] = Field(default_factory=list)

    @classmethod
    def empty(cls, chart_type: ChartType) -> "ChartSeries":
        return cls(chart_type=chart_type)

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def to_mapping(self) -> Dict[Any, float]:
        """Label -> value mapping; for pie series each label is a distinct key."""
        return dict(zip(self.labels, self.values))


class SavedChart(BaseModel):
    title: str = Field(..., description="Display title of the saved chart")
    chart_type: ChartType
    config: ChartRequest
    series: ChartSeries
    dataset_id: Optional[str] = Field(None, description="Identifier of the source dataset")
    owner: Optional[str] = None
