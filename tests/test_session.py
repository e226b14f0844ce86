"""Tests for the caller-owned chart building session."""

from __future__ import annotations

import pytest

from chartnexus.dataset import Dataset
from chartnexus.schemas import ChartRequest
from chartnexus.session import ChartConfigError, ChartNotReadyError, ChartSession


def test_generate_waits_for_dataset_and_axes(sales: Dataset) -> None:
    """Nothing is generated until a dataset and both axes are chosen."""

    session = ChartSession()
    assert session.columns == []
    assert session.generate() is None

    session.load(sales, dataset_id="d1")
    assert session.columns == ["region", "sales"]
    session.update("xAxis", "region")
    assert session.generate() is None
    assert session.series is None

    session.update("yAxis", "sales")
    series = session.generate()
    assert series is not None
    assert series.labels == ["A", "B", "A"]
    assert session.series == series


def test_update_accepts_client_and_field_names(sales: Dataset) -> None:
    """Config fields can be set by client name or attribute name."""

    session = ChartSession(dataset=sales)
    session.update("type", "pie")
    session.update("x_axis", "region")
    request = session.update("y_axis", "sales")
    assert request.model_dump() == {"chart_type": "pie", "x_axis": "region", "y_axis": "sales", "title": ""}
    assert session.generate().to_mapping() == {"A": 15.0, "B": 20.0}


def test_update_rejects_unknown_fields_and_types() -> None:
    """Unknown fields and chart types raise ChartConfigError."""

    session = ChartSession()
    with pytest.raises(ChartConfigError):
        session.update("color", "red")
    with pytest.raises(ChartConfigError):
        session.update("type", "radar")
    assert session.request.chart_type == "bar"


def test_failed_generate_keeps_previous_series(sales: Dataset) -> None:
    """Clearing an axis does not discard the last generated series."""

    session = ChartSession(dataset=sales, request=ChartRequest(xAxis="region", yAxis="sales"))
    first = session.generate()
    session.update("yAxis", "")
    assert session.generate() is None
    assert session.series == first


def test_load_clears_series(sales: Dataset) -> None:
    """Loading another dataset drops the previous series."""

    session = ChartSession(dataset=sales, request=ChartRequest(xAxis="region", yAxis="sales"))
    session.generate()
    session.load(Dataset(rows=[{"k": "x", "v": 1}]), dataset_id="d2")
    assert session.series is None
    assert session.dataset_id == "d2"


def test_to_saved_chart_requires_series_and_title(sales: Dataset) -> None:
    """Saving needs a generated series and a non-blank title."""

    session = ChartSession(dataset_id="d1", dataset=sales)
    session.update("title", "Sales by region")
    with pytest.raises(ChartNotReadyError, match="add a title"):
        session.to_saved_chart()

    session.update("title", "  ")
    session.update("xAxis", "region")
    session.update("yAxis", "sales")
    session.generate()
    with pytest.raises(ChartNotReadyError):
        session.to_saved_chart()


def test_to_saved_chart_payload(sales: Dataset) -> None:
    """The saved chart carries title, type, config, series, dataset and owner."""

    session = ChartSession(dataset_id="d1", dataset=sales)
    for field, value in (("type", "pie"), ("title", "Sales"), ("xAxis", "region"), ("yAxis", "sales")):
        session.update(field, value)
    session.generate()

    saved = session.to_saved_chart(owner="u1")
    assert saved.title == "Sales"
    assert saved.chart_type == "pie"
    assert saved.config.x_axis == "region"
    assert saved.series.to_mapping() == {"A": 15.0, "B": 20.0}
    assert saved.dataset_id == "d1"
    assert saved.owner == "u1"
