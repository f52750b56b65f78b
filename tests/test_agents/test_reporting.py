"""
Unit tests for the Review Table Builder.
"""

import json
import os

import pandas as pd
import pytest

from critic.agents.reporting import ReviewTableBuilder, TABLE_COLUMNS
from critic.models.restaurant import Restaurant, ReviewSummary
from critic.utils.storage import StorageManager


@pytest.fixture
def builder(tmp_path):
    return ReviewTableBuilder(StorageManager(str(tmp_path / "output")))


@pytest.fixture
def restaurants():
    return [
        Restaurant(name="Lunch Bar", schedule={0: 4.0, 1: 4.0}, stars=0, restaurant_id="1"),
        Restaurant(name="Cafe Aurora", schedule={d: 8.0 for d in range(5)}, stars=4, restaurant_id="2"),
        Restaurant(name="Kiosk", schedule={5: 8.0}, stars=0, restaurant_id="3"),
    ]


def test_build_table_columns_and_order(builder, restaurants):
    """Test columns and descending Total order (ties keep input order)."""
    table = builder.build_table(restaurants)

    assert list(table.columns) == TABLE_COLUMNS
    assert list(table["Name"]) == ["Cafe Aurora", "Lunch Bar", "Kiosk"]
    assert list(table["Total"]) == [40.0, 8.0, 8.0]
    assert list(table["Stars"]) == [4, 0, 0]


def test_build_table_fills_missing_days_with_zero(builder, restaurants):
    """Test that days absent from a schedule show as 0.0."""
    table = builder.build_table(restaurants)
    kiosk = table[table["Name"] == "Kiosk"].iloc[0]

    assert kiosk["ma"] == 0.0
    assert kiosk["la"] == 8.0
    assert kiosk["su"] == 0.0


def test_build_table_empty(builder):
    """Test empty table still has all columns."""
    table = builder.build_table([])

    assert table.empty
    assert list(table.columns) == TABLE_COLUMNS


def test_export_writes_csv_and_metadata(builder, restaurants):
    """Test CSV and metadata files produced by export."""
    summary = ReviewSummary(favorite=restaurants[1], least_favorite=restaurants[0])

    output_path = builder.export(
        restaurants,
        run_name="ravintolat",
        summary=summary,
        source="ravintolat.csv",
        skipped_records=2
    )

    assert output_path.endswith("review_ravintolat.csv")
    df = pd.read_csv(output_path)
    assert len(df) == 3
    assert df.iloc[0]["Name"] == "Cafe Aurora"

    metadata_path = builder.storage.metadata_path("ravintolat")
    assert os.path.exists(metadata_path)
    with open(metadata_path, encoding="utf-8") as f:
        metadata = json.load(f)

    assert metadata["restaurants"] == 3
    assert metadata["skipped_records"] == 2
    assert metadata["favorite"] == "Cafe Aurora"
    assert metadata["least_favorite"] == "Lunch Bar"
    assert metadata["generated_at"].endswith("Z")


def test_storage_creates_output_dir(tmp_path):
    """Test that StorageManager creates its output directory."""
    output_root = tmp_path / "nested" / "output"

    StorageManager(str(output_root))

    assert output_root.is_dir()
