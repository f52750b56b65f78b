"""
Unit tests for the Ingestion Agent.
"""

import pytest
from unittest.mock import patch

from critic.agents.ingestion import IngestionAgent
from critic.exceptions import FormatError, InputSourceError
from critic.models.restaurant import RawRecord


@pytest.fixture
def agent():
    return IngestionAgent()


def test_parse_line(agent):
    """Test splitting a record line into its columns."""
    record = agent.parse_line("1;Cafe Aurora;00100;Helsinki;ma-pe 09:00-17:00, la-su 10:00-14:00\n")

    assert record == RawRecord(
        restaurant_id="1",
        name="Cafe Aurora",
        postal_code="00100",
        city="Helsinki",
        opening_hours="ma-pe 09:00-17:00, la-su 10:00-14:00"
    )


def test_parse_line_ignores_extra_columns(agent):
    """Test that columns after the fifth are dropped."""
    record = agent.parse_line("7;Pizzeria;00200;Espoo;ma 10:00-20:00;extra;\r\n")

    assert record.opening_hours == "ma 10:00-20:00"


def test_parse_line_too_few_columns(agent):
    """Test that a short line raises FormatError with the line number."""
    with pytest.raises(FormatError, match="Line 3"):
        agent.parse_line("1;Cafe;00100", line_number=3)


def test_read_records(agent, tmp_path):
    """Test reading all records in input order, skipping blank lines."""
    path = tmp_path / "ravintolat.csv"
    path.write_text(
        "1;Cafe Aurora;00100;Helsinki;ma-pe 09:00-17:00\n"
        "\n"
        "2;Lounasravintola;00200;Espoo;ma 10:30-14:00\n",
        encoding="utf-8"
    )

    records = list(agent.read_records(path))

    assert [r.name for r in records] == ["Cafe Aurora", "Lounasravintola"]
    assert records[1].city == "Espoo"


def test_read_lines_reports_line_numbers(agent, tmp_path):
    """Test that blank lines still count towards line numbers."""
    path = tmp_path / "ravintolat.csv"
    path.write_text("a;b;c;d;e\n\n  \nf;g;h;i;j", encoding="utf-8")

    numbers = [number for number, _ in agent.read_lines(path)]

    assert numbers == [1, 4]


def test_missing_file_raises_immediately(agent, tmp_path):
    """Test existence check happens before iteration starts."""
    with pytest.raises(InputSourceError, match="Non-existing or unreadable"):
        agent.read_records(tmp_path / "missing.csv")


def test_directory_is_rejected(agent, tmp_path):
    """Test that a directory is not accepted as input."""
    with pytest.raises(InputSourceError):
        agent.read_lines(tmp_path)


def test_file_closed_after_early_stop(agent, tmp_path):
    """Test that closing the iterator early releases the file."""
    path = tmp_path / "ravintolat.csv"
    path.write_text("a;b;c;d;e\nf;g;h;i;j\n", encoding="utf-8")

    lines = agent.read_lines(path)
    next(lines)
    handle = lines.gi_frame.f_locals["handle"]
    lines.close()

    assert handle.closed


def test_custom_delimiter():
    """Test ingestion with another column delimiter."""
    agent = IngestionAgent(delimiter="|")

    record = agent.parse_line("1|Cafe|00100|Turku|la 10:00-12:00")

    assert record.city == "Turku"


def test_file_not_opened_when_closed_before_first_line(agent, tmp_path):
    """Test that an iterator closed before its first item never holds the file."""
    path = tmp_path / "ravintolat.csv"
    path.write_text("a;b;c;d;e\n", encoding="utf-8")

    with patch("builtins.open", wraps=open) as spy:
        lines = agent.read_lines(path)
        lines.close()

    assert spy.call_count == 0


def test_unused_records_iterator_does_not_open_file(agent, tmp_path):
    """Test that read_records only checks the source until it is consumed."""
    path = tmp_path / "ravintolat.csv"
    path.write_text("a;b;c;d;e\n", encoding="utf-8")

    with patch("builtins.open", wraps=open) as spy:
        agent.read_records(path)

    assert spy.call_count == 0


def test_invalid_encoding_raises_input_source_error(agent, tmp_path):
    """Test that undecodable bytes surface as InputSourceError."""
    path = tmp_path / "ravintolat.csv"
    path.write_bytes(b"1;Caf\xe9;00100;Helsinki;ma 09:00-17:00\n")

    with pytest.raises(InputSourceError, match="not valid utf-8"):
        list(agent.read_lines(path))


def test_latin1_encoding_reads_same_bytes(tmp_path):
    """Test configured encoding is used when opening the file."""
    path = tmp_path / "ravintolat.csv"
    path.write_bytes(b"1;Caf\xe9;00100;Helsinki;ma 09:00-17:00\n")

    records = list(IngestionAgent(encoding="latin-1").read_records(path))

    assert records[0].name == "Café"
