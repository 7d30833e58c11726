"""Tests for :mod:`SequenceAnalyzer.Reporting.report_reader`."""

import logging

from SequenceAnalyzer.Reporting.report_reader import (
    ReportReader,
    parse_report,
    render_top_sequences,
    select_top_sequences,
)
from SequenceAnalyzer.Reporting.report_writer import ReportWriter


def test_parse_report_skips_borders_and_padding() -> None:
    text = "-----,---\nlow  ,  3\noil  ,  1\n-----,---\n"
    assert parse_report(text) == ["low", "oil"]


def test_parse_empty_report() -> None:
    assert parse_report("") == []
    assert parse_report("---,---\n---,---\n") == []


def test_top_sequences_are_sorted_unique_and_capped() -> None:
    sequences_by_length = {
        1: [f"w{index:02d}" for index in range(12)],
        2: ["w00", "a b"],
    }
    top = select_top_sequences(sequences_by_length)

    assert len(top) == 10
    assert top == sorted(top)
    assert top[0] == "a b"
    assert len(set(top)) == len(top)


def test_top_limit_is_respected() -> None:
    assert select_top_sequences({1: ["c", "b", "a"]}, limit=2) == ["a", "b"]


def test_render_top_sequences_as_bullets() -> None:
    assert render_top_sequences(["e", "e 101"]) == "Top Sequences:\n  - e\n  - e 101\n"


def test_read_reports_round_trip(make_config) -> None:
    config = make_config()
    table = {1: {"e": 2, "101": 2, "fault": 1}, 2: {"e 101": 2}}
    report_index = ReportWriter(config).write_reports(table)

    sequences_by_length = ReportReader(config).read_reports(report_index)

    assert {length: set(sequences) for length, sequences in sequences_by_length.items()} == {
        1: {"e", "101", "fault"},
        2: {"e 101"},
    }


def test_unreadable_report_contributes_nothing(make_config, caplog) -> None:
    config = make_config()
    report_index = ReportWriter(config).write_reports({1: {"a": 1}})
    report_index[2] = config.output_folder / "occurrence_length_2.csv"

    with caplog.at_level(logging.ERROR):
        sequences_by_length = ReportReader(config).read_reports(report_index)

    assert sequences_by_length == {1: ["a"], 2: []}
    assert "occurrence_length_2.csv" in caplog.text


def test_discover_reports_skips_bad_names(make_config, caplog) -> None:
    config = make_config()
    ReportWriter(config).write_reports({1: {"a": 1}, 3: {"a b c": 1}})
    (config.output_folder / "occurrence_length_x.csv").write_text("---,---\n")
    (config.output_folder / "top_sequences.txt").write_text("Top Sequences:\n")

    with caplog.at_level(logging.WARNING):
        report_index = ReportReader(config).discover_reports()

    assert sorted(report_index) == [1, 3]
    assert "occurrence_length_x.csv" in caplog.text


def test_discover_reports_without_output_folder(make_config) -> None:
    assert ReportReader(make_config()).discover_reports() == {}


def test_collect_and_write_top_sequences(make_config) -> None:
    config = make_config(top_limit=2)
    ReportWriter(config).write_reports({1: {"c": 1, "b": 1}, 2: {"a b": 1}})
    reader = ReportReader(config)

    top = reader.collect_top_sequences()
    path = reader.write_top_sequences(top)

    assert top == ["a b", "b"]
    assert path.read_text(encoding="utf-8") == "Top Sequences:\n  - a b\n  - b\n"
