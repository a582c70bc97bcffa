from __future__ import annotations

from rich.console import Console

from sortbench.reporter import format_line, print_results, render_lines, render_size, to_microseconds

SIZE = 1000


def _result(size: int = SIZE, **extra):
    result = {
        "size": size,
        "runs": 1,
        "peak_rss_bytes": 50 * 1024 * 1024,
        "operations": [
            {"operation": "linear_search", "label": "Linear search", "duration_ns": 12_345, "matches": 1},
            {"operation": "quick_sort", "label": "Quick sort", "duration_ns": 2_000_999, "matches": None},
        ],
    }
    result.update(extra)
    return result


def test_to_microseconds_truncates():
    assert to_microseconds(999) == 0
    assert to_microseconds(1_999) == 1
    assert to_microseconds(2_000_000) == 2_000


def test_format_line_matches_report_format():
    assert format_line("Linear search", 100, 12_345) == "Linear search 100 elements 12 mcs"


def test_render_size_appends_blank_separator():
    assert render_size(_result()) == [
        "Linear search 1000 elements 12 mcs",
        "Quick sort 1000 elements 2000 mcs",
        "",
    ]


def test_render_size_skips_failed_sizes():
    assert render_size(_result(error="missing", error_type="DataFileNotFoundError")) == []


def test_render_lines_keeps_size_order():
    lines = render_lines([_result(size=100), _result(size=SIZE)])
    assert lines[0].startswith("Linear search 100 ")
    assert lines[2] == ""
    assert lines[3].startswith("Linear search 1000 ")
    assert lines[-1] == ""


def test_print_results_renders_table():
    console = Console(record=True, width=160)
    print_results([_result(), _result(size=5000, operations=[], error="gone", error_type="TruncatedInputError")], console=console)
    text = console.export_text()

    assert "Sort & Search Benchmark Results" in text
    assert "Linear search" in text
    assert "2,000" in text
    assert "TruncatedInputError" in text


def test_print_results_aggregated_shows_spread():
    aggregated = _result(runs=3)
    aggregated["operations"][0]["stats"] = {"median": 12_345, "stddev": 2_500.0}
    console = Console(record=True, width=160)
    print_results([aggregated], console=console)
    assert "12 ± 2.5" in console.export_text()


def test_print_results_empty():
    console = Console(record=True, width=80)
    print_results([], console=console)
    assert "No results to display." in console.export_text()
