from __future__ import annotations

from people_api.services.sheet_cells import cell_value


def test_cell_value_returns_cell():
    assert cell_value(["a", "b"], 1) == "b"


def test_cell_value_short_row():
    assert cell_value(["a"], 5) == ""


def test_cell_value_empty_cell():
    assert cell_value(["", None], 0) == ""
    assert cell_value(["", None], 1) == ""
