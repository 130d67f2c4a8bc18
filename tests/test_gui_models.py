import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402

from conftest import make_cpu  # noqa: E402
from lc3_gui.memory_panel import MEM_COLS, MemoryModel  # noqa: E402


def test_memory_model_shape():
    model = MemoryModel(make_cpu())
    assert model.rowCount() * model.columnCount() == 65536
    assert model.columnCount() == MEM_COLS


def test_memory_model_cells():
    model = MemoryModel(make_cpu([0x1042, 0xF025]))
    row = 0x3000 // MEM_COLS
    assert model.data(model.index(row, 0)) == "1042"
    assert model.data(model.index(row, 1)) == "F025"
    assert model.data(model.index(row, 1), Qt.ToolTipRole) == "x3001: HALT"
    assert model.headerData(row, Qt.Vertical) == "x3000"
    assert model.headerData(3, Qt.Horizontal) == "+3"
