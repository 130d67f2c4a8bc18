"""Central widget that displays all 65536 memory words in a scrollable table."""
from PySide6.QtWidgets import QTableView, QWidget, QVBoxLayout
from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex

from lc3.disassembler import disassemble
from lc3.memory import MEM_SIZE

MEM_COLS = 16  # 16 columns x 4096 rows == 65536 cells


class MemoryModel(QAbstractTableModel):
    def __init__(self, cpu):
        super().__init__()
        self.cpu = cpu

    # Qt model overrides
    def rowCount(self, parent=QModelIndex()):
        return MEM_SIZE // MEM_COLS

    def columnCount(self, parent=QModelIndex()):
        return MEM_COLS

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        addr = index.row()*MEM_COLS + index.column()
        val = self.cpu.mem.read(addr)
        if role == Qt.DisplayRole:
            return f"{val & 0xFFFF:04X}"
        if role == Qt.ToolTipRole:
            return f"x{addr:04X}: {disassemble(val)}"
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return f"+{section:X}"
        return f"x{section*MEM_COLS:04X}"

    def refresh(self):
        top_left = self.index(0, 0)
        bottom_right = self.index(self.rowCount()-1, self.columnCount()-1)
        self.dataChanged.emit(top_left, bottom_right)


class MemoryPanel(QWidget):
    def __init__(self, cpu):
        super().__init__()
        self.model = MemoryModel(cpu)
        self.view = QTableView()
        self.view.setModel(self.model)
        self.view.horizontalHeader().setStretchLastSection(True)
        self.view.setSelectionMode(QTableView.SingleSelection)
        layout = QVBoxLayout(self)
        layout.addWidget(self.view)
        self.setLayout(layout)

    def refresh(self):
        self.model.refresh()

    def show_address(self, addr: int):
        """Scroll to and select the cell holding `addr` (e.g. the PC)."""
        index = self.model.index(addr // MEM_COLS, addr % MEM_COLS)
        self.view.setCurrentIndex(index)
        self.view.scrollTo(index)
