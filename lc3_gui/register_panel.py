"""Widget that shows the 8 general-purpose registers and the control unit
(PC, IR, CC, RUNNING) in a compact table. Updates are pulled from the
CPU instance via the `refresh()` slot, which the control panel triggers
after each CPU step."""
from PySide6.QtWidgets import QWidget, QTableWidget, QTableWidgetItem, QVBoxLayout
from PySide6.QtCore import Slot

from lc3.registers import GENERAL_REGS, SPECIAL_REGS


class RegisterPanel(QWidget):
    HEADERS = [f"R{i}" for i in range(GENERAL_REGS)] + SPECIAL_REGS + ["RUNNING"]

    def __init__(self, cpu):
        super().__init__()
        self.cpu = cpu
        self.table = QTableWidget(len(self.HEADERS), 3)
        self.table.setHorizontalHeaderLabels(["Reg", "Hex", "Dec"])
        for row, name in enumerate(self.HEADERS):
            self.table.setItem(row, 0, QTableWidgetItem(name))
            self.table.setItem(row, 1, QTableWidgetItem("x0000"))
            self.table.setItem(row, 2, QTableWidgetItem("0"))
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)

        layout = QVBoxLayout(self)
        layout.addWidget(self.table)
        self.setLayout(layout)
        self.refresh()

    def rows(self):
        """(hex, dec) text for every row, in HEADERS order."""
        values = [(f"x{v & 0xFFFF:04X}", str(v)) for v in self.cpu.registers]
        values.append((f"x{self.cpu.pc:04X}", str(self.cpu.pc)))
        values.append((f"x{self.cpu.ir:04X}", str(self.cpu.ir)))
        values.append((str(self.cpu.cc), f"{self.cpu.cc.flag:03b}"))
        values.append(("yes" if self.cpu.running else "no", str(int(self.cpu.running))))
        return values

    @Slot()
    def refresh(self):
        """Update table values from CPU state."""
        for row, (hex_text, dec_text) in enumerate(self.rows()):
            self.table.item(row, 1).setText(hex_text)
            self.table.item(row, 2).setText(dec_text)
