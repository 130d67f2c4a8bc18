from PySide6.QtWidgets import (QMainWindow, QDockWidget, QPlainTextEdit,
                               QInputDialog, QApplication)
from PySide6.QtCore import Qt
from PySide6.QtGui import QTextCursor
from .register_panel import RegisterPanel
from .memory_panel import MemoryPanel
from .control_panel import ControlPanel
from lc3.cpu_core import CPU
from lc3.errors import InputExhausted
from lc3.traps import IN_PROMPT, printable
import sys


class OutputConsole:
    """Trap console backed by a text pane; input comes from a dialog."""

    def __init__(self, output: QPlainTextEdit):
        self.output = output

    def write(self, text: str) -> None:
        self.output.moveCursor(QTextCursor.End)
        self.output.insertPlainText(printable(text))

    def read_byte(self) -> int:
        text, ok = QInputDialog.getText(self.output, "Trap input", IN_PROMPT)
        if not ok or not text:
            raise InputExhausted()
        return text.encode("utf-8")[0]


class MainWindow(QMainWindow):
    def __init__(self, program=None):
        super().__init__()
        self.output = QPlainTextEdit()
        self.output.setReadOnly(True)
        self.cpu = CPU(console=OutputConsole(self.output))
        if program is not None:
            self.cpu.load_program(program)
        self.setWindowTitle("LC-3 Simulator")

        # central widget: memory
        self.memory_panel = MemoryPanel(self.cpu)
        self.setCentralWidget(self.memory_panel)

        # dock 1: registers
        self.register_panel = RegisterPanel(self.cpu)
        reg_dock = QDockWidget("Registers", self)
        reg_dock.setWidget(self.register_panel)
        self.addDockWidget(Qt.LeftDockWidgetArea, reg_dock)

        # dock 2: controls
        self.control_panel = ControlPanel(self.cpu, self.register_panel,
                                          self.memory_panel, program)
        ctrl_dock = QDockWidget("Control", self)
        ctrl_dock.setWidget(self.control_panel)
        self.addDockWidget(Qt.BottomDockWidgetArea, ctrl_dock)

        # dock 3: trap output
        out_dock = QDockWidget("Output", self)
        out_dock.setWidget(self.output)
        self.addDockWidget(Qt.BottomDockWidgetArea, out_dock)

        self.memory_panel.show_address(self.cpu.pc)


def run(program=None):
    app = QApplication.instance() or QApplication(sys.argv)
    mw = MainWindow(program)
    mw.resize(1280, 960)
    mw.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(run())
