"""Run/step/reset buttons controlling the CPU and updating views."""
from PySide6.QtWidgets import QWidget, QPushButton, QHBoxLayout, QLabel
from PySide6.QtCore import QTimer, Slot

from lc3.errors import LC3Error


class ControlPanel(QWidget):
    def __init__(self, cpu, register_panel, memory_panel, program=None):
        super().__init__()
        self.cpu = cpu
        self.register_panel = register_panel
        self.memory_panel = memory_panel
        self.program = program

        self.btn_step = QPushButton("Step")
        self.btn_run  = QPushButton("Run")
        self.btn_reset = QPushButton("Reset")
        self.status = QLabel("Ready")

        layout = QHBoxLayout(self)
        for w in (self.btn_step, self.btn_run, self.btn_reset, self.status):
            layout.addWidget(w)
        self.setLayout(layout)

        self.timer = QTimer(self)
        self.timer.setInterval(200)  # 5 Hz
        self.timer.timeout.connect(self.step)

        # connections
        self.btn_step.clicked.connect(self.step)
        self.btn_run.clicked.connect(self.toggle_run)
        self.btn_reset.clicked.connect(self.reset)

    def refresh_views(self):
        self.register_panel.refresh()
        self.memory_panel.refresh()
        self.memory_panel.show_address(self.cpu.pc)

    def stop(self):
        self.timer.stop()
        self.btn_run.setText("Run")

    @Slot()
    def step(self):
        try:
            self.cpu.step()
        except LC3Error as e:
            self.stop()
            self.status.setText(str(e))
        else:
            self.status.setText(f"PC=x{self.cpu.pc:04X}  cycles={self.cpu.cycles}")
            if not self.cpu.running:
                self.stop()
                self.status.setText("Halted")
        self.refresh_views()

    @Slot()
    def toggle_run(self):
        if self.timer.isActive():
            self.stop()
        else:
            self.timer.start()
            self.btn_run.setText("Pause")

    @Slot()
    def reset(self):
        self.stop()
        self.cpu.reset()
        if self.program is not None:
            self.cpu.load_program(self.program)
        self.refresh_views()
        self.status.setText("Reset done")
