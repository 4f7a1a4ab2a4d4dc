"""Run/pause/reset/load buttons driving the CPU and updating the screen."""
from PySide6.QtWidgets import (QWidget, QPushButton, QHBoxLayout, QLabel,
                               QFileDialog, QMessageBox, QApplication)
from PySide6.QtCore import Qt, QTimer, Slot

from chip8.errors import LoadError


class ControlPanel(QWidget):
    def __init__(self, cpu, screen_panel, cycle_delay: int):
        super().__init__()
        self.cpu = cpu
        self.screen_panel = screen_panel
        self.was_sounding = False

        self.btn_run  = QPushButton("Run")
        self.btn_reset = QPushButton("Reset")
        self.btn_load = QPushButton("Load ROM")
        self.status = QLabel("Ready")

        layout = QHBoxLayout(self)
        for w in (self.btn_run, self.btn_reset, self.btn_load, self.status):
            w.setFocusPolicy(Qt.NoFocus)
            layout.addWidget(w)
        self.setLayout(layout)

        self.timer = QTimer(self)
        self.timer.setInterval(cycle_delay)
        self.timer.timeout.connect(self.step)

        # connections
        self.btn_run.clicked.connect(self.toggle_run)
        self.btn_reset.clicked.connect(self.reset)
        self.btn_load.clicked.connect(self.load_rom)

    @Slot()
    def step(self):
        try:
            self.cpu.step()
            self.screen_panel.refresh()
            self.beep_on_sound()
            if self.cpu.awaiting_key is not None:
                self.status.setText(f"Waiting for key (V{self.cpu.awaiting_key:X})")
            else:
                self.status.setText(f"PC=0x{self.cpu.reg.pc:03X}")
        except Exception as e:
            self.stop()
            self.status.setText(str(e))

    def beep_on_sound(self):
        sounding = self.cpu.sound_active
        if sounding and not self.was_sounding:
            QApplication.beep()
        self.was_sounding = sounding

    def start(self):
        self.timer.start()
        self.btn_run.setText("Pause")

    def stop(self):
        self.timer.stop()
        self.btn_run.setText("Run")

    @Slot()
    def toggle_run(self):
        if self.timer.isActive():
            self.stop()
        else:
            self.start()

    @Slot()
    def reset(self):
        self.cpu.reset()
        self.was_sounding = False
        self.screen_panel.refresh()
        self.status.setText("Reset done")

    @Slot()
    def load_rom(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load ROM", "",
                                              "CHIP-8 ROMs (*.ch8 *.c8);;All files (*)")
        if not path:
            return
        try:
            self.cpu.switch_rom(path)
        except LoadError as e:
            QMessageBox.warning(self, "Load failed", str(e))
            return
        self.was_sounding = False
        self.screen_panel.refresh()
        self.status.setText(f"Loaded {path}")
