from PySide6.QtWidgets import QMainWindow, QDockWidget, QApplication
from PySide6.QtCore import Qt
from .screen_panel import ScreenPanel
from .control_panel import ControlPanel
from chip8.cpu_core import CPU
from chip8.errors import LoadError
import logging
import sys

log = logging.getLogger(__name__)

# host key -> CHIP-8 keypad index
#   1 2 3 4        1 2 3 C
#   Q W E R   ->   4 5 6 D
#   A S D F        7 8 9 E
#   Z X C V        A 0 B F
KEYMAP = {
    Qt.Key_1: 0x1, Qt.Key_2: 0x2, Qt.Key_3: 0x3, Qt.Key_4: 0xC,
    Qt.Key_Q: 0x4, Qt.Key_W: 0x5, Qt.Key_E: 0x6, Qt.Key_R: 0xD,
    Qt.Key_A: 0x7, Qt.Key_S: 0x8, Qt.Key_D: 0x9, Qt.Key_F: 0xE,
    Qt.Key_Z: 0xA, Qt.Key_X: 0x0, Qt.Key_C: 0xB, Qt.Key_V: 0xF,
}


class MainWindow(QMainWindow):
    def __init__(self, config):
        super().__init__()
        self.cpu = CPU()
        self.setWindowTitle("CHIP-8 Emulator")
        self.setFocusPolicy(Qt.StrongFocus)

        # central widget: frame buffer
        self.screen_panel = ScreenPanel(self.cpu, config.scale)
        self.setCentralWidget(self.screen_panel)

        # dock: controls
        self.control_panel = ControlPanel(self.cpu, self.screen_panel, config.cycle_delay)
        ctrl_dock = QDockWidget("Control", self)
        ctrl_dock.setWidget(self.control_panel)
        ctrl_dock.setFeatures(QDockWidget.NoDockWidgetFeatures)
        self.addDockWidget(Qt.BottomDockWidgetArea, ctrl_dock)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.close()
        elif event.key() in KEYMAP and not event.isAutoRepeat():
            self.cpu.press(KEYMAP[event.key()])
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() in KEYMAP and not event.isAutoRepeat():
            self.cpu.release(KEYMAP[event.key()])
        else:
            super().keyReleaseEvent(event)


def run(config):
    app = QApplication(sys.argv[:1])
    mw = MainWindow(config)
    try:
        mw.cpu.load_rom(config.rom_path)
    except LoadError as e:
        log.error("%s", e)
        sys.exit(1)
    mw.screen_panel.refresh()
    mw.adjustSize()
    mw.show()
    mw.control_panel.start()
    sys.exit(app.exec())
