"""Central widget that paints the 64x32 frame buffer, scaled up without smoothing."""
from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QImage, QPainter
from PySide6.QtCore import Qt, Slot

from chip8.display import WIDTH, HEIGHT


class ScreenPanel(QWidget):
    def __init__(self, cpu, scale: int):
        super().__init__()
        self.cpu = cpu
        self.image = QImage(WIDTH, HEIGHT, QImage.Format_RGB32)
        self.setMinimumSize(WIDTH * scale, HEIGHT * scale)
        self.setFocusPolicy(Qt.NoFocus)

    @Slot()
    def refresh(self):
        """Copy the CPU frame buffer into the image and schedule a repaint, if it changed."""
        display = self.cpu.display
        if not display.dirty:
            return
        pixels = display.pixels
        for y in range(HEIGHT):
            row = y * WIDTH
            for x in range(WIDTH):
                self.image.setPixel(x, y, pixels[row + x])
        display.dirty = False
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform, False)
        painter.drawImage(self.rect(), self.image)
        painter.end()
