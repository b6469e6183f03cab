"""
Testes para o widget CircleProgress (PyQt6, plataforma offscreen)
"""
import os
import sys
import unittest
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtWidgets import QApplication

from circleprogress.core.config.settings import ColorsConfig, RingConfig
from circleprogress.core.geometry import ProgressState, run_until_settled
from circleprogress.ui.widgets.progress import (
    COLOR_ROLES, CircleProgress, paint_frame, qt_arc_angles,
)

app = QApplication.instance() or QApplication(sys.argv)

COLORS = ColorsConfig(background="#E0E0E0", progress="#3F51B5", dot="#FFFFFF")


def _render(progress):
    """Desenha o frame final da animação num QImage 200x200"""
    state = ProgressState.from_progress(progress)
    frame = run_until_settled(200, 200, state)[-1]

    image = QImage(200, 200, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    colors = {role: QColor(COLORS.for_role(role)) for role in COLOR_ROLES}
    paint_frame(painter, frame, colors)
    painter.end()
    return image


class TestQtArcAngles(unittest.TestCase):
    """Testa conversão para ângulos do Qt"""

    def test_clockwise_to_qt(self):
        self.assertEqual(qt_arc_angles(180, 90), (-2880, -1440))
        self.assertEqual(qt_arc_angles(180, 0), (-2880, 0))
        self.assertEqual(qt_arc_angles(180, 118.8), (-2880, -1901))


class TestPaintFrame(unittest.TestCase):
    """Testa o desenho dos comandos"""

    def test_full_ring_uses_progress_color(self):
        image = _render(100)
        self.assertEqual(image.pixelColor(100, 10).name(), "#3f51b5")
        self.assertEqual(image.pixelColor(100, 190).name(), "#3f51b5")
        self.assertEqual(image.pixelColor(100, 100).alpha(), 0)

    def test_half_ring_covers_top(self):
        image = _render(50)
        self.assertEqual(image.pixelColor(100, 10).name(), "#3f51b5")
        self.assertEqual(image.pixelColor(100, 190).name(), "#e0e0e0")

    def test_empty_ring_shows_background(self):
        image = _render(0)
        self.assertEqual(image.pixelColor(100, 10).name(), "#e0e0e0")
        self.assertEqual(image.pixelColor(100, 190).name(), "#e0e0e0")


class TestCircleProgress(unittest.TestCase):
    """Testa o widget"""

    def setUp(self):
        self.widget = CircleProgress(50, ring=RingConfig(), colors=COLORS)
        self.widget.resize(200, 200)

    def tearDown(self):
        self.widget.deleteLater()

    def test_initial_state(self):
        self.assertEqual(self.widget.state.target_sweep, 180)
        self.assertEqual(self.widget.state.ring_thickness, 20)
        self.assertEqual(self.widget.state.current_arc, 0)

    def test_set_progress_resets(self):
        self.widget.set_progress(25)
        self.assertEqual(self.widget.state.target_sweep, 90)
        self.assertEqual(self.widget.state.current_arc, 0)
        self.assertEqual(self.widget.state.current_dot, 0)

    def test_set_colors(self):
        self.widget.set_colors(progress="#00FF00")
        self.assertEqual(self.widget.colors["progress"].name(), "#00ff00")
        self.assertEqual(self.widget.colors["background"].name(), "#e0e0e0")

    def test_paint_event_advances_one_frame(self):
        self.widget.grab()
        self.assertIsNotNone(self.widget.last_frame)
        self.assertEqual(self.widget.state.current_arc, 5)
        self.assertEqual(self.widget.last_frame.radius, 90)
        self.assertTrue(self.widget.last_frame.needs_another_frame)

    def test_animation_finished_emitted_once(self):
        finished = []
        self.widget.animation_finished.connect(lambda: finished.append(True))
        self.widget.set_progress(0)
        self.widget.grab()
        self.widget.grab()
        self.assertEqual(finished, [True])


if __name__ == "__main__":
    unittest.main()
