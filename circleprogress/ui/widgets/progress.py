"""
Widget de progresso circular
"""
import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF, QRectF, QTimer, pyqtSignal
from PyQt6.QtGui import QPainter, QPen, QColor

from circleprogress.core.geometry import (
    ArcCommand, CircleCommand, Frame, PointCommand, ProgressState, compute_frame,
)
from circleprogress.core.config.settings import ColorsConfig, RingConfig

logger = logging.getLogger('CircleProgress.UI.Progress')

COLOR_ROLES = ("background", "progress", "dot")

_CAPS = {
    "round": Qt.PenCapStyle.RoundCap,
    "butt": Qt.PenCapStyle.FlatCap,
    "square": Qt.PenCapStyle.SquareCap,
}


def qt_arc_angles(start_angle: float, sweep_angle: float):
    """Converte ângulos horários (graus) para o padrão Qt (anti-horário, 1/16 de grau)"""
    return int(round(-start_angle * 16)), int(round(-sweep_angle * 16))


def paint_frame(painter: QPainter, frame: Frame, colors: dict):
    """Desenha os comandos de um frame com o QPainter informado"""
    painter.setBrush(Qt.BrushStyle.NoBrush)

    for command in frame.commands:
        pen = QPen(colors[command.color_role], command.stroke_width)
        if isinstance(command, CircleCommand):
            painter.setPen(pen)
            painter.drawEllipse(QPointF(command.cx, command.cy), command.radius, command.radius)
        elif isinstance(command, ArcCommand):
            pen.setCapStyle(_CAPS[command.cap])
            painter.setPen(pen)
            rect = QRectF(command.left, command.top,
                          command.right - command.left, command.bottom - command.top)
            start, span = qt_arc_angles(command.start_angle, command.sweep_angle)
            painter.drawArc(rect, start, span)
        elif isinstance(command, PointCommand):
            pen.setCapStyle(_CAPS[command.cap])
            painter.setPen(pen)
            painter.drawPoint(QPointF(command.x, command.y))


class CircleProgress(QWidget):
    """Anel de progresso com arco animado e ponto na ponta"""

    # Emitido quando arco e ponto alcançam o alvo
    animation_finished = pyqtSignal()

    def __init__(self, progress: float = 0, parent=None,
                 ring: Optional[RingConfig] = None, colors: Optional[ColorsConfig] = None):
        super().__init__(parent)
        if ring is None or colors is None:
            from circleprogress.core.config.settings import settings
            ring = ring or settings.ring
            colors = colors or settings.colors

        self.frame_interval_ms = ring.frame_interval_ms
        self.state = ProgressState.from_progress(
            progress,
            ring_thickness=ring.thickness,
            step=ring.step,
            dot_inset=ring.dot_inset,
        )
        self.colors = {}
        self.set_colors(**{role: colors.for_role(role) for role in COLOR_ROLES})
        self.last_frame: Optional[Frame] = None
        self._animating = True

        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.timeout.connect(self.update)

    def set_progress(self, percentage: float):
        """Define progresso (0-100) e reinicia a animação"""
        self.state.set_progress(percentage)
        self._animating = True
        logger.debug(f"Progresso definido: {percentage}%")
        self.update()

    def set_colors(self, background=None, progress=None, dot=None):
        """Define cores personalizadas"""
        for role, color in zip(COLOR_ROLES, (background, progress, dot)):
            if color:
                self.colors[role] = QColor(color)
        self.update()

    def paintEvent(self, event):
        """Desenha o frame atual e agenda o próximo se necessário"""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        frame = compute_frame(self.width(), self.height(), self.state)
        paint_frame(painter, frame, self.colors)
        painter.end()
        self.last_frame = frame

        if frame.needs_another_frame:
            if not self._frame_timer.isActive():
                self._frame_timer.start(self.frame_interval_ms)
        elif self._animating:
            self._animating = False
            self.animation_finished.emit()
