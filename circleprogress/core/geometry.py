"""
Geometria e animação do anel de progresso

Cálculo puro, sem dependência de toolkit gráfico. O host chama
compute_frame() uma vez por refresh e desenha os comandos retornados.
Ângulos: 0° = 3 horas, positivo = sentido horário.
"""
import math
import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple, Union

logger = logging.getLogger('CircleProgress.Geometry')

DEFAULT_RING_THICKNESS = 20
DEFAULT_STEP = 5.0
DEFAULT_DOT_INSET = 8
START_ANGLE = 180.0
MAX_DOT_SWEEP = 359.0


def sweep_for_progress(percentage: float) -> float:
    """Converte percentual (0-100) em ângulo de varredura"""
    return 360 * percentage / 100


def dot_visible(target_sweep: float) -> bool:
    """Anel vazio ou completo não tem ponta para marcar"""
    return 0 < target_sweep <= MAX_DOT_SWEEP


def frames_to_target(target_sweep: float, step: float = DEFAULT_STEP) -> int:
    """
    Número de frames até a animação assentar

    Conta o frame que assenta a animação: para alvo vazio ou negativo o
    primeiro frame já prende os contadores, então o resultado é 1 (e não
    ceil(T / step) = 0).
    """
    if target_sweep <= 0:
        return 1
    return math.ceil(target_sweep / step)


def _advance(current: float, target: float, step: float) -> float:
    current += step
    if current >= target:
        current = target
    return current


@dataclass
class ProgressState:
    """
    Estado mutável de um anel de progresso (um por widget)

    current_dot avança a cada frame mesmo quando o ponto não é desenhado
    (alvo fora de (0, 359]), para que anel cheio ou vazio também assente.
    """

    ring_thickness: int = DEFAULT_RING_THICKNESS
    target_sweep: float = 0.0
    current_arc: float = 0.0
    current_dot: float = 0.0
    radius: int = 0
    step: float = DEFAULT_STEP
    dot_inset: int = DEFAULT_DOT_INSET

    @classmethod
    def from_progress(cls, progress: float = 0, **kwargs) -> "ProgressState":
        return cls(target_sweep=sweep_for_progress(progress), **kwargs)

    def set_progress(self, percentage: float):
        """Define novo alvo e reinicia a animação a partir da origem"""
        self.current_arc = 0.0
        self.current_dot = 0.0
        self.target_sweep = sweep_for_progress(percentage)
        logger.debug(f"Novo alvo: {percentage}% -> {self.target_sweep}°")

    @property
    def settled(self) -> bool:
        return self.current_arc == self.target_sweep and self.current_dot == self.target_sweep


def set_progress(state: ProgressState, percentage: float) -> ProgressState:
    state.set_progress(percentage)
    return state


# ============ COMANDOS DE DESENHO ============

@dataclass(frozen=True)
class CircleCommand:
    cx: int
    cy: int
    radius: int
    stroke_width: int
    color_role: str = "background"


@dataclass(frozen=True)
class ArcCommand:
    left: int
    top: int
    right: int
    bottom: int
    start_angle: float
    sweep_angle: float
    stroke_width: int
    cap: str = "round"
    color_role: str = "progress"

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class PointCommand:
    x: float
    y: float
    stroke_width: int
    cap: str = "round"
    color_role: str = "dot"


DrawCommand = Union[CircleCommand, ArcCommand, PointCommand]


class Frame(NamedTuple):
    commands: List[DrawCommand]
    needs_another_frame: bool
    center: Tuple[int, int]
    radius: int


# ============ FRAME ============

def compute_frame(width: int, height: int, state: ProgressState) -> Frame:
    """
    Avança a animação um frame e devolve a geometria a desenhar

    Args:
        width: largura do widget em pixels
        height: altura do widget em pixels
        state: estado do anel (modificado no lugar)

    Returns:
        Frame com os comandos e se outro frame é necessário
    """
    thickness = state.ring_thickness
    # Divisão truncada em direção a zero; raio não positivo fica degenerado, sem erro
    radius = int((height - thickness) / 2)
    state.radius = radius
    cx, cy = width // 2, height // 2

    commands: List[DrawCommand] = [CircleCommand(cx, cy, radius, thickness)]

    inset = thickness // 2
    state.current_arc = _advance(state.current_arc, state.target_sweep, state.step)
    commands.append(ArcCommand(
        inset,
        inset,
        2 * radius + inset,
        2 * radius + inset,
        START_ANGLE,
        state.current_arc,
        thickness,
    ))

    # O contador do ponto avança mesmo oculto, senão anel cheio nunca assenta
    state.current_dot = _advance(state.current_dot, state.target_sweep, state.step)
    if dot_visible(state.target_sweep):
        angle = state.current_dot * math.pi / 180
        commands.append(PointCommand(
            cx - radius * math.cos(angle),
            cy - radius * math.sin(angle),
            thickness - state.dot_inset,
        ))

    needs_another_frame = (
        state.current_arc != state.target_sweep
        or state.current_dot != state.target_sweep
    )
    return Frame(commands, needs_another_frame, (cx, cy), radius)


def run_until_settled(width: int, height: int, state: ProgressState,
                      max_frames: int = 1000) -> List[Frame]:
    """Executa frames até a animação assentar (ou max_frames)"""
    frames = []
    for _ in range(max_frames):
        frame = compute_frame(width, height, state)
        frames.append(frame)
        if not frame.needs_another_frame:
            break
    else:
        logger.warning(f"Animação não assentou após {max_frames} frames")
    logger.debug(f"{len(frames)} frames até assentar em {state.target_sweep}°")
    return frames
