#!/usr/bin/env python3
"""
Circle Progress - CLI
"""
import sys
import logging

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from circleprogress.core.config.settings import reload_settings
from circleprogress.core.errors import SettingsError
from circleprogress.core.geometry import (
    ArcCommand, PointCommand, ProgressState, dot_visible, frames_to_target, run_until_settled,
)

app = typer.Typer(help="Circle Progress - anel de progresso circular animado")
console = Console()

state = {"settings": None}


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Modo verboso"),
    config: str = typer.Option("config/settings.yaml", "--config", "-c", help="Arquivo YAML de configuração"),
):
    """
    Circle Progress - simulação e visualização do anel
    """
    try:
        settings = reload_settings(config)
    except SettingsError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else settings.app.log_level)
    state["settings"] = settings
    if verbose:
        console.print("[bold yellow]Modo verboso ativado[/bold yellow]")


@app.command()
def simulate(
    progress: float = typer.Option(50.0, "--progress", "-p", help="Progresso alvo (0-100)"),
    width: int = typer.Option(None, help="Largura do widget em pixels"),
    height: int = typer.Option(None, help="Altura do widget em pixels"),
    max_frames: int = typer.Option(1000, help="Limite de frames"),
):
    """
    Mostra a animação frame a frame até assentar
    """
    ring = state["settings"].ring
    width = width or ring.size
    height = height or ring.size

    progress_state = ProgressState.from_progress(
        progress, ring_thickness=ring.thickness, step=ring.step, dot_inset=ring.dot_inset,
    )
    frames = run_until_settled(width, height, progress_state, max_frames=max_frames)

    table = Table(title=f"Animação até {progress_state.target_sweep:g}°")
    table.add_column("Frame", justify="right", style="cyan")
    table.add_column("Arco (°)", justify="right")
    table.add_column("Ponto (x, y)", justify="right")
    table.add_column("Continua", justify="center")

    for index, frame in enumerate(frames, start=1):
        arc = next(c for c in frame.commands if isinstance(c, ArcCommand))
        dot = next((c for c in frame.commands if isinstance(c, PointCommand)), None)
        dot_text = f"({dot.x:.1f}, {dot.y:.1f})" if dot else "-"
        table.add_row(
            str(index),
            f"{arc.sweep_angle:g}",
            dot_text,
            "✅" if frame.needs_another_frame else "⏹",
        )

    console.print(table)
    last = frames[-1]
    console.print(Panel.fit(
        f"Centro: {last.center}  Raio: {last.radius}\n"
        f"Frames: {len(frames)} (esperado {frames_to_target(progress_state.target_sweep, ring.step)})\n"
        f"Ponto visível: {'sim' if dot_visible(progress_state.target_sweep) else 'não'}",
        border_style="blue",
    ))


@app.command()
def show(
    progress: float = typer.Option(None, "--progress", "-p", help="Progresso inicial (0-100)"),
):
    """
    Abre uma janela com o anel de progresso
    """
    from PyQt6.QtWidgets import QApplication
    from circleprogress.ui.widgets.progress import CircleProgress

    settings = state["settings"]
    if progress is None:
        progress = settings.ring.initial_progress

    qt_app = QApplication.instance() or QApplication(sys.argv)
    qt_app.setApplicationName(settings.app.name)

    widget = CircleProgress(progress, ring=settings.ring, colors=settings.colors)
    widget.setWindowTitle(f"{settings.app.name} - {progress:g}%")
    widget.resize(settings.ring.size, settings.ring.size)
    widget.animation_finished.connect(
        lambda: logging.getLogger('CircleProgress.CLI').info("Animação concluída")
    )
    widget.show()

    raise typer.Exit(qt_app.exec())


if __name__ == "__main__":
    app()
