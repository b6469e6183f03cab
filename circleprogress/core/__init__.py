from .geometry import (
    ArcCommand,
    CircleCommand,
    Frame,
    PointCommand,
    ProgressState,
    compute_frame,
    dot_visible,
    frames_to_target,
    run_until_settled,
    set_progress,
    sweep_for_progress,
)
