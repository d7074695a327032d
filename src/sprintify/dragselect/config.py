from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionConfig:
    """Tunables for drag selection and edge auto-scroll.

    Distances are in viewport pixels.

    Args:
        drag_threshold: Pointer travel from the press before a click becomes a drag
        edge_margin: Distance from a viewport edge at which auto-scroll kicks in
        max_scroll_step: Largest scroll delta issued per frame
        frame_interval_ms: Delay between auto-scroll frames
        cancel_key: Key name that cancels the current selection
    """
    drag_threshold: float = 10.0
    edge_margin: float = 20.0
    max_scroll_step: float = 15.0
    frame_interval_ms: int = 16
    cancel_key: str = "Escape"

    def __post_init__(self) -> None:
        if self.drag_threshold <= 0:
            raise ValueError(f"drag_threshold must be positive, got {self.drag_threshold}")
        if self.edge_margin < 0:
            raise ValueError(f"edge_margin must not be negative, got {self.edge_margin}")
        if self.max_scroll_step < 0:
            raise ValueError(f"max_scroll_step must not be negative, got {self.max_scroll_step}")
        if self.frame_interval_ms <= 0:
            raise ValueError(f"frame_interval_ms must be positive, got {self.frame_interval_ms}")
