from dataclasses import dataclass


@dataclass
class AppConfig:
    """Tunables for the window app and the headless runner."""

    step_delay_ms: int = 2
    # Repaint the board every N solver steps
    render_every: int = 1
    cell_size: int = 50
    window_name: str = "Sudoku Solver"
    # BGR colours
    given_color: tuple = (255, 0, 0)
    solved_color: tuple = (0, 150, 0)
    current_color: tuple = (120, 220, 255)
    log_level: str = "INFO"
    headless: bool = False

    def __post_init__(self):
        if self.step_delay_ms < 0:
            raise ValueError("step_delay_ms must be >= 0")
        if self.render_every < 1:
            raise ValueError("render_every must be >= 1")
        if self.cell_size < 20:
            raise ValueError("cell_size must be >= 20")

    @property
    def step_delay(self):
        return self.step_delay_ms / 1000.0

    @classmethod
    def from_args(cls, args):
        delay = args.delay
        if delay is None:
            # Terminal runs go flat out unless asked to slow down
            delay = 0 if args.headless else cls.step_delay_ms
        return cls(
            step_delay_ms=delay,
            render_every=args.render_every,
            cell_size=args.cell_size,
            log_level=args.log_level.upper(),
            headless=args.headless,
        )
