"""Tkinter GUI frontend for Life-like cellular automata."""

import sys
import tkinter as tk
from typing import Dict, Optional, Tuple

import numpy as np

from ..core.errors import SimulationSetupError
from ..core.simulation import Simulation, SimulationConfig, validate_config

DEAD_COLOR = "white"
ALIVE_COLOR = "black"


class TkinterGameOfLifeGUI:
    """Tkinter window that animates a simulation for tlength generations."""

    def __init__(self, master: tk.Tk, config: SimulationConfig, canvas_size: int = 600) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            config: Simulation configuration
            canvas_size: Edge length of the drawing area in pixels

        Raises:
            SimulationSetupError: If the configuration is invalid
        """
        self.master = master
        self.config = config
        self.canvas_size = canvas_size

        self.simulation = Simulation(config, renderer=self.render)
        self.cell_size = max(1, canvas_size // config.size)
        self.update_interval = int(config.delay * 1000)

        self.title = f"Simulation of the Game of Life: {self.simulation.engine.rule.notation}"
        self.master.title(self.title)
        self.master.configure(bg=DEAD_COLOR)

        # GUI state
        self.running = False
        self.completed = False
        self._after_id: Optional[str] = None

        # Canvas objects cache, keyed by (row, col)
        self.cell_objects: Dict[Tuple[int, int], int] = {}

        self.setup_ui()
        self.draw_grid(self.simulation.engine.cells)

    def setup_ui(self) -> None:
        """Set up the user interface."""
        tk.Label(self.master, text=self.title, bg=DEAD_COLOR, font=("Arial", 12, "bold")).pack(pady=(5, 0))

        self.canvas = tk.Canvas(
            self.master,
            width=self.cell_size * self.config.size,
            height=self.cell_size * self.config.size,
            bg=DEAD_COLOR,
            highlightthickness=1,
            highlightbackground=ALIVE_COLOR,
        )
        self.canvas.pack(padx=10, pady=5)

        self.time_label = tk.Label(
            self.master,
            text=f"Time: 0 / {self.config.tlength}",
            bg=DEAD_COLOR,
            font=("Arial", 9),
        )
        self.time_label.pack()

        self._create_legend()
        self._create_control_buttons()

    def _create_legend(self) -> None:
        """Create the cell state legend."""
        legend = tk.Frame(self.master, bg=DEAD_COLOR)
        legend.pack(pady=5)

        tk.Label(legend, text="Cell state:", bg=DEAD_COLOR, font=("Arial", 9)).pack(side=tk.LEFT, padx=3)
        for name, color in (("Dead", DEAD_COLOR), ("Alive", ALIVE_COLOR)):
            swatch = tk.Canvas(legend, width=12, height=12, bg=color, highlightthickness=1, highlightbackground="gray")
            swatch.pack(side=tk.LEFT, padx=(6, 2))
            tk.Label(legend, text=name, bg=DEAD_COLOR, font=("Arial", 9)).pack(side=tk.LEFT)

    def _create_control_buttons(self) -> None:
        """Create the main control buttons."""
        controls = tk.Frame(self.master, bg=DEAD_COLOR)
        controls.pack(pady=(0, 5))

        self.toggle_btn = tk.Button(controls, text="Pause", command=self.toggle_running, font=("Arial", 9))
        self.toggle_btn.pack(side=tk.LEFT, padx=3)

        self.quit_btn = tk.Button(controls, text="Quit", command=self.master.destroy, font=("Arial", 9))
        self.quit_btn.pack(side=tk.LEFT, padx=3)

    def draw_cell(self, row: int, col: int, alive: bool) -> None:
        """Draw or remove a single cell on the canvas."""
        cell_key = (row, col)

        if alive:
            if cell_key not in self.cell_objects:
                x1 = col * self.cell_size
                y1 = row * self.cell_size
                obj = self.canvas.create_rectangle(
                    x1, y1, x1 + self.cell_size, y1 + self.cell_size, fill=ALIVE_COLOR, outline=""
                )
                self.cell_objects[cell_key] = obj
        elif cell_key in self.cell_objects:
            self.canvas.delete(self.cell_objects.pop(cell_key))

    def draw_grid(self, cells: np.ndarray) -> None:
        """Bring the canvas in line with a cell array."""
        for (row, col), alive in np.ndenumerate(cells):
            self.draw_cell(row, col, bool(alive))

    def render(self, cells: np.ndarray, iteration: int, tlength: int, rule: str) -> None:
        """Draw one generation and its iteration counter."""
        self.draw_grid(cells)
        self.time_label.config(text=f"Time: {iteration} / {tlength}")

    def start(self) -> None:
        """Start stepping on the Tk timer."""
        self.running = True
        self.toggle_btn.config(text="Pause")
        self._schedule()

    def toggle_running(self) -> None:
        """Pause or resume the animation."""
        if self.completed:
            return

        if self.running:
            self.running = False
            self.toggle_btn.config(text="Resume")
            if self._after_id is not None:
                self.master.after_cancel(self._after_id)
                self._after_id = None
        else:
            self.start()

    def _schedule(self) -> None:
        self._after_id = self.master.after(self.update_interval, self.update_loop)

    def update_loop(self) -> None:
        """Advance one generation and schedule the next."""
        self._after_id = None
        if not self.running:
            return

        self.simulation.advance()

        if self.simulation.finished:
            self.running = False
            self.completed = True
            self.toggle_btn.config(state=tk.DISABLED)
            self.time_label.config(
                text=f"Time: {self.simulation.iteration} / {self.config.tlength} - "
                f"Simulation complete after specified time: {self.config.tlength}"
            )
            return

        self._schedule()


def main() -> int:
    """Main entry point for the Tkinter GUI."""
    from .cli import CLIGameOfLife, create_parser

    parser = create_parser()
    parser.description = "Animate Conway's Game of Life and its rule variants in a Tkinter window"
    args = parser.parse_args()

    if args.list_rules:
        CLIGameOfLife().list_rules()
        return 0

    config = SimulationConfig(
        size=args.size, tlength=args.tlength, prob=args.prob, rule=args.rule, seed=args.seed, delay=args.delay
    )

    try:
        validate_config(config)
    except SimulationSetupError as e:
        print(f"Error: {e}")
        return 1

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterGameOfLifeGUI(root, config)

    app.start()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
