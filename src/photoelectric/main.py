"""
Application Initialization
==========================
This module constructs the Model / Controller / View objects and starts the
Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the simulation model (SimulationState).
2. Instantiates the Main Window (View), which owns the AnimationController.
3. Passes the Model into the View so they can communicate.
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from photoelectric.logging_config import setup_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="photoelectric", description="Photoelectric effect simulator")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random source")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # Qt is loaded only after argument parsing
    import numpy as np
    from photoelectric.app import create_app
    from photoelectric.model.state import SimulationState
    from photoelectric.view.main_window import MainWindow

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = SimulationState(rng=np.random.default_rng(args.seed))

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
