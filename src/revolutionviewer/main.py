"""
Application Initialization
==========================
Parses the command line, sets up logging, builds the model and the main
window, and starts the Qt event loop.
"""
import argparse
import logging
import sys
from typing import List, Optional

import pyqtgraph as pg

from revolutionviewer.logging_config import level_from_name, setup_logging
from revolutionviewer.model.state import PlotInputs

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="revolutionviewer",
        description="Plot y = f(x) and its solids of revolution about the X and Y axes.",
    )
    parser.add_argument("--formula", default=None, help="first function of x (default: x^2)")
    parser.add_argument("--formula2", default=None, help="optional second function of x")
    parser.add_argument("-a", dest="limit_a", default=None, help="lower bound A (default: -1)")
    parser.add_argument("-b", dest="limit_b", default=None, help="upper bound B (default: 3)")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def inputs_from_args(args: argparse.Namespace) -> PlotInputs:
    """Initial field contents; options that were not given keep the defaults."""
    inputs = PlotInputs()
    if args.formula is not None:
        inputs.formula_1 = args.formula
    if args.formula2 is not None:
        inputs.formula_2 = args.formula2
    if args.limit_a is not None:
        inputs.limit_a = args.limit_a
    if args.limit_b is not None:
        inputs.limit_b = args.limit_b
    return inputs


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    try:
        level = level_from_name(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    setup_logging(level=level, log_file=args.log_file)

    # 2. Create the Qt Application
    # Imported late so --help works without a display
    from revolutionviewer.view.application import create_app
    from revolutionviewer.view.main_window import MainWindow

    pg.setConfigOptions(antialias=True, foreground='k')
    app = create_app()

    # 3. Initialize the Data Model
    inputs = inputs_from_args(args)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(inputs)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
