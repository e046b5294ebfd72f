from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.compiler import compile_layout
from .core.errors import LayoutError
from .core.models import Layout
from .core.storage import export_layout, load_layout

logger = logging.getLogger("layoutpreview")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layoutpreview",
        description="Compile a layout description into HTML and CSS and preview it.",
    )
    parser.add_argument("layout", nargs="?", type=Path, help="Layout JSON file")
    parser.add_argument("--export", metavar="DIR", type=Path, help="Write index.html and style.css to DIR")
    parser.add_argument("--print", dest="print_kind", choices=("html", "css"), help="Print the compiled HTML or CSS")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _run_gui(layout: Layout, title: str) -> int:
    from PyQt6 import QtWidgets

    from .ui.preview_widget import PreviewWindow

    if sys.platform == "win32":
        try:
            import ctypes
            ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(
                "LayoutPreview.App")
        except (AttributeError, OSError):
            logger.debug("Could not set the Windows app user model id")

    app = QtWidgets.QApplication(sys.argv[:1])
    win = PreviewWindow()
    win.show_layout(layout, title)
    win.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        layout = load_layout(args.layout) if args.layout else Layout()
        if args.export or args.print_kind:
            compiled = compile_layout(layout)
            if args.export:
                export_layout(compiled, args.export)
            if args.print_kind:
                sys.stdout.write(getattr(compiled, args.print_kind))
            return 0
    except LayoutError as exc:
        logger.error("%s", exc)
        return 1

    title = args.layout.stem if args.layout else ""
    return _run_gui(layout, title)


if __name__ == "__main__":
    raise SystemExit(main())
