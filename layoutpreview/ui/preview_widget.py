"""Tabbed Preview / HTML / CSS panel for a compiled layout."""

from __future__ import annotations

import logging
import shutil
import tempfile
import webbrowser
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtWebEngineWidgets import QWebEngineView

from ..core.compiler import compile_layout
from ..core.errors import LayoutError
from ..core.markup import strip_style_blocks
from ..core.models import CompiledLayout, Layout
from ..core.storage import HTML_FILENAME
from ..settings import Settings

logger = logging.getLogger(__name__)

APP_TITLE = "Layout Preview"
TAB_KEYS = ("preview", "html", "css")


def open_url(url: str) -> None:
    """Open a URL using the desktop services with a webbrowser fallback."""
    qurl = QtCore.QUrl(url)
    if qurl.isValid() and QtGui.QDesktopServices.openUrl(qurl):
        return
    webbrowser.open(url)


class LayoutPreviewWidget(QtWidgets.QWidget):
    copied = QtCore.pyqtSignal(str)

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None, code_font_size: int = 10) -> None:
        super().__init__(parent)
        self._compiled = CompiledLayout(html="", css="")
        self._preview_tmp: Optional[str] = None
        self._code_font_size = code_font_size

        self._build_ui()
        self._bind_events()

    # ------------------------------------------------------------------ UI --
    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        header_row = QtWidgets.QHBoxLayout()
        header_row.addWidget(QtWidgets.QLabel("<b>HTML/CSS Code</b>", self))
        header_row.addStretch(1)
        self.btn_open_preview = QtWidgets.QPushButton("Preview HTML", self)
        header_row.addWidget(self.btn_open_preview)
        layout.addLayout(header_row)

        self.tabs = QtWidgets.QTabWidget(self)
        self.tabs.setDocumentMode(True)

        self.preview = QWebEngineView(self.tabs)

        font = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(self._code_font_size)

        html_page, self.html_view, self.btn_copy_html = self._code_page("HTML Code", "Copy HTML", font)
        css_page, self.css_view, self.btn_copy_css = self._code_page("CSS Code", "Copy CSS", font)

        self.tabs.addTab(self.preview, "Preview")
        self.tabs.addTab(html_page, "HTML")
        self.tabs.addTab(css_page, "CSS")
        layout.addWidget(self.tabs, 1)

    def _code_page(
        self, heading: str, copy_label: str, font: QtGui.QFont
    ) -> tuple[QtWidgets.QWidget, QtWidgets.QPlainTextEdit, QtWidgets.QPushButton]:
        page = QtWidgets.QWidget(self.tabs)
        page_layout = QtWidgets.QVBoxLayout(page)
        page_layout.setContentsMargins(0, 6, 0, 0)

        row = QtWidgets.QHBoxLayout()
        row.addWidget(QtWidgets.QLabel(heading, page))
        row.addStretch(1)
        button = QtWidgets.QPushButton(copy_label, page)
        row.addWidget(button)
        page_layout.addLayout(row)

        view = QtWidgets.QPlainTextEdit(page)
        view.setReadOnly(True)
        view.setFont(font)
        view.setLineWrapMode(QtWidgets.QPlainTextEdit.LineWrapMode.WidgetWidth)
        page_layout.addWidget(view, 1)
        return page, view, button

    def _bind_events(self) -> None:
        self.btn_open_preview.clicked.connect(self.open_preview)
        self.btn_copy_html.clicked.connect(self.copy_html)
        self.btn_copy_css.clicked.connect(self.copy_css)

    # ------------------------------------------------------------- Content --
    @property
    def compiled(self) -> CompiledLayout:
        return self._compiled

    def set_layout(self, layout: Union[Layout, Mapping[str, Any]]) -> None:
        self._compiled = compile_layout(layout)
        self._refresh()

    def select_tab(self, key: str) -> None:
        if key in TAB_KEYS:
            self.tabs.setCurrentIndex(TAB_KEYS.index(key))

    def _refresh(self) -> None:
        self.preview.setHtml(strip_style_blocks(self._compiled.html))
        self.html_view.setPlainText(self._compiled.html)
        self.css_view.setPlainText(self._compiled.css)

    # ------------------------------------------------------------- Actions --
    def open_preview(self) -> None:
        if self._preview_tmp and Path(self._preview_tmp).is_dir():
            shutil.rmtree(self._preview_tmp, ignore_errors=True)
        self._preview_tmp = tempfile.mkdtemp(prefix="layoutpreview_")
        path = Path(self._preview_tmp) / HTML_FILENAME
        path.write_text(self._compiled.html, encoding="utf-8")
        logger.debug("Opening full preview from %s", path)
        open_url(QtCore.QUrl.fromLocalFile(str(path)).toString())

    def copy_html(self) -> None:
        self._copy(self._compiled.html, "HTML")

    def copy_css(self) -> None:
        self._copy(self._compiled.css, "CSS")

    def _copy(self, text: str, label: str) -> None:
        clipboard = QtGui.QGuiApplication.clipboard()
        if clipboard is None:
            logger.warning("No clipboard available; %s was not copied", label)
            return
        clipboard.setText(text)
        self.copied.emit(label)

    def cleanup(self) -> None:
        if self._preview_tmp and Path(self._preview_tmp).is_dir():
            shutil.rmtree(self._preview_tmp, ignore_errors=True)
        self._preview_tmp = None


class PreviewWindow(QtWidgets.QMainWindow):
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.setWindowTitle(APP_TITLE)
        self.resize(
            self.settings.get_int("window_width", 1200),
            self.settings.get_int("window_height", 800),
        )

        self.panel = LayoutPreviewWidget(
            self, code_font_size=self.settings.get_int("code_font_size", 10)
        )
        self.panel.select_tab(self.settings.get("default_tab", "preview"))
        self.setCentralWidget(self.panel)
        self.status = self.statusBar()

        self.panel.copied.connect(self._on_copied)

    def show_layout(self, layout: Union[Layout, Mapping[str, Any]], title: str = "") -> None:
        try:
            self.panel.set_layout(layout)
        except LayoutError as exc:
            logger.error("Failed to compile layout: %s", exc)
            QtWidgets.QMessageBox.warning(self, "Layout", f"Could not compile layout:\n{exc}")
            return
        if title:
            self.setWindowTitle(f"{title} - {APP_TITLE}")

    def _on_copied(self, label: str) -> None:
        if self.status is not None:
            self.status.showMessage(f"{label} copied to clipboard", 2500)

    def closeEvent(self, event: Optional[QtGui.QCloseEvent]) -> None:
        self.panel.cleanup()
        self.settings.set("window_width", str(self.width()))
        self.settings.set("window_height", str(self.height()))
        super().closeEvent(event)
