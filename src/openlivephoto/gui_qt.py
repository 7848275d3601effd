from __future__ import annotations
import os
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QLabel, QLineEdit, QPushButton,
    QFileDialog, QTableWidget, QTableWidgetItem, QGridLayout, QVBoxLayout,
    QMessageBox
)

from .errors import LivePhotoError
from .parser import Container, ContainerParser
from .recovery import ElementRecovery

APP_NAME = "OpenLivePhoto"
QSS = """
*{font-family: 'Segoe UI','Inter','Roboto'; font-size:10.5pt;}
QMainWindow{background:#0F1115;}
QWidget{color:#E6E9EF;background:#0F1115;}
QFrame#Card{background:#171A21;border:1px solid #232733;border-radius:12px;}
QLineEdit{background:#0B0D11;border:1px solid #2A3040;border-radius:6px;padding:6px;}
QPushButton{background:#232733;border:1px solid #2F3542;border-radius:8px;padding:8px 14px;}
QPushButton:disabled{opacity:.5;}
QPushButton#Primary{background:qlineargradient(x1:0,y1:0,x2:1,y2:0,stop:0 #22D3EE,stop:1 #3B82F6);border:none;color:white;font-weight:600;}
QHeaderView::section{background:#171A21;border:1px solid #232733;padding:6px;}
QTableWidget{gridline-color:#232733;selection-background-color:#3B82F6;}
"""

class Main(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setMinimumSize(820, 560)
        self._parser = ContainerParser()
        self._build_ui()
        self._wire()
        self._reset_state()

    def _build_ui(self):
        root = QWidget(self)
        self.setCentralWidget(root)
        outer = QVBoxLayout(root)
        outer.setContentsMargins(12,12,12,12)
        outer.setSpacing(10)

        io_card = QWidget(objectName="Card")
        io = QGridLayout(io_card)
        io.setContentsMargins(12,12,12,12)
        self.edSrc = QLineEdit()
        self.edSrc.setReadOnly(True)
        self.btnOpen = QPushButton("Open…", objectName="Primary")
        self.btnPhoto = QPushButton("Save photo…")
        self.btnVideo = QPushButton("Save video…")
        self.btnAll = QPushButton("Save all…")
        io.addWidget(QLabel("Live photo"), 0, 0)
        io.addWidget(self.edSrc, 0, 1, 1, 3)
        io.addWidget(self.btnOpen, 0, 4)
        io.addWidget(self.btnPhoto, 1, 2)
        io.addWidget(self.btnVideo, 1, 3)
        io.addWidget(self.btnAll, 1, 4)
        outer.addWidget(io_card)

        self.lblPreview = QLabel()
        self.lblPreview.setAlignment(Qt.AlignCenter)
        self.lblPreview.setMinimumHeight(260)
        outer.addWidget(self.lblPreview, 1)

        self.tbl = QTableWidget(0, 4)
        self.tbl.setHorizontalHeaderLabels(["type","start","end","length"])
        self.tbl.horizontalHeader().setStretchLastSection(True)
        outer.addWidget(self.tbl)

    def _wire(self):
        self.btnOpen.clicked.connect(self._pick_file)
        self.btnPhoto.clicked.connect(self._save_photo)
        self.btnVideo.clicked.connect(self._save_video)
        self.btnAll.clicked.connect(self._save_all)

    def _reset_state(self):
        self._container: Optional[Container] = None
        self.tbl.setRowCount(0)
        self.lblPreview.clear()
        self.lblPreview.setText("Open a live photo to split it")
        for b in (self.btnPhoto, self.btnVideo, self.btnAll):
            b.setEnabled(False)
        self.setWindowTitle(f"{APP_NAME} Ready")

    @Slot()
    def _pick_file(self):
        p, _ = QFileDialog.getOpenFileName(self, "Choose live photo", "", "Images (*.jpg *.jpeg *.png);;All files (*.*)")
        if p:
            self.open(p)

    def open(self, path: str):
        self._reset_state()
        self.edSrc.setText(path)
        try:
            c = self._parser.parse(path)
        except (LivePhotoError, OSError) as e:
            QMessageBox.critical(self, "Error", f"Cannot read {path}:\n{e}")
            return
        self._container = c
        for el in c:
            row = self.tbl.rowCount()
            self.tbl.insertRow(row)
            for col, v in enumerate((el.kind, el.start, el.end, el.length)):
                self.tbl.setItem(row, col, QTableWidgetItem(str(v)))
        self._show_preview(c)
        kinds = [k.category for k in c.kinds()]
        self.btnPhoto.setEnabled("image" in kinds)
        self.btnVideo.setEnabled("video" in kinds)
        self.btnAll.setEnabled(len(c) > 0)
        self.setWindowTitle(f"{APP_NAME} • {os.path.basename(path)}")

    def _show_preview(self, c: Container):
        still = next((el for el in c if el.kind.category == "image"), None)
        if still is None:
            self.lblPreview.setText("No still image")
            return
        with open(c.path, "rb") as f:
            f.seek(still.start)
            data = f.read(still.length)
        pix = QPixmap()
        if pix.loadFromData(data):
            self.lblPreview.setPixmap(pix.scaled(self.lblPreview.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation))
        else:
            self.lblPreview.setText("Preview unavailable")

    def _run(self, job):
        try:
            return job(ElementRecovery(self._container))
        except (LivePhotoError, OSError) as e:
            QMessageBox.critical(self, "Error", str(e))
            return None

    @Slot()
    def _save_photo(self):
        still = next((el for el in self._container if el.kind.category == "image"), None)
        if still is None:
            return
        stem = os.path.splitext(self._container.path)[0]
        p, _ = QFileDialog.getSaveFileName(self, "Save photo as", f"{stem}.{still.kind.name.lower()}")
        if p and self._run(lambda r: r.extract(still, p)):
            self.setWindowTitle(f"{APP_NAME} • Saved {os.path.basename(p)}")

    @Slot()
    def _save_video(self):
        stem = os.path.splitext(self._container.path)[0]
        p, _ = QFileDialog.getSaveFileName(self, "Save video as", f"{stem}.mp4", "Video (*.mp4)")
        if p and self._run(lambda r: r.extract_mp4(p)):
            self.setWindowTitle(f"{APP_NAME} • Saved {os.path.basename(p)}")

    @Slot()
    def _save_all(self):
        p, _ = QFileDialog.getSaveFileName(self, "Save all elements next to", self._container.path)
        if not p:
            return
        out = self._run(lambda r: r.extract_all(p))
        if out:
            self.setWindowTitle(f"{APP_NAME} • Saved {len(out)} file(s)")

def main() -> int:
    app = QApplication([])
    app.setStyleSheet(QSS)
    w = Main()
    w.show()
    return app.exec()
