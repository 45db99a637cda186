"""
Examples Panel
Table of bundled presets; clicking a row selects it.
"""
from typing import List, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
)
from PySide6.QtCore import Signal

from revolutionviewer.model.examples import ExamplePreset, load_examples


class ExamplesPanel(QWidget):
    # Emits the selected ExamplePreset
    example_selected = Signal(object)

    def __init__(self, presets: Optional[List[ExamplePreset]] = None) -> None:
        super().__init__()
        self.presets: List[ExamplePreset] = presets if presets is not None else load_examples()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Examples")
        grp_layout = QVBoxLayout(grp)

        self.table = QTableWidget(len(self.presets), 3)
        self.table.setHorizontalHeaderLabels(["Name", "f(x)", "[A, B]"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)

        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.Stretch)
        header.setSectionResizeMode(2, QHeaderView.ResizeToContents)

        for row, preset in enumerate(self.presets):
            self.table.setItem(row, 0, QTableWidgetItem(preset.label))
            self.table.setItem(row, 1, QTableWidgetItem(preset.formula))
            self.table.setItem(row, 2, QTableWidgetItem(f"[{preset.a}, {preset.b}]"))

        self.table.cellClicked.connect(self.on_cell_clicked)
        grp_layout.addWidget(self.table)
        layout.addWidget(grp)

    def on_cell_clicked(self, row: int, _column: int) -> None:
        if 0 <= row < len(self.presets):
            self.example_selected.emit(self.presets[row])
