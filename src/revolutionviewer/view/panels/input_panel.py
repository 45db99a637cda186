"""
Input Control Panel
Two formula fields, the interval bounds and the Plot/Clear actions.
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton, QLabel
)
from PySide6.QtCore import Signal, Qt

from revolutionviewer.model.state import PlotInputs


class InputPanel(QWidget):
    regenerate_requested = Signal()
    clear_requested = Signal()

    def __init__(self, inputs: PlotInputs) -> None:
        super().__init__()
        self.inputs = inputs

        layout = QVBoxLayout(self)

        # --- Functions ---
        grp_functions = QGroupBox("Functions")
        form_functions = QFormLayout(grp_functions)

        self.edit_formula_1 = QLineEdit()
        self.edit_formula_1.setPlaceholderText("e.g. x^2, sqrt(x), 2sin(x)")
        self.edit_formula_1.textChanged.connect(self.on_formula_1_changed)
        form_functions.addRow("f(x) =", self.edit_formula_1)

        self.edit_formula_2 = QLineEdit()
        self.edit_formula_2.setPlaceholderText("optional")
        self.edit_formula_2.textChanged.connect(self.on_formula_2_changed)
        form_functions.addRow("g(x) =", self.edit_formula_2)

        layout.addWidget(grp_functions)

        # --- Interval ---
        grp_interval = QGroupBox("Interval")
        form_interval = QFormLayout(grp_interval)

        self.edit_limit_a = QLineEdit()
        self.edit_limit_a.setPlaceholderText("-1")
        self.edit_limit_a.textChanged.connect(self.on_limit_a_changed)
        form_interval.addRow("A:", self.edit_limit_a)

        self.edit_limit_b = QLineEdit()
        self.edit_limit_b.setPlaceholderText("3")
        self.edit_limit_b.textChanged.connect(self.on_limit_b_changed)
        form_interval.addRow("B:", self.edit_limit_b)

        layout.addWidget(grp_interval)

        # Return in any field plots
        for edit in (self.edit_formula_1, self.edit_formula_2, self.edit_limit_a, self.edit_limit_b):
            edit.returnPressed.connect(self.regenerate_requested.emit)

        # --- Actions ---
        btn_row = QHBoxLayout()
        self.btn_plot = QPushButton("Plot")
        self.btn_plot.setMinimumHeight(36)
        self.btn_plot.clicked.connect(self.regenerate_requested.emit)
        btn_row.addWidget(self.btn_plot)

        self.btn_clear = QPushButton("Clear")
        self.btn_clear.setMinimumHeight(36)
        self.btn_clear.clicked.connect(self.clear_requested.emit)
        btn_row.addWidget(self.btn_clear)
        layout.addLayout(btn_row)

        hint = QLabel("Decimal comma or point. Empty bounds fall back to A = -1, B = 3.")
        hint.setWordWrap(True)
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet("color: gray;")
        layout.addWidget(hint)

        self.load_from_state()

    def load_from_state(self) -> None:
        """Push the model's text into the fields without echoing it back."""
        for edit, text in (
            (self.edit_formula_1, self.inputs.formula_1),
            (self.edit_formula_2, self.inputs.formula_2),
            (self.edit_limit_a, self.inputs.limit_a),
            (self.edit_limit_b, self.inputs.limit_b),
        ):
            edit.blockSignals(True)
            edit.setText(text)
            edit.blockSignals(False)

    # --- SLOTS ---

    def on_formula_1_changed(self, text: str) -> None:
        self.inputs.formula_1 = text

    def on_formula_2_changed(self, text: str) -> None:
        self.inputs.formula_2 = text

    def on_limit_a_changed(self, text: str) -> None:
        self.inputs.limit_a = text

    def on_limit_b_changed(self, text: str) -> None:
        self.inputs.limit_b = text
