import sys
import logging
from dataclasses import replace

import numpy as np
from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QVBoxLayout, QWidget, QPushButton, QHBoxLayout, QGridLayout,
    QGraphicsView, QGraphicsScene, QFileDialog, QLineEdit, QLabel, QGroupBox, QMessageBox, QComboBox
)
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QPixmap, QImage
from matplotlib import colormaps

from chaosgame.cli import parse_args
from chaosgame.exceptions import ChaosGameError
from chaosgame.file_handler import read_from_file, write_to_file
from chaosgame.game import ChaosGame, GameState
from chaosgame.plot_utils import colorize, render_description, save_canvas_image
from chaosgame.presets import get_preset
from chaosgame.settings import default_settings, load_settings
from chaosgame.styles import get_stylesheet
from chaosgame.transforms import JULIA, julia_pair
from chaosgame.vectors import Complex, Vector2D

# Setup logging
LOG_FILE = "log.txt"

logger = logging.getLogger()
logger.setLevel(logging.INFO)
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)
console_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
console_handler.setFormatter(console_formatter)
file_handler = logging.FileHandler(LOG_FILE)
file_handler.setLevel(logging.INFO)
file_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
file_handler.setFormatter(file_formatter)
logger.addHandler(console_handler)
logger.addHandler(file_handler)


class ChaosGameApp(QMainWindow):
    INPUT_WIDTH = 70
    CONTROLLS_WIDTH = INPUT_WIDTH * 4
    PRESET_BUTTONS = [("Julia Set", "julia"), ("Sierpinski", "sierpinski"), ("Barnsley", "barnsley")]

    def __init__(self, settings, description):
        super().__init__()
        self.settings = settings
        self.colormap_name = settings.colormap
        self.game = ChaosGame(
            description, *settings.resolution, seed=settings.seed, batch_size=settings.steps_per_tick
        )

        self.timer = QTimer(self)
        self.timer.setInterval(settings.tick_interval)
        self.timer.timeout.connect(self.on_tick)

        self.init_ui()
        self.update_description_inputs()
        self.display_canvas()

    def init_ui(self):
        self.setWindowTitle("Chaos Game")
        self.setStyleSheet(get_stylesheet(self.colormap_name))

        main_layout = QHBoxLayout()

        self.graphics_view = QGraphicsView()
        self.graphics_scene = QGraphicsScene()
        self.graphics_view.setScene(self.graphics_scene)
        main_layout.addWidget(self.graphics_view)

        controls_layout = QVBoxLayout()
        controls_layout.addWidget(self.create_description_group(), alignment=Qt.AlignTop)
        controls_layout.addWidget(self.create_run_group(), alignment=Qt.AlignTop)
        controls_layout.addWidget(self.create_bounds_group(), alignment=Qt.AlignTop)
        controls_layout.addWidget(self.create_julia_group(), alignment=Qt.AlignTop)
        controls_layout.addWidget(self.create_settings_group(), alignment=Qt.AlignTop)
        controls_layout.addStretch()
        main_layout.addLayout(controls_layout)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        self.graphics_view.setFocus()
        self.graphics_view.keyPressEvent = self.on_key

    def create_description_group(self):
        """Preset buttons and description file controls."""
        group = QGroupBox("Description")
        group.setMaximumWidth(self.CONTROLLS_WIDTH)
        layout = QVBoxLayout()

        preset_layout = QHBoxLayout()
        for label, name in self.PRESET_BUTTONS:
            preset_layout.addWidget(
                self.create_button(label, f"Reset with the {label} description", lambda _, n=name: self.load_preset(n))
            )
        layout.addLayout(preset_layout)

        file_layout = QHBoxLayout()
        file_layout.addWidget(self.create_button("Read File", "Load a description file", self.read_description))
        file_layout.addWidget(self.create_button("Write File", "Save the description to a file", self.write_description))
        layout.addLayout(file_layout)

        group.setLayout(layout)
        return group

    def create_run_group(self):
        group = QGroupBox("Run")
        group.setMaximumWidth(self.CONTROLLS_WIDTH)
        layout = QGridLayout()

        iterations_label = QLabel("Iterations:")
        iterations_label.setAlignment(Qt.AlignRight)
        self.iterations_field = QLineEdit(str(self.settings.iterations))
        self.iterations_field.setToolTip("Number of chaos game steps")
        self.iterations_field.returnPressed.connect(self.run_game)
        layout.addWidget(iterations_label, 0, 0)
        layout.addWidget(self.iterations_field, 0, 1, 1, 2)

        layout.addWidget(self.create_button("Run", "Run the chaos game (Shortcut: Space)", self.run_game), 1, 0)
        layout.addWidget(self.create_button("Stop", "Stop a running game (Shortcut: Space)", self.stop_game), 1, 1)
        layout.addWidget(self.create_button("Clear", "Clear the canvas (Shortcut: C)", self.clear_canvas), 1, 2)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label, 2, 0, 1, 3)

        group.setLayout(layout)
        return group

    def create_bounds_group(self):
        group = QGroupBox("Bounds")
        group.setToolTip("Region of the plane shown on the canvas.")
        group.setMaximumWidth(self.CONTROLLS_WIDTH)
        layout = QGridLayout()

        self.min_x_field, self.min_y_field = self.create_pair_row(layout, 0, "Min:", "x", "y")
        self.max_x_field, self.max_y_field = self.create_pair_row(layout, 1, "Max:", "x", "y")
        for field in (self.min_x_field, self.min_y_field, self.max_x_field, self.max_y_field):
            field.returnPressed.connect(self.update_bounds)

        group.setLayout(layout)
        return group

    def create_julia_group(self):
        self.julia_group = QGroupBox("Julia constant")
        self.julia_group.setToolTip("The constant c in z -> ±sqrt(z - c).")
        self.julia_group.setMaximumWidth(self.CONTROLLS_WIDTH)
        layout = QGridLayout()

        self.real_field, self.imaginary_field = self.create_pair_row(layout, 0, "c:", "real part", "imaginary part")
        self.real_field.returnPressed.connect(self.update_julia_constant)
        self.imaginary_field.returnPressed.connect(self.update_julia_constant)

        self.julia_group.setLayout(layout)
        return self.julia_group

    def create_settings_group(self):
        group = QGroupBox("Settings")
        group.setMaximumWidth(self.CONTROLLS_WIDTH)
        layout = QVBoxLayout()

        colormap_layout = QHBoxLayout()
        colormap_label = QLabel("Colors:")
        colormap_label.setAlignment(Qt.AlignRight)
        colormap_dropdown = QComboBox()
        colormap_dropdown.setToolTip("Select a colormap for the canvas")
        colormap_dropdown.addItems(sorted(colormaps.keys()))
        colormap_dropdown.setCurrentText(self.colormap_name)
        colormap_dropdown.currentTextChanged.connect(self.update_colormap)
        colormap_layout.addWidget(colormap_label)
        colormap_layout.addWidget(colormap_dropdown)
        layout.addLayout(colormap_layout)

        layout.addWidget(self.create_button("Export", "Export the canvas as an image", self.export_canvas))

        group.setLayout(layout)
        return group

    def create_pair_row(self, layout, row, label, first_tip, second_tip):
        row_label = QLabel(label)
        row_label.setAlignment(Qt.AlignRight)
        first = QLineEdit()
        first.setFixedWidth(self.INPUT_WIDTH)
        first.setToolTip(first_tip)
        second = QLineEdit()
        second.setFixedWidth(self.INPUT_WIDTH)
        second.setToolTip(second_tip)
        layout.addWidget(row_label, row, 0)
        layout.addWidget(first, row, 1)
        layout.addWidget(second, row, 2)
        return first, second

    def create_button(self, label, tooltip, callback):
        """Create a reusable button."""
        button = QPushButton(label)
        button.setToolTip(tooltip)
        button.clicked.connect(callback)
        return button

    def show_error(self, title, error):
        logging.warning(f"{title}: {error}")
        QMessageBox.warning(self, title, str(error))

    def reset_game(self, description):
        """Stop any run and start over with a new description on a cleared canvas."""
        self.stop_game()
        self.game.new_game(description, self.settings.resolution)
        self.update_description_inputs()
        self.display_canvas()

    def load_preset(self, name):
        logging.info(f"Loading preset {name}...")
        self.reset_game(get_preset(name))

    def read_description(self):
        options = QFileDialog.Options()
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Read Chaos Game Description",
            self.settings.descriptions_dir,
            "Text Files (*.txt);;All Files (*)",
            options=options,
        )
        if not file_path:
            return
        try:
            description = read_from_file(file_path)
        except ChaosGameError as e:
            self.show_error("Could not read description", e)
            return
        self.reset_game(description)

    def write_description(self):
        options = QFileDialog.Options()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Write Chaos Game Description",
            self.settings.descriptions_dir,
            "Text Files (*.txt);;All Files (*)",
            options=options,
        )
        if not file_path:
            return
        if not file_path.endswith(".txt"):
            file_path += ".txt"
        try:
            write_to_file(self.game.description, file_path)
        except ChaosGameError as e:
            self.show_error("Could not write description", e)

    def run_game(self):
        try:
            iterations = int(self.iterations_field.text())
            if iterations < 0:
                raise ValueError(iterations)
        except ValueError:
            self.show_error("Invalid Input", "Iterations must be a non-negative whole number.")
            return

        self.timer.stop()
        self.game.clear_canvas()
        self.game.reset_current_point()
        self.game.request_steps(iterations)
        self.timer.start()

    def stop_game(self):
        if self.game.state is GameState.RUNNING:
            self.game.stop()
        self.timer.stop()
        self.update_status()

    def clear_canvas(self):
        logging.info("Clearing canvas...")
        self.game.clear_canvas()
        self.display_canvas()

    def on_tick(self):
        """Advance the game by one batch and repaint."""
        running = self.game.run_steps()
        self.display_canvas()
        if not running:
            self.timer.stop()

    def update_status(self):
        state = self.game.state
        if state is GameState.RUNNING:
            self.status_label.setText(f"Running, {self.game.remaining_steps} steps left")
        else:
            self.status_label.setText(state.value.capitalize())

    def update_bounds(self):
        try:
            min_coords = Vector2D(float(self.min_x_field.text()), float(self.min_y_field.text()))
            max_coords = Vector2D(float(self.max_x_field.text()), float(self.max_y_field.text()))
        except ValueError:
            logging.warning("Invalid input for bounds. Please enter numeric values.")
            return
        try:
            description = self.game.description.with_bounds(min_coords, max_coords)
        except ChaosGameError as e:
            self.show_error("Invalid bounds", e)
            return
        logging.info(f"Updated bounds to: {min_coords}, {max_coords}")
        self.reset_game(description)

    def update_julia_constant(self):
        try:
            real = float(self.real_field.text())
            imaginary = float(self.imaginary_field.text())
        except ValueError:
            logging.warning("Invalid input for the Julia constant. Please enter numeric values.")
            return
        constant = julia_pair(Complex(real, imaginary))
        logging.info(f"Updated Julia constant to: {real} + {imaginary}i")
        self.reset_game(self.game.description.with_transforms(constant))

    def update_description_inputs(self):
        """Update the input fields to reflect the current description."""
        description = self.game.description
        fields = [self.min_x_field, self.min_y_field, self.max_x_field, self.max_y_field]
        values = [description.min_coords.x0, description.min_coords.x1, description.max_coords.x0, description.max_coords.x1]
        for field, value in zip(fields, values):
            field.setText(str(value))
            field.setCursorPosition(0)

        is_julia = description.kind == JULIA
        self.julia_group.setEnabled(is_julia)
        if is_julia:
            constant = description.transforms[0].point
            self.real_field.setText(str(constant.real))
            self.imaginary_field.setText(str(constant.imaginary))

    def update_colormap(self, colormap_name):
        logging.info(f"Changing colormap to: {colormap_name}")
        self.colormap_name = colormap_name
        self.setStyleSheet(get_stylesheet(colormap_name))
        self.display_canvas()

    def display_canvas(self):
        """Convert a canvas snapshot to an image with the colormap and display it."""
        colored = np.ascontiguousarray(colorize(self.game.current_canvas_snapshot(), self.colormap_name))
        height, width, _ = colored.shape
        q_image = QImage(colored.data, width, height, 3 * width, QImage.Format_RGB888)

        pixmap = QPixmap.fromImage(q_image)
        self.graphics_scene.clear()
        self.graphics_scene.addPixmap(pixmap)
        self.update_status()

    def export_canvas(self):
        options = QFileDialog.Options()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Chaos Game Image",
            self.settings.export_dir,
            "PNG Files (*.png);;All Files (*)",
            options=options,
        )
        if not file_path:
            return
        if not file_path.endswith(".png"):
            file_path += ".png"
        try:
            save_canvas_image(self.game.current_canvas_snapshot(), file_path, self.colormap_name)
        except OSError as e:
            self.show_error("Could not export image", e)

    def on_key(self, event):
        """Handle key press events."""
        if event.key() == Qt.Key_Escape:
            self.close()
        elif event.key() == Qt.Key_Space:
            if self.game.state is GameState.RUNNING:
                self.stop_game()
            else:
                self.run_game()
        elif event.key() == Qt.Key_C:
            self.clear_canvas()
        elif event.key() == Qt.Key_F11:
            if self.isFullScreen():
                self.showNormal()
            else:
                self.showFullScreen()


def main():
    args = parse_args()

    settings = load_settings(args.config) if args.config else default_settings
    if args.iterations is not None:
        settings = replace(settings, iterations=args.iterations)
    if args.seed is not None:
        settings = replace(settings, seed=args.seed)

    try:
        description = read_from_file(args.load) if args.load else get_preset(args.preset)
    except ChaosGameError as e:
        logging.error(f"Could not load description: {e}")
        sys.exit(1)

    if args.export:
        canvas_array = render_description(description, settings.iterations, settings.resolution, settings.seed)
        save_canvas_image(canvas_array, args.export, settings.colormap)
        return

    app = QApplication(sys.argv)
    main_window = ChaosGameApp(settings, description)
    main_window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
