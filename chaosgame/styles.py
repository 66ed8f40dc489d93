from matplotlib import colormaps

from chaosgame.plot_utils import rgba_to_rgb

STYLESHEET = """
 * {{
    color: rgb({text});
    background-color: rgb({background});
    border: 1px solid rgb({border});
}}
QGraphicsView {{
    border: none;
}}
QPushButton:hover {{
    background-color: rgb({border});
    color: rgb({background});
}}
QPushButton:disabled {{
    color: rgb({input});
}}
QLineEdit, QComboBox {{
    background-color: rgb({input});
}}
QGroupBox {{
    border: 1px solid rgb({text});
    border-radius: 5px;
    font-weight: bold;
    margin-top: 10px;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    subcontrol-position: top right;
    padding: 0 5px;
}}
QLabel {{
    border: none;
}}
"""


def interface_colors(colormap_name):
    """Pick interface colors from the low end of the canvas colormap."""
    colormap = colormaps[colormap_name]
    return {
        "background": rgba_to_rgb(colormap(0.0)),
        "input": rgba_to_rgb(colormap(0.1)),
        "text": rgba_to_rgb(colormap(0.6)),
        "border": rgba_to_rgb(colormap(0.5)),
    }


def get_stylesheet(colormap_name):
    colors = interface_colors(colormap_name)
    return STYLESHEET.format(**{name: ", ".join(str(c) for c in rgb) for name, rgb in colors.items()})
