# Constants definition

# Canvas (4K wallpaper)
DEFAULT_CANVAS_WIDTH = 3840
DEFAULT_CANVAS_HEIGHT = 2160

# Background colors per theme (RGBA)
BACKGROUND_COLORS = {
    "dark": (13, 17, 23, 255),
    "light": (255, 255, 255, 255),
}

# Faux code block defaults
DEFAULT_THEME = "dark"
DEFAULT_FONT_SIZE = 4  # Stroke thickness and per-character advance
DEFAULT_LINE_SPACING = 8  # Gap between lines
DEFAULT_LINE_CAP = "round"
DEFAULT_MARGIN = 10  # Space between block edges and code
DEFAULT_LINE_NUMBER_OFFSET = -3  # Line number offset from margin

# Truncation policy applied before tokenizing
DEFAULT_MAX_LINES_PER_FILE = 30
DEFAULT_MAX_LINE_WIDTH = 120

# Layout
DEFAULT_LAYOUT_MODE = "centered"
DEFAULT_GRID_COLUMNS = "auto"

THEMES = ("light", "dark")
LINE_CAPS = ("square", "round")
LAYOUT_MODES = ("centered", "edge-to-edge")

TAB_SPACES = "    "  # Tab replacement (4 spaces)

# File discovery
DEFAULT_FILE_COUNT = 5
SOURCE_EXTENSIONS = (
    ".js", ".jsx", ".ts", ".tsx", ".py", ".java",
    ".cpp", ".c", ".rs", ".go", ".rb",
)
SKIP_DIRS = frozenset({
    "node_modules", ".git", "dist", "build", "coverage",
    ".next", "__pycache__", "venv", "env",
})
