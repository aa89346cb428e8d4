# src/fsindex/config.py

DEFAULT_EXTENSIONS = (".txt", ".json", ".md")

# Exact file names dropped by the extension filter
DEFAULT_BLACKLIST = (".DS_Store",)

TEXT_ENCODING = "utf-8"
JSON_INDENT = 2

DEFAULT_IGNORE_FILE = ".fsindexignore"

DEFAULT_IGNORE_PATTERNS = [
    ".git/",
    "node_modules/",
    "__pycache__/",
    ".venv/",
    "venv/",
]

# Rows shown in the CLI summary table
PREVIEW_ROWS = 10
