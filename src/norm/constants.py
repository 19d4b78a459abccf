# ===== SECTION: CONSTANTS =====
# Constants used throughout the norm codebase

# Every directive line starts with this prefix
DIRECTIVE_PREFIX = "-- !"

# Required first non-blank line of a norm file
SENTINEL = "-- !norm"

# Header defaults, used when no override directive is present
DEFAULT_OUTPUT_FILE = "db.py"
DEFAULT_PACKAGE = "db"
DEFAULT_DRIVER_LIB = "psycopg"
DEFAULT_DRIVER_NAME = "psycopg"

# Generated symbol suffixes
OUTPUT_CLASS_SUFFIX = "Output"
CURSOR_CLASS_SUFFIX = "Cursor"
SCAN_FUNCTION_SUFFIX = "_scan"
SQL_CONSTANT_SUFFIX = "_SQL"

# Prefix for locals holding scanned output values inside generated functions
OUTPUT_LOCAL_PREFIX = "_o_"

# Import entries that are emitted verbatim instead of as `import <entry>`
VERBATIM_IMPORT_PREFIXES = ("from ", "import ")

# Liveness query run right after connecting
PING_QUERY = "SELECT 1"

# Module-level names defined by the generated preamble; no command may
# generate a symbol with one of these names
PREAMBLE_NAMES = frozenset({
    "importlib",
    "closing",
    "dataclass",
    "Any",
    "List",
    "Optional",
    "Tuple",
    "DRIVER_NAME",
    "NormError",
    "NoRowsError",
    "ScanError",
    "_scan_row",
    "_ping",
    "open_connection",
    "close_connection",
})

# Names bound inside generated function bodies; inputs may not use them
GENERATED_LOCALS = frozenset({"conn", "_cur", "_row", "_res", "_ret"})
