"""Shared constants across the application"""


class StoreConstants:
    """Constants for word list storage"""

    # Suffixes accepted by import; anything else is rejected up front
    IMPORT_EXTENSIONS = frozenset([".csv", ".txt", ".tsv", ".list"])

    # Tombstone file for bundled lists the user deleted
    DELETED_LISTS_FILE = ".deleted_lists"

    # Temp suffix used for atomic writes
    TEMP_SUFFIX = ".tmp"

    ENCODING = "utf-8"

    # Characters not allowed in a list name (it becomes a file name)
    FORBIDDEN_NAME_CHARS = frozenset(["/", "\\", "\x00"])


class DrillConstants:
    """Bounds for the drill preferences"""

    MIN_INTERVAL = 0.0
    MAX_INTERVAL = 60.0

    MIN_WORDS_DISPLAYED = 1
    MAX_WORDS_DISPLAYED = 20

    # Interactive loop commands
    COMMAND_NEXT = ""
    COMMAND_BACK = "b"
    COMMAND_FORWARD = "f"
    COMMAND_KEEP = "k"
    COMMAND_LOCATE = "l"
    COMMAND_PAUSE = "p"
    COMMAND_QUIT = "q"


class TextConstants:
    """Constants for text processing"""

    # Binary signatures rejected by import
    BINARY_SIGNATURES = (
        b"%PDF-",  # PDF
        b"\x89PNG\r\n\x1a\n",  # PNG
        b"\xff\xd8\xff",  # JPEG
        b"GIF8",  # GIF
        b"PK\x03\x04",  # ZIP/OOXML
        b"\x1f\x8b\x08",  # GZIP
        b"MZ",  # Windows EXE/DLL
        b"\x7fELF",  # ELF
        b"OggS",  # OGG
        b"ID3",  # MP3 (ID3 tag)
    )

    TEXT_SAMPLE_SIZE = 4096

    # Leading byte order mark some editors write
    BOM = "\ufeff"
