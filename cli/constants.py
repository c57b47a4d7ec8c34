"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["split", "restore", "clear", "exit", "help"]

SPLIT_OPTIONS = ["--size-limit", "--output-dir", "--compress"]
RESTORE_OPTIONS = ["--input-dir", "--output-dir", "--strict"]

STYLE = Style.from_dict(
    {
        "prompt": "#2AA198 bold",
        "command": "#0088ff bold",
    }
)

TEAL = "\033[38;2;42;161;152m"
GREEN = "\033[32m"
RESET = "\033[0m"

LOGO = f"""{TEAL}
  ___ _ _       ___      _ _ _   _
 | __(_) |___  / __|_ __| (_) |_| |_ ___ _ _
 | _|| | / -_) \\__ \\ '_ \\ | |  _|  _/ -_) '_|
 |_| |_|_\\___| |___/ .__/_|_|\\__|\\__\\___|_|
                   |_|
{RESET}"""

WELCOME_TITLE = "File Splitter - split large files into chunks and restore them"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "splitter> "

HELP_TEXT = """Available commands:
  split <file>... [options]            Split files into chunks
      -s, --size-limit BYTES           Maximum bytes per chunk (default from config, 104857600)
      -o, --output-dir DIR             Root directory for <file>_parts/ subdirectories
      -c, --compress                   Gzip-compress every chunk
  restore <manifest.json>... [options] Restore files from their split info
      -i, --input-dir DIR              Root directory holding the <file>_parts/ subdirectories
      -o, --output-dir DIR             Directory for the restored files
      --strict                         Fail on checksum mismatch instead of warning
  clear                                Clear screen and redisplay welcome message
  help                                 Show this help
  exit                                 Exit REPL

Each file's split info is saved as <output-dir>/<file>_parts/<file>.json.
Examples:
  split backup.tar -s 1048576 -o parts
  split video.mp4 notes.txt --compress
  restore parts/backup.tar_parts/backup.tar.json -i parts -o restored"""

DEFAULT_CONFIG_DIR = ".file-splitter"
