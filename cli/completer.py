"""Custom completer for the file splitter CLI with path autocompletion."""

from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS, RESTORE_OPTIONS, SPLIT_OPTIONS
from common.constants import CHUNKS_DIR_SUFFIX, MANIFEST_SUFFIX


class SplitterCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Option completion for 'split' and 'restore'
    - File completion from the working directory for 'split'
    - Split info (manifest) completion from <file>_parts/ directories for 'restore'
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        if command not in ("split", "restore"):
            return

        current_word = "" if is_typing_new_token else tokens[-1]

        if current_word.startswith("-"):
            options = SPLIT_OPTIONS if command == "split" else RESTORE_OPTIONS
            yield from self._complete_options(current_word, options)
            return

        already_typed = set(tokens[1:])
        if not is_typing_new_token:
            already_typed.discard(current_word)

        if command == "split":
            candidates = self._list_files()
            empty_display = "(no files found in current directory)"
        else:
            candidates = self._list_manifests()
            empty_display = "(no split info files found)"

        candidates = [c for c in candidates if c not in already_typed]
        if not candidates:
            yield Completion("", start_position=0, display=empty_display)
            return

        partial_lower = current_word.lower()
        for candidate in sorted(candidates):
            if candidate.lower().startswith(partial_lower):
                yield Completion(candidate, start_position=-len(current_word))

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_options(self, partial: str, options: list[str]) -> Iterable[Completion]:
        for option in options:
            if option.startswith(partial):
                yield Completion(option, start_position=-len(partial))

    def _list_files(self) -> list[str]:
        """Regular files in the working directory."""
        return [item.name for item in Path.cwd().iterdir() if item.is_file()]

    def _list_manifests(self) -> list[str]:
        """Manifests laid out as <name>_parts/<name>.json under the working directory."""
        manifests = []
        for parts_dir in Path.cwd().glob(f"*{CHUNKS_DIR_SUFFIX}"):
            if not parts_dir.is_dir():
                continue
            original_name = parts_dir.name[: -len(CHUNKS_DIR_SUFFIX)]
            manifest_path = parts_dir / f"{original_name}{MANIFEST_SUFFIX}"
            if manifest_path.is_file():
                manifests.append(f"{parts_dir.name}/{manifest_path.name}")
        return manifests
