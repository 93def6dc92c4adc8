"""Table navigation keybindings manager."""

from __future__ import annotations

from typing import Literal

TableAction = Literal[
    "pageForward",
    "pageBackward",
]

TableKeybindingsConfig = dict[TableAction, str | list[str]]

DEFAULT_TABLE_KEYBINDINGS: dict[TableAction, str | list[str]] = {
    "pageForward": "]]",
    "pageBackward": "[[",
}


class TableKeybindingsManager:
    """Manages the key sequences bound to table navigation."""

    def __init__(self, config: TableKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[TableAction, list[str]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: TableKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_TABLE_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: TableAction) -> bool:
        """Check if a complete key sequence is bound to *action*."""
        return data in self._action_to_keys.get(action, [])

    def get_keys(self, action: TableAction) -> list[str]:
        """Get key sequences bound to an action."""
        return self._action_to_keys.get(action, [])

    def hint(self, action: TableAction) -> str:
        """The key sequence shown to the user for *action*."""
        keys = self.get_keys(action)
        return keys[0] if keys else ""

    def set_config(self, config: TableKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


class KeySequenceBuffer:
    """Collects multi-key sequences with an optional numeric count prefix.

    ``feed`` returns ``(keys, count)`` once the buffered input equals one of
    the known sequences, ``None`` while it is still a prefix of one.  Input
    that can no longer match clears the buffer.
    """

    def __init__(self) -> None:
        self._count = ""
        self._keys = ""

    @property
    def pending(self) -> str:
        return self._count + self._keys

    def reset(self) -> None:
        self._count = ""
        self._keys = ""

    def feed(self, data: str, sequences: list[str]) -> tuple[str, int | None] | None:
        for ch in data:
            result = self._feed_char(ch, sequences)
            if result is not None:
                return result
        return None

    def _feed_char(
        self, ch: str, sequences: list[str]
    ) -> tuple[str, int | None] | None:
        if not self._keys and ch.isdigit() and (self._count or ch != "0"):
            self._count += ch
            return None

        candidate = self._keys + ch
        if candidate in sequences:
            count = int(self._count) if self._count else None
            self.reset()
            return (candidate, count)
        if any(seq.startswith(candidate) for seq in sequences):
            self._keys = candidate
            return None

        restart = bool(self._keys)
        self.reset()
        if restart:
            # The rejected key may still begin a new sequence.
            return self._feed_char(ch, sequences)
        return None


_global_table_keybindings: TableKeybindingsManager | None = None


def get_table_keybindings() -> TableKeybindingsManager:
    global _global_table_keybindings
    if _global_table_keybindings is None:
        _global_table_keybindings = TableKeybindingsManager()
    return _global_table_keybindings


def set_table_keybindings(manager: TableKeybindingsManager) -> None:
    global _global_table_keybindings
    _global_table_keybindings = manager
