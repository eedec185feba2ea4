"""Load and validate the YAML message catalog used by the console shell."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

MENU_NAMES = ("main", "contacts")

REQUIRED_MESSAGES = (
    "app_title",
    "app_welcome",
    "enter_choice",
    "invalid_option",
    "goodbye",
    "dial_title",
    "enter_phone_number",
    "calling_contact",
    "dialing",
    "call_connected",
    "call_ended",
    "call_history_title",
    "no_dialed_numbers",
    "error",
    "unexpected_error",
    "warning",
)


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def get_messages_path() -> Path:
    """Return path to the message catalog (SPHONE_MESSAGES_PATH env or messages/sphone.yaml)."""
    default = _repo_root() / "messages" / "sphone.yaml"
    path = os.environ.get("SPHONE_MESSAGES_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


@dataclass(frozen=True)
class MenuOption:
    key: str
    label: str
    action: str


@dataclass(frozen=True)
class Menu:
    title: str
    options: tuple[MenuOption, ...]

    def action_for(self, choice: str | None) -> str | None:
        """Return the action bound to the typed key, or None."""
        key = (choice or "").strip()
        for option in self.options:
            if option.key == key:
                return option.action
        return None

    def lines(self) -> list[str]:
        return [self.title] + [f"{o.key}. {o.label}" for o in self.options]

    def keys_text(self) -> str:
        keys = [o.key for o in self.options]
        if len(keys) <= 1:
            return "".join(keys)
        return ", ".join(keys[:-1]) + f", or {keys[-1]}"


@dataclass(frozen=True)
class Catalog:
    """Menus and message templates. Passed into the presentation layer."""

    menus: dict[str, Menu]
    messages: dict[str, str]

    def text(self, key: str, **values) -> str:
        """Format the template for key. Missing keys fall back to the key itself."""
        template = self.messages.get(key, key)
        if not values:
            return template
        return template.format(**values)

    def menu(self, name: str) -> Menu:
        return self.menus[name]


def _parse_menu(name: str, raw) -> Menu:
    if not isinstance(raw, dict):
        raise ValueError(f"Menu '{name}' must be a dict")
    options_raw = raw.get("options")
    if not options_raw:
        raise ValueError(f"Menu '{name}' must have a non-empty 'options' list")
    options = []
    seen: set[str] = set()
    for item in options_raw:
        if not isinstance(item, dict):
            raise ValueError(f"Menu '{name}' options must be dicts")
        key = str(item.get("key", "")).strip()
        action = str(item.get("action", "")).strip()
        if not key or not action:
            raise ValueError(f"Menu '{name}' option needs 'key' and 'action'")
        if key in seen:
            raise ValueError(f"Menu '{name}' has duplicate key '{key}'")
        seen.add(key)
        options.append(MenuOption(key=key, label=str(item.get("label", action)), action=action))
    return Menu(title=str(raw.get("title", "")), options=tuple(options))


def load_catalog(path: Path | None = None) -> Catalog:
    """Load catalog YAML and return a Catalog. Validates menus and required messages."""
    if path is None:
        path = get_messages_path()
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValueError("Message catalog YAML must be a dict")
    menus_raw = data.get("menus") or {}
    if not isinstance(menus_raw, dict):
        raise ValueError("'menus' must be a dict")
    for name in MENU_NAMES:
        if name not in menus_raw:
            raise ValueError(f"Message catalog must define menu '{name}'")
    menus = {name: _parse_menu(name, menu) for name, menu in menus_raw.items()}
    messages = data.get("messages") or {}
    if not isinstance(messages, dict):
        raise ValueError("'messages' must be a dict")
    missing = [key for key in REQUIRED_MESSAGES if key not in messages]
    if missing:
        raise ValueError(f"Message catalog is missing: {', '.join(missing)}")
    return Catalog(menus=menus, messages={str(k): str(v) for k, v in messages.items()})
