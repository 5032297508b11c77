from __future__ import annotations

import random
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Footer, Header, Static

from .adapters import AutoTypeInput, BellSound, KeyboardInput, SilentSound
from .config import FRAME_WIDTH, SessionConfig
from .screens import CATCH_MARKER, CAUGHT_MARKER, TITLE
from .session import STOPPED, Session
from .words import CORPUS, build_pool

if TYPE_CHECKING:
    from .session import InputSource


THEMES: Dict[str, Dict[str, str]] = {
    "slate": {
        "screen_bg": "transparent",
        "card_bg": "#111827",
        "stats_bg": "#0f172a",
        "border": "#1f2937",
        "title": "#e5e7eb",
        "muted": "#64748b",
        "hint": "#93c5fd",
        "ok": "#a7f3d0",
        "bad": "#fca5a5",
        "active_ok": "#86efac",
        "active_fg": "#e5e7eb",
        "upcoming": "#cbd5e1",
        "stream": "#67e8f9",
        "remaining": "#fbbf24",
    },
    "ember": {
        "screen_bg": "transparent",
        "card_bg": "#1f140f",
        "stats_bg": "#21140e",
        "border": "#3b1d14",
        "title": "#fef3c7",
        "muted": "#d6a08a",
        "hint": "#fbbf24",
        "ok": "#fcd34d",
        "bad": "#f87171",
        "active_ok": "#fde68a",
        "active_fg": "#fde68a",
        "upcoming": "#f3e8e1",
        "stream": "#fdba74",
        "remaining": "#f97316",
    },
    "mint": {
        "screen_bg": "transparent",
        "card_bg": "#0b1f24",
        "stats_bg": "#0b1c22",
        "border": "#12323a",
        "title": "#d1fae5",
        "muted": "#7dd3c7",
        "hint": "#5eead4",
        "ok": "#a7f3d0",
        "bad": "#fb7185",
        "active_ok": "#5eead4",
        "active_fg": "#d1fae5",
        "upcoming": "#c7f9f1",
        "stream": "#99f6e4",
        "remaining": "#34d399",
    },
}


def build_palettes(extra: Dict[str, Dict[str, str]]) -> Dict[str, Dict[str, str]]:
    palettes = THEMES.copy()
    for name, colors in extra.items():
        palettes[name] = {**palettes["slate"], **colors}
    return palettes


def style_lines(lines: List[str], palette: Dict[str, str]) -> Text:
    text = Text()
    for i, line in enumerate(lines):
        if i:
            text.append("\n")
        append_line(text, line, palette)
    return text


def append_line(text: Text, line: str, palette: Dict[str, str]) -> None:
    if line.startswith(TITLE[:3]):
        text.append(line, style=f"bold {palette['title']}")
    elif line.startswith(CAUGHT_MARKER):
        text.append(line, style=f"bold {palette['ok']}")
    elif line.startswith(CATCH_MARKER):
        text.append(CATCH_MARKER, style=f"bold {palette['remaining']}")
        text.append(line[1:], style=f"bold {palette['active_fg']} underline")
    elif line.startswith("★"):
        text.append(line, style=f"bold {palette['active_ok']}")
    elif line.startswith("✗"):
        text.append(line, style=f"bold {palette['bad']}")
    elif line.startswith(("○", "◐")):
        text.append(line, style=palette["hint"])
    elif line.startswith("[") and "]" in line:
        # progress: [typed]remaining
        typed, _, remaining = line[1:].partition("]")
        text.append(f"[{typed}]", style=f"bold {palette['ok']}")
        text.append(remaining, style=palette["remaining"])
    elif len(line) == 1:
        text.append(line, style=palette["stream"])
    else:
        text.append(line, style=palette["upcoming"])


# ---------------------------
# UI widgets
# ---------------------------

class BoardView(Static):
    """Board, progress and feedback."""


class HelpBar(Static):
    """Help / controls."""


class WidgetRenderer:
    def __init__(self, app: "RacerApp") -> None:
        self.app = app
        self.lines: List[str] = []

    def clear(self) -> None:
        self.lines = []
        self.app.board_view.update("")

    def render(self, lines: List[str]) -> None:
        _, height = self.get_dimensions()
        # short terminals: drop spacer lines before cutting content
        if height and len(lines) > height:
            lines = [line for line in lines if line]
        self.lines = list(lines)
        self.app.board_view.update(style_lines(self.lines, self.app.palette))

    def get_dimensions(self) -> Tuple[int, int]:
        size = self.app.board_view.size
        return size.width, size.height


# ---------------------------
# App
# ---------------------------

class RacerApp(App):
    CSS = f"""
    Screen {{
        background: transparent;
        align: center middle;
    }}

    #root {{
        width: {FRAME_WIDTH + 4};
        height: 100%;
        padding: 1 0;
    }}

    BoardView {{
        background: #111827;
        border: heavy #1f2937;
        padding: 0 1;
        height: 1fr;
    }}

    HelpBar {{
        background: #0f172a;
        border: round #1f2937;
        padding: 0 1;
        height: 3;
    }}
    """

    TITLE = "Letter Racer"
    SUB_TITLE = "catch each letter on the line"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+t", "cycle_theme", "Theme"),
        ("f1", "toggle_sound", "Sound"),
    ]

    EXIT_DELAY = 2.0

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        demo: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__()
        self.config = config or SessionConfig()
        self.demo = demo
        self.rng = rng
        self.palettes = build_palettes(self.config.themes)
        self.theme_name = self.config.theme
        if self.theme_name not in self.palettes:
            self.theme_name = "slate"
        self.palette = self.palettes[self.theme_name]
        self.keyboard = KeyboardInput(on_interrupt=self.exit)
        self.session: Optional[Session] = None
        self.sound: Union[BellSound, SilentSound] = SilentSound()

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="root"):
            self.board_view = BoardView()
            self.help_bar = HelpBar()
            yield self.board_view
            yield self.help_bar
        yield Footer()

    def on_mount(self) -> None:
        self.board_renderer = WidgetRenderer(self)
        input_source: InputSource
        if self.demo:
            auto = AutoTypeInput(self, self.config.auto_type_interval)
            input_source = auto
        else:
            input_source = self.keyboard
            self.sound = BellSound(self.bell, enabled=self.config.sound)

        self.session = Session(
            build_pool(CORPUS),
            self.config,
            self,
            input_source,
            self.board_renderer,
            self.sound,
            rng=self.rng,
            on_exit=self._schedule_exit,
        )
        if self.demo:
            auto.bind(self.session.snapshot)

        self.apply_theme()
        self._render_help()
        self.session.start()

    def on_unmount(self) -> None:
        if self.session is not None:
            self.session.stop()

    def on_key(self, event: events.Key) -> None:
        if self.keyboard.feed(event.key, event.character):
            event.stop()

    def _schedule_exit(self) -> None:
        self._render_help()
        self.set_timer(self.EXIT_DELAY, self.exit)

    def apply_theme(self) -> None:
        palette = self.palette
        self.screen.styles.background = palette["screen_bg"]
        self.board_view.styles.background = palette["card_bg"]
        self.help_bar.styles.background = palette["stats_bg"]
        self.board_view.styles.border = ("heavy", palette["border"])
        self.help_bar.styles.border = ("round", palette["border"])

    def action_cycle_theme(self) -> None:
        self.theme_name = self._cycle_value(self.theme_name, list(self.palettes.keys()))
        self.palette = self.palettes[self.theme_name]
        self.apply_theme()
        self.board_renderer.render(self.board_renderer.lines)
        self._render_help()

    def action_toggle_sound(self) -> None:
        enabled = self.sound.toggle_mute()
        self.notify("Sound on" if enabled else "Sound off", timeout=1.5)

    def _cycle_value(self, current: str, options: List[str]) -> str:
        if current not in options:
            return options[0]
        idx = options.index(current)
        return options[(idx + 1) % len(options)]

    def _render_help(self) -> None:
        theme = self.palette
        text = Text()
        if self.session is not None and self.session.phase == STOPPED:
            text.append("Session over. ", style=theme["hint"])
        elif self.demo:
            text.append("Demo: letters are typed for you. ", style=theme["hint"])
        else:
            text.append("Press a letter while it sits on ▶. ", style=theme["hint"])
        text.append("Ctrl+T theme", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("F1 sound", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("Ctrl+Q quit", style=theme["hint"])
        self.help_bar.update(text)
