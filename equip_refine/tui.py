"""TUI for equipment refinement using Textual."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.logging import TextualHandler
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Label,
    RichLog,
    Rule,
    Select,
    Static,
)
from rich.text import Text

from .controller import Outcome
from .log import configure_logging
from .models import ParamKind
from .screens import ActorSelectScreen
from .session import RefinementSession


class SlotButton(Button):
    """Button for one equipment slot."""

    def __init__(self, slot_index: int, label: str):
        self.slot_index = slot_index
        super().__init__(label, id=f"slot-btn-{slot_index}", classes="slot-button")


class EquipScreen(Screen):
    """An actor's equipment with refine controls and a message log."""

    CSS = """
    EquipScreen {
        layout: vertical;
    }

    #actor-caption {
        height: 3;
        padding: 0 1;
        background: $surface;
        border-bottom: solid $primary;
    }

    .caption-field {
        width: 24;
    }

    #equip-columns {
        height: auto;
        padding: 1;
    }

    #slot-column {
        width: 1fr;
        height: auto;
        padding: 0 1;
        border-right: solid $primary-darken-2;
    }

    #refine-column {
        width: 1fr;
        height: auto;
        padding: 0 1;
    }

    .slot-button {
        width: 100%;
    }

    .slot-button.-selected {
        text-style: bold;
    }

    .section-header {
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    #material-select {
        width: 100%;
    }

    #log-container {
        height: 1fr;
        border: solid $primary;
        margin: 0 1;
    }

    #controls {
        height: 3;
        padding: 0 1;
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refine", "Refine"),
        Binding("a", "auto_refine", "Auto Refine"),
        Binding("s", "save", "Save"),
        Binding("l", "load", "Load"),
        Binding("escape", "back", "Back"),
    ]

    def __init__(self, actor_id: int):
        super().__init__()
        self.actor_id = actor_id
        self.selected_slot = 0

    @property
    def session(self) -> RefinementSession:
        return self.app.session

    def compose(self) -> ComposeResult:
        actor = self.session.database.actor(self.actor_id)
        rows = self.session.display.slot_rows(self.actor_id)

        yield Header()

        with Horizontal(id="actor-caption"):
            yield Static(actor.name if actor else "?", id="actor-display", classes="caption-field")
            yield Static("ATK +0", id="atk-display", classes="caption-field")
            yield Static("DEF +0", id="def-display", classes="caption-field")

        with Horizontal(id="equip-columns"):
            with Vertical(id="slot-column"):
                yield Static("Equipment", classes="section-header")
                for row in rows:
                    yield SlotButton(row.slot_index, self._slot_label(row.slot_name, row.text))

            with Vertical(id="refine-column"):
                yield Static("Refine", classes="section-header")
                yield Label("Material:")
                yield Select(self._material_options(), prompt="Choose material", id="material-select")
                yield Rule()
                with Horizontal():
                    yield Button("Refine", id="refine-button", variant="success")
                    yield Button("Auto Refine", id="auto-button", variant="primary")

        yield RichLog(id="log-container", highlight=False, markup=False)

        with Container(id="controls"):
            yield Button("Back", id="back-button", variant="default")

        yield Footer()

    def on_mount(self) -> None:
        self._refresh()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, SlotButton):
            self.selected_slot = event.button.slot_index
            self._refresh()
        elif event.button.id == "refine-button":
            self.action_refine()
        elif event.button.id == "auto-button":
            self.action_auto_refine()
        elif event.button.id == "back-button":
            self.action_back()

    def action_refine(self) -> None:
        """Refine the selected slot with the chosen material."""
        material_id = self.query_one("#material-select", Select).value
        if not isinstance(material_id, int):
            self.notify("Choose a material first", severity="warning")
            return
        self._log_outcome(self.session.controller.attempt_refine(self.actor_id, self.selected_slot, material_id))

    def action_auto_refine(self) -> None:
        """Refine the selected slot with any held material of the right rank."""
        self._log_outcome(self.session.controller.auto_refine(self.actor_id, self.selected_slot))

    def action_save(self) -> None:
        self.app.action_save()

    def action_load(self) -> None:
        self.app.action_load()
        self._refresh()

    def action_back(self) -> None:
        self.app.pop_screen()

    def action_quit(self) -> None:
        self.app.exit()

    def _log_outcome(self, outcome: Outcome) -> None:
        log = self.query_one("#log-container", RichLog)
        style = "bold green" if outcome.ok else "red"
        log.write(Text(outcome.message, style=style))
        self._refresh()

    def _refresh(self) -> None:
        """Update slot labels, bonuses and the material list."""
        for row in self.session.display.slot_rows(self.actor_id):
            button = self.query_one(f"#slot-btn-{row.slot_index}", SlotButton)
            button.label = self._slot_label(row.slot_name, row.text)
            button.set_class(row.slot_index == self.selected_slot, "-selected")

        projector = self.session.projector
        self.query_one("#atk-display", Static).update(
            f"ATK +{projector.bonus_for(self.actor_id, ParamKind.ATK)}"
        )
        self.query_one("#def-display", Static).update(
            f"DEF +{projector.bonus_for(self.actor_id, ParamKind.DEF)}"
        )

        select = self.query_one("#material-select", Select)
        current = select.value
        options = self._material_options()
        select.set_options(options)
        if any(value == current for _, value in options):
            select.value = current

    def _material_options(self) -> list[tuple[str, int]]:
        inventory = self.session.inventory
        materials = sorted(self.session.database.all_material_definitions(), key=lambda i: i.id)
        return [
            (f"{item.name} ({item.target_rank or '?'}) x{inventory.quantity_of(item.id)}", item.id)
            for item in materials
            if inventory.has_item(item.id)
        ]

    @staticmethod
    def _slot_label(slot_name: str, text: str) -> str:
        return f"{slot_name}: {text}" if slot_name else text


class RefineApp(App):
    """Main TUI application."""

    TITLE = "Equipment Refinement"
    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, session: RefinementSession, save_path: Optional[Path] = None):
        super().__init__()
        self.session = session
        self.save_path = save_path

    def on_mount(self) -> None:
        self.push_screen(ActorSelectScreen())

    def action_save(self) -> None:
        if self.save_path is None:
            self.notify("No save file given", severity="warning")
            return
        try:
            self.session.save(self.save_path)
        except OSError as exc:
            self.notify(f"Save failed: {exc}", severity="error")
            return
        self.notify("Game saved", timeout=1)

    def action_load(self) -> None:
        if self.save_path is None or not self.save_path.exists():
            self.notify("No save file to load", severity="warning")
            return
        try:
            self.session.load(self.save_path)
        except (OSError, ValueError) as exc:
            self.notify(f"Load failed: {exc}", severity="error")
            return
        self.notify("Game loaded", timeout=1)


def build_log_handler(log_file: Optional[Path] = None) -> logging.Handler:
    """Handler that keeps log output off the terminal the app draws on."""
    if log_file is not None:
        return logging.FileHandler(log_file, encoding="utf8")
    return TextualHandler()


def main():
    """Entry point for the TUI."""
    parser = argparse.ArgumentParser(description="Equipment refinement TUI")
    parser.add_argument("--data", "-d", type=Path, required=True, help="Game data JSON file")
    parser.add_argument("--save", type=Path, help="Save file to load from and save to")
    parser.add_argument("--policy", type=Path, help="TOML file overriding the rank table")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write log records to this file (default: the Textual devtools console)",
    )
    args = parser.parse_args()

    configure_logging(args.log_level, build_log_handler(args.log_file))
    try:
        session = RefinementSession.from_files(args.data, args.save, args.policy)
    except (OSError, ValueError, KeyError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    app = RefineApp(session, args.save)
    app.run()


if __name__ == "__main__":
    main()
