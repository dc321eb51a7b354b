"""Actor selection screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static, Rule

from equip_refine.models import ActorDefinition
from .rank_table import RankTableScreen


class ActorButton(Button):
    """Button representing a selectable actor."""

    def __init__(self, actor: ActorDefinition, index: int):
        self.actor = actor
        label = f"{index}. {actor.name}"
        super().__init__(label, id=f"actor-btn-{actor.id}")


class ActorSelectScreen(Screen):
    """Starting screen for choosing whose equipment to refine."""

    CSS = """
    ActorSelectScreen {
        layout: vertical;
    }

    #actor-list-container {
        height: 1fr;
        padding: 1 2;
    }

    #actor-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    ActorButton {
        width: 100%;
        margin: 1 0;
    }

    .actor-summary {
        color: $text-muted;
        margin-left: 4;
        margin-bottom: 1;
    }

    #rank-table-button {
        margin-top: 2;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("1", "select_1", "Select 1", show=False),
        Binding("2", "select_2", "Select 2", show=False),
        Binding("3", "select_3", "Select 3", show=False),
        Binding("4", "select_4", "Select 4", show=False),
        Binding("5", "select_5", "Select 5", show=False),
    ]

    def __init__(self):
        super().__init__()
        self.actors: list[ActorDefinition] = []

    def compose(self) -> ComposeResult:
        self.actors = self.app.session.database.actors()
        display = self.app.session.display

        yield Header()

        with Container(id="actor-list-container"):
            yield Static("Select Actor:", id="actor-title")

            for i, actor in enumerate(self.actors, 1):
                yield ActorButton(actor, i)
                equipped = [row.text for row in display.slot_rows(actor.id) if row.item_id is not None]
                yield Static(", ".join(equipped) or "(nothing equipped)", classes="actor-summary")

            yield Rule()
            yield Button("Rank Table", id="rank-table-button", variant="default")

        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press events."""
        if isinstance(event.button, ActorButton):
            self._select_actor(event.button.actor)
        elif event.button.id == "rank-table-button":
            self.app.push_screen(RankTableScreen())

    def _select_actor(self, actor: ActorDefinition) -> None:
        # Import here to avoid circular imports
        from equip_refine.tui import EquipScreen
        self.app.push_screen(EquipScreen(actor.id))

    def _select_by_index(self, index: int) -> None:
        """Select an actor by its index (1-based)."""
        if 0 < index <= len(self.actors):
            self._select_actor(self.actors[index - 1])

    def action_select_1(self) -> None:
        self._select_by_index(1)

    def action_select_2(self) -> None:
        self._select_by_index(2)

    def action_select_3(self) -> None:
        self._select_by_index(3)

    def action_select_4(self) -> None:
        self._select_by_index(4)

    def action_select_5(self) -> None:
        self._select_by_index(5)

    def action_quit(self) -> None:
        self.app.exit()
