"""Rank table screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label, Static, Rule

from equip_refine.display import category_lines


class RankTableScreen(Screen):
    """Shows the max level and per-level bonus of every rank."""

    CSS = """
    RankTableScreen {
        layout: vertical;
    }

    #ranks-container {
        padding: 1 2;
        height: auto;
    }

    #title {
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 1;
    }

    .section-title {
        text-style: bold;
        color: $primary;
        margin-top: 1;
    }

    .rank-row {
        height: 1;
    }

    .rank-label {
        width: 10;
        content-align: left middle;
    }

    .rank-value {
        width: 16;
    }

    .rank-note {
        color: $text-muted;
    }

    #back-button {
        margin-top: 2;
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
    ]

    def compose(self) -> ComposeResult:
        policy = self.app.session.policy

        yield Header()

        with ScrollableContainer(id="ranks-container"):
            yield Static("Refinement Ranks", id="title")
            yield Rule()

            yield Static("Max Level / Bonus per Level", classes="section-title")

            with Horizontal(classes="rank-row"):
                yield Label("Rank", classes="rank-label")
                yield Label("Max Level", classes="rank-value")
                yield Label("Bonus / Level", classes="rank-value")
                yield Label("Max Bonus", classes="rank-value")

            for rank in policy.ranks():
                max_level = policy.max_level(rank)
                per_level = policy.per_level_value(rank)
                with Horizontal(classes="rank-row"):
                    yield Static(rank, classes="rank-label")
                    yield Static(f"+{max_level}", classes="rank-value")
                    yield Static(str(per_level), classes="rank-value")
                    yield Static(str(max_level * per_level), classes="rank-value")

            yield Rule()

            yield Static("Categories", classes="section-title")
            for line in category_lines():
                yield Static(line, classes="rank-note")

            yield Rule()

            yield Button("Back", id="back-button", variant="default")

        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "back-button":
            self.action_back()

    def action_back(self) -> None:
        self.app.pop_screen()
