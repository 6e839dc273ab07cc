"""Search field shown while the keybinding table is being filtered."""

from textual.message import Message
from textual.widgets import Input


class SearchInput(Input):
    """One-line query field; every edit re-filters the table."""

    class FilterChanged(Message):
        """Carries the current query after each edit."""

        def __init__(self, filter_text: str) -> None:
            super().__init__()
            self.filter_text = filter_text

    def __init__(self, **kwargs):
        super().__init__(placeholder="Search actions...", **kwargs)

    def set_value(self, value: str) -> None:
        self.value = value

    def on_input_changed(self, event: Input.Changed) -> None:
        self.post_message(self.FilterChanged(event.value))
