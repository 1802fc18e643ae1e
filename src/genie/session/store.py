"""Session state store.

The one place session state lives. Consumers read fields through properties
and change them through named transitions; every transition notifies the
subscribed listeners with the name of the field that changed.
"""

from collections.abc import Callable
from dataclasses import replace

from .models import SessionState

StateListener = Callable[[str, "SessionStore"], None]


class SessionStore:
    """In-memory, session-lifetime state shared by reference.

    Nothing is persisted; a restart starts from an empty state.
    """

    def __init__(self, state: SessionState | None = None) -> None:
        self._state = state or SessionState()
        self._listeners: list[StateListener] = []

    @property
    def input(self) -> str:
        return self._state.input

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._state.history)

    @property
    def active_prompt(self) -> str:
        return self._state.active_prompt

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def is_result_visible(self) -> bool:
        return self._state.is_result_visible

    @property
    def displayed_response(self) -> str:
        return self._state.displayed_response

    def snapshot(self) -> SessionState:
        """Return an independent copy of the current state."""
        return replace(self._state, history=list(self._state.history))

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, field_name: str) -> None:
        for listener in list(self._listeners):
            listener(field_name, self)

    # Public transitions

    def set_input(self, text: str) -> None:
        """Replace the current input. Empty text is allowed."""
        self._state.input = text
        self._notify("input")

    def new_session(self) -> None:
        """Return to the greeting screen.

        Input and history are left as they are.
        """
        self.set_loading(False)
        self.set_result_visible(False)

    # Transitions driven by the controller and animator

    def append_history(self, prompt: str) -> None:
        self._state.history.append(prompt)
        self._notify("history")

    def set_active_prompt(self, prompt: str) -> None:
        self._state.active_prompt = prompt
        self._notify("active_prompt")

    def set_loading(self, loading: bool) -> None:
        self._state.is_loading = loading
        self._notify("is_loading")

    def set_result_visible(self, visible: bool) -> None:
        self._state.is_result_visible = visible
        self._notify("is_result_visible")

    def set_displayed_response(self, text: str) -> None:
        self._state.displayed_response = text
        self._notify("displayed_response")

    def append_displayed_response(self, fragment: str) -> None:
        self._state.displayed_response += fragment
        self._notify("displayed_response")
