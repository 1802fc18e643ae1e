"""Prompt submission controller.

Hides the request lifecycle: Idle -> Loading -> Revealing -> Idle.
"""

import asyncio
import logging
from typing import Protocol

from .animator import RevealAnimator
from .formatter import build_fragments
from .store import SessionStore

logger = logging.getLogger(__name__)


class Completer(Protocol):
    """Anything that turns a prompt into reply text without raising."""

    async def complete(self, prompt: str) -> str: ...


class PromptController:
    """Runs one submission cycle per ``submit`` call.

    The completion call is the only suspension point. If a newer cycle starts
    while an older one waits for its reply, the older cycle finishes silently:
    it reveals nothing and leaves loading and input state alone.
    """

    def __init__(
        self,
        store: SessionStore,
        client: Completer,
        animator: RevealAnimator | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._animator = animator or RevealAnimator(store)

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def animator(self) -> RevealAnimator:
        return self._animator

    async def submit(self, prompt_override: str | None = None) -> "asyncio.Future[None]":
        """Send a prompt and start revealing the reply.

        Args:
            prompt_override: Prompt to send instead of the current input.
                Used for history replays, which are not added to history again.

        Returns:
            Future resolved when the reveal has finished
        """
        store = self._store
        prompt = prompt_override if prompt_override else store.input

        generation = self._animator.begin()
        store.set_displayed_response("")
        store.set_result_visible(True)
        store.set_loading(True)

        if not prompt_override:
            store.append_history(store.input)
        store.set_active_prompt(prompt)

        logger.debug("Cycle %d: sending prompt %r", generation, prompt[:50])
        raw = await self._client.complete(prompt)

        if not self._animator.is_current(generation):
            logger.debug("Cycle %d superseded before its reply arrived", generation)
            done: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            done.set_result(None)
            return done

        fragments = build_fragments(raw)
        reveal = self._animator.reveal(fragments, generation)

        store.set_loading(False)
        store.set_input("")
        logger.debug("Cycle %d: revealing %d fragments", generation, len(fragments))
        return reveal

    async def replay(self, prompt: str) -> "asyncio.Future[None]":
        """Send a prompt picked from history."""
        return await self.submit(prompt)

    def new_session(self) -> None:
        self._store.new_session()
