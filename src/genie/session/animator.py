"""Staggered reveal of reply fragments.

Hides the timing of the typewriter effect. All timers for a reply are armed
at once on the running event loop; fragment ``i`` lands ``interval * i``
seconds after scheduling.

Each submission cycle gets a generation number. An append that belongs to
an older generation is dropped, so a slow reveal can never leak words into
the reply of a newer prompt.
"""

import asyncio
from collections.abc import Sequence

from .store import SessionStore

REVEAL_INTERVAL_SECONDS = 0.075


class RevealAnimator:
    """Appends fragments to ``displayed_response`` on a fixed stagger."""

    def __init__(self, store: SessionStore, interval: float = REVEAL_INTERVAL_SECONDS) -> None:
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self._store = store
        self._interval = interval
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def interval(self) -> float:
        return self._interval

    def begin(self) -> int:
        """Start a new generation and return its number.

        Appends still pending from earlier generations become no-ops.
        """
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def reveal(self, fragments: Sequence[str], generation: int | None = None) -> "asyncio.Future[None]":
        """Schedule every fragment for staggered append.

        Must be called from a running event loop.

        Args:
            fragments: Fragments in display order
            generation: Generation the fragments belong to (default: current)

        Returns:
            Future resolved after the last fragment is appended, or once the
            generation is found to be stale
        """
        loop = asyncio.get_running_loop()
        if generation is None:
            generation = self._generation

        done: asyncio.Future[None] = loop.create_future()
        if not fragments or not self.is_current(generation):
            done.set_result(None)
            return done

        last = len(fragments) - 1
        for index, fragment in enumerate(fragments):
            args = (generation, fragment, done if index == last else None)
            if self._interval == 0:
                # call_soon keeps FIFO order; equal call_later deadlines do not
                loop.call_soon(self._append, *args)
            else:
                loop.call_later(self._interval * index, self._append, *args)
        return done

    def _append(
        self,
        generation: int,
        fragment: str,
        done: "asyncio.Future[None] | None",
    ) -> None:
        if self.is_current(generation):
            self._store.append_displayed_response(fragment)
        if done is not None and not done.done():
            done.set_result(None)
