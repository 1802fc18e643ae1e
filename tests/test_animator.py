"""Unit tests for the reveal animator."""
import asyncio

import pytest

from genie.session import REVEAL_INTERVAL_SECONDS, RevealAnimator


class TestRevealAnimator:
    """Tests for staggered fragment appends."""

    def test_default_interval_is_75ms(self, store):
        """Test the default stagger between words."""
        assert REVEAL_INTERVAL_SECONDS == 0.075
        assert RevealAnimator(store).interval == 0.075

    def test_negative_interval_fails(self, store):
        """Test that a negative interval is rejected."""
        with pytest.raises(ValueError):
            RevealAnimator(store, interval=-1)

    async def test_reveal_appends_all_fragments_in_order(self, store, animator):
        """Test that the full reply appears once the reveal completes."""
        seen = []
        store.subscribe(lambda field, s: seen.append(s.displayed_response))

        await animator.reveal(["Your ", "<b>wish</b> ", "granted "])

        assert store.displayed_response == "Your <b>wish</b> granted "
        assert seen == ["Your ", "Your <b>wish</b> ", "Your <b>wish</b> granted "]

    async def test_zero_interval_keeps_order(self, store):
        """Test that an instant reveal still appends in index order."""
        animator = RevealAnimator(store, interval=0)
        fragments = [f"w{i} " for i in range(50)]

        await animator.reveal(fragments)

        assert store.displayed_response == "".join(fragments)

    async def test_fragments_are_staggered(self, store):
        """Test that later fragments wait for their slot."""
        animator = RevealAnimator(store, interval=0.2)
        done = animator.reveal(["first ", "second "])

        await asyncio.sleep(0.05)
        assert store.displayed_response == "first "

        await done
        assert store.displayed_response == "first second "

    async def test_empty_fragment_list_resolves_immediately(self, store, animator):
        """Test revealing nothing."""
        done = animator.reveal([])
        assert done.done()
        assert store.displayed_response == ""


class TestGenerations:
    """Tests for stale-cycle suppression."""

    async def test_begin_increments_generation(self, animator):
        """Test that each cycle gets a new generation number."""
        assert animator.generation == 0
        assert animator.begin() == 1
        assert animator.begin() == 2
        assert animator.is_current(2)
        assert not animator.is_current(1)

    async def test_stale_appends_are_dropped(self, store, animator):
        """Test that starting a new generation silences pending appends."""
        generation = animator.begin()
        done = animator.reveal(["old ", "words "], generation)
        animator.begin()

        await done

        assert store.displayed_response == ""

    async def test_reveal_for_stale_generation_schedules_nothing(self, store, animator):
        """Test that a reveal requested for an old generation is a no-op."""
        old = animator.begin()
        animator.begin()

        done = animator.reveal(["late "], old)

        assert done.done()
        await asyncio.sleep(0.01)
        assert store.displayed_response == ""

    async def test_new_generation_reveal_is_not_corrupted(self, store):
        """Test that an overlapping reveal only shows the newest reply."""
        animator = RevealAnimator(store, interval=0.005)
        first = animator.begin()
        stale = animator.reveal([f"old{i} " for i in range(20)], first)

        await asyncio.sleep(0.02)
        second = animator.begin()
        store.set_displayed_response("")
        fresh = animator.reveal(["new ", "reply "], second)

        await asyncio.gather(stale, fresh)
        assert store.displayed_response == "new reply "
