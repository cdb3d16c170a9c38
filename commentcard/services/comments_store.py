"""
Comments store.

Owns the UI state of one comments screen session. The store fetches
comments through the repository, reduces fetch outcomes and user events
into new immutable UIState snapshots and publishes every snapshot to its
subscribers.

Only the latest fetch may update the state: a Retry cancels the fetch in
flight and bumps the fetch generation, and a result that arrives for an
older generation is dropped.
"""

import asyncio
from typing import AsyncIterator, List, Optional

from commentcard.models.event import Event, ImageAttached, ImageAttachRequested, Retry
from commentcard.models.result import FetchResult
from commentcard.models.state import UIState
from commentcard.services.comments_repository import CommentsRepository
from commentcard.services.error_classifier import classify
from commentcard.services.reducer import apply_result, attach_image, start_loading
from commentcard.utils.logging import get_logger, log_state_transition


logger = get_logger(__name__)

# Queue marker that ends a subscription
_CLOSED = object()


class CommentsStore:
    """
    State container for one comments screen session.

    Usage:
        async with CommentsStore(repository, post_id=1) as store:
            async for state in store.subscribe():
                render(state)
    """

    def __init__(self, repository: CommentsRepository, post_id: int):
        """
        Create the store and issue the initial fetch.

        The store is never observable in the idle state: construction
        moves it straight to loading, so it must happen inside a running
        event loop.

        Args:
            repository: Repository used for every fetch
            post_id: Post whose comments the screen shows

        Raises:
            RuntimeError: If no event loop is running
        """
        self.repository = repository
        self.post_id = post_id

        self._state = UIState()
        self._generation = 0
        self._fetch_task: Optional[asyncio.Task] = None
        self._subscribers: List[asyncio.Queue] = []
        self._pending_image_comment_id: Optional[int] = None
        self._closed = False
        self._logger = logger.with_context(post_id=post_id)

        self._fetch()
        self._logger.info("Comments store created")

    @property
    def current_state(self) -> UIState:
        """Latest published UI state."""
        return self._state

    @property
    def pending_image_comment_id(self) -> Optional[int]:
        """Comment the user is currently picking an avatar for, if any."""
        return self._pending_image_comment_id

    @property
    def generation(self) -> int:
        """Number of fetches issued so far."""
        return self._generation

    async def close(self) -> None:
        """Cancel the fetch in flight and end all subscriptions."""
        if self._closed:
            return
        self._closed = True

        task = self._fetch_task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait([task])

        # A subscriber with an undelivered snapshot ends after receiving it
        for queue in self._subscribers:
            if queue.empty():
                queue.put_nowait(_CLOSED)

        self._logger.info("Comments store closed")

    async def __aenter__(self) -> "CommentsStore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def submit(self, event: Event) -> None:
        """
        Handle an event from the presentation layer.

        Args:
            event: Retry, ImageAttachRequested or ImageAttached

        Raises:
            TypeError: If the event type is unknown
        """
        if self._closed:
            self._logger.warning(f"Ignoring {type(event).__name__}: store is closed")
            return

        if isinstance(event, Retry):
            self._fetch()
        elif isinstance(event, ImageAttachRequested):
            self._pending_image_comment_id = event.comment_id
            self._logger.debug(f"Awaiting avatar for comment {event.comment_id}")
        elif isinstance(event, ImageAttached):
            self._attach_image(event)
        else:
            raise TypeError(f"Unsupported event: {type(event).__name__}")

    async def subscribe(self) -> AsyncIterator[UIState]:
        """
        Observe the UI state.

        Yields the current state first and then published states in order.
        Delivery is conflated: a subscriber that falls behind skips to the
        latest snapshot. The iteration ends when the store is closed.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        queue.put_nowait(self._state)
        self._subscribers.append(queue)

        try:
            while True:
                state = await queue.get()
                if state is _CLOSED:
                    return
                yield state
                if self._closed and queue.empty():
                    return
        finally:
            if queue in self._subscribers:
                self._subscribers.remove(queue)

    async def wait_for_fetch(self) -> UIState:
        """
        Wait until the latest fetch has been applied.

        Returns:
            The state after the most recent fetch settled
        """
        while True:
            task = self._fetch_task
            if task is None or task.done():
                return self._state
            await asyncio.wait([task])
            if task is self._fetch_task:
                return self._state

    def _fetch(self) -> None:
        """Supersede any fetch in flight and start a new one."""
        # Raises before any state changes when called outside an event loop
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation

        previous = self._fetch_task
        if previous is not None and not previous.done():
            previous.cancel()
            self._logger.info(
                f"Superseding fetch generation {generation - 1}",
                extra={"generation": generation}
            )

        self._publish(start_loading(self._state))
        log_state_transition(self._logger, "loading", generation, len(self._state.comments))

        self._fetch_task = loop.create_task(
            self._run_fetch(generation),
            name=f"comments-fetch-{self.post_id}-{generation}",
        )

    async def _run_fetch(self, generation: int) -> None:
        """Fetch comments and apply the outcome if it is still current."""
        try:
            result = await self.repository.fetch(self.post_id)
        except Exception as e:
            # The repository converts failures itself; anything reaching here is a bug
            self._logger.error(f"Repository raised unexpectedly: {e}", exc_info=True)
            result = FetchResult.failure(classify(e))

        if generation != self._generation or self._closed:
            self._logger.debug(
                f"Discarding stale result of fetch generation {generation}",
                extra={"generation": generation}
            )
            return

        self._publish(apply_result(self._state, result))

        if result.is_success:
            log_state_transition(self._logger, "loaded", generation, len(self._state.comments))
        else:
            log_state_transition(
                self._logger,
                "failed",
                generation,
                len(self._state.comments),
                error=result.error.category.value,
            )

    def _attach_image(self, event: ImageAttached) -> None:
        if self._pending_image_comment_id == event.comment_id:
            self._pending_image_comment_id = None

        new_state = attach_image(self._state, event.comment_id, event.image_ref)
        if new_state is self._state:
            self._logger.debug(f"No displayed comment with id {event.comment_id}; avatar ignored")
            return

        self._publish(new_state)
        self._logger.info(f"Avatar attached to comment {event.comment_id}")

    def _publish(self, state: UIState) -> None:
        self._state = state
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(state)
