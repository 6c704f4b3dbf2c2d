"""Scheduler driving refresh, cycling and scrolling of display instances."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from oebb_departures.application.interval_timer import IntervalTimer
from oebb_departures.application.services.field_renderer import FieldRenderer, clean_destination
from oebb_departures.application.services.scroll_engine import (
    FRAME_STEP,
    TICK_SECONDS,
    ScrollEngine,
)
from oebb_departures.domain.contracts.presentation_scheduler import (
    PresentationSchedulerProtocol,
)
from oebb_departures.domain.models.display_field import DisplayField
from oebb_departures.domain.models.presentation_state import PresentationMode, PresentationState
from oebb_departures.domain.models.rendered_field import ComposedLine
from oebb_departures.domain.models.scheduler_event import EventKind, SchedulerEvent

if TYPE_CHECKING:
    from oebb_departures.application.services.departure_board_service import (
        DepartureBoardService,
    )
    from oebb_departures.domain.contracts.image_composer import ImageComposerProtocol
    from oebb_departures.domain.models.departure_settings import DepartureSettings
    from oebb_departures.domain.ports import DisplaySurface

logger = logging.getLogger(__name__)

NO_DEPARTURES_MESSAGE = "No departures"
ERROR_MESSAGE = "Error"


class InstanceRuntime:
    """Settings, presentation state, event queue and timers of one display instance."""

    def __init__(self, instance_id: str, settings: DepartureSettings) -> None:
        self.instance_id = instance_id
        self.settings = settings
        self.state = PresentationState()
        self.queue: asyncio.Queue[SchedulerEvent] = asyncio.Queue()
        self.worker: asyncio.Task | None = None
        self.timers: dict[EventKind, IntervalTimer] = {}
        self._generations: dict[EventKind, int] = {}

    def enqueue(self, event: SchedulerEvent) -> None:
        self.queue.put_nowait(event)

    def arm(self, kind: EventKind, interval_seconds: float) -> None:
        """(Re)start the timer for ``kind``; a restarted timer counts from zero."""
        self.disarm(kind)
        generation = self._generations.get(kind, 0) + 1
        self._generations[kind] = generation

        def on_tick() -> None:
            self.enqueue(SchedulerEvent(kind, generation=generation))

        timer = IntervalTimer(f"{self.instance_id}:{kind.value}", interval_seconds, on_tick)
        self.timers[kind] = timer
        timer.start()

    def disarm(self, kind: EventKind) -> None:
        timer = self.timers.pop(kind, None)
        if timer is not None:
            timer.cancel()

    def is_armed(self, kind: EventKind) -> bool:
        timer = self.timers.get(kind)
        return timer is not None and timer.active

    def timer_event(self, kind: EventKind) -> SchedulerEvent | None:
        """The event the armed timer for ``kind`` would deliver, if it is armed."""
        if not self.is_armed(kind):
            return None
        return SchedulerEvent(kind, generation=self._generations[kind])

    def is_current(self, event: SchedulerEvent) -> bool:
        """Whether a timer event comes from the currently armed timer."""
        return self.is_armed(event.kind) and event.generation == self._generations.get(event.kind)

    def cancel(self) -> list[asyncio.Task]:
        """Cancel every timer and the worker; returns the tasks to await."""
        tasks = list(self.timers.values())
        for timer in tasks:
            timer.cancel()
        self.timers.clear()
        pending: list[asyncio.Task] = [t.task for t in tasks if t.task is not None]
        if self.worker is not None:
            self.worker.cancel()
            pending.append(self.worker)
        return pending


class PresentationScheduler(PresentationSchedulerProtocol):
    """Keeps exactly one consistent render per display instance.

    Every instance has its own event queue processed by a single worker task,
    so refresh, cycle, scroll and manual-advance handling never overlap for the
    same instance. Timers only enqueue events.
    """

    def __init__(
        self,
        board_service: DepartureBoardService,
        display_surface: DisplaySurface,
        image_composer: ImageComposerProtocol,
        field_renderer: FieldRenderer | None = None,
        scroll_tick_seconds: float = TICK_SECONDS,
    ) -> None:
        """Initialize the scheduler.

        Args:
            board_service: Service producing the departures of an instance.
            display_surface: Receives rendered images.
            image_composer: Builds images from rendered lines.
            field_renderer: Maps departure fields to line text.
            scroll_tick_seconds: Interval of the scroll animation timer.
        """
        self.board_service = board_service
        self.display_surface = display_surface
        self.image_composer = image_composer
        self.field_renderer = field_renderer or FieldRenderer()
        self.scroll_tick_seconds = scroll_tick_seconds
        self._instances: dict[str, InstanceRuntime] = {}

    @property
    def instance_ids(self) -> list[str]:
        """Identifiers of all live instances."""
        return list(self._instances)

    def get_state(self, instance_id: str) -> PresentationState | None:
        """Presentation state of an instance, or None if it does not exist."""
        runtime = self._instances.get(instance_id)
        return runtime.state if runtime else None

    def get_settings(self, instance_id: str) -> DepartureSettings | None:
        """Current settings of an instance, or None if it does not exist."""
        runtime = self._instances.get(instance_id)
        return runtime.settings if runtime else None

    def is_armed(self, instance_id: str, kind: EventKind) -> bool:
        """Whether the timer ``kind`` of an instance is armed."""
        runtime = self._instances.get(instance_id)
        return runtime is not None and runtime.is_armed(kind)

    async def appear(self, instance_id: str, settings: DepartureSettings) -> None:
        """Create an instance, queue its first refresh and arm the refresh timer."""
        if instance_id in self._instances:
            logger.warning(f"Instance {instance_id} already exists, recreating it")
            await self.disappear(instance_id)

        runtime = InstanceRuntime(instance_id, settings)
        self._instances[instance_id] = runtime
        runtime.worker = asyncio.create_task(
            self._run_worker(runtime), name=f"presentation:{instance_id}"
        )
        runtime.enqueue(SchedulerEvent(EventKind.REFRESH))
        runtime.arm(EventKind.REFRESH, settings.refresh_interval)
        logger.info(
            f"Instance {instance_id} appeared (station {settings.station_id}, "
            f"refresh every {settings.refresh_interval}s)"
        )

    async def disappear(self, instance_id: str) -> None:
        """Cancel all timers and the worker of an instance, then discard its state."""
        runtime = self._instances.get(instance_id)
        if runtime is None:
            return

        pending = runtime.cancel()
        del self._instances[instance_id]
        for task in pending:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        logger.info(f"Instance {instance_id} disappeared")

    async def settings_changed(self, instance_id: str, settings: DepartureSettings) -> None:
        """Refresh immediately with new settings and rearm the refresh timer."""
        await self.dispatch(instance_id, SchedulerEvent(EventKind.SETTINGS_CHANGED, settings))

    async def key_down(self, instance_id: str) -> None:
        """Advance to the next departure, or refresh when there is nothing to cycle."""
        await self.dispatch(instance_id, SchedulerEvent(EventKind.MANUAL_ADVANCE))

    async def request_refresh(self, instance_id: str) -> None:
        """Refresh immediately."""
        await self.dispatch(instance_id, SchedulerEvent(EventKind.REFRESH))

    async def dispatch(self, instance_id: str, event: SchedulerEvent) -> None:
        """Queue an event for an instance."""
        runtime = self._instances.get(instance_id)
        if runtime is None:
            logger.warning(f"Ignoring {event.kind.value} for unknown instance {instance_id}")
            return
        runtime.enqueue(event)

    async def fire_timer(self, instance_id: str, kind: EventKind) -> bool:
        """Deliver a tick of an armed timer right away.

        Returns:
            False if the timer is not armed.
        """
        runtime = self._instances.get(instance_id)
        event = runtime.timer_event(kind) if runtime else None
        if runtime is None or event is None:
            return False
        runtime.enqueue(event)
        return True

    async def drain(self, instance_id: str) -> None:
        """Wait until every queued event of an instance has been processed."""
        runtime = self._instances.get(instance_id)
        if runtime is not None:
            await runtime.queue.join()

    async def shutdown(self) -> None:
        """Tear down every instance."""
        for instance_id in list(self._instances):
            await self.disappear(instance_id)

    async def _run_worker(self, runtime: InstanceRuntime) -> None:
        while True:
            event = await runtime.queue.get()
            try:
                await self._handle(runtime, event)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(
                    f"Failed to handle {event.kind.value} for instance {runtime.instance_id}: {e}"
                )
            finally:
                runtime.queue.task_done()

    async def _handle(self, runtime: InstanceRuntime, event: SchedulerEvent) -> None:
        state = runtime.state

        if event.kind is EventKind.REFRESH:
            if event.generation is not None and not runtime.is_current(event):
                return
            await self._refresh(runtime)

        elif event.kind is EventKind.SETTINGS_CHANGED:
            if event.settings is not None:
                runtime.settings = event.settings
            runtime.disarm(EventKind.REFRESH)
            await self._refresh(runtime)
            runtime.arm(EventKind.REFRESH, runtime.settings.refresh_interval)

        elif event.kind is EventKind.CYCLE:
            if not runtime.is_current(event) or state.mode is not PresentationMode.CYCLING:
                return
            await self._advance(runtime, restart_cycle=False)

        elif event.kind is EventKind.SCROLL_TICK:
            if not runtime.is_current(event) or state.current is None:
                return
            state.scroll_frame += FRAME_STEP
            await self._render(runtime)

        elif event.kind is EventKind.MANUAL_ADVANCE:
            if state.mode is PresentationMode.CYCLING:
                await self._advance(runtime, restart_cycle=True)
            else:
                await self._refresh(runtime)

    async def _refresh(self, runtime: InstanceRuntime) -> None:
        settings = runtime.settings
        # No cycle or scroll ticks pile up while the fetch is pending
        runtime.disarm(EventKind.CYCLE)
        runtime.disarm(EventKind.SCROLL_TICK)
        try:
            departures = await self.board_service.get_board(settings)
            runtime.state.replace_departures(departures)

            if runtime.state.mode is PresentationMode.EMPTY:
                await self._show_message(runtime, NO_DEPARTURES_MESSAGE)
                return

            if runtime.state.mode is PresentationMode.CYCLING:
                runtime.arm(EventKind.CYCLE, settings.cycle_interval)

            self._arm_scrolling(runtime)
            await self._render(runtime)
        except Exception as e:
            logger.error(f"Error updating departures for instance {runtime.instance_id}: {e}")
            await self._show_error(runtime)

    async def _show_error(self, runtime: InstanceRuntime) -> None:
        """Drop the departures of an instance and show the error placeholder."""
        runtime.disarm(EventKind.CYCLE)
        runtime.disarm(EventKind.SCROLL_TICK)
        runtime.state.clear()
        await self._show_message(runtime, ERROR_MESSAGE)

    async def _advance(self, runtime: InstanceRuntime, restart_cycle: bool) -> None:
        runtime.state.advance()
        self._arm_scrolling(runtime)
        if restart_cycle:
            runtime.arm(EventKind.CYCLE, runtime.settings.cycle_interval)
        await self._render(runtime)

    def _scroll_text(self, runtime: InstanceRuntime) -> str | None:
        """Destination text that has to scroll for the current departure, if any."""
        departure = runtime.state.current
        settings = runtime.settings
        if (
            departure is None
            or not settings.enable_scrolling
            or DisplayField.DESTINATION not in settings.line_fields
        ):
            return None
        text = clean_destination(departure.destination)
        return text if ScrollEngine.needs_scroll(text) else None

    def _arm_scrolling(self, runtime: InstanceRuntime) -> None:
        runtime.disarm(EventKind.SCROLL_TICK)
        if self._scroll_text(runtime) is not None:
            runtime.arm(EventKind.SCROLL_TICK, self.scroll_tick_seconds)

    async def _render(self, runtime: InstanceRuntime) -> None:
        state = runtime.state
        departure = state.current
        if departure is None:
            return

        settings = runtime.settings
        lines: list[ComposedLine] = []
        for field_name in settings.line_fields:
            rendered = self.field_renderer.render(departure, field_name)
            x_offset = 0
            if field_name == DisplayField.DESTINATION and settings.enable_scrolling:
                x_offset = ScrollEngine.offset(
                    clean_destination(departure.destination), state.scroll_frame
                )
            lines.append(ComposedLine(rendered, x_offset))

        total = len(state.departures)
        counter_text = f"{state.index + 1}/{total}" if total > 1 else ""
        image = self.image_composer.compose(lines, counter_text)
        await self.display_surface.set_image(runtime.instance_id, image)

    async def _show_message(self, runtime: InstanceRuntime, message: str) -> None:
        image = self.image_composer.compose_message(message)
        await self.display_surface.set_image(runtime.instance_id, image)
