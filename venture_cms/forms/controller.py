"""Step controller: wizard navigation over a form session.

The controller owns the active step and a `navigating` flag. While a
transition or a submit is in flight, further `next`/`previous`/`submit`
calls are ignored, so repeated taps cannot skip or double a step.
"""

import asyncio
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from venture_cms.business.models import BusinessRecord
from venture_cms.business.store import BusinessStore
from venture_cms.config.models.forms import FormDefaults
from venture_cms.forms.models import SessionMode
from venture_cms.forms.session import FormSession
from venture_cms.observability.logging import get_logger

logger = get_logger(__name__)

SourceRecord = Mapping[str, Any] | BaseModel


class StepController:
    """Gates movement between the steps of a business form.

    Forward movement requires the current step to validate; backward
    movement is always allowed. Submitting hands the session payload to
    the store: `update` in edit mode, `create` otherwise.
    """

    def __init__(
        self,
        session: FormSession,
        store: BusinessStore,
        on_cancel: Callable[[], None],
        defaults: FormDefaults | None = None,
    ) -> None:
        """Initialize the controller at step 1.

        Args:
            session: Values and errors of the form being edited
            store: Persistence collaborator used on submit
            on_cancel: Called once per `cancel()`, e.g. to route back
            defaults: Placeholders for sessions created by `load`/`reset`
        """
        self._session = session
        self._store = store
        self._on_cancel = on_cancel
        self._defaults = defaults or FormDefaults()
        self._active_step = 1
        self._navigating = False

    @property
    def session(self) -> FormSession:
        return self._session

    @property
    def active_step(self) -> int:
        return self._active_step

    @property
    def step_count(self) -> int:
        return self._session.registry.step_count

    @property
    def is_navigating(self) -> bool:
        return self._navigating

    @property
    def is_first_step(self) -> bool:
        return self._active_step == 1

    @property
    def is_last_step(self) -> bool:
        return self._active_step == self.step_count

    @property
    def is_current_step_valid(self) -> bool:
        """Whether the current step would validate, without storing errors."""
        return self._session.is_step_valid(self._active_step)

    @property
    def can_go_previous(self) -> bool:
        return not self.is_first_step and not self._navigating

    @property
    def can_go_next(self) -> bool:
        return not self.is_last_step and not self._navigating and self.is_current_step_valid

    @property
    def can_submit(self) -> bool:
        return self.is_last_step and not self._navigating and self.is_current_step_valid

    async def next(self) -> bool:
        """Validate the current step and advance if it is valid.

        Returns:
            True if the active step moved forward
        """
        if self._navigating:
            logger.debug("form_navigation_ignored", action="next", step=self._active_step)
            return False

        self._navigating = True
        try:
            # Yield once so taps queued behind this one observe the flag
            await asyncio.sleep(0)
            if not self._session.validate_step(self._active_step):
                logger.debug(
                    "form_step_invalid",
                    step=self._active_step,
                    fields=sorted(self._session.errors_for_step(self._active_step)),
                )
                return False
            if self.is_last_step:
                return False

            self._active_step += 1
            logger.debug("form_step_advanced", step=self._active_step)
            return True
        finally:
            self._navigating = False

    async def previous(self) -> bool:
        """Go back one step. No validation is required.

        Returns:
            True if the active step moved back
        """
        if self._navigating:
            logger.debug("form_navigation_ignored", action="previous", step=self._active_step)
            return False
        if self.is_first_step:
            return False

        self._active_step -= 1
        logger.debug("form_step_retreated", step=self._active_step)
        return True

    async def submit(self) -> BusinessRecord | None:
        """Persist the form through the store.

        Only acts on the last step when every step is valid; otherwise the
        current step's errors are refreshed and None is returned. Store
        failures propagate unchanged and leave values and step untouched.

        Returns:
            The stored record, or None if the submit was not allowed
        """
        if self._navigating:
            logger.debug("form_navigation_ignored", action="submit", step=self._active_step)
            return None
        if not self.is_last_step:
            logger.warning("form_submit_out_of_sequence", step=self._active_step)
            return None
        if not self._session.validate_step(self._active_step):
            return None

        # Earlier steps can be edited out of band while on the last one
        invalid_steps = [
            step.index
            for step in self._session.registry.steps_of()
            if not self._session.is_step_valid(step.index)
        ]
        if invalid_steps:
            logger.warning("form_submit_blocked", invalid_steps=invalid_steps)
            return None

        payload = self._session.to_payload()

        self._navigating = True
        try:
            if self._session.mode == SessionMode.EDIT and self._session.record_id is not None:
                record = await self._store.update(self._session.record_id, payload)
            else:
                record = await self._store.create(payload)
        except Exception as e:
            logger.error(
                "form_submit_failed",
                mode=self._session.mode.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        finally:
            self._navigating = False

        logger.info(
            "form_submitted",
            mode=self._session.mode.value,
            business_id=str(record.id),
        )
        return record

    def cancel(self) -> None:
        """Invoke the discard callback once. Values and step are left as they are."""
        logger.debug("form_cancelled", step=self._active_step)
        self._on_cancel()

    def load(self, record: SourceRecord | None = None) -> bool:
        """Replace the session for a new source record and return to step 1.

        None starts a blank create-mode session. Ignored while a transition
        or submit is in flight.

        Returns:
            True if the session was replaced
        """
        if self._navigating:
            logger.debug("form_navigation_ignored", action="load", step=self._active_step)
            return False

        if record is None:
            self._session = FormSession.create(self._defaults, self._session.registry)
        else:
            self._session = FormSession.from_record(
                record, self._defaults, self._session.registry
            )
        self._active_step = 1
        return True

    def reset(self) -> bool:
        """Clear the form for another new listing."""
        return self.load(None)
