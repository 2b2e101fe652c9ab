"""Shared save/cancel/notify workflow for the entity form dialogs.

The department and seller forms differ only in their fields. Everything else
(entity and service preconditions, validation feedback, persistence failure
alerts, listener notification, and closing the window) lives here so both
controllers behave identically.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Mapping, Optional, Protocol, TypeVar

from ..domain.errors import StateError, ValidationError
from ..domain.ports import DataChangeListener, UseCaseError
from ..usecases.save_entity import SaveEntity
from .views.alerts import AlertType, ShowAlert, show_alert

E = TypeVar("E")
S = TypeVar("S")


class FormView(Protocol[S]):
    """What a controller needs from a form dialog."""

    def get_state(self) -> S: ...
    def set_state(self, state: S) -> None: ...
    def set_error_messages(self, messages: Mapping[str, str]) -> None: ...
    def close(self) -> None: ...


class FormVM(Protocol[E, S]):
    state: S

    def load_entity(self, entity: E) -> S: ...
    def build_entity(self) -> E: ...
    def apply_errors(self, errors: Mapping[str, str]) -> dict: ...


class FormPhase(enum.Enum):
    IDLE = "idle"
    SAVING = "saving"


class SaveOutcome(enum.Enum):
    SAVED = "saved"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(eq=False)
class Subscription:
    """Handle returned by ``subscribe_data_change_listener``."""

    listener: DataChangeListener
    _owner: Optional["EntityFormController[Any, Any]"] = None

    def cancel(self) -> None:
        if self._owner is not None:
            self._owner._drop_subscription(self)
            self._owner = None


class EntityFormController(Generic[E, S]):
    """Validate -> persist -> notify -> close workflow for one form dialog.

    Call chain:
        A list controller builds the dialog and this controller, injects the
        entity and service(s), calls ``update_form_data`` and wires the dialog
        buttons to ``on_save`` and ``on_cancel``.
    """

    entity_label = "Entity"
    save_error_title = "Error saving object"

    def __init__(
        self,
        view: FormView[S],
        vm: FormVM[E, S],
        *,
        alert: Optional[ShowAlert] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.view = view
        self.vm = vm
        self._alert: ShowAlert = alert or show_alert
        self._entity: Optional[E] = None
        self._save: Optional[Callable[[E], None]] = None
        self._subscriptions: List[Subscription] = []
        self.phase = FormPhase.IDLE

    @property
    def entity(self) -> Optional[E]:
        return self._entity

    # ------------------------------------------------------------------
    # Injection
    # ------------------------------------------------------------------
    def _set_entity(self, entity: E) -> None:
        self._entity = entity

    def _set_service(self, service: Any) -> None:
        self._save = SaveEntity(service) if service is not None else None

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------
    def subscribe_data_change_listener(self, listener: DataChangeListener) -> Subscription:
        subscription = Subscription(listener, self)
        self._subscriptions.append(subscription)
        return subscription

    def clear_listeners(self) -> None:
        for subscription in self._subscriptions:
            subscription._owner = None
        self._subscriptions.clear()

    def _drop_subscription(self, subscription: Subscription) -> None:
        self._subscriptions = [s for s in self._subscriptions if s is not subscription]

    def _notify_data_change_listeners(self) -> None:
        self._log.debug(
            "Notifying %d data change listener(s) for %s",
            len(self._subscriptions),
            self.entity_label,
        )
        for subscription in list(self._subscriptions):
            subscription.listener()

    # ------------------------------------------------------------------
    # Entity <-> form
    # ------------------------------------------------------------------
    def update_form_data(self) -> None:
        if self._entity is None:
            raise StateError("Entity is null")
        self.view.set_state(self.vm.load_entity(self._entity))

    # ------------------------------------------------------------------
    # Button handlers
    # ------------------------------------------------------------------
    def on_save(self) -> SaveOutcome:
        """Save the form; the returned outcome tells tests and callers what happened."""
        if self._entity is None:
            raise StateError("Entity is null")
        if self._save is None:
            raise StateError("Service is null")
        if self.phase is FormPhase.SAVING:
            raise StateError("Save already in progress")

        self.phase = FormPhase.SAVING
        try:
            self.vm.state = self.view.get_state()
            try:
                entity = self.vm.build_entity()
            except ValidationError as exc:
                self._log.debug("%s form invalid: %s", self.entity_label, sorted(exc.errors))
                self.view.set_error_messages(self.vm.apply_errors(exc.errors))
                return SaveOutcome.INVALID

            self.view.set_error_messages(self.vm.apply_errors({}))
            self._entity = entity
            try:
                self._save(entity)
            except UseCaseError as err:
                self._log.warning("Saving %s failed: %s", self.entity_label, err.message)
                self._alert(self.save_error_title, None, err.message, AlertType.ERROR)
                return SaveOutcome.FAILED

            self._log.info("Saved %s id=%s", self.entity_label, getattr(entity, "id", None))
            self._notify_data_change_listeners()
            self.view.close()
            return SaveOutcome.SAVED
        finally:
            self.phase = FormPhase.IDLE

    def on_cancel(self) -> None:
        self.view.close()
