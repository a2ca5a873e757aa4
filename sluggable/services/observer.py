"""Lifecycle integration: slug records when they are saved."""

from collections.abc import Iterable
from typing import Any, TypeVar

from sqlalchemy import event
from sqlalchemy.orm import Session

from sluggable.models.capabilities import Sluggable
from sluggable.models.events import SlugDecision, SluggedHook, SluggingHook
from sluggable.services.config_resolver import ConfigResolver
from sluggable.services.slug_service import SlugService
from sluggable.stores.sqlalchemy_store import SQLAlchemyRecordStore
from sluggable.utils.logging import get_logger
from sluggable.utils.slug import SlugEngineRegistry

logger = get_logger(__name__)

H = TypeVar("H")


class SluggableObserver:
    """
    Runs the slug service on save and notifies registered hooks.

    ``slugging`` hooks run before the slug is built and may return
    ``SlugDecision.ABORT`` to skip slugging for that save. ``slugged`` hooks
    run afterwards with whether the slug changed. Hooks registered for a base
    class also apply to its subclasses.
    """

    def __init__(self, service: SlugService) -> None:
        self.service = service
        self._slugging_hooks: dict[type, list[SluggingHook]] = {}
        self._slugged_hooks: dict[type, list[SluggedHook]] = {}

    def on_slugging(self, record_type: type, hook: SluggingHook) -> None:
        """Register a hook called before a record of ``record_type`` is slugged."""
        self._slugging_hooks.setdefault(record_type, []).append(hook)

    def on_slugged(self, record_type: type, hook: SluggedHook) -> None:
        """Register a hook called after a record of ``record_type`` was slugged."""
        self._slugged_hooks.setdefault(record_type, []).append(hook)

    def _hooks_for(self, registry: dict[type, list[H]], record: Any) -> list[H]:
        return [
            hook
            for klass in type(record).__mro__
            for hook in registry.get(klass, [])
        ]

    def saving(self, record: Sluggable) -> bool | None:
        """
        Handle a record about to be saved.

        Returns:
            Whether the slug changed, or None when a hook aborted slugging
        """
        return self.generate_slug(record, "saving")

    def generate_slug(self, record: Sluggable, event_name: str) -> bool | None:
        if self.fire_slugging_event(record, event_name) is SlugDecision.ABORT:
            logger.debug(
                "Slugging aborted by hook",
                record_type=type(record).__name__,
                event=event_name,
            )
            return None

        was_slugged = self.service.slug(record)
        self.fire_slugged_event(record, was_slugged)
        return was_slugged

    def fire_slugging_event(self, record: Sluggable, event_name: str) -> SlugDecision:
        for hook in self._hooks_for(self._slugging_hooks, record):
            if hook(record, event_name) is SlugDecision.ABORT:
                return SlugDecision.ABORT
        return SlugDecision.PROCEED

    def fire_slugged_event(self, record: Sluggable, status: bool) -> None:
        for hook in self._hooks_for(self._slugged_hooks, record):
            hook(record, status)

    def replicate(self, record: Sluggable, exclude: Iterable[str] = ()) -> Any:
        """
        Clone a record into a new, unsaved instance with fresh slugs.

        Args:
            record: Record to clone
            exclude: Attribute names not to copy

        Returns:
            Transient copy whose slugs were regenerated
        """
        clone = self.service.store.replicate(record, exclude)
        self.service.slug(clone, force=True)
        return clone

    def before_flush(self, session: Session, flush_context: Any, instances: Any) -> None:
        """SQLAlchemy ``before_flush`` listener slugging new and modified records."""
        pending = [
            obj
            for obj in [*session.new, *session.dirty]
            if isinstance(obj, Sluggable) and obj not in session.deleted
        ]
        for record in pending:
            self.saving(record)


def install(
    session: Session,
    resolver: ConfigResolver | None = None,
    engines: SlugEngineRegistry | None = None,
) -> SluggableObserver:
    """
    Attach automatic slugging to a SQLAlchemy session.

    Args:
        session: Session to listen on
        resolver: Shared configuration resolver
        engines: Shared slug engine registry

    Returns:
        Observer registered for the session's ``before_flush`` event
    """
    service = SlugService(SQLAlchemyRecordStore(session), resolver=resolver, engines=engines)
    observer = SluggableObserver(service)
    event.listen(session, "before_flush", observer.before_flush)

    logger.debug("Slug observer installed", session=repr(session))
    return observer
