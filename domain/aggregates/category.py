from __future__ import annotations

from datetime import UTC, datetime

from eventsourcing.domain import Aggregate, event

from domain.validation.domain_validation import DomainValidation


class Category(Aggregate):
    """The Aggregate Root for a catalog Category.

    A category is created active unless told otherwise, and keeps its name and
    description within the bounds below on every state change.
    """

    INITIAL_VERSION = 0

    NAME_MIN_LENGTH = 3
    NAME_MAX_LENGTH = 255
    DESCRIPTION_MAX_LENGTH = 10_000

    @classmethod
    def create(cls, name: str, description: str, is_active: bool = True) -> Category:
        """Create a new Category aggregate (Factory Method)."""
        return cls(
            name=name,
            description=description,
            is_active=is_active,
            created_at=datetime.now(UTC),
        )

    class Created(Aggregate.Created):
        """Defines the structure of the Category Created event."""

        name: str
        description: str
        is_active: bool
        created_at: datetime

    @event(Created)
    def __init__(
        self,
        name: str,
        description: str,
        is_active: bool,
        created_at: datetime,
    ) -> None:
        self._validate_name(name)
        DomainValidation.not_null(description, "Description")
        self._validate_description(description)

        self.name = name
        self.description = description
        self.is_active = is_active
        self._created_at = created_at

    def __hash__(self) -> int:
        """Return hash of the aggregate based on its ID."""
        return hash(self.id)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @classmethod
    def _validate_name(cls, name: str | None) -> None:
        DomainValidation.not_null_or_empty(name, "Name")
        DomainValidation.min_length(name, cls.NAME_MIN_LENGTH, "Name")
        DomainValidation.max_length(name, cls.NAME_MAX_LENGTH, "Name")

    @classmethod
    def _validate_description(cls, description: str) -> None:
        DomainValidation.max_length(description, cls.DESCRIPTION_MAX_LENGTH, "Description")

    # ============================================================================
    # COMMAND METHOD - Update name / description
    # ============================================================================
    class Updated(Aggregate.Event):
        name: str
        description: str

    def update(self, name: str, description: str | None = None) -> None:
        """Rename the category and optionally replace its description.

        A ``None`` description means "not given": the current one is kept.
        """
        self._validate_name(name)
        if description is None:
            description = self.description
        else:
            self._validate_description(description)

        self.trigger_event(self.Updated, name=name, description=description)

    @event(Updated)
    def _apply_updated(self, name: str, description: str) -> None:
        self.name = name
        self.description = description

    # ============================================================================
    # COMMAND METHOD - Activation state
    # ============================================================================
    class Activated(Aggregate.Event):
        pass

    def activate(self) -> None:
        self.trigger_event(self.Activated)

    @event(Activated)
    def _apply_activated(self) -> None:
        self.is_active = True

    class Deactivated(Aggregate.Event):
        pass

    def deactivate(self) -> None:
        self.trigger_event(self.Deactivated)

    @event(Deactivated)
    def _apply_deactivated(self) -> None:
        self.is_active = False
