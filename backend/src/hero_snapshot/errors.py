"""Failure taxonomy for the hero snapshot pipeline."""


class SnapshotError(Exception):
    """Base class for all pipeline failures."""


class HeroNotFoundError(SnapshotError):
    """No roster entry matched a search query."""

    def __init__(self, query: str):
        super().__init__(f"Could not find a hero matching {query!r}")
        self.query = query


class TransportError(SnapshotError):
    """An upstream fetch failed or returned malformed data."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class IntegrityError(SnapshotError):
    """Roster and reference tables disagree (e.g. a hero id with no metadata)."""


class NoDataError(SnapshotError):
    """A hero has no recorded picks, so its win rate is undefined."""

    def __init__(self, hero_id: int):
        super().__init__(f"Hero {hero_id} has no recorded picks")
        self.hero_id = hero_id


class InsufficientDataError(SnapshotError):
    """Fewer resolvable items than requested exist for a phase."""

    def __init__(self, phase: str, available: int, required: int):
        super().__init__(
            f"Only {available} resolvable items for {phase} phase, {required} required"
        )
        self.phase = phase
        self.available = available
        self.required = required
