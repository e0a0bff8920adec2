"""Id Sequence - monotonic blog identifier generator.

Invariants:
    - Starts at 0; first issued id is 1
    - next_id() never returns the same value twice within one instance
    - advance_to() only moves forward

Design Decisions:
    - Pure dataclass with no lock of its own: callers mutate it inside the
      Blog Store's exclusive guard, which is what makes assignment exactly-once
    - Not persisted: a restart starts again at 0 unless the store is asked
      to seed it from existing records
"""

from dataclasses import dataclass

from blog_api.core.domain_types import BlogId


@dataclass
class IdSequence:
    """Process-local counter owned by exactly one Blog Store."""

    current: int = 0

    def next_id(self) -> BlogId:
        self.current += 1
        return BlogId(self.current)

    def advance_to(self, floor: int) -> None:
        """Ensure the next issued id is greater than floor."""
        if floor > self.current:
            self.current = floor
