"""Domain model for a computed floor route."""
from collections import deque
from typing import Iterable, Iterator, List, Tuple

from .floor import Location
from ...shared.exceptions import EmptyRouteError


class Route:
    """Ordered steps from (excluding) a source to (including) a target.

    Steps are consumed from the front, one at a time, by the route's owner.
    """

    def __init__(self, steps: Iterable[Location] = ()):
        self._steps = deque(steps)

    @property
    def steps(self) -> Tuple[Location, ...]:
        """Read-only snapshot of the remaining steps."""
        return tuple(self._steps)

    @property
    def target(self) -> Location:
        if not self._steps:
            raise EmptyRouteError()
        return self._steps[-1]

    def prepend(self, location: Location):
        self._steps.appendleft(location)

    def peek_remaining_steps(self) -> int:
        """Number of steps not yet consumed."""
        return len(self._steps)

    def peek_next_step(self) -> Location:
        if not self._steps:
            raise EmptyRouteError()
        return self._steps[0]

    def pop_next_step(self) -> Location:
        """Remove and return the next step.

        Raises:
            EmptyRouteError: If no steps remain
        """
        if not self._steps:
            raise EmptyRouteError()
        return self._steps.popleft()

    def clear(self):
        self._steps.clear()

    def validate(self, source: Location) -> List[str]:
        """Validate that the route is a continuous walk starting next to source."""
        issues = []
        previous = source
        for i, step in enumerate(self._steps):
            if not previous.is_adjacent(step):
                issues.append(f"Invalid movement at step {i}: {previous} -> {step}")
            previous = step
        return issues

    def __len__(self) -> int:
        return len(self._steps)

    def __bool__(self) -> bool:
        return bool(self._steps)

    def __iter__(self) -> Iterator[Location]:
        return iter(tuple(self._steps))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._steps == other._steps

    def __repr__(self) -> str:
        return f"Route({list(self._steps)!r})"
