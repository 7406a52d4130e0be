"""Display factory."""

from collections.abc import Callable
from dataclasses import dataclass, field

from .Display import Display


def _default_factory() -> Display:
    from .CLIDisplay import CLIDisplay

    return CLIDisplay()


@dataclass(frozen=True)
class DisplayContext:
    """Centralized display factory; tests swap ``factory`` for a recorder."""

    factory: Callable[[], Display] = field(default=_default_factory)

    def get_display(self) -> Display:
        return self.factory()
