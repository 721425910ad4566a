"""Registry of sports built from the static category taxonomy."""
import logging
from typing import Dict, Iterable, List, Optional

from processor.models import Category, Sport
from processor.taxonomy import SPORT_DEFINITIONS, SportDefinition

logger = logging.getLogger(__name__)


class UnknownSportError(KeyError):
    """Raised when a sport name is not present in the registry."""

    def __init__(self, names: List[str]):
        super().__init__(names)
        self.names = names

    def __str__(self) -> str:
        return f"Unknown sport(s): {', '.join(self.names)}"


class SportRegistry:
    """Owns every Sport known to one processing run."""

    def __init__(self, definitions: Optional[Iterable[SportDefinition]] = None):
        """
        Build Sport objects from taxonomy definitions.

        Args:
            definitions: Sport definitions to load (default: full taxonomy)
        """
        if definitions is None:
            definitions = SPORT_DEFINITIONS

        self._sports: Dict[str, Sport] = {}
        for definition in definitions:
            sport = Sport(name=definition.name, icon=definition.icon)
            for category_def in definition.categories:
                sport.categories[category_def.name] = Category(
                    name=category_def.name,
                    redirect=category_def.redirect
                )
            self._sports[sport.name] = sport

        logger.debug(f"Loaded {len(self._sports)} sports into registry")

    def __contains__(self, name: str) -> bool:
        return name in self._sports

    def get(self, name: str) -> Sport:
        """
        Look up a sport by display name.

        Raises:
            UnknownSportError: If no sport has that name
        """
        try:
            return self._sports[name]
        except KeyError:
            raise UnknownSportError([name]) from None

    def select(self, names: Iterable[str]) -> List[Sport]:
        """
        Resolve several sport names, preserving the requested order.

        A name requested more than once is resolved only once, at its first
        position.

        Raises:
            UnknownSportError: Listing every name that is not registered
        """
        # drop repeats, keep first-occurrence order
        names = list(dict.fromkeys(names))
        unknown = [name for name in names if name not in self]
        if unknown:
            raise UnknownSportError(unknown)
        return [self._sports[name] for name in names]
