"""Title extraction and validation.

Titles are the page identifiers that double as file names, so both the
route pattern and the form validator restrict them to ASCII letters and
digits.
"""

import re
from collections.abc import Sequence

from flatwiki.errors import InvalidTitle

TITLE_CHARS = "[a-zA-Z0-9]+"

ACTIONS: tuple[str, ...] = ("view", "edit", "save", "update", "delete", "create")

# Route set of the first release, before create/update/delete were split out
LEGACY_ACTIONS: tuple[str, ...] = ("edit", "save", "view")


class TitleValidator:
    """Extracts titles from request paths and validates form titles.

    Patterns are compiled once; instances are immutable and shared by all
    requests.
    """

    def __init__(self, actions: Sequence[str] = ACTIONS) -> None:
        """Initialize validator.

        Args:
            actions: Action prefixes accepted in front of a title
                     (e.g., "view" in "/view/Home")

        Raises:
            ValueError: If no actions are given
        """
        if not actions:
            raise ValueError("At least one route action is required")
        self._actions = tuple(actions)
        alternation = "|".join(re.escape(action) for action in self._actions)
        self._route_pattern = re.compile(f"^/({alternation})/({TITLE_CHARS})$")
        self._title_pattern = re.compile(f"^{TITLE_CHARS}$")

    @property
    def actions(self) -> tuple[str, ...]:
        """Action prefixes recognised by the route pattern."""
        return self._actions

    def extract(self, path: str) -> tuple[str, str]:
        """Match a request path against the route pattern.

        Args:
            path: URL path, e.g. "/view/Home"

        Returns:
            Tuple of (action, title)

        Raises:
            InvalidTitle: If the path does not match
        """
        match = self._route_pattern.fullmatch(path)
        if match is None:
            raise InvalidTitle(path)
        return match.group(1), match.group(2)

    def extract_title(self, path: str) -> str:
        """Return only the title captured from a request path."""
        _, title = self.extract(path)
        return title

    def validate(self, title: str) -> str:
        """Check a title supplied outside of the URL path.

        Returns:
            The title unchanged

        Raises:
            InvalidTitle: If the title contains anything but letters and digits
        """
        # fullmatch so a trailing newline is rejected too
        if not self._title_pattern.fullmatch(title):
            raise InvalidTitle(title)
        return title

    def is_valid(self, title: str) -> bool:
        return self._title_pattern.fullmatch(title) is not None
