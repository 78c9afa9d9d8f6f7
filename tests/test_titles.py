"""Tests for title extraction and validation."""

import pytest
from flatwiki.core.titles import ACTIONS, LEGACY_ACTIONS, TitleValidator
from flatwiki.errors import InvalidTitle


class TestExtract:
    """Tests for TitleValidator.extract()."""

    @pytest.mark.parametrize("action", ACTIONS)
    def test__known_action__returns_action_and_title(self, action: str) -> None:
        """Capture action and title for every default action."""
        validator = TitleValidator()

        assert validator.extract(f"/{action}/Alpha1") == (action, "Alpha1")

    @pytest.mark.parametrize(
        "path",
        [
            "/view/",
            "/view",
            "/view/bad title",
            "/view/bad-title",
            "/view/a/b",
            "/view/../secret",
            "/show/Alpha1",
            "view/Alpha1",
            "/view/Alpha1\n",
            "/view/Ünicode",
        ],
    )
    def test__malformed_path__raises_invalid_title(self, path: str) -> None:
        """Reject paths that do not match the route pattern."""
        validator = TitleValidator()

        with pytest.raises(InvalidTitle):
            validator.extract(path)

    def test__legacy_actions__rejects_removed_actions(self) -> None:
        """Legacy route set only accepts edit, save and view."""
        validator = TitleValidator(LEGACY_ACTIONS)

        assert validator.extract_title("/save/Home") == "Home"
        with pytest.raises(InvalidTitle):
            validator.extract("/delete/Home")

    def test__no_actions__raises_value_error(self) -> None:
        """Refuse to build a validator without actions."""
        with pytest.raises(ValueError, match="At least one route action"):
            TitleValidator(())


class TestValidate:
    """Tests for TitleValidator.validate()."""

    @pytest.mark.parametrize("title", ["Alpha1", "a", "ABC", "123"])
    def test__alphanumeric_title__returned_unchanged(self, title: str) -> None:
        """Accept titles made of letters and digits."""
        assert TitleValidator().validate(title) == title

    @pytest.mark.parametrize("title", ["", "bad title!", "a.b", "..", "a/b", "Home\n", "é"])
    def test__other_characters__raises_invalid_title(self, title: str) -> None:
        """Reject titles with any other character."""
        validator = TitleValidator()

        with pytest.raises(InvalidTitle) as exc_info:
            validator.validate(title)

        assert exc_info.value.title == title
        assert not validator.is_valid(title)
