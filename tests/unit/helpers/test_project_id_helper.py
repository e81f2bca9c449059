"""Unit tests for project identifier normalization."""

import pytest

from architector.helpers.exceptions import InvalidIdentifierError
from architector.helpers.project_id_helper import normalize_project_id


class TestNormalizeProjectId:
    """Tests for normalize_project_id."""

    @pytest.mark.unit
    def test_workspace_path(self) -> None:
        """Every character outside [A-Za-z0-9_-] becomes an underscore."""
        assert normalize_project_id("/home/me/proj 1") == "_home_me_proj_1"

    @pytest.mark.unit
    def test_safe_id_is_unchanged(self) -> None:
        assert normalize_project_id("my-project_2") == "my-project_2"

    @pytest.mark.unit
    def test_preserves_length(self) -> None:
        raw = "C:\\Users\\dev\\app.v2"
        result = normalize_project_id(raw)
        assert len(result) == len(raw)
        assert result == "C__Users_dev_app_v2"

    @pytest.mark.unit
    def test_non_ascii_is_replaced(self) -> None:
        assert normalize_project_id("café") == "caf_"

    @pytest.mark.unit
    def test_is_idempotent(self) -> None:
        once = normalize_project_id("/a b/c.d")
        assert normalize_project_id(once) == once

    @pytest.mark.unit
    def test_distinct_inputs_can_collide(self) -> None:
        """Collisions after normalization are accepted, not corrected."""
        assert normalize_project_id("a/b") == normalize_project_id("a.b")

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_input_raises(self, raw: str | None) -> None:
        with pytest.raises(InvalidIdentifierError):
            normalize_project_id(raw)
