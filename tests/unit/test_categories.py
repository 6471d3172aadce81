"""Unit tests for blockfinder.categories."""

from __future__ import annotations

from blockfinder.categories import extract_categories
from blockfinder.models.registry import ComponentRecord, ComponentType, RegistryFile


def _record(name: str, path: str | None = None, categories: list[str] | None = None):
    return ComponentRecord(
        name=name,
        type=ComponentType.UI,
        files=[RegistryFile(path=path)] if path else [],
        categories=categories or [],
    )


class TestExtractCategories:
    def test_name_and_path_with_plural_hint(self) -> None:
        record = _record("fancy-button", "components/ui/buttons/fancy-button.tsx")
        assert extract_categories(record) == {"fancy", "button", "components", "buttons"}

    def test_short_name_tokens_dropped(self) -> None:
        assert extract_categories(_record("use-mobile")) == {"mobile"}

    def test_four_letter_tokens_kept(self) -> None:
        assert extract_categories(_record("card-grid")) == {"card", "grid"}

    def test_underscore_separator(self) -> None:
        assert extract_categories(_record("date_picker")) == {"date", "picker"}

    def test_name_tokens_lowercased(self) -> None:
        assert extract_categories(_record("Hero-Section")) == {"hero", "section"}

    def test_path_segments_with_dot_dropped(self) -> None:
        record = _record("xyz", "components/ui/input.tsx")
        assert extract_categories(record) == {"components"}

    def test_backslash_paths(self) -> None:
        record = _record("xyz", "components\\ui\\buttons\\x.tsx")
        assert extract_categories(record) == {"components", "buttons", "button"}

    def test_modals_and_dialogs_map_to_dialog(self) -> None:
        assert "dialog" in extract_categories(_record("xyz", "components/modals/confirm.tsx"))
        assert "dialog" in extract_categories(_record("xyz", "components/dialogs/confirm.tsx"))

    def test_navigation_maps_to_nav(self) -> None:
        tags = extract_categories(_record("xyz", "components/navigation/top-bar.tsx"))
        assert {"nav", "navigation"} <= tags

    def test_hint_is_plain_substring(self) -> None:
        # "cards" inside "scorecards" still triggers the card hint
        tags = extract_categories(_record("xyz", "blocks/scorecards/a.tsx"))
        assert "card" in tags

    def test_singular_directory_gets_no_hint(self) -> None:
        tags = extract_categories(_record("xyz", "components/loader/a.tsx"))
        assert tags == {"components", "loader"}

    def test_explicit_categories_lowercased(self) -> None:
        record = _record("xyz", categories=["Pricing", "UI"])
        assert extract_categories(record) == {"pricing", "ui"}

    def test_only_primary_file_used(self) -> None:
        record = ComponentRecord(
            name="xyz",
            type=ComponentType.UI,
            files=[RegistryFile(path="a/first/x.tsx"), RegistryFile(path="b/second/y.tsx")],
        )
        assert extract_categories(record) == {"first"}

    def test_deterministic(self, sample_records: list[ComponentRecord]) -> None:
        for record in sample_records:
            assert extract_categories(record) == extract_categories(record)
