from __future__ import annotations

from datetime import datetime, timezone

import pytest

from recipes_api.app.domain.models import (
    Recipe,
    RecipeDraft,
    StoreState,
    parse_timestamp,
)

PUBLISHED = datetime(2021, 1, 17, 19, 28, 52, tzinfo=timezone.utc)


class TestStoreState:
    def test_store_state_values(self) -> None:
        assert StoreState.UNINITIALIZED.value == "UNINITIALIZED"
        assert StoreState.READY.value == "READY"

    def test_store_state_is_string_enum(self) -> None:
        assert isinstance(StoreState.READY, str)
        assert StoreState.READY == "READY"


class TestRecipeDraft:
    def test_build_converts_lists_to_tuples(self) -> None:
        draft = RecipeDraft.build("Pasta", tags=["Italian", "Dinner"], ingredients=["flour"])

        assert draft.name == "Pasta"
        assert draft.tags == ("Italian", "Dinner")
        assert draft.ingredients == ("flour",)
        assert draft.instructions == ()

    def test_build_keeps_duplicate_tags_in_order(self) -> None:
        draft = RecipeDraft.build("Soup", tags=["b", "a", "b"])

        assert draft.tags == ("b", "a", "b")

    def test_draft_is_immutable(self) -> None:
        draft = RecipeDraft.build("Pasta")

        with pytest.raises(AttributeError):
            draft.name = "Pizza"  # type: ignore[misc]


class TestRecipe:
    def test_from_draft(self) -> None:
        draft = RecipeDraft.build("Pasta", tags=["Italian"], instructions=["Boil water"])

        recipe = Recipe.from_draft(draft, id="abc", published_at=PUBLISHED)

        assert recipe.id == "abc"
        assert recipe.name == "Pasta"
        assert recipe.tags == ("Italian",)
        assert recipe.instructions == ("Boil water",)
        assert recipe.published_at == PUBLISHED

    def test_with_draft_keeps_id_and_published_at(self) -> None:
        recipe = Recipe.from_draft(RecipeDraft.build("Pasta"), id="abc", published_at=PUBLISHED)

        updated = recipe.with_draft(RecipeDraft.build("Pizza", tags=["Italian"]))

        assert updated.id == "abc"
        assert updated.published_at == PUBLISHED
        assert updated.name == "Pizza"
        assert updated.tags == ("Italian",)
        assert recipe.name == "Pasta"

    def test_has_tag_is_case_insensitive(self) -> None:
        recipe = Recipe(id="1", name="Pasta", published_at=PUBLISHED, tags=("Italian", "Dinner"))

        assert recipe.has_tag("italian") is True
        assert recipe.has_tag("DINNER") is True
        assert recipe.has_tag("dessert") is False

    def test_has_tag_uses_casefold(self) -> None:
        recipe = Recipe(id="1", name="Strudel", published_at=PUBLISHED, tags=("Straße",))

        assert recipe.has_tag("STRASSE") is True

    def test_to_row(self) -> None:
        recipe = Recipe(
            id="1",
            name="Pasta",
            published_at=PUBLISHED,
            tags=("Italian",),
            ingredients=("flour", "eggs"),
            instructions=("Mix",),
        )

        row = recipe.to_row()

        assert row == {
            "id": "1",
            "name": "Pasta",
            "tags": ["Italian"],
            "ingredients": ["flour", "eggs"],
            "instructions": ["Mix"],
            "published_at": "2021-01-17T19:28:52+00:00",
        }


class TestParseTimestamp:
    def test_parses_zulu_suffix(self) -> None:
        assert parse_timestamp("2021-01-17T19:28:52Z") == PUBLISHED

    def test_naive_value_is_utc(self) -> None:
        assert parse_timestamp("2021-01-17T19:28:52") == PUBLISHED

    def test_five_digit_fraction(self) -> None:
        parsed = parse_timestamp("2021-01-17T19:28:52.12345+00:00")

        assert parsed == PUBLISHED.replace(microsecond=123450)

    def test_datetime_passthrough(self) -> None:
        assert parse_timestamp(PUBLISHED) is PUBLISHED

    def test_invalid_values(self) -> None:
        assert parse_timestamp(None) is None
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(12345) is None  # type: ignore[arg-type]
