"""Tests for the Supabase record store."""

from dataclasses import dataclass, field

import pytest

from nutrition_insights.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from nutrition_insights.demo_data import DEMO_PROFILES, DEMO_RECIPES


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "delete": []}
    )
    actions: list[str] = field(default_factory=list)
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    orders: list[tuple[str, bool]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.orders.append((column, desc))
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_list_profiles_orders_by_position_and_coerces() -> None:
    client = FakeSupabaseClient()
    table = client.table("nutrition_profiles")
    table.queue(
        "select",
        [
            {
                "diet_name": "Vegan",
                "calories": "420",
                "protein": 20,
                "carbs": 50,
                "fat": 15,
            },
            {"diet_name": "Keto", "calories": 530, "protein": 30, "carbs": 10},
        ],
    )

    profiles = SupabaseRecordRepository(client).list_profiles()

    assert table.orders == [("position", False)]
    assert [p.diet_name for p in profiles] == ["Vegan", "Keto"]
    assert profiles[0].calories == 420.0
    assert profiles[1].fat == 0.0


def test_list_recipes_parses_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("recipes")
    table.queue(
        "select",
        [
            {
                "id": 6,
                "name": "Vegan Lentil Soup",
                "diet_type": "vegan",
                "calories": 360,
                "protein": 16,
            }
        ],
    )

    recipes = SupabaseRecordRepository(client).list_recipes()

    assert table.orders == [("position", False)]
    assert recipes[0].id == 6
    assert recipes[0].diet_type == "vegan"


def test_list_returns_empty_when_no_rows() -> None:
    client = FakeSupabaseClient()

    assert SupabaseRecordRepository(client).list_profiles() == []


def test_replace_all_deletes_then_inserts_with_positions() -> None:
    client = FakeSupabaseClient()
    profiles_table = client.table("nutrition_profiles")
    recipes_table = client.table("recipes")
    profiles_table.queue("insert", [{"diet_name": "Vegan"}])
    recipes_table.queue("insert", [{"id": 1}])

    SupabaseRecordRepository(client).replace_all(DEMO_PROFILES, DEMO_RECIPES)

    assert profiles_table.actions == ["delete", "insert"]
    assert recipes_table.actions == ["delete", "insert"]
    assert profiles_table.last_filters == [("position", 0)]
    payload = profiles_table.last_payload
    assert isinstance(payload, list)
    assert [row["position"] for row in payload] == list(range(len(DEMO_PROFILES)))
    assert payload[1]["diet_name"] == "Keto"
    recipe_payload = recipes_table.last_payload
    assert isinstance(recipe_payload, list)
    assert recipe_payload[5] == {
        "position": 5,
        "id": 6,
        "name": "Vegan Lentil Soup",
        "diet_type": "vegan",
        "calories": 360,
        "protein": 16,
    }


def test_replace_all_raises_when_insert_returns_nothing() -> None:
    client = FakeSupabaseClient()

    with pytest.raises(RuntimeError, match="Failed to seed nutrition profiles"):
        SupabaseRecordRepository(client).replace_all(DEMO_PROFILES, DEMO_RECIPES)
