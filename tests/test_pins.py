import json
import logging

from quicklaunch.constants import PINS_KEY
from quicklaunch.errors import StorageError
from quicklaunch.pins import PinStore, parse_pins
from quicklaunch.storage import JsonFileStore, MemoryStore

from .conftest import CHROME, VSCODE, WECHAT, app


class FailingStore(MemoryStore):
    def set(self, key, value):
        raise StorageError("disk full")


def _names(store: PinStore):
    return [p.app.name for p in store.pins]


def _orders(store: PinStore):
    return [p.order for p in store.pins]


def test_add_pin_appends_with_alias_and_order(kv):
    pins = PinStore(kv)
    first = pins.add_pin(CHROME)
    second = pins.add_pin(VSCODE)
    assert first.alias == "Google Chrome"
    assert (first.order, second.order) == (0, 1)
    assert pins.apps() == [CHROME, VSCODE]


def test_add_pin_is_idempotent_per_path(kv):
    pins = PinStore(kv)
    assert pins.add_pin(CHROME) is not None
    assert pins.add_pin(CHROME) is None
    assert len(pins) == 1


def test_remove_pin_keeps_orders_dense(kv):
    pins = PinStore(kv)
    for a in (CHROME, VSCODE, WECHAT):
        pins.add_pin(a)
    middle = pins.pins[1]
    assert pins.remove_pin(middle.id) is True
    assert _names(pins) == ["Google Chrome", "WeChat"]
    assert _orders(pins) == [0, 1]


def test_unknown_ids_are_no_ops(kv):
    pins = PinStore(kv)
    pins.add_pin(CHROME)
    before = pins.pins
    assert pins.remove_pin("nope") is False
    assert pins.rename_pin("nope", "x") is False
    assert pins.reorder_pins("nope", before[0].id) is False
    assert pins.reorder_pins(before[0].id, before[0].id) is False
    assert pins.pins == before


def test_rename_pin_changes_alias_only(kv):
    pins = PinStore(kv)
    pin = pins.add_pin(CHROME)
    assert pins.rename_pin(pin.id, "Browser") is True
    renamed = pins.get(pin.id)
    assert renamed.alias == "Browser"
    assert renamed.app == CHROME
    assert renamed.order == 0


def test_reorder_places_source_immediately_before_target(kv):
    pins = PinStore(kv)
    for name in "abcd":
        pins.add_pin(app(name))
    ids = {p.app.name: p.id for p in pins.pins}

    assert pins.reorder_pins(ids["d"], ids["b"]) is True
    assert _names(pins) == ["a", "d", "b", "c"]
    assert _orders(pins) == [0, 1, 2, 3]

    # moving forward: still lands right before the target
    assert pins.reorder_pins(ids["a"], ids["c"]) is True
    assert _names(pins) == ["d", "b", "a", "c"]


def test_pins_survive_a_reload(kv):
    pins = PinStore(kv)
    for a in (CHROME, VSCODE, WECHAT):
        pins.add_pin(a)
    pins.reorder_pins(pins.pins[2].id, pins.pins[0].id)
    pins.rename_pin(pins.pins[0].id, "Chat")

    reloaded = PinStore(kv)
    assert reloaded.pins == pins.pins
    assert reloaded.pins[0].alias == "Chat"


def test_pins_round_trip_through_the_state_file(tmp_path):
    path = tmp_path / "state.json"
    pins = PinStore(JsonFileStore(path))
    pins.add_pin(CHROME)
    pins.add_pin(VSCODE)

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert [p["app"]["name"] for p in on_disk[PINS_KEY]] == ["Google Chrome", "Visual Studio Code"]
    assert PinStore(JsonFileStore(path)).apps() == [CHROME, VSCODE]


def test_parse_pins_rejects_malformed_data():
    assert parse_pins(None) == []
    assert parse_pins("garbage") == []
    assert parse_pins([{"bad": 1}]) == []
    assert parse_pins(["not a dict"]) == []


def test_parse_pins_sorts_and_compacts_orders():
    raw = [
        {"id": "b", "app": VSCODE.to_dict(), "alias": "Code", "order": 7},
        {"id": "a", "app": CHROME.to_dict(), "alias": "Chrome", "order": 2},
        {"id": "c", "app": CHROME.to_dict(), "alias": "Dup", "order": 9},
    ]
    pins = parse_pins(raw)
    assert [p.id for p in pins] == ["a", "b"]
    assert [p.order for p in pins] == [0, 1]


def test_malformed_pin_data_loads_as_empty_board():
    pins = PinStore(MemoryStore({PINS_KEY: {"oops": True}}))
    assert pins.pins == []


def test_write_failure_keeps_in_memory_pins(caplog):
    pins = PinStore(FailingStore())
    with caplog.at_level(logging.ERROR, logger="quicklaunch.pins"):
        pin = pins.add_pin(CHROME)
    assert pin is not None
    assert pins.apps() == [CHROME]
    assert "Persisting 1 pins failed" in caplog.text
