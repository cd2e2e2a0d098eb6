import json

import pytest

from conftest import FIXED_NOW_ISO, FakeFileStorage
from seedmerge.errors import InputError, ShapeError, WriteError
from seedmerge.modules import run_merge
from seedmerge.registry import (
    load_registry, load_seed, parse_registry, parse_seed, save_registry, serialize_registry
)

SEED = "seed.json"
REGISTRY = "mcp-registry.json"

def dump(data):
    return json.dumps(data).encode("utf-8")

def make_storage(seed, registry):
    return FakeFileStorage({SEED: dump(seed), REGISTRY: dump(registry)})

def test_missing_file_is_input_error(storage):
    with pytest.raises(InputError, match="file not found"):
        load_seed(SEED, storage)

def test_invalid_json_is_input_error():
    storage = FakeFileStorage({REGISTRY: b"{not json"})
    with pytest.raises(InputError, match="invalid JSON"):
        load_registry(REGISTRY, storage)

def test_invalid_utf8_is_input_error():
    storage = FakeFileStorage({SEED: b"\xff\xfe["})
    with pytest.raises(InputError):
        load_seed(SEED, storage)

@pytest.mark.parametrize("data", [
    [],
    {"metadata": {"count": 0}},
    {"servers": [], "metadata": 3},
    {"servers": {}, "metadata": {}},
    {"servers": [{"name": "flat"}], "metadata": {}},
])
def test_registry_shape_errors(data):
    with pytest.raises(ShapeError):
        parse_registry(data)

def test_shape_error_is_an_input_error():
    assert issubclass(ShapeError, InputError)

@pytest.mark.parametrize("data", [{"name": "a"}, [{"name": "a"}, "b"], None])
def test_seed_shape_errors(data):
    with pytest.raises(ShapeError):
        parse_seed(data)

def test_serialize_is_indented_and_keeps_unicode():
    text = serialize_registry({"servers": [], "metadata": {"count": 0, "note": "日本語"}}, indent=2).decode("utf-8")
    assert '\n  "servers": []' in text
    assert "日本語" in text

def test_write_failure_is_write_error():
    storage = FakeFileStorage(unwritable=[REGISTRY])
    with pytest.raises(WriteError):
        save_registry(REGISTRY, {"servers": [], "metadata": {"count": 0}}, storage)

def test_run_merge_writes_once(clock, empty_registry):
    storage = make_storage([{"name": "a", "version": "1.0", "packages": [{"x": 1}]}], empty_registry)
    result = run_merge(SEED, REGISTRY, storage, clock)

    assert storage.writes == [REGISTRY]
    written = json.loads(storage.files[REGISTRY])
    assert written == result.document
    assert written["metadata"]["count"] == 1
    meta = written["servers"][0]["_meta"]["io.modelcontextprotocol.registry/official"]
    assert meta["publishedAt"] == meta["updatedAt"] == FIXED_NOW_ISO

def test_run_merge_is_idempotent(clock, empty_registry):
    storage = make_storage([{"name": "a"}, {"name": "b"}], empty_registry)
    run_merge(SEED, REGISTRY, storage, clock)
    first = storage.files[REGISTRY]

    second = run_merge(SEED, REGISTRY, storage, clock)
    assert second.added == 0
    assert second.skipped == 2
    assert json.loads(storage.files[REGISTRY]) == json.loads(first)

def test_run_merge_dry_run_does_not_write(clock, empty_registry):
    storage = make_storage([{"name": "a"}], empty_registry)
    original = storage.files[REGISTRY]
    result = run_merge(SEED, REGISTRY, storage, clock, dry_run=True)
    assert result.added == 1
    assert storage.writes == []
    assert storage.files[REGISTRY] == original

def test_run_merge_bad_registry_writes_nothing(clock):
    storage = make_storage([{"name": "a"}], {"servers": []})
    with pytest.raises(ShapeError):
        run_merge(SEED, REGISTRY, storage, clock)
    assert storage.writes == []

def test_run_merge_missing_seed_writes_nothing(clock, empty_registry):
    storage = FakeFileStorage({REGISTRY: dump(empty_registry)})
    with pytest.raises(InputError):
        run_merge(SEED, REGISTRY, storage, clock)
    assert storage.writes == []
