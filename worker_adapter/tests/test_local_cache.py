import pytest

from worker_adapter.errors import CodeCacheError
from worker_adapter.lifecycle import LocalCodeCache, action_digest


def test_path_is_deterministic(tmp_path):
    first = LocalCodeCache(tmp_path)
    second = LocalCodeCache(tmp_path)

    assert first.path_for("foo") == second.path_for("foo")
    assert first.path_for("foo") != first.path_for("bar")
    assert first.path_for("foo").name == f"python_local_{action_digest('foo')}.py"
    assert len(action_digest("foo")) == 8


def test_write_then_resolve_returns_written_code(tmp_path):
    cache = LocalCodeCache(tmp_path)
    cache.write("foo", "code A")

    path = cache.resolve_for_execution("foo", {"code": "code B"})

    assert path.read_text(encoding="utf-8") == "code A"


def test_resolve_regenerates_missing_file(tmp_path):
    cache = LocalCodeCache(tmp_path / "nested")
    original = cache.write("foo", "code A")
    original.unlink()

    path = cache.resolve_for_execution("foo", {"code": "code A"})

    assert path == original
    assert path.read_text(encoding="utf-8") == "code A"


def test_write_overwrites(tmp_path):
    cache = LocalCodeCache(tmp_path)
    cache.write("foo", "a much longer first version")
    cache.write("foo", "short")

    assert cache.path_for("foo").read_text(encoding="utf-8") == "short"
    assert [p.name for p in tmp_path.iterdir()] == [cache.path_for("foo").name]


def test_remove_is_idempotent(tmp_path):
    cache = LocalCodeCache(tmp_path)
    cache.write("foo", "x = 1")

    cache.remove("foo")
    cache.remove("foo")

    assert not cache.path_for("foo").exists()


def test_missing_base_path_fails():
    cache = LocalCodeCache(None)

    with pytest.raises(CodeCacheError):
        cache.path_for("foo")
    with pytest.raises(RuntimeError):
        cache.resolve_for_execution("foo", {"code": "x = 1"})


def test_resolve_without_code_fails(tmp_path):
    with pytest.raises(CodeCacheError):
        LocalCodeCache(tmp_path).resolve_for_execution("foo", {})


def test_load_handler(tmp_path):
    cache = LocalCodeCache(tmp_path)
    path = cache.write("foo", "def handle(*args):\n    return len(args)\n")

    handler = cache.load_handler(path)

    assert handler(1, 2, 3) == 3


def test_load_handler_requires_callable(tmp_path):
    cache = LocalCodeCache(tmp_path)
    path = cache.write("foo", "handle = 42\n")

    with pytest.raises(CodeCacheError, match="callable"):
        cache.load_handler(path)


def test_load_handler_picks_up_updates(tmp_path):
    cache = LocalCodeCache(tmp_path)
    cache.write("foo", "def handle():\n    return 'v1'\n")
    assert cache.load_handler(cache.path_for("foo"))() == "v1"

    cache.write("foo", "def handle():\n    return 'v2'\n")
    assert cache.load_handler(cache.path_for("foo"))() == "v2"


def test_load_handler_leaves_no_bytecode_behind(tmp_path):
    cache = LocalCodeCache(tmp_path)
    path = cache.write("foo", "def handle():\n    return 'ok'\n")

    assert cache.load_handler(path)() == "ok"
    assert not (tmp_path / "__pycache__").exists()
