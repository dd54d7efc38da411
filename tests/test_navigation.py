import os

import pytest

from docmirror.errors import PartialTreeError
from docmirror.navigation import (
    META_HEADER,
    build_navigation_record,
    dump_navigation_record,
    load_navigation_record,
    synthesize,
)

from . import list_dirs, make_tree, read_tree


@pytest.fixture
def tree(fs):
    make_tree(
        "/sdk",
        {
            "index.mdx": b"# SDK",
            "core/index.mdx": b"# Core",
            "core/classes/Foo.mdx": b"Foo",
            "core/type-aliases/Bar.mdx": b"Bar",
            "core/realtimeEvents/Baz.mdx": b"Baz",
            "src/README.md": b"readme",
        },
    )
    os.makedirs("/sdk/core/classes/empty_dir")
    yield "/sdk"


def test_build_navigation_record(tree):
    record = build_navigation_record("/sdk/core")

    assert record == {
        "classes": {"title": "Classes"},
        "realtimeEvents": {"title": "Realtime Events"},
        "type-aliases": {"title": "Type Aliases"},
        "index": {"title": "Overview"},
    }
    assert list(record) == ["classes", "realtimeEvents", "type-aliases", "index"]


def test_build_navigation_record_without_index(tree):
    assert build_navigation_record("/sdk/src") == {}
    assert build_navigation_record("/sdk/core/classes") == {
        "empty_dir": {"title": "Empty Dir"}
    }


def test_build_navigation_record_index_filename(tree):
    record = build_navigation_record("/sdk/src", index_filename="README.md")

    assert record == {"index": {"title": "Overview"}}


def test_build_navigation_record_index_directory_is_not_index_file(tree):
    os.makedirs("/sdk/src/index.mdx")

    record = build_navigation_record("/sdk/src")

    assert record == {"index.mdx": {"title": "Index.mdx"}}


def test_dump_navigation_record():
    content = dump_navigation_record(
        {"classes": {"title": "Classes"}, "index": {"title": "Overview"}}
    )

    assert content == (
        META_HEADER + "\n"
        "export default {\n"
        '  "classes": {\n'
        '    "title": "Classes"\n'
        "  },\n"
        '  "index": {\n'
        '    "title": "Overview"\n'
        "  }\n"
        "};\n"
    )
    assert dump_navigation_record({}) == META_HEADER + "\nexport default {};\n"


def test_dump_navigation_record_keeps_unicode():
    content = dump_navigation_record({"指南": {"title": "指南"}})

    assert '"指南"' in content


def test_synthesize(tree):
    synthesize(tree)

    for relative_dir in list_dirs(tree):
        dir_path = os.path.normpath(os.path.join(tree, relative_dir))
        record = load_navigation_record(os.path.join(dir_path, "_meta.ts"))
        assert record == build_navigation_record(dir_path)

    assert load_navigation_record("/sdk/_meta.ts") == {
        "core": {"title": "Core"},
        "src": {"title": "Source"},
        "index": {"title": "Overview"},
    }
    assert load_navigation_record("/sdk/core/classes/empty_dir/_meta.ts") == {}


def test_synthesize_only_adds_meta_files(tree):
    before = read_tree(tree)

    synthesize(tree)

    after = read_tree(tree)
    added = set(after) - set(before)
    assert all(os.path.basename(path) == "_meta.ts" for path in added)
    assert len(added) == len(list_dirs(tree))
    assert {path: after[path] for path in before} == before


def test_synthesize_is_idempotent(tree):
    synthesize(tree)
    first = read_tree(tree)
    synthesize(tree)

    assert read_tree(tree) == first


def test_synthesize_meta_filename(tree):
    synthesize(tree, meta_filename="_meta.js", index_filename="README.md")

    assert not os.path.exists("/sdk/_meta.ts")
    assert load_navigation_record("/sdk/src/_meta.js") == {
        "index": {"title": "Overview"}
    }
    assert "index" not in load_navigation_record("/sdk/core/_meta.js")


def test_synthesize_missing_dir(fs):
    with pytest.raises(PartialTreeError) as error:
        synthesize("/NotExist")

    assert isinstance(error.value.__cause__, FileNotFoundError)


def test_synthesize_write_failure(tree, mocker):
    failure = OSError(28, "No space left on device", "/sdk/core/_meta.ts")
    mocker.patch(
        "docmirror.navigation.dump_navigation_record",
        side_effect=[dump_navigation_record({}), failure],
    )

    with pytest.raises(PartialTreeError) as error:
        synthesize(tree)

    assert error.value.path == "/sdk/core/_meta.ts"
    assert error.value.__cause__ is failure
    assert os.path.exists("/sdk/_meta.ts")
    assert not os.path.exists("/sdk/src/_meta.ts")


def test_synthesize_keeps_hand_written_meta_file(tree):
    make_tree(tree, {"core/_meta.ts": b"export default {};\n"})

    with pytest.raises(PartialTreeError) as error:
        synthesize(tree)

    assert error.value.path == "/sdk/core/_meta.ts"
    assert isinstance(error.value.__cause__, FileExistsError)
    with open("/sdk/core/_meta.ts", "rb") as f:
        assert f.read() == b"export default {};\n"
    assert os.path.exists("/sdk/_meta.ts")
    assert not os.path.exists("/sdk/src/_meta.ts")


def test_synthesize_meta_path_is_directory(tree):
    os.makedirs("/sdk/src/_meta.ts")

    with pytest.raises(PartialTreeError) as error:
        synthesize(tree)

    assert isinstance(error.value.__cause__, OSError)
    assert os.path.isdir("/sdk/src/_meta.ts")


def test_synthesize_replaces_generated_meta_file(tree):
    make_tree(
        tree,
        {"core/_meta.ts": dump_navigation_record({"old": {"title": "Old"}}).encode()},
    )

    synthesize(tree)

    assert "old" not in load_navigation_record("/sdk/core/_meta.ts")
    assert "classes" in load_navigation_record("/sdk/core/_meta.ts")


def test_load_navigation_record_rejects_hand_written_file(fs):
    make_tree("/", {"_meta.ts": b'export default {"a": {"title": "A"}};\n'})
    make_tree("/bad", {"_meta.ts": (META_HEADER + "\n{}\n").encode()})

    with pytest.raises(ValueError):
        load_navigation_record("/_meta.ts")
    with pytest.raises(ValueError):
        load_navigation_record("/bad/_meta.ts")
