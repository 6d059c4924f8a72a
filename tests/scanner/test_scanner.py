import pytest

from shader_gen.errors import ScanError
from shader_gen.scanner import FileEntry, scan, scan_entries
from shader_gen.stages import MANIFEST_FILENAME
from shader_gen.testing import set_mtime, write_source


def entries(*items):
    return [FileEntry(name=name, mtime_ns=mtime) for name, mtime in items]


def test_source_without_artifact_needs_generation():
    result = scan_entries(entries(("basic.vert", 10)))
    assert result.to_generate == ("basic.vert",)
    assert result.to_delete == ()
    assert result.all_sources == ("basic.vert",)
    assert not result.manifest_present


def test_artifact_strictly_older_needs_generation():
    result = scan_entries(entries(("basic.vert", 20), ("basic.vert.gen.py", 10)))
    assert result.to_generate == ("basic.vert",)


def test_artifact_equal_or_newer_is_up_to_date():
    equal = scan_entries(entries(("a.frag", 10), ("a.frag.gen.py", 10), (MANIFEST_FILENAME, 5)))
    newer = scan_entries(entries(("a.frag", 10), ("a.frag.gen.py", 30), (MANIFEST_FILENAME, 5)))
    for result in (equal, newer):
        assert result.to_generate == ()
        assert result.manifest_present
        assert result.up_to_date


def test_force_schedules_every_source():
    result = scan_entries(
        entries(("a.frag", 10), ("a.frag.gen.py", 30), ("b.comp", 10), ("b.comp.gen.py", 30)),
        force=True,
    )
    assert result.to_generate == ("a.frag", "b.comp")


def test_orphans_need_deletion():
    result = scan_entries(entries(("a.frag", 10), ("a.frag.gen.py", 30), ("gone.vert.gen.py", 5)))
    assert result.to_delete == ("gone.vert.gen.py",)
    assert result.all_sources == ("a.frag",)


def test_unrelated_files_and_directories_ignored():
    items = entries(("notes.txt", 1), ("helpers.gen.py", 1), ("common.glsl", 1))
    items.append(FileEntry(name="nested.vert", mtime_ns=1, is_dir=True))
    result = scan_entries(items)
    assert result.to_generate == ()
    assert result.to_delete == ()
    assert result.all_sources == ()


def test_all_sources_sorted():
    result = scan_entries(entries(("z.vert", 1), ("a.frag", 1), ("m.comp.glsl", 1)))
    assert result.all_sources == ("a.frag", "m.comp.glsl", "z.vert")
    assert result.to_generate == result.all_sources


def test_unreadable_mtime_under_comparison_is_fatal():
    with pytest.raises(ScanError):
        scan_entries(entries(("a.frag", None), ("a.frag.gen.py", 10)))
    with pytest.raises(ScanError):
        scan_entries(entries(("a.frag", 10), ("a.frag.gen.py", None)))


def test_unreadable_mtime_not_compared_is_fine():
    result = scan_entries(entries(("a.frag", None)))
    assert result.to_generate == ("a.frag",)
    forced = scan_entries(entries(("a.frag", None), ("a.frag.gen.py", None)), force=True)
    assert forced.to_generate == ("a.frag",)


def test_scan_reads_directory(shader_dir, make_config):
    write_source(shader_dir, "new.vert", mtime_ns=1_000_000_000)
    write_source(shader_dir, "edited.frag", mtime_ns=3_000_000_000)
    set_mtime(write_source(shader_dir, "edited.frag.gen.py", "old"), 2_000_000_000)
    write_source(shader_dir, "fresh.comp", mtime_ns=1_000_000_000)
    set_mtime(write_source(shader_dir, "fresh.comp.gen.py", "old"), 2_000_000_000)
    write_source(shader_dir, "orphan.geom.gen.py", "old")
    (shader_dir / "sub.vert").mkdir()

    result = scan(make_config())
    assert result.to_generate == ("edited.frag", "new.vert")
    assert result.to_delete == ("orphan.geom.gen.py",)
    assert result.all_sources == ("edited.frag", "fresh.comp", "new.vert")
    assert not result.manifest_present


def test_scan_missing_directory_raises(tmp_path, make_config):
    with pytest.raises(ScanError):
        scan(make_config(directory=tmp_path / "missing"))
