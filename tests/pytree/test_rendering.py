"""Tests for pytree formatting and line rendering."""

import os
from datetime import datetime

import pytest
from pytree import (
    DirectoryEntry,
    EntryKind,
    IdentityResolver,
    SizeMode,
    TraversalFrame,
    TreeOptions,
    entry_details,
    format_date,
    format_mode,
    format_size,
    human_size,
    render_line,
    render_root,
    type_char,
)


class FakeResolver:
    """Resolver returning fixed names."""

    def user(self, uid):
        return {1000: "alice"}.get(uid, str(uid))

    def group(self, gid):
        return {1000: "staff"}.get(gid, str(gid))


@pytest.fixture
def file_entry():
    return DirectoryEntry(
        name="notes.txt",
        path="root/notes.txt",
        kind=EntryKind.FILE,
        size=2048,
        mode=0o100644,
        uid=1000,
        gid=1000,
        mtime=datetime(2024, 3, 5, 14, 7).timestamp(),
    )


class TestHumanSize:
    """Test human_size function."""

    def test_below_one_kilobyte(self):
        assert human_size(0) == "0"
        assert human_size(1023) == "1023"

    def test_kilobytes(self):
        assert human_size(1024) == "1.0K"
        assert human_size(1536) == "1.5K"

    def test_megabytes(self):
        assert human_size(1048576) == "1.0M"

    def test_larger_units(self):
        assert human_size(1024**3) == "1.0G"
        assert human_size(3 * 1024**4) == "3.0T"
        assert human_size(1024**5) == "1.0P"

    def test_saturates_at_petabytes(self):
        assert human_size(2048 * 1024**5) == "2048.0P"


class TestFormatSize:
    """Test format_size function."""

    def test_bytes_field_width(self):
        assert format_size(42, SizeMode.BYTES) == "         42"

    def test_human_field_width(self):
        assert format_size(5, SizeMode.HUMAN) == "   5"
        assert format_size(1024, SizeMode.HUMAN) == "1.0K"

    def test_none(self):
        assert format_size(42, SizeMode.NONE) == ""


class TestFormatMode:
    """Test format_mode and type_char functions."""

    def test_common_modes(self):
        assert format_mode(0o755) == "rwxr-xr-x"
        assert format_mode(0o421) == "r---w---x"
        assert format_mode(0o000) == "---------"
        assert format_mode(0o777) == "rwxrwxrwx"

    def test_ignores_type_bits(self):
        assert format_mode(0o100644) == "rw-r--r--"

    def test_type_char(self):
        assert type_char(EntryKind.DIRECTORY) == "d"
        assert type_char(EntryKind.SYMLINK) == "l"
        assert type_char(EntryKind.FILE) == "-"
        assert type_char(EntryKind.OTHER) == "-"


class TestFormatDate:
    """Test format_date function."""

    def test_local_time(self):
        ts = datetime(2024, 3, 5, 14, 7).timestamp()
        assert format_date(ts) == "Mar 05 14:07"

    def test_unavailable(self):
        assert format_date(None) is None


class TestEntryDetails:
    """Test entry_details function."""

    def test_no_details(self, file_entry):
        assert entry_details(file_entry, TreeOptions(), FakeResolver()) == ""

    def test_permissions(self, file_entry):
        options = TreeOptions(show_perms=True)
        assert entry_details(file_entry, options, FakeResolver()) == "[-rw-r--r--]  "

    def test_all_fields_in_order(self, file_entry):
        options = TreeOptions(
            show_perms=True,
            show_user=True,
            show_group=True,
            show_date=True,
            size_mode=SizeMode.HUMAN,
        )
        assert (
            entry_details(file_entry, options, FakeResolver())
            == "[-rw-r--r-- 2.0K alice staff Mar 05 14:07]  "
        )

    def test_unknown_ids_fall_back_to_numbers(self, file_entry):
        file_entry.uid = 4242
        file_entry.gid = 4343
        options = TreeOptions(show_user=True, show_group=True)
        assert entry_details(file_entry, options, FakeResolver()) == "[4242 4343]  "

    def test_missing_date_is_omitted(self, file_entry):
        file_entry.mtime = None
        options = TreeOptions(show_user=True, show_date=True)
        assert entry_details(file_entry, options, FakeResolver()) == "[alice]  "

    def test_only_date_missing_gives_no_brackets(self, file_entry):
        file_entry.mtime = None
        assert entry_details(file_entry, TreeOptions(show_date=True), FakeResolver()) == ""


class TestRenderLine:
    """Test render_line and render_root functions."""

    def test_connectors(self, file_entry):
        frame = TraversalFrame()
        options = TreeOptions()
        assert render_line(file_entry, frame, False, options, FakeResolver()) == "├── notes.txt"
        assert render_line(file_entry, frame, True, options, FakeResolver()) == "└── notes.txt"

    def test_bar_and_details(self, file_entry):
        frame = TraversalFrame().child(is_last=False).child(is_last=True)
        options = TreeOptions(size_mode=SizeMode.BYTES)
        assert (
            render_line(file_entry, frame, True, options, FakeResolver())
            == "│       └── [       2048]  notes.txt"
        )

    def test_symlink_shows_target(self, tmp_path):
        (tmp_path / "target.txt").write_text("x")
        (tmp_path / "link").symlink_to("target.txt")
        entry = DirectoryEntry.from_path(str(tmp_path / "link"))
        assert entry.kind is EntryKind.SYMLINK
        line = render_line(entry, TraversalFrame(), True, TreeOptions(), FakeResolver())
        assert line == "└── link -> target.txt"

    def test_unreadable_symlink_target_is_empty(self):
        entry = DirectoryEntry(name="gone", path="/nonexistent/gone", kind=EntryKind.SYMLINK)
        line = render_line(entry, TraversalFrame(), False, TreeOptions(), FakeResolver())
        assert line == "├── gone -> "

    def test_color(self, file_entry):
        line = render_line(file_entry, TraversalFrame(), True, TreeOptions(color=True), FakeResolver())
        assert line == "└── \033[1;37mnotes.txt\033[0m"

    def test_root_uses_given_path(self, file_entry):
        options = TreeOptions(show_user=True)
        assert render_root(file_entry, "some/dir", options, FakeResolver()) == "[alice]  some/dir"


class TestTraversalFrame:
    """Test TraversalFrame.child."""

    def test_bar_grows_by_four(self):
        frame = TraversalFrame()
        not_last = frame.child(is_last=False)
        assert not_last.bar == "│   "
        assert not_last.depth == 2
        last = not_last.child(is_last=True)
        assert last.bar == "│       "
        assert len(last.bar) == 8
        assert last.depth == 3

    def test_ancestors_last_chain(self):
        frame = TraversalFrame()
        assert frame.child(is_last=True).ancestors_last is True
        assert frame.child(is_last=False).child(is_last=True).ancestors_last is False


class TestIdentityResolver:
    """Test IdentityResolver."""

    def test_current_user(self):
        pwd = pytest.importorskip("pwd")
        resolver = IdentityResolver()
        assert resolver.user(os.getuid()) == pwd.getpwuid(os.getuid()).pw_name

    def test_unknown_ids(self):
        resolver = IdentityResolver()
        assert resolver.user(2**31 - 7) == str(2**31 - 7)
        assert resolver.group(2**31 - 7) == str(2**31 - 7)
