#!/usr/bin/env python3
"""
pytree - Directory tree renderer.

Lists the contents of directories in a tree-like format, similar to the Unix
'tree' command. Supports depth limits, directory-only output, regex name
patterns, size filters, and per-entry details (permissions, size, owner,
group, modification date). Symbolic links are shown with their target and
are never followed.
"""

import argparse
import grp
import logging
import os
import pwd
import re
import stat
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)

# Tree glyphs
BRANCH = "├──"
LAST_BRANCH = "└──"
VERTICAL = "│"
BAR_WIDTH = 4

SIZE_UNITS = ["K", "M", "G", "T", "P"]
SIZE_SPEC_RE = re.compile(r"^(?P<sign>[-+])?(?P<magnitude>\d+)(?P<unit>[KMGTP])?$")
DATE_FORMAT = "%b %d %H:%M"


class ColorFormatter(logging.Formatter):
    """
    Custom logging formatter that adds ANSI color codes to log messages.

    This formatter applies color coding based on log levels for better
    readability in terminal output.
    """

    COLORS = {
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[41m",  # Red background
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with colors.

        Args:
            record (logging.LogRecord):
                The log record to format.

        Returns:
            str:
                The formatted log message with ANSI color codes.

        """
        color = self.COLORS.get(record.levelno, "")
        message = super().format(record)
        if color:
            message = f"{color}{message}{self.RESET}"
        return message


class ConfigError(ValueError):
    """Raised when the requested options cannot be turned into a valid run."""


class EntryKind(Enum):
    """Enumeration of filesystem entry kinds."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


class SizeMode(Enum):
    """How entry sizes are displayed."""

    NONE = "none"
    BYTES = "bytes"
    HUMAN = "human"


class SizeSign(Enum):
    """Comparison operator of a size filter."""

    NONE = ""
    LESS = "-"
    GREATER = "+"


@dataclass
class DirectoryEntry:
    """A snapshot of one filesystem entry met while scanning a directory.

    Attributes:
        name (str):
            The base name of the entry.
        path (str):
            The path of the entry, relative to the working directory or absolute
            depending on how the root was given.
        kind (EntryKind):
            The entry kind, as reported by lstat.
        size (int):
            Length in bytes.
        mode (int):
            Raw st_mode value.
        uid (int):
            Owner id.
        gid (int):
            Group id.
        mtime (float | None):
            Modification time as a Unix timestamp, None when unavailable.

    """

    name: str
    path: str
    kind: EntryKind
    size: int = 0
    mode: int = 0
    uid: int = 0
    gid: int = 0
    mtime: float | None = None

    @classmethod
    def from_stat(cls, name: str, path: str, st: os.stat_result) -> "DirectoryEntry":
        """Build an entry from an already collected stat result."""
        return cls(
            name=name,
            path=path,
            kind=kind_from_mode(st.st_mode),
            size=st.st_size,
            mode=st.st_mode,
            uid=st.st_uid,
            gid=st.st_gid,
            mtime=getattr(st, "st_mtime", None),
        )

    @classmethod
    def from_path(cls, path: str, follow_symlinks: bool = False) -> "DirectoryEntry":
        """
        Stat a path and build its entry.

        Raises:
            OSError: If the path cannot be statted.

        """
        st = os.stat(path, follow_symlinks=follow_symlinks)
        name = os.path.basename(os.path.normpath(path)) or path
        return cls.from_stat(name, path, st)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def link_target(self) -> str:
        """Read the symlink target, returning an empty string if it cannot be read."""
        try:
            return os.readlink(self.path)
        except OSError:
            return ""


@dataclass(frozen=True)
class SizeSpec:
    """A parsed size filter such as '+10K'.

    Attributes:
        sign (SizeSign):
            Comparison to apply against the threshold.
        magnitude (int):
            Number of units.
        unit (str):
            One of '', 'K', 'M', 'G', 'T', 'P' (powers of 1024).

    """

    sign: SizeSign
    magnitude: int
    unit: str = ""

    @property
    def threshold(self) -> int:
        """The size in bytes the filter compares against."""
        exponent = SIZE_UNITS.index(self.unit) + 1 if self.unit else 0
        return self.magnitude * 1024**exponent

    def matches(self, size: int) -> bool:
        if self.sign is SizeSign.GREATER:
            return size > self.threshold
        if self.sign is SizeSign.LESS:
            return size < self.threshold
        return size == self.threshold


@dataclass(frozen=True)
class TreeOptions:
    """Fully validated options for one run.

    Attributes:
        paths (tuple[str, ...]):
            Root paths, rendered in the given order.
        max_depth (int | None):
            Deepest level whose directories are expanded (None for unlimited).
        dir_only (bool):
            Whether only directories are listed.
        patterns (tuple[re.Pattern, ...]):
            Name patterns files and symlinks must match (directories always pass).
        size_spec (SizeSpec | None):
            Size filter for files and symlinks.
        show_perms (bool), show_user (bool), show_group (bool), show_date (bool):
            Per-field detail toggles.
        size_mode (SizeMode):
            How sizes are displayed.
        color (bool):
            Whether entry names are colored by kind.

    """

    paths: tuple[str, ...] = (".",)
    max_depth: int | None = None
    dir_only: bool = False
    patterns: tuple[re.Pattern, ...] = ()
    size_spec: SizeSpec | None = None
    show_perms: bool = False
    show_user: bool = False
    show_group: bool = False
    show_date: bool = False
    size_mode: SizeMode = SizeMode.NONE
    color: bool = False


@dataclass(frozen=True)
class TraversalFrame:
    """Per-level state threaded down the recursion.

    Attributes:
        depth (int):
            Level of the entries being listed (root children are at 1).
        ancestors_last (bool):
            Whether every ancestor up to the root is the last of its siblings.
        bar (str):
            Continuation bar printed before the connector.

    """

    depth: int = 1
    ancestors_last: bool = True
    bar: str = ""

    def child(self, is_last: bool) -> "TraversalFrame":
        """Return the frame used to list the children of a sibling."""
        extension = "" if is_last else VERTICAL
        return TraversalFrame(
            depth=self.depth + 1,
            ancestors_last=self.ancestors_last and is_last,
            bar=self.bar + extension.ljust(BAR_WIDTH),
        )


@dataclass
class RunTotals:
    """Running count of visited directories and files."""

    directories: int = 0
    files: int = 0

    def __add__(self, other: "RunTotals") -> "RunTotals":
        return RunTotals(
            directories=self.directories + other.directories,
            files=self.files + other.files,
        )


def kind_from_mode(mode: int) -> EntryKind:
    """Map an st_mode value to its entry kind."""
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


# -- Size formatting --
def human_size(size: int) -> str:
    """
    Convert a size in bytes to a compact human-readable string.

    Args:
        size (int):
            Size in bytes.

    Returns:
        str:
            The plain integer below 1024, otherwise the value with one decimal
            followed by the unit letter (K, M, G, T, P). Units saturate at P.

    Examples:
        >>> human_size(1023)
        '1023'
        >>> human_size(1024)
        '1.0K'
        >>> human_size(1048576)
        '1.0M'

    """
    if size < 1024:
        return str(size)
    value = size / 1024
    i = 0
    while value >= 1024 and i < len(SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    return f"{value:.1f}{SIZE_UNITS[i]}"


def format_size(size: int, mode: SizeMode) -> str:
    """Format a size for the details column according to the display mode."""
    if mode is SizeMode.BYTES:
        return f"{size:>11}"
    if mode is SizeMode.HUMAN:
        return f"{human_size(size):>4}"
    return ""


# -- Permission formatting --
PERMISSION_MASKS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
)


def format_mode(mode: int) -> str:
    """
    Render the permission bits of a mode as nine 'rwx' characters.

    Examples:
        >>> format_mode(0o755)
        'rwxr-xr-x'
        >>> format_mode(0o421)
        'r---w---x'

    """
    triplets = []
    for read, write, execute in PERMISSION_MASKS:
        triplets.append(
            ("r" if mode & read else "-")
            + ("w" if mode & write else "-")
            + ("x" if mode & execute else "-")
        )
    return "".join(triplets)


def type_char(kind: EntryKind) -> str:
    """Return the leading character of the permission column."""
    if kind is EntryKind.DIRECTORY:
        return "d"
    if kind is EntryKind.SYMLINK:
        return "l"
    return "-"


def format_date(mtime: float | None) -> str | None:
    """Format a modification time in local time, None if it cannot be shown."""
    if mtime is None:
        return None
    try:
        return datetime.fromtimestamp(mtime).strftime(DATE_FORMAT)
    except (OverflowError, OSError, ValueError):
        return None


class IdentityResolver:
    """Resolve numeric owner and group ids to names, falling back to the id."""

    def __init__(self):
        self._users: dict[int, str] = {}
        self._groups: dict[int, str] = {}

    def user(self, uid: int) -> str:
        if uid not in self._users:
            try:
                self._users[uid] = pwd.getpwuid(uid).pw_name
            except (KeyError, OverflowError):
                self._users[uid] = str(uid)
        return self._users[uid]

    def group(self, gid: int) -> str:
        if gid not in self._groups:
            try:
                self._groups[gid] = grp.getgrgid(gid).gr_name
            except (KeyError, OverflowError):
                self._groups[gid] = str(gid)
        return self._groups[gid]


# -- Option parsing helpers --
def parse_size_spec(spec: str) -> SizeSpec:
    """
    Parse a size filter string into a SizeSpec.

    Args:
        spec (str):
            A string of the form '[+-]digits[KMGTP]', e.g. '+10K', '-1M', '512'.

    Returns:
        SizeSpec:
            The parsed filter.

    Raises:
        ConfigError: If the string does not follow the expected format.

    Examples:
        >>> parse_size_spec('+10K').threshold
        10240

    """
    match = SIZE_SPEC_RE.match(spec.strip())
    if match is None:
        raise ConfigError(
            f"Invalid size filter: '{spec}'. "
            f"Use formats like '1024', '+10K', '-2M' (units K, M, G, T, P)."
        )
    return SizeSpec(
        sign=SizeSign(match.group("sign") or ""),
        magnitude=int(match.group("magnitude")),
        unit=match.group("unit") or "",
    )


def process_patterns(patterns: list[str]) -> list[str]:
    """
    Split comma-separated pattern arguments and drop empty entries.

    Examples:
        >>> process_patterns(["py$,md$", " ^read ", ""])
        ['py$', 'md$', '^read']

    """
    processed = []
    for pattern in patterns:
        processed.extend(pattern.split(","))
    return [pattern.strip() for pattern in processed if pattern.strip()]


def compile_patterns(patterns: list[str]) -> tuple[re.Pattern, ...]:
    """
    Compile name patterns as regular expressions.

    Raises:
        ConfigError: If any of the patterns is not a valid regular expression.

    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ConfigError(f"Invalid pattern '{pattern}': {e}") from e
    return tuple(compiled)


# -- Filtering --
@dataclass
class EntryFilterSet:
    """Independent predicates deciding whether an entry is rendered.

    Attributes:
        kinds (frozenset[EntryKind]):
            Accepted kinds (empty accepts every kind).
        patterns (tuple[re.Pattern, ...]):
            Name patterns for files and symlinks.
        size_spec (SizeSpec | None):
            Size filter for files and symlinks.
        max_depth (int | None):
            Deepest level whose directories are expanded.

    """

    kinds: frozenset = field(default_factory=frozenset)
    patterns: tuple = ()
    size_spec: SizeSpec | None = None
    max_depth: int | None = None

    @classmethod
    def from_options(cls, options: TreeOptions) -> "EntryFilterSet":
        return cls(
            kinds=(
                frozenset({EntryKind.DIRECTORY}) if options.dir_only else frozenset()
            ),
            patterns=options.patterns,
            size_spec=options.size_spec,
            max_depth=options.max_depth,
        )

    def type_matches(self, entry: DirectoryEntry) -> bool:
        return not self.kinds or entry.kind in self.kinds

    def name_matches(self, entry: DirectoryEntry) -> bool:
        if not self.patterns or entry.is_dir:
            return True
        return any(p.search(entry.name) for p in self.patterns)

    def size_matches(self, entry: DirectoryEntry) -> bool:
        # Directories always pass, the size filter selects files only.
        if self.size_spec is None or entry.is_dir:
            return True
        return self.size_spec.matches(entry.size)

    def accepts(self, entry: DirectoryEntry) -> bool:
        """Return True if the entry passes every configured filter."""
        return (
            self.type_matches(entry)
            and self.name_matches(entry)
            and self.size_matches(entry)
        )

    def should_expand(self, depth: int) -> bool:
        """Return True if a directory listed at this depth may be descended into."""
        return self.max_depth is None or depth < self.max_depth


# -- Rendering --
def colored(text: str, color_code: str, light: bool = False) -> str:
    """
    Apply ANSI color codes to text.

    Args:
        text (str):
            Text to color
        color_code (str):
            ANSI color code (e.g., "31" for red, "32" for green)
        light (bool):
            Whether to use light (bright) variant of the color

    Returns:
        str:
            Text wrapped with ANSI color codes

    """
    if light:
        color_code = f"1;{color_code}"
    return f"\033[{color_code}m{text}\033[0m"


def color_name(name: str, kind: EntryKind, use_color: bool) -> str:
    """Color an entry name by kind: directories blue, symlinks yellow, others white."""
    if not use_color:
        return name

    kind_colors = {
        EntryKind.DIRECTORY: "34",
        EntryKind.SYMLINK: "33",
        EntryKind.FILE: "37",
    }
    return colored(name, kind_colors.get(kind, "37"), True)


def entry_details(
    entry: DirectoryEntry,
    options: TreeOptions,
    resolver: IdentityResolver,
) -> str:
    """
    Build the bracketed metadata prefix of an entry.

    Fields are added in a fixed order (permissions, size, owner, group, date),
    each toggled independently. Fields the platform cannot provide are left out.

    Args:
        entry (DirectoryEntry):
            Entry to describe.
        options (TreeOptions):
            Options holding the detail toggles and size mode.
        resolver (IdentityResolver):
            Resolver used for owner and group names.

    Returns:
        str:
            '[field field ...]  ' or an empty string when no field is enabled.

    """
    fields: list[str] = []
    if options.show_perms:
        fields.append(type_char(entry.kind) + format_mode(entry.mode))
    size = format_size(entry.size, options.size_mode)
    if size:
        fields.append(size)
    if options.show_user:
        fields.append(resolver.user(entry.uid))
    if options.show_group:
        fields.append(resolver.group(entry.gid))
    if options.show_date:
        date = format_date(entry.mtime)
        if date is not None:
            fields.append(date)
    if not fields:
        return ""
    return f"[{' '.join(fields)}]  "


def render_line(
    entry: DirectoryEntry,
    frame: TraversalFrame,
    is_last: bool,
    options: TreeOptions,
    resolver: IdentityResolver,
) -> str:
    """Build the output line of one child entry."""
    connector = LAST_BRANCH if is_last else BRANCH
    name = color_name(entry.name, entry.kind, options.color)
    if entry.kind is EntryKind.SYMLINK:
        name = f"{name} -> {entry.link_target()}"
    details = entry_details(entry, options, resolver)
    return f"{frame.bar}{connector} {details}{name}"


def render_root(
    entry: DirectoryEntry,
    path: str,
    options: TreeOptions,
    resolver: IdentityResolver,
) -> str:
    """Build the header line of a root, showing the path as it was given."""
    details = entry_details(entry, options, resolver)
    return f"{details}{color_name(path, entry.kind, options.color)}"


# -- Traversal --
class TreeWalker:
    """
    Depth-first renderer of one or more directory trees.

    Each directory is listed once, its children sorted by name and filtered,
    then rendered in order. Directories are descended into while the depth
    bound allows. Tallies are returned from each call and folded by the caller.
    """

    def __init__(
        self,
        options: TreeOptions,
        out=None,
        resolver: IdentityResolver | None = None,
    ):
        self.options = options
        self.filters = EntryFilterSet.from_options(options)
        self.out = out if out is not None else sys.stdout
        self.resolver = resolver or IdentityResolver()

    def emit(self, line: str) -> None:
        print(line, file=self.out)

    def list_entries(self, path: str) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Listing errors are logged and yield an empty list. A child whose
        metadata cannot be read is logged and skipped.
        """
        entries = []
        try:
            with os.scandir(path) as it:
                for dir_entry in it:
                    try:
                        st = dir_entry.stat(follow_symlinks=False)
                    except OSError as e:
                        logger.error(f"{dir_entry.path}: {e.strerror or e}")
                        continue
                    entries.append(
                        DirectoryEntry.from_stat(dir_entry.name, dir_entry.path, st)
                    )
        except OSError as e:
            logger.error(f"{path}: {e.strerror or e}")
            return []
        return entries

    def visible_entries(self, path: str) -> list[DirectoryEntry]:
        """Return the children of a directory that pass the filters, by name."""
        entries = sorted(self.list_entries(path), key=lambda e: e.name)
        return [e for e in entries if self.filters.accepts(e)]

    def walk(self, path: str, frame: TraversalFrame) -> RunTotals:
        """
        Render the children of a directory and return the subtree tallies.

        The directory itself is not counted here; the caller counts it.

        Args:
            path (str):
                Directory whose children are rendered.
            frame (TraversalFrame):
                Depth and continuation bar of the children.

        Returns:
            RunTotals:
                Directories and files rendered below `path`.

        """
        logger.debug(f"Listing {path} at depth {frame.depth}")
        totals = RunTotals()
        entries = self.visible_entries(path)
        for i, entry in enumerate(entries):
            is_last = i == len(entries) - 1
            self.emit(render_line(entry, frame, is_last, self.options, self.resolver))
            if entry.is_dir:
                totals.directories += 1
                if self.filters.should_expand(frame.depth):
                    totals += self.walk(entry.path, frame.child(is_last))
            else:
                totals.files += 1
        return totals

    def walk_root(self, path: str) -> RunTotals:
        """
        Render one root path and everything below it.

        A root that cannot be statted is logged and contributes nothing.
        """
        try:
            root = DirectoryEntry.from_path(path, follow_symlinks=True)
        except OSError as e:
            logger.error(f"{path}: {e.strerror or e}")
            return RunTotals()

        self.emit(render_root(root, path, self.options, self.resolver))
        if not root.is_dir:
            return RunTotals(files=1)
        return RunTotals(directories=1) + self.walk(path, TraversalFrame())


# -- Aggregation --
def summary_line(totals: RunTotals, dir_only: bool) -> str:
    """
    Build the trailing report line.

    Examples:
        >>> summary_line(RunTotals(directories=2, files=1), dir_only=False)
        '2 directories, 1 file'
        >>> summary_line(RunTotals(directories=3, files=0), dir_only=True)
        '3 directories'

    """
    line = f"{totals.directories} directories"
    if not dir_only:
        plural = "" if totals.files == 1 else "s"
        line += f", {totals.files} file{plural}"
    return line


def run(
    options: TreeOptions,
    out=None,
    resolver: IdentityResolver | None = None,
) -> RunTotals:
    """
    Render every root in order and print the summary line.

    Args:
        options (TreeOptions):
            Validated run options.
        out (TextIO | None):
            Output stream (standard output when None).
        resolver (IdentityResolver | None):
            Owner and group name resolver.

    Returns:
        RunTotals:
            Totals summed over all roots.

    """
    walker = TreeWalker(options, out=out, resolver=resolver)
    totals = RunTotals()
    for path in options.paths:
        totals += walker.walk_root(path)
    walker.emit("")
    walker.emit(summary_line(totals, options.dir_only))
    return totals


def build_options(args: argparse.Namespace, use_color: bool = False) -> TreeOptions:
    """
    Validate parsed arguments and turn them into run options.

    Every check happens here so that a bad configuration is reported before
    anything is printed.

    Raises:
        ConfigError: On conflicting options, a bad depth, pattern or size filter.

    """
    if args.dir_only and args.pattern:
        raise ConfigError("--dir-only cannot be combined with --pattern")
    if args.dir_only and args.file_size:
        raise ConfigError("--dir-only cannot be combined with --file-size")
    if args.level is not None and args.level < 1:
        raise ConfigError(f"Invalid level '{args.level}': must be greater than 0")

    size_spec = parse_size_spec(args.file_size) if args.file_size else None
    patterns = compile_patterns(process_patterns(args.pattern))

    size_mode = SizeMode.NONE
    if args.size:
        size_mode = SizeMode.BYTES
    if args.human_readable or size_spec is not None:
        size_mode = SizeMode.HUMAN

    return TreeOptions(
        paths=tuple(args.paths) or (".",),
        max_depth=args.level,
        dir_only=args.dir_only,
        patterns=patterns,
        size_spec=size_spec,
        show_perms=args.perms,
        show_user=args.user,
        show_group=args.group,
        show_date=args.date,
        size_mode=size_mode,
        color=use_color,
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="List the contents of directories in a tree-like format.",
        conflict_handler="resolve",
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Directories to list (default: current directory)",
    )
    parser.add_argument(
        "-L",
        "--level",
        type=int,
        default=None,
        help="Descend only LEVEL directories deep",
    )
    parser.add_argument(
        "-d",
        "--dir-only",
        action="store_true",
        help="List directories only",
    )
    parser.add_argument(
        "-P",
        "--pattern",
        action="append",
        default=[],
        help="List only files whose name matches one of the regular expressions (can be used multiple times or comma-separated)",
    )
    parser.add_argument(
        "-s",
        "--file-size",
        type=str,
        default=None,
        help="List only files of this size: exact ('1024'), larger ('+10K') or smaller ('-1M')",
    )
    parser.add_argument(
        "-S",
        "--size",
        action="store_true",
        help="Print the size of each entry in bytes",
    )
    parser.add_argument(
        "-H",
        "--human-readable",
        action="store_true",
        help="Print sizes in human-readable format (e.g., 1.2K)",
    )
    parser.add_argument(
        "-p",
        "--perms",
        action="store_true",
        help="Print the type and permissions of each entry",
    )
    parser.add_argument(
        "-u",
        "--user",
        action="store_true",
        help="Print the owner name (or uid) of each entry",
    )
    parser.add_argument(
        "-g",
        "--group",
        action="store_true",
        help="Print the group name (or gid) of each entry",
    )
    parser.add_argument(
        "-D",
        "--date",
        action="store_true",
        help="Print the last modification date of each entry",
    )
    parser.add_argument(
        "-c",
        "--color",
        choices=["always", "never", "auto"],
        default="auto",
        help="Color entry names by type (default: auto)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for the pytree directory lister.

    Parses command-line arguments, validates them, and renders each requested
    root. Access errors are reported on stderr without changing the exit
    status; configuration errors exit with status 1 before any output.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColorFormatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if args.debug else logging.INFO)

    # Determine if colors should be used
    use_color = args.color == "always" or (args.color == "auto" and sys.stdout.isatty())

    try:
        options = build_options(args, use_color=use_color)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    run(options)


if __name__ == "__main__":
    main()
