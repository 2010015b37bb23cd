#!/usr/bin/env python

r"""
exactimport.py - Import photos and videos into date folders and verify every copy

SUMMARY:
--------
This script scans one or more source directories (recursively) for media files with allowed extensions,
reads each file's creation date, and makes sure a byte-identical copy exists in the target directory
under a subfolder named after that date (YYYY-MM-DD). Files already present in the target are verified,
missing files are copied (or reported, depending on the missing-file policy), and any mismatch is reported
as a failure.

FEATURES:
---------
- Multiple source directories per run, scanned in the order given.
- Default extensions cover camera photos, raw formats, videos and Magic Lantern logs/indexes.
- Date folders use the file system creation date, or optionally the creation date embedded in the
  file's metadata (read with hachoir) with the file system date as fallback.
- Missing destination files can be copied (default), reported as failures, or skipped.
- Every destination file is verified byte-for-byte against its source in fixed-size chunks, so
  multi-gigabyte videos never need to fit in memory. A faster length-only check is available.
- Never overwrites, renames or deletes anything in the target: re-running an import only verifies.
- Progress is printed per file and logged to 'events.log' in the target directory.
- Exit code 1 when any file failed verification, 0 when everything matched.

USAGE EXAMPLES:
---------------
1. Import a memory card into the archive, copying anything that is missing:
    python exactimport.py /archive/photos /media/card/DCIM

2. Import from two cards in one run:
    python exactimport.py /archive/photos /media/card1 /media/card2

3. Only check that a card is fully archived, without copying anything:
    python exactimport.py -M fail /archive/photos /media/card/DCIM

4. Report missing files without treating them as errors:
    python exactimport.py -M skip /archive/photos /media/card/DCIM

5. Import only JPEG and Canon raw files:
    python exactimport.py -j jpg,cr2 /archive/photos /media/card/DCIM

6. Quick verification comparing file lengths only:
    python exactimport.py -V length /archive/photos /media/card/DCIM

7. Use the creation date stored in the photo/video metadata for the date folders:
    python exactimport.py -x metadata /archive/photos /media/card/DCIM

8. Verbose logging of every step to events.log:
    python exactimport.py -v /archive/photos /media/card/DCIM

See --help for all options.
"""

# Standard library imports
import sys
import datetime
import logging
import shutil
import argparse
import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional, Sequence, TextIO

# Third-party library imports for metadata extraction
from hachoir.parser import createParser
from hachoir.metadata import extractMetadata
from hachoir.core import config

# Suppress hachoir warnings to keep console output clean
config.quiet = True

# Script version information
# Version History:
# v1.0.0 - Copy-or-verify import with date folders, chunked content comparison
# v1.1.0 - Missing-file policies (fail/copy/skip), multiple source directories
# v1.2.0 - Exclusive create on copy, length-only verification mode
# v1.3.0 - Optional metadata creation dates via hachoir
__version__ = "1.3.0"
myversion = f"v. {__version__} 2026-10-19"

# Extensions imported when -j is not given
DEFAULT_EXTENSIONS = frozenset(
    {
        ".jpg",
        ".rw2",  # panasonic raw
        ".mp4",
        ".avi",
        ".mov",
        ".cr2",  # canon raw
        ".log",  # magic lantern movie log
        ".mlv",  # magic lantern raw video
        ".idx",  # magic lantern index
    }
)

# Read buffer used for both copying and comparing
CHUNK_SIZE = 1024 * 1024 * 4  # 4 MB

# Date folder naming inside the target directory
DATE_FOLDER_FORMAT = "%Y-%m-%d"

# Log file written to the target directory on every run
LOG_FILE_NAME = "events.log"

# Containers whose header dates are stored in UTC rather than local time
UTC_METADATA_EXTENSIONS = frozenset({".mov", ".mp4", ".m4v", ".3gp"})


class MissingPolicy(enum.Enum):
    """What to do when a source file has no counterpart in the target."""

    FAIL = "fail"
    COPY = "copy"
    SKIP = "skip"


class VerifyMode(enum.Enum):
    """How a destination file is compared with its source."""

    CONTENTS = "contents"
    LENGTH = "length"


class DateSource(enum.Enum):
    """Where the date used for the destination folder comes from."""

    CREATED = "created"
    METADATA = "metadata"


class ResultCode(enum.Enum):
    MATCHED = "Matched"
    MISSING_IN_DESTINATION = "MissingInDestination"
    CONTENTS_DIFFERENT = "ContentsDifferent"
    ATTRIBUTES_DIFFERENT = "AttributesDifferent"

    def __str__(self):
        return self.value


class ActionTaken(enum.Enum):
    NONE = "None"
    EXISTED = "Existed"
    COPIED = "Copied"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ImportConfiguration:
    """
    Settings for one import run.

    Args:
        target_root (Path): Root of the organized target tree
        source_roots (tuple): Source directories, scanned in order
        allowed_extensions (frozenset): Lowercase extensions including the dot, e.g. ".jpg"
        missing_policy (MissingPolicy): Behavior when a destination file does not exist
        verify_mode (VerifyMode): How existing or copied files are compared
        date_source (DateSource): Which date picks the destination folder
    """

    target_root: Path
    source_roots: Sequence[Path]
    allowed_extensions: FrozenSet[str] = DEFAULT_EXTENSIONS
    missing_policy: MissingPolicy = MissingPolicy.COPY
    verify_mode: VerifyMode = VerifyMode.CONTENTS
    date_source: DateSource = DateSource.CREATED

    def __post_init__(self):
        # Normalize so callers may pass strings and lists
        object.__setattr__(self, "target_root", Path(self.target_root))
        object.__setattr__(
            self, "source_roots", tuple(Path(p) for p in self.source_roots)
        )
        object.__setattr__(
            self,
            "allowed_extensions",
            frozenset(ext.lower() for ext in self.allowed_extensions),
        )


@dataclass(frozen=True)
class DiscoveredFile:
    path: Path
    name: str
    created: datetime.datetime

    @property
    def extension(self) -> str:
        return Path(self.name).suffix


@dataclass(frozen=True)
class ImportOutcome:
    source_path: Path
    destination_path: Path
    result_code: ResultCode
    failure: bool
    action_taken: ActionTaken = ActionTaken.NONE

    def to_display_string(self) -> str:
        """Single progress line: '<source> <result> <destination> (ok)' or '(failure!)'."""
        status = "(failure!)" if self.failure else "(ok)"
        return f"{self.source_path} {self.result_code} {self.destination_path} {status}"


@dataclass
class ImportReport:
    """Outcomes of one run, in discovery order."""

    outcomes: List[ImportOutcome] = field(default_factory=list)

    def append(self, outcome: ImportOutcome):
        self.outcomes.append(outcome)

    def __iter__(self):
        return iter(self.outcomes)

    def __len__(self):
        return len(self.outcomes)

    @property
    def failures(self) -> List[ImportOutcome]:
        return [o for o in self.outcomes if o.failure]

    @property
    def has_failures(self) -> bool:
        return any(o.failure for o in self.outcomes)

    def counts(self) -> dict:
        """Return the number of outcomes per result code name."""
        counts = {}
        for outcome in self.outcomes:
            key = str(outcome.result_code)
            counts[key] = counts.get(key, 0) + 1
        return counts


def set_up_logging(destination_dir: Path, verbose: bool):
    """
    Set up logging to a file in the target directory.

    Args:
        destination_dir (Path): Directory where the log file will be created
        verbose (bool): Whether to enable verbose (DEBUG) logging

    Returns:
        logging.Logger: Configured logger instance

    Creates a logger that appends to 'events.log' in the target directory.
    The logging level is set based on the verbose flag.
    """
    logger = logging.getLogger(__name__)

    level = logging.DEBUG if verbose else logging.INFO

    logfile = destination_dir / LOG_FILE_NAME

    # Ensure the log directory exists
    try:
        logfile.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Failed to create log directory: {e}", file=sys.stderr)
        sys.exit(1)

    logger.setLevel(level)

    # One log file per run: drop handlers left over from an earlier target
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    ch = logging.FileHandler(logfile, encoding="utf-8")
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(ch)

    return logger


def get_creation_time(path: Path) -> datetime.datetime:
    """
    Return the file system creation time of a file as a local datetime.

    Uses the birth time where the platform reports one. Windows reports
    creation time as st_ctime. Elsewhere the older of st_ctime and st_mtime
    is the closest available value.
    """
    st = path.stat()
    timestamp = getattr(st, "st_birthtime", None)
    if timestamp is None:
        if os.name == "nt":
            timestamp = st.st_ctime
        else:
            timestamp = min(st.st_ctime, st.st_mtime)
    return datetime.datetime.fromtimestamp(timestamp)


def get_created_date(filename: Path, logger):
    """
    Attempt to extract the creation date from the file's embedded metadata.

    Args:
        filename (Path): Path to the file to extract metadata from
        logger (logging.Logger): Logger for recording issues

    Returns:
        datetime.datetime or None: Creation date if found, otherwise None

    Uses hachoir to parse the file and looks for the 'creation_date'
    metadata field (EXIF for photos, container headers for videos).
    """
    created_date = None

    try:
        parser = createParser(str(filename))
    except Exception as e:
        logger.debug(f"Failed to create parser for {filename}: {e}")
        return created_date

    if not parser:
        logger.debug(f"Unable to parse file for created date: {filename}")
        return created_date

    with parser:
        try:
            metadata = extractMetadata(parser)
        except Exception as err:
            logger.debug(f"Metadata extraction error for {filename}: {err}")
            metadata = None

        if not metadata:
            logger.debug(f"Unable to extract metadata for {filename}")
        else:
            cd = metadata.getValues("creation_date")
            if len(cd) > 0:
                created_date = metadata_date_to_local(filename, cd[0])

    return created_date


def metadata_date_to_local(filename: Path, created_date):
    """
    Convert a metadata creation date to local time.

    QuickTime/MP4 headers store UTC; EXIF dates are already local.
    """
    if Path(filename).suffix.lower() not in UTC_METADATA_EXTENSIONS:
        return created_date
    if not isinstance(created_date, datetime.datetime):
        return created_date
    if created_date.tzinfo is None:
        created_date = created_date.replace(tzinfo=datetime.timezone.utc)
    return created_date.astimezone().replace(tzinfo=None)


def normalize_extensions(ext_string: str):
    """
    Normalize file extensions to a consistent format.

    Args:
        ext_string (str): Comma-separated list of file extensions

    Returns:
        frozenset: Normalized extensions, each lowercase and starting with a dot
    """
    return frozenset(
        "." + ext.strip().lower().lstrip(".")
        for ext in ext_string.split(",")
        if ext.strip().lstrip(".")
    )


def file_lengths_equal(path_a: Path, path_b: Path) -> bool:
    return path_a.stat().st_size == path_b.stat().st_size


def files_equal(path_a: Path, path_b: Path, chunk_size: int = CHUNK_SIZE) -> bool:
    """
    Compare two files byte-for-byte.

    Args:
        path_a (Path): First file
        path_b (Path): Second file
        chunk_size (int): Size of the read buffers

    Returns:
        bool: True if both files have the same length and the same bytes

    Lengths are compared first. Contents are then read into two buffers that
    are reused for every chunk, so memory use does not depend on file size.
    Stops at the first differing chunk.
    """
    if not file_lengths_equal(path_a, path_b):
        return False

    buffer_a = bytearray(chunk_size)
    buffer_b = bytearray(chunk_size)
    view_a = memoryview(buffer_a)
    view_b = memoryview(buffer_b)

    with open(path_a, "rb") as a, open(path_b, "rb") as b:
        while True:
            read_a = a.readinto(buffer_a)
            read_b = b.readinto(buffer_b)

            # Not the same byte count read - files differ
            if read_a != read_b:
                return False

            # End of both files without a difference
            if read_a == 0:
                return True

            if view_a[:read_a] != view_b[:read_b]:
                return False


def copy_exclusive(source: Path, destination: Path, chunk_size: int = CHUNK_SIZE):
    """
    Copy a file to a destination that must not exist yet.

    Args:
        source (Path): File to copy
        destination (Path): New file to create

    Raises:
        FileExistsError: If the destination appeared since it was checked

    The destination is opened in exclusive-create mode, so an existing file
    is never overwritten. Timestamps and permission bits are copied afterwards
    the same way shutil.copy2 does. A partially written destination is
    removed if the copy fails.
    """
    with open(source, "rb") as fsrc:
        with open(destination, "xb") as fdst:
            try:
                shutil.copyfileobj(fsrc, fdst, chunk_size)
            except BaseException:
                fdst.close()
                destination.unlink()
                raise
    shutil.copystat(source, destination)


def discover_files(source_root: Path) -> Iterator[Path]:
    """
    Yield every file below source_root, depth first, in name order.

    Raises whatever error the walk hits (missing or unreadable directories)
    instead of silently skipping it.
    """

    def _raise(err):
        raise err

    if not source_root.is_dir():
        raise NotADirectoryError(f"Source directory does not exist: {source_root}")

    for folder_name, dir_names, filenames in os.walk(source_root, onerror=_raise):
        dir_names.sort()
        for filename in sorted(filenames):
            yield Path(folder_name) / filename


class PathClassifier:
    """Decides which files are imported and where they go in the target tree."""

    def __init__(self, allowed_extensions, target_root: Path, logger=None):
        self.allowed_extensions = frozenset(ext.lower() for ext in allowed_extensions)
        self.target_root = Path(target_root)
        self.logger = logger or logging.getLogger(__name__)

    def is_in_scope(self, file) -> bool:
        """Return True if the file's extension (case-insensitive) is allowed."""
        name = file.name if isinstance(file, (DiscoveredFile, Path)) else str(file)
        return Path(name).suffix.lower() in self.allowed_extensions

    def destination_path(self, file: DiscoveredFile) -> Path:
        """
        Return <target_root>/<YYYY-MM-DD>/<file name> for a discovered file.

        The date folder comes from the file's creation date in local time and
        is created (with any missing parents) if it does not exist yet.
        Two files with the same date and name map to the same destination.
        """
        destf = self.target_root / file.created.strftime(DATE_FOLDER_FORMAT)
        if not destf.is_dir():
            destf.mkdir(parents=True, exist_ok=True)
            self.logger.debug(f"created new destination subdir: {destf}")
        return destf / file.name


class ImportEngine:
    """
    Walks the source directories and makes sure each media file has a verified
    copy in the target tree.

    Args:
        config (ImportConfiguration): Settings for the run
        logger (logging.Logger): Logger for recording operations
        progress_stream (TextIO): Where per-file progress lines are written,
            standard output when not given
    """

    def __init__(
        self,
        config: ImportConfiguration,
        logger=None,
        progress_stream: Optional[TextIO] = None,
    ):
        if config is None:
            raise ValueError("config must not be None")
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.progress_stream = progress_stream
        self.classifier = PathClassifier(
            config.allowed_extensions, config.target_root, self.logger
        )

    def is_own_log_file(self, path: Path, source_root: Path) -> bool:
        """
        Return True for an events.log this tool writes: the one in the target
        root, or one left in a source root that was an earlier import target.
        """
        if path.name != LOG_FILE_NAME:
            return False
        folder = path.parent.resolve()
        return folder in (
            self.config.target_root.resolve(),
            Path(source_root).resolve(),
        )

    def discover(self, source_root: Path) -> Iterator[DiscoveredFile]:
        """Yield in-scope files below one source root with their dates."""
        for path in discover_files(source_root):
            if not self.classifier.is_in_scope(path):
                continue
            if self.is_own_log_file(path, source_root):
                self.logger.debug(f"  skipped log file {path}")
                continue
            yield DiscoveredFile(path=path, name=path.name, created=self.file_date(path))

    def file_date(self, path: Path) -> datetime.datetime:
        if self.config.date_source is DateSource.METADATA:
            cd = get_created_date(path, self.logger)
            if cd:
                return cd
            self.logger.debug(f"No metadata date for {path}, using file system date")
        return get_creation_time(path)

    def run(self) -> ImportReport:
        """
        Import every in-scope file of every source root.

        Returns:
            ImportReport: One outcome per in-scope file, in discovery order

        Each outcome is printed to the progress stream as soon as the file is
        done. Per-file problems end up in the report; I/O errors abort the run.
        """
        report = ImportReport()
        stream = self.progress_stream or sys.stdout

        for source_root in self.config.source_roots:
            self.logger.info(f"Source Folder: {source_root}")

            for discovered in self.discover(source_root):
                destination = self.classifier.destination_path(discovered)
                outcome = self.import_file(discovered.path, destination)

                line = outcome.to_display_string()
                print(line, file=stream, flush=True)
                if outcome.failure:
                    self.logger.error(line)
                else:
                    self.logger.info(line)

                report.append(outcome)

        summary = ", ".join(f"{k}: {v}" for k, v in sorted(report.counts().items()))
        self.logger.info(
            f"Total files processed: {len(report)}, failures: {len(report.failures)}"
            + (f" ({summary})" if summary else "")
        )
        return report

    def import_file(self, source: Path, destination: Path) -> ImportOutcome:
        """
        Apply the missing-file policy and verification to one file.

        Args:
            source (Path): Source file
            destination (Path): Where the file belongs in the target tree

        Returns:
            ImportOutcome: Result for this file
        """
        policy = self.config.missing_policy

        if not destination.exists():
            if policy is MissingPolicy.FAIL:
                return ImportOutcome(
                    source, destination, ResultCode.MISSING_IN_DESTINATION, True
                )
            elif policy is MissingPolicy.COPY:
                copy_exclusive(source, destination)
                self.logger.debug(f"  copied {source} -> {destination}")
                action_taken = ActionTaken.COPIED
            elif policy is MissingPolicy.SKIP:
                return ImportOutcome(
                    source, destination, ResultCode.MISSING_IN_DESTINATION, False
                )
            else:
                raise NotImplementedError(f"Missing policy {policy!r} not implemented")
        else:
            action_taken = ActionTaken.EXISTED

        return self.verify(source, destination, action_taken)

    def verify(
        self, source: Path, destination: Path, action_taken: ActionTaken
    ) -> ImportOutcome:
        """Compare an existing (or just copied) destination with its source."""
        mode = self.config.verify_mode

        if mode is VerifyMode.LENGTH:
            if not file_lengths_equal(source, destination):
                return ImportOutcome(
                    source,
                    destination,
                    ResultCode.ATTRIBUTES_DIFFERENT,
                    True,
                    action_taken,
                )
        elif mode is VerifyMode.CONTENTS:
            if not files_equal(source, destination):
                return ImportOutcome(
                    source,
                    destination,
                    ResultCode.CONTENTS_DIFFERENT,
                    True,
                    action_taken,
                )
        else:
            raise NotImplementedError(f"Verify mode {mode!r} not implemented")

        return ImportOutcome(
            source, destination, ResultCode.MATCHED, False, action_taken
        )


def is_same_or_inside(path: Path, other: Path) -> bool:
    """Return True if path equals other or lies below it."""
    try:
        path.resolve().relative_to(other.resolve())
    except ValueError:
        return False
    return True


def validate_args(source_dirs, target_dir: Path):
    """
    Validate source and target directories before anything is written.

    Args:
        source_dirs (list): Source directory paths
        target_dir (Path): Target directory path

    Exits:
        If any source directory does not exist, or a source and the target
        overlap (same directory, or one inside the other)

    Runs before logging is set up, so a mistyped path leaves no trace in
    the target.
    """
    for source_dir in source_dirs:
        if not source_dir.is_dir():
            print(f"Source directory does not exist: {source_dir}", file=sys.stderr)
            sys.exit(1)

        # Overlapping trees would import the target into itself
        if is_same_or_inside(target_dir, source_dir) or is_same_or_inside(
            source_dir, target_dir
        ):
            print(
                f"Source and target directories must not overlap: {source_dir} / {target_dir}",
                file=sys.stderr,
            )
            sys.exit(1)


def print_examples():
    """
    Print usage examples to the user.

    Extracts and displays the examples section from the module's docstring.
    """
    doc_lines = __doc__.split("\n")
    examples_start = doc_lines.index("USAGE EXAMPLES:")
    examples_end = next(
        (
            i
            for i, line in enumerate(doc_lines[examples_start:], examples_start)
            if line.startswith("See --help")
        ),
        len(doc_lines),
    )

    examples = "\n".join(doc_lines[examples_start : examples_end + 1])
    print(examples)


USAGE = "Usage: <TargetPath> <SourcePath 1> <SourcePath 2> ... <SourcePath N>"


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that treats missing paths as a usage request, not an error."""

    def error(self, message):
        # Too few positional arguments: show usage and exit without a failure code
        if "required" in message:
            sys.stderr.write(f"exactimport {myversion}\n")
            sys.stderr.write(f"{USAGE}\n")
            sys.exit(0)
        sys.stderr.write(f"{self.prog}: error: {message}\n")
        sys.stderr.write(f"Try '{self.prog} --help' for more information.\n")
        sys.exit(2)


def parse_arguments(args=None):
    """
    Parse command line arguments using argparse.

    Args:
        args (list, optional): Command line arguments. Defaults to None.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    if args is None:
        args = sys.argv[1:]

    # --examples works without the required positional arguments
    if "--examples" in args:
        print_examples()
        sys.exit(0)

    parser = UsageArgumentParser(
        prog="exactimport",
        description="Import media files from one or more source directories into date folders (YYYY-MM-DD) under a target directory, verifying every destination file against its source. Files already in the target are verified, missing files are copied, nothing is ever overwritten.",
        epilog="""
IMPORTANT NOTES:
• Exit code is 1 if any file is missing (with -M fail) or differs from its source
• Failing files are listed on stderr after the run
• All operations are logged to 'events.log' in the target directory
• Use --examples to see usage scenarios""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "target_dir",
        help="Target directory where files are organized into date-based subdirectories (YYYY-MM-DD). Example: '/archive/photos'",
        metavar="TARGET_DIR",
    )

    parser.add_argument(
        "source_dirs",
        nargs="+",
        help="One or more source directories, scanned recursively in the order given. Example: '/media/card/DCIM'",
        metavar="SOURCE_DIR",
    )

    parser.add_argument(
        "-j",
        "--extensions",
        default=None,
        help=f"File extensions to import, comma-separated without dots. Example: 'jpg,cr2,mov' [default: {','.join(sorted(e.lstrip('.') for e in DEFAULT_EXTENSIONS))}]",
        metavar="EXT",
        dest="extense",
    )

    parser.add_argument(
        "-M",
        "--missing",
        choices=[p.value for p in MissingPolicy],
        default=MissingPolicy.COPY.value,
        help="What to do when a file is not in the target yet: 'copy' (default) = copy it and verify the copy; 'fail' = report it as a failure; 'skip' = report it without failing.",
    )

    parser.add_argument(
        "-V",
        "--verify",
        choices=[m.value for m in VerifyMode],
        default=VerifyMode.CONTENTS.value,
        help="How destination files are compared with their source: 'contents' (default) = byte-for-byte; 'length' = file length only, faster but weaker.",
    )

    parser.add_argument(
        "-x",
        "--date-source",
        choices=[d.value for d in DateSource],
        default=DateSource.CREATED.value,
        help="Which date selects the destination folder: 'created' (default) = file system creation date; 'metadata' = creation date embedded in the file (EXIF/video header), falling back to the file system date. QuickTime/MP4 header dates are stored in UTC and converted to local time.",
        dest="date_source",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging to events.log in the target directory.",
    )

    parser.add_argument(
        "--examples",
        action="store_true",
        help="Display usage examples and exit.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program version and exit",
    )

    return parser.parse_args(args)


def main(args=None):
    """
    Main entry point for the script.

    Args:
        args (list, optional): Command line arguments. Defaults to None.

    Returns:
        int: 1 if any file failed, 0 otherwise
    """
    parsed_args = parse_arguments(args)

    if parsed_args.extense is None:
        ext_list = DEFAULT_EXTENSIONS
    else:
        ext_list = normalize_extensions(parsed_args.extense)

    target_dir = Path(parsed_args.target_dir).expanduser().resolve()
    source_dirs = [Path(p).expanduser().resolve() for p in parsed_args.source_dirs]

    validate_args(source_dirs, target_dir)

    logger = set_up_logging(target_dir, parsed_args.verbose)

    start_time = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    logger.info("=" * 80)
    logger.info("exactimport - Media Import Tool")
    logger.info(f"Version: {__version__}")
    logger.info(f"Session Started: {start_time}")
    logger.info("=" * 80)
    logger.debug("Command-line options: %s", vars(parsed_args))

    logger.info(f"Importing files with extensions: {', '.join(sorted(ext_list))}")

    import_config = ImportConfiguration(
        target_root=target_dir,
        source_roots=source_dirs,
        allowed_extensions=ext_list,
        missing_policy=MissingPolicy(parsed_args.missing),
        verify_mode=VerifyMode(parsed_args.verify),
        date_source=DateSource(parsed_args.date_source),
    )
    report = ImportEngine(import_config, logger).run()

    for outcome in report.failures:
        print(outcome.to_display_string(), file=sys.stderr)

    has_failure = report.has_failures
    print("Finished WITH ERRORS" if has_failure else "Finished ALL OK")

    end_time = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    logger.info("=" * 80)
    logger.info(f"Session Ended: {end_time}")
    logger.info("=" * 80)
    logger.info("")  # Add blank line between sessions

    return 1 if has_failure else 0


def run():
    """Console script entry point."""
    exit_code = main()
    logging.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
