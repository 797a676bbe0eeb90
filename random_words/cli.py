"""Command line interface for the Random Words drill tool"""

import argparse
import queue
import sys
import threading
from collections.abc import Callable
from pathlib import Path

from .config.settings import AppSettings, settings
from .core.constants import DrillConstants
from .core.controller import DrillController
from .core.factory import create_drill_controller, create_list_editor
from .core.projection import SortProjection
from .exceptions import ConfigurationError, RandomWordsError
from .logging_config import get_logger, setup_logging
from .models.preferences import Theme
from .models.word_models import SampleResult, SortMode, TaggedWord
from .utils.error_handler import ErrorCollector

logger = get_logger(__name__)

TICK = "tick"
INPUT = "input"

SORT_CHOICES = [mode.value for mode in SortMode]
THEME_CHOICES = [theme.value for theme in Theme]

DRILL_HELP = (
    "Enter = next words, b = back, f = forward, k = keep in own vocabulary, "
    "l = locate source list, p = pause/resume, q = quit"
)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Drill vocabulary with randomly sampled words from your word lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rwords lists                         # Show lists and which are selected
  rwords select EnglishByFreq          # Drill words from a list
  rwords range EnglishByFreq --upper 0.25
  rwords draw -n 5 --fair              # Print five words, one list at a time
  rwords run                           # Interactive drill with the timer
  rwords import ~/Downloads/myWords.csv
  rwords settings --interval 5 --words 3
        """,
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    storage_group = parser.add_argument_group("storage options")
    storage_group.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help=f"Directory holding word lists (default: {settings.storage.data_dir})",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    sub.add_parser("lists", help="Show available lists")

    show = sub.add_parser("show", help="Print the words of a list")
    show.add_argument("name")
    show.add_argument("--sort", choices=SORT_CHOICES, default=None)
    show.add_argument("--find", metavar="WORD", help="Mark the first match of WORD")

    add = sub.add_parser("add", help="Append words to a list")
    add.add_argument("name")
    add.add_argument("words", nargs="+")

    remove = sub.add_parser("remove", help="Remove words by position")
    remove.add_argument("name")
    remove.add_argument("positions", nargs="+", type=int, metavar="POSITION")
    remove.add_argument(
        "--sort",
        choices=SORT_CHOICES,
        default=None,
        help="Sort order the positions refer to (as printed by 'show')",
    )

    edit = sub.add_parser("edit", help="Replace the word at a position")
    edit.add_argument("name")
    edit.add_argument("position", type=int)
    edit.add_argument("text")
    edit.add_argument("--sort", choices=SORT_CHOICES, default=None)

    create = sub.add_parser("create", help="Create an empty list")
    create.add_argument("name")

    rename = sub.add_parser("rename", help="Rename a list")
    rename.add_argument("old")
    rename.add_argument("new")

    delete = sub.add_parser("delete-list", help="Delete a list permanently")
    delete.add_argument("name")
    delete.add_argument("-y", "--yes", action="store_true", help="Do not ask")

    imp = sub.add_parser("import", help="Import text files as lists")
    imp.add_argument("files", nargs="+", type=Path, metavar="FILE")

    exp = sub.add_parser("export", help="Write a list to a file or directory")
    exp.add_argument("name")
    exp.add_argument("destination", type=Path)

    select = sub.add_parser("select", help="Add lists to the drill")
    select.add_argument("names", nargs="+", metavar="NAME")

    deselect = sub.add_parser("deselect", help="Remove lists from the drill")
    deselect.add_argument("names", nargs="+", metavar="NAME")

    rng = sub.add_parser("range", help="Limit a selected list to a fraction")
    rng.add_argument("name")
    rng.add_argument("--lower", type=float, default=None, help="0.0 - 1.0")
    rng.add_argument("--upper", type=float, default=None, help="0.0 - 1.0")

    draw = sub.add_parser("draw", help="Print one random sample")
    draw.add_argument("-n", "--count", type=int, default=None)
    fair_group = draw.add_mutually_exclusive_group()
    fair_group.add_argument("--fair", dest="fair", action="store_true", default=None)
    fair_group.add_argument("--unfair", dest="fair", action="store_false")

    prefs = sub.add_parser("settings", help="Show or change drill settings")
    prefs.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between new words, 0 for manual mode",
    )
    prefs.add_argument("--words", type=int, default=None, help="Words shown at once")
    prefs_fair = prefs.add_mutually_exclusive_group()
    prefs_fair.add_argument("--fair", dest="fair", action="store_true", default=None)
    prefs_fair.add_argument("--unfair", dest="fair", action="store_false")
    prefs.add_argument("--theme", choices=THEME_CHOICES, default=None)

    sub.add_parser("run", help="Interactive drill")

    return parser


def build_settings(args: argparse.Namespace) -> AppSettings:
    """Apply command line overrides to the global settings"""
    app_settings = settings
    if getattr(args, "data_dir", None):
        storage = settings.storage.model_copy(
            update={"data_dir": args.data_dir.expanduser()}
        )
        app_settings = settings.model_copy(update={"storage": storage})
    app_settings.create_directories()
    return app_settings


def _to_index(position: int, size: int) -> int:
    if position < 1 or position > size:
        raise ConfigurationError(
            "position", position, f"must be between 1 and {size}"
        )
    return position - 1


def print_sample(result: SampleResult, controller: DrillController) -> None:
    """Print the words of a sample, one per line"""
    if not result:
        if not controller.selected_lists:
            print("Select word list(s)")
        else:
            print("No words available")
        return
    print("-" * 40)
    for entry in result:
        print(f"  {entry.word}")
    suffix = "  (paused)" if controller.is_paused else ""
    print("-" * 40 + suffix)


# ---- commands ----


def cmd_lists(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    selected = controller.selected_lists
    ranges = controller.ranges
    print("\n📚 Word lists:")
    for name in controller.store.list_names():
        try:
            count = len(controller.store.load(name))
        except RandomWordsError as e:
            logger.warning(f"Cannot read list '{name}': {e}")
            count = 0
        if name in selected:
            print(f"  ✓ {name} ({count} words, {ranges[name]})")
        else:
            print(f"    {name} ({count} words)")


def cmd_show(args: argparse.Namespace, app_settings: AppSettings) -> None:
    editor = create_list_editor(args.name, args.sort, app_settings)
    marked = editor.position_of(args.find) if args.find else None
    if args.find and marked is None:
        logger.warning(f"'{args.find}' is not in list '{args.name}'")
    print(f"\n📄 {args.name} ({len(editor)} words, {editor.sort_mode.label})")
    for position, word in enumerate(editor.words):
        pointer = "→" if position == marked else " "
        print(f"{pointer} {position + 1:>6}  {word}")


def cmd_add(args: argparse.Namespace, app_settings: AppSettings) -> None:
    editor = create_list_editor(args.name, None, app_settings)
    for word in args.words:
        added = editor.add(word)
        print(f"✅ Added '{added}' to {args.name}")


def cmd_remove(args: argparse.Namespace, app_settings: AppSettings) -> None:
    editor = create_list_editor(args.name, args.sort, app_settings)
    indices = [_to_index(p, len(editor)) for p in args.positions]
    removed = editor.delete(indices)
    print(f"🗑️ Removed from {args.name}: {', '.join(removed)}")


def cmd_edit(args: argparse.Namespace, app_settings: AppSettings) -> None:
    editor = create_list_editor(args.name, args.sort, app_settings)
    index = _to_index(args.position, len(editor))
    before = editor.words[index]
    after = editor.edit(index, args.text)
    editor.close()
    print(f"✏️ {args.name}: '{before}' → '{after}'")


def cmd_create(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    name = controller.create_list(args.name)
    print(f"✅ Created list '{name}'")


def cmd_rename(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    name = controller.rename_list(args.old, args.new)
    print(f"✅ Renamed '{args.old}' to '{name}'")


def cmd_delete_list(args: argparse.Namespace, app_settings: AppSettings) -> None:
    if not args.yes:
        answer = input(f"Delete list '{args.name}' permanently? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Cancelled")
            return
    controller = create_drill_controller(app_settings)
    controller.delete_list(args.name)
    print(f"🗑️ Deleted list '{args.name}'")


def cmd_import(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    collector = ErrorCollector("Import")
    for path in args.files:
        try:
            name = controller.import_list(path)
        except RandomWordsError as e:
            collector.add_error(str(path), e)
            continue
        collector.add_success(str(path))
        count = len(controller.all_words.get(name, []))
        print(f"✅ Imported {path} as '{name}' ({count} words)")
    if collector.has_errors():
        collector.log_all(logger)
        print(collector.get_summary())
        sys.exit(1)


def cmd_export(args: argparse.Namespace, app_settings: AppSettings) -> None:
    editor = create_list_editor(args.name, None, app_settings)
    target = editor.export(args.destination)
    print(f"📤 Exported '{args.name}' to {target}")


def cmd_select(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    for name in args.names:
        controller.select_list(name)
        print(f"✓ Selected '{name}' ({controller.ranges[name]})")


def cmd_deselect(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    for name in args.names:
        controller.deselect_list(name)
        print(f"Deselected '{name}'")


def cmd_range(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    selection = controller.set_range(args.name, args.lower, args.upper)
    total = len(controller.all_words.get(args.name, []))
    start, stop = selection.bounds(total)
    print(f"📏 {args.name}: {selection} (words {start + 1}-{stop} of {total})")


def cmd_draw(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    controller.load_words()
    prefs = controller.preferences
    count = args.count if args.count is not None else prefs.words_displayed
    fair = args.fair if args.fair is not None else prefs.fair_distribution
    result = controller.sampler.sample(
        controller.active_ranges, controller.all_words, count, fair=fair
    )
    if not result:
        print_sample(result, controller)
        return
    for entry in result:
        print(f"{entry.word}\t[{entry.list_name}]")


def cmd_settings(args: argparse.Namespace, app_settings: AppSettings) -> None:
    controller = create_drill_controller(app_settings)
    if args.interval is not None:
        controller.set_interval(args.interval)
    if args.words is not None:
        controller.set_word_count(args.words)
    if args.fair is not None:
        controller.set_fair_distribution(args.fair)
    if args.theme is not None:
        controller.set_theme(args.theme)

    prefs = controller.preferences
    interval = (
        "manual mode" if prefs.is_manual else f"every {prefs.switch_interval:g} sec"
    )
    print("\n⚙️ Settings")
    print("=" * 40)
    print(f"Switch interval: {interval}")
    print(f"Words displayed: {prefs.words_displayed}")
    print(f"Fair list distribution: {'on' if prefs.fair_distribution else 'off'}")
    print(f"Theme: {prefs.theme.value}")
    print(f"Selected lists: {', '.join(prefs.selected_lists) or '-'}")
    print("=" * 40)


def print_location(
    controller: DrillController, located: TaggedWord, sort_mode: SortMode
) -> None:
    word, name = located.word, located.list_name
    words = controller.store.load(name) if controller.store.exists(name) else []
    position = SortProjection(words, sort_mode).position_of(word)
    if position is None:
        print(f"🔎 '{word}' is no longer in list '{name}'")
    else:
        print(
            f"🔎 '{word}' is word {position + 1} of list '{name}'"
            f" ({sort_mode.label})"
        )


def _read_lines(
    events: "queue.Queue[tuple[str, str]]", read_line: Callable[[], str]
) -> None:
    """Forward input lines to the drill loop until quit or end of input"""
    while True:
        try:
            line = read_line()
        except (EOFError, OSError):
            events.put((INPUT, DrillConstants.COMMAND_QUIT))
            return
        command = line.strip().lower()
        events.put((INPUT, command))
        if command == DrillConstants.COMMAND_QUIT:
            return


def handle_drill_command(
    controller: DrillController,
    command: str,
    sort_mode: SortMode = SortMode.ORIGINAL,
) -> bool:
    """Apply one interactive command; returns False to quit

    Located words are numbered in ``sort_mode``, the order ``show`` uses.
    """
    if command == DrillConstants.COMMAND_QUIT:
        return False
    if command == DrillConstants.COMMAND_NEXT:
        print_sample(controller.resample(), controller)
    elif command == DrillConstants.COMMAND_BACK:
        if controller.go_back() is None:
            print("No earlier words")
        else:
            print_sample(controller.current, controller)
    elif command == DrillConstants.COMMAND_FORWARD:
        if controller.go_forward() is None:
            print("No later words")
        else:
            print_sample(controller.current, controller)
    elif command == DrillConstants.COMMAND_KEEP:
        added = controller.keep_current()
        if added:
            print(f"⭐ Kept: {', '.join(added)}")
        print_sample(controller.current, controller)
    elif command == DrillConstants.COMMAND_LOCATE:
        located = controller.locate_current()
        if located is None:
            print("Nothing to locate")
        else:
            print_location(controller, located, sort_mode)
    elif command == DrillConstants.COMMAND_PAUSE:
        print("⏸️ Paused" if controller.toggle_pause() else "▶️ Resumed")
    else:
        print(DRILL_HELP)
    return True


def run_drill(
    controller: DrillController,
    events: "queue.Queue[tuple[str, str]]",
    read_line: Callable[[], str] = input,
    sort_mode: SortMode = SortMode.ORIGINAL,
) -> None:
    """Interactive loop; timer ticks and input are handled on this thread"""
    reader = threading.Thread(
        target=_read_lines, args=(events, read_line), daemon=True
    )
    print(DRILL_HELP)
    controller.load_words()
    print_sample(controller.current, controller)
    controller.start()
    reader.start()
    try:
        while True:
            kind, value = events.get()
            if kind == TICK:
                print_sample(controller.resample(), controller)
            elif not handle_drill_command(controller, value, sort_mode):
                break
    finally:
        controller.stop()


def cmd_run(args: argparse.Namespace, app_settings: AppSettings) -> None:
    events: "queue.Queue[tuple[str, str]]" = queue.Queue()
    controller = create_drill_controller(
        app_settings, on_tick=lambda: events.put((TICK, ""))
    )
    run_drill(
        controller,
        events,
        sort_mode=SortMode.parse(app_settings.drill.default_sort_mode),
    )


COMMANDS: dict[str, Callable[[argparse.Namespace, AppSettings], None]] = {
    "lists": cmd_lists,
    "show": cmd_show,
    "add": cmd_add,
    "remove": cmd_remove,
    "edit": cmd_edit,
    "create": cmd_create,
    "rename": cmd_rename,
    "delete-list": cmd_delete_list,
    "import": cmd_import,
    "export": cmd_export,
    "select": cmd_select,
    "deselect": cmd_deselect,
    "range": cmd_range,
    "draw": cmd_draw,
    "settings": cmd_settings,
    "run": cmd_run,
}


def main() -> None:
    """Main entry point for the CLI"""
    parser = create_parser()

    if len(sys.argv) == 1:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args()
    if not args.command:
        parser.error("a command is required")

    log_level = "DEBUG" if args.debug or args.verbose else settings.logging.level
    log_file_path = args.log_file or settings.logging.file
    log_file = str(log_file_path) if log_file_path else None
    setup_logging(log_level, log_file, settings.logging.format)

    try:
        logger.debug(f"Running command '{args.command}'")
        app_settings = build_settings(args)
        COMMANDS[args.command](args, app_settings)
    except RandomWordsError as e:
        logger.error(f"Application error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
