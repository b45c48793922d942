"""
Session loop for gh-dungeon.

DungeonSession reads commands, checks them against the current position,
moves the player or queries the content provider, and reports back.
Only transport failures that survive retrying, and a repository that
cannot be found at all, end a session early.
"""

import logging
import time
from typing import Callable, Optional

from dungeon_lib.common import Colors, error, narrate, warn
from dungeon_lib.config import DEFAULT_MAX_RETRIES
from dungeon_lib.display import FlavorPicker, RoomRenderer, show_file
from dungeon_lib.errors import DungeonError, ErrorKind, UnknownCommandError
from dungeon_lib.provider import ContentProvider, DirectoryListing, FileEntry

from .commands import Command, CommandKind, Direction, parse_command
from .protocols import REPL
from .state import NavigationState, get_prompt_text, join_path, short_ref


logger = logging.getLogger(__name__)

FAREWELL = "see you again~"

# Player-facing text for recoverable errors, by kind
RECOVERY_MESSAGES = {
    ErrorKind.AT_ROOT: "you search the walls for a door out but can't find one.",
    ErrorKind.NO_PRIOR_HISTORY: "you strain to see further back, but the past here is blank.",
    ErrorKind.UNSUPPORTED: "you focus on the future, but it refuses to come into view.",
    ErrorKind.CANCELLED: "you change your mind.",
    ErrorKind.NOT_FOUND: "whatever was there slips through your fingers.",
}


class DungeonSession:
    """One walk through a repository."""

    def __init__(
        self,
        repo: str,
        provider: ContentProvider,
        repl: REPL,
        renderer: Optional[RoomRenderer] = None,
        flavor: Optional[FlavorPicker] = None,
        pager: Callable[[str, str], None] = show_file,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: float = 1.0,
        ref: Optional[str] = None,
    ):
        self.repo = repo
        self.provider = provider
        self.repl = repl
        self.renderer = renderer or RoomRenderer()
        self.flavor = flavor
        self.pager = pager
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.state = NavigationState(ref=ref)
        self._describe = True

    # -- provider access ---------------------------------------------------

    def _with_retries(self, func, *args):
        """Call func, retrying transport failures up to max_retries times."""
        attempt = 0
        while True:
            try:
                return func(*args)
            except DungeonError as e:
                if e.kind is not ErrorKind.TRANSPORT or attempt >= self.max_retries:
                    raise
                attempt += 1
                warn(f"{e} (retry {attempt} of {self.max_retries})")
                time.sleep(self.retry_delay * attempt)

    def refresh_listing(self) -> DirectoryListing:
        """Return the listing for the current position, fetching it if stale."""
        while True:
            listing = self.state.listing
            if listing is not None:
                return listing

            logger.debug("fetching /%s at %s", self.state.joined_path, self.state.ref or "latest")
            try:
                listing = self._with_retries(
                    self.provider.list_directory, self.state.joined_path, self.state.ref
                )
            except DungeonError as e:
                if e.kind is not ErrorKind.NOT_FOUND:
                    raise
                self._recover_lost(e)
                continue

            self.state.store_listing(listing)
            return listing

    def _recover_lost(self, err: DungeonError) -> None:
        """The current room vanished. Fall back toward the root at latest."""
        logger.debug("lost: %s", err)
        if not self.state.is_root:
            narrate("the floor gives way beneath you. you are lost in time and space...")
            narrate("when the spinning stops, you find yourself back at the entrance.")
            self.state.reset_to_root()
        elif self.state.ref:
            narrate("the walls shimmer and dissolve. you are lost in time and space...")
            narrate("when the spinning stops, you find yourself back in the present.")
            self.state.reset_to_latest()
        else:
            raise err
        self._describe = True

    # -- output ------------------------------------------------------------

    def describe_room(self, listing: DirectoryListing) -> None:
        label = self.state.label(self.repo)
        flavor = self.flavor.room(self.state.joined_path) if self.flavor else None
        items = [
            (self.flavor.object_for(name) if self.flavor else "a piece of paper", name)
            for name in listing.file_names
        ]
        print(self.renderer.render_room(
            label,
            has_dirs=listing.has_dirs,
            has_parent=not self.state.is_root,
            has_files=listing.has_files,
            flavor=flavor,
            items=items,
        ))
        if self.state.ref:
            narrate(f"{Colors.DIM}everything here looks as it did at {short_ref(self.state.ref)}.{Colors.NC}")

    def report(self, err: DungeonError) -> None:
        """Turn a recoverable error into player feedback. Fatal errors propagate."""
        if not err.recoverable:
            raise err
        if err.kind is ErrorKind.UNKNOWN_COMMAND:
            warn(str(err))
            if err.hint:
                print(f"hint: {err.hint}")
            return
        narrate(RECOVERY_MESSAGES.get(err.kind, str(err)))
        logger.debug("recovered from %s: %s", err.kind.value, err)

    # -- commands ----------------------------------------------------------

    def cmd_help(self) -> None:
        print()
        print(f"{Colors.BOLD}Supported verbs:{Colors.NC}")
        print("    look                 Look around the room")
        print("    go down | go up      Take a staircase to another level")
        print("    examine              Pick up one of the papers lying here")
        print("    shift back           Step to the previous change of this place")
        print("    shift forward        Step forward again after shifting back")
        print("    quit, q              Leave the dungeon")
        print("    ?                    Show this help")
        print()

    def cmd_go(self, direction: Direction, listing: DirectoryListing) -> None:
        if direction is Direction.UP:
            self.state.ascend()
            narrate("you open the door and follow a spiral staircase up to a previous level.")
            self._describe = True
            return

        if not listing.has_dirs:
            narrate("there is no door leading down from here.")
            return

        narrate("you open the door.")
        narrate("before you is a dim, spiraling staircase going down.")
        narrate("as you descend, doors emerge from the darkness at regular intervals upon small landings.")
        names = listing.dir_names
        which = self.repl.select_one("at which door will you stop?", names)
        self.state.descend(names[which])
        self._describe = True

    def cmd_examine(self, listing: DirectoryListing) -> None:
        if not listing.has_files:
            narrate("you don't see anything to examine in here.")
            return

        narrate("you gather up the papers and look at their titles.")
        which = self.repl.select_one("examine which paper?", listing.file_names)
        entry = listing.files[which]
        narrate(f"you are holding a paper titled {entry.name}.")

        choice = self.repl.select_one("what now?", ["read it", "put it down"])
        if choice == 0:
            self.read_paper(entry)
        else:
            narrate("you set the paper back down.")

    def read_paper(self, entry: FileEntry) -> None:
        path = join_path(self.state.path + (entry.name,))
        found = self._with_retries(self.provider.get_file, path, self.state.ref)
        text = self._with_retries(self.provider.read_file, found)
        self.pager(found.name, text)

    def cmd_shift(self, direction: Direction) -> None:
        if direction is Direction.BACK:
            narrate("you close your eyes and focus on the past.")
            ref = self._with_retries(self.state.shift_to_previous, self.provider)
        else:
            narrate("you close your eyes and focus on the future.")
            ref = self.state.shift_to_next()
        narrate(f"you feel as though things have changed around you. ({short_ref(ref)})")
        self._describe = True

    def handle_command(self, command: Command, listing: DirectoryListing) -> bool:
        """
        Handle a command. Returns False if the session should end.
        """
        try:
            if command.kind is CommandKind.QUIT:
                narrate(FAREWELL)
                return False
            if command.kind is CommandKind.HELP:
                self.cmd_help()
            elif command.kind is CommandKind.LOOK:
                self.describe_room(listing)
            elif command.kind is CommandKind.GO:
                self.cmd_go(command.direction, listing)
            elif command.kind is CommandKind.EXAMINE:
                self.cmd_examine(listing)
            elif command.kind is CommandKind.SHIFT:
                self.cmd_shift(command.direction)
        except DungeonError as e:
            self.report(e)
        return True

    # -- main loop ---------------------------------------------------------

    def step(self) -> bool:
        """Run one read-parse-act cycle. Returns False if the session should end."""
        listing = self.refresh_listing()
        if self._describe:
            self.describe_room(listing)
            self._describe = False

        try:
            raw = self.repl.read_line(get_prompt_text(self.state, self.repo))
        except EOFError:
            print()
            narrate(FAREWELL)
            return False

        if not raw.strip():
            return True

        try:
            command = parse_command(raw)
        except UnknownCommandError as e:
            self.report(e)
            return True

        return self.handle_command(command, listing)

    def run(self) -> int:
        """Main session entry point. Returns a process exit code."""
        print()
        print(f"{Colors.BOLD}gh-dungeon: {self.repo}{Colors.NC}")
        print("Type '?' for verbs, 'quit' to leave")
        print()

        try:
            while True:
                try:
                    if not self.step():
                        break
                except KeyboardInterrupt:
                    # Ctrl+C abandons the current command, not the session
                    print()
        except DungeonError as e:
            error(str(e))
            if e.kind is ErrorKind.NOT_FOUND:
                print(f"  Is '{self.repo}' the right repository?")
            return 1
        return 0
