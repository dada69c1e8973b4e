from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from cloakroom.core.cloakroom import InternalInconsistencyError
from cloakroom.core.entities.items import ItemCategory
from cloakroom.core.entities.locker import CapacityExceededError, Locker
from cloakroom.infrastructure.config import Settings
from cloakroom.schemas.models import (
    MAX_VALID_MAX_ITEMS,
    MAX_VALID_NUM_LOCKERS,
    MIN_VALID_MAX_ITEMS,
    MIN_VALID_NUM_LOCKERS,
    CloakroomParams,
    ItemCountInput,
)
from cloakroom.services.cloakroom_service import CloakroomSession, KeyNotFoundError, NoClosedLockersError

ERR_PREFIX = " *** Error:"

SHORT_RULE = "-" * 77
LONG_RULE = "-" * 87

console = Console(soft_wrap=True, emoji=False, highlight=False)

_CATEGORY_OPTIONS: dict[int, tuple[ItemCategory, str]] = {
    1: (ItemCategory.COATS, "coats"),
    2: (ItemCategory.BACKPACKS, "backpacks"),
    3: (ItemCategory.UMBRELLAS, "umbrellas"),
    4: (ItemCategory.OTHER, "other items"),
}


# -----------------------------
# Console helpers
# -----------------------------
def _say(text: str = "") -> None:
    console.print(escape(text))


def print_err(message: str) -> None:
    _say(f"{ERR_PREFIX} {message}.")


def halt() -> None:
    console.input("Press return to continue")


def _ask(prompt: str) -> str:
    return Prompt.ask(escape(prompt), console=console, default="", show_default=False).strip()


def input_within_range_loop(prompt: str, min_valid: int, max_valid: int) -> int:
    while True:
        raw = _ask(prompt)
        try:
            value = int(raw)
        except ValueError:
            value = None

        if value is not None and min_valid <= value <= max_valid:
            return value
        _say(f"{ERR_PREFIX} number must be between {min_valid} and {max_valid}.")


def input_int_loop(prompt: str) -> int:
    while True:
        try:
            return int(_ask(prompt))
        except ValueError:
            print_err("data entered is invalid/outside of range")


def input_menu_option(max_option: int) -> int:
    return input_within_range_loop(f"Please enter option between 1 and {max_option}", 1, max_option)


# -----------------------------
# Cloakroom parameters
# -----------------------------
def input_cloakroom_params(settings: Settings) -> CloakroomParams:
    """
    Ask for whichever parameters the settings leave unset.

    Raises pydantic.ValidationError when a preset value is out of range.
    """
    num_lockers = settings.num_lockers
    if num_lockers is None:
        num_lockers = input_within_range_loop(
            f"Enter number of lockers (number between {MIN_VALID_NUM_LOCKERS} and {MAX_VALID_NUM_LOCKERS})",
            MIN_VALID_NUM_LOCKERS,
            MAX_VALID_NUM_LOCKERS,
        )

    max_items = settings.max_items_per_locker
    if max_items is None:
        max_items = input_within_range_loop(
            "Enter number of items each locker can hold "
            f"(number between {MIN_VALID_MAX_ITEMS} and {MAX_VALID_MAX_ITEMS})",
            MIN_VALID_MAX_ITEMS,
            MAX_VALID_MAX_ITEMS,
        )

    return CloakroomParams(num_lockers=num_lockers, max_items_per_locker=max_items)


# -----------------------------
# Locker contents
# -----------------------------
def print_locker_info(locker: Locker) -> None:
    _say()
    _say(SHORT_RULE)
    _say(f"Current contents of locker number {locker.locker_number} are:")
    _say(locker.items.format())
    _say(f"Total number of items currently in locker: {locker.total_items}, max items: {locker.max_items}")
    _say(SHORT_RULE)
    _say()


def input_num_items(locker: Locker, category: ItemCategory, item_descr: str) -> None:
    while True:
        try:
            num_items = ItemCountInput(num_items=input_int_loop(f"Enter number of {item_descr}")).num_items
            break
        except ValidationError:
            print_err("data entered is invalid/outside of range")

    try:
        locker.set_count(category, num_items)
    except CapacityExceededError:
        print_err("not enough space in locker")
        halt()


def close_locker(session: CloakroomSession, locker: Locker) -> None:
    contents = locker.items.format()
    num_items = locker.total_items
    locker_number = session.close(locker)

    _say(LONG_RULE)
    if num_items > 0:
        _say(
            f"Locker number {locker_number} has been closed and key has been obtained. "
            "Contents are as follows:"
        )
        _say(contents)
    else:
        _say(f"Locker number {locker_number}, which is empty, has been closed and key has been obtained.")
    _say(LONG_RULE)
    halt()


def change_locker_contents(session: CloakroomSession, locker: Locker) -> None:
    while True:
        print_locker_info(locker)

        _say("1) Change number of coats")
        _say("2) Change number of backpacks")
        _say("3) Change number of umbrellas")
        _say("4) Change number of other items")
        _say("5) Close locker")
        _say()

        option = input_menu_option(5)
        _say()
        if option == 5:
            close_locker(session, locker)
            return

        category, item_descr = _CATEGORY_OPTIONS[option]
        input_num_items(locker, category, item_descr)


# -----------------------------
# Main menu actions
# -----------------------------
def _open_locker(session: CloakroomSession) -> Locker | None:
    if not session.has_keys:
        print_err("there are no closed lockers from which to collect items")
        halt()
        return None

    locker_number = input_int_loop("Enter locker number printed on key")
    try:
        return session.reopen(locker_number)
    except (NoClosedLockersError, KeyNotFoundError) as e:
        print_err(str(e))
    except InternalInconsistencyError as e:
        _say(f"{ERR_PREFIX} internal error: {e}")
    halt()
    return None


def deposit_items(session: CloakroomSession) -> None:
    locker = session.start_deposit()
    if locker is None:
        _say("There are no free lockers.")
        halt()
        return

    _say(f" *** Found free locker number {locker.locker_number} ***")
    change_locker_contents(session, locker)


def collect_items(session: CloakroomSession) -> None:
    locker = _open_locker(session)
    if locker is None:
        return

    locker_number = locker.locker_number
    items = session.vacate(locker)
    _say(SHORT_RULE)
    _say(f"Collected following items from locker number {locker_number}:")
    _say(items.format())
    _say(SHORT_RULE)
    halt()


def change_contents(session: CloakroomSession) -> None:
    locker = _open_locker(session)
    if locker is not None:
        change_locker_contents(session, locker)


def print_cloakroom_contents(session: CloakroomSession) -> None:
    closed = session.closed_lockers()
    if not closed:
        _say("There are no closed lockers.")
    for view in closed:
        _say(f"locker number {view.locker_number}: [{view.contents}]")
    halt()


def run_menu(session: CloakroomSession) -> None:
    actions = {
        1: deposit_items,
        2: collect_items,
        3: change_contents,
        4: print_cloakroom_contents,
    }

    while True:
        _say()
        _say("1) Deposit items in a locker")
        _say("2) Collect items from a locker")
        _say("3) Change locker contents")
        _say("4) Print contents of closed lockers")
        _say("5) Quit")
        _say()

        option = input_menu_option(5)
        _say()
        if option == 5:
            return
        actions[option](session)
