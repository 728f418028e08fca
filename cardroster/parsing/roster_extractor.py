import re
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from loguru import logger

from cardroster.models.enums import PlayerRole, RosterMode, TableShape
from cardroster.models.player import Player
from cardroster.models.roster import RosterEntity
from .html_scanner import detect_table_shape, scan_rows

# Roster entries read "Name (WBF id) [role]"; names may carry accented Latin letters
NAME_CHAR_PATTERN = re.compile(r"[A-Za-zÀ-ÿ\s\-'.]")
WBF_ID_PATTERN = re.compile(r"\(([0-9]+)\)")
ROLE_PATTERN = re.compile(r"\s*(?i:(captain|coach|npc))?")

HEADER_NAMES = {"Team Name", "Pair Name", "Pair", "Team"}
HEADER_EVENT = "Event"
MIN_PLAYERS = 2
PAIR_SIZE = 2

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class ClassifiedRow(NamedTuple):
    id: str
    event: str
    name: str
    roster: str


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def derive_entity_id(event: str, name: str) -> str:
    """Stable ID for tables without an ID column.

    Keeps the exact signed 32-bit ``h * 31 + char`` arithmetic: previously
    uploaded cards are stored under these IDs.
    """
    key = _NON_ALNUM.sub("", f"{event}_{name}".lower())
    hash_value = 0
    for char in key:
        hash_value = _to_int32((hash_value << 5) - hash_value + ord(char))
    return str(abs(hash_value))


def derive_surname(full_name: str) -> str:
    """First all-caps token longer than one character, else the last token."""
    parts = full_name.split() or [""]
    for part in parts:
        if len(part) > 1 and part == part.upper():
            return part.upper()
    return parts[-1].upper()


def classify_row(
    cells: Sequence[str], shape: TableShape, mode: RosterMode = RosterMode.TEAMS
) -> Optional[ClassifiedRow]:
    """Maps a row's cells to (id, event, name, roster), or None for non-data rows.

    Teams and pairs share the same column layout and header labels, so
    ``mode`` does not change the result.
    """
    if shape == TableShape.HAS_ID_COLUMN:
        if len(cells) < 4:
            return None
        event, entity_id, name, roster = cells[0], cells[1], cells[2], cells[3]
        # Blank ID cell
        if not entity_id:
            entity_id = derive_entity_id(event, name)
    else:
        if len(cells) < 3:
            return None
        event, name, roster = cells[0], cells[1], cells[2]
        entity_id = derive_entity_id(event, name)

    if not name or name in HEADER_NAMES or event == HEADER_EVENT:
        return None

    return ClassifiedRow(id=entity_id, event=event, name=name, roster=roster)


def _scan_entries(
    roster_text: str, with_roles: bool
) -> Iterator[Tuple[str, str, Optional[str]]]:
    """Yields (name, wbf id, role) for every ``Name (123) [role]`` entry.

    Each ``(digits)`` token is located first and its name is the run of name
    characters directly before it, bounded by the end of the previous entry.
    Every character is visited a bounded number of times.
    """
    entry_end = 0
    id_match = WBF_ID_PATTERN.search(roster_text, entry_end)
    while id_match is not None:
        name_start = id_match.start()
        while name_start > entry_end and NAME_CHAR_PATTERN.match(
            roster_text, name_start - 1
        ):
            name_start -= 1

        if name_start == id_match.start():
            # No name in front of this id
            id_match = WBF_ID_PATTERN.search(roster_text, id_match.end())
            continue

        role = None
        entry_end = id_match.end()
        if with_roles:
            role_match = ROLE_PATTERN.match(roster_text, entry_end)
            role = (role_match.group(1) or "").lower()
            entry_end = role_match.end()

        yield roster_text[name_start : id_match.start()], id_match.group(1), role
        id_match = WBF_ID_PATTERN.search(roster_text, entry_end)


def parse_roster(roster_text: str, mode: RosterMode) -> List[Player]:
    """Extracts players from a roster cell such as ``Jane DOE (123) captain``.

    A WBF id seen earlier in the same cell is skipped, which covers players
    listed twice under two roles.
    """
    teams_mode = mode == RosterMode.TEAMS

    players: List[Player] = []
    seen: set[str] = set()
    for raw_name, wbf_id, raw_role in _scan_entries(roster_text, teams_mode):
        full_name = raw_name.strip()
        if wbf_id in seen:
            continue
        seen.add(wbf_id)

        role = PlayerRole(raw_role) if raw_role is not None else None

        players.append(
            Player(
                full_name=full_name,
                surname=derive_surname(full_name),
                wbf_id=wbf_id,
                role=role,
            )
        )
    return players


def extract_roster(
    html: str, mode: Union[RosterMode, str]
) -> List[RosterEntity]:
    """Turns a registration table into teams or pairs, in row order.

    Malformed rows, header rows and entities with fewer than two players are
    dropped; the function never raises for bad markup.
    """
    mode = RosterMode(mode)
    shape = detect_table_shape(html)

    entities: List[RosterEntity] = []
    rows_seen = 0
    for cells in scan_rows(html):
        rows_seen += 1
        row = classify_row(cells, shape, mode)
        if row is None:
            continue

        players = parse_roster(row.roster, mode)
        if len(players) < MIN_PLAYERS:
            continue
        if mode == RosterMode.PAIRS:
            players = players[:PAIR_SIZE]

        entities.append(
            RosterEntity(id=row.id, event=row.event, name=row.name, players=players)
        )

    logger.debug(
        f"Extracted {len(entities)} {mode.value} from {rows_seen} rows ({shape.value})"
    )
    return entities
