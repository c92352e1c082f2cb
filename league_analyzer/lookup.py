"""Owner and team name lookups."""

from typing import Iterable, Mapping

from .schemas import DraftPick, Roster, User


def team_fallback_name(roster_id: int) -> str:
    """Name used when a team has no owner or the owner has no display name."""
    return f'Team {roster_id}'


def build_owner_names(rosters: Iterable[Roster], users: Iterable[User]) -> dict[int, str]:
    """
    Map roster id to the owner's display name.

    Rosters without an owner, or whose owner is missing from the user list,
    get the synthesized "Team {id}" name.
    """
    display_by_user = {u.user_id: u.display_name for u in users}
    names = {}
    for roster in rosters:
        display = display_by_user.get(roster.owner_id) if roster.owner_id else None
        names[roster.roster_id] = display or team_fallback_name(roster.roster_id)
    return names


def display_name(roster_id: int, names: Mapping[int, str]) -> str:
    return names.get(roster_id) or team_fallback_name(roster_id)


def build_player_names(picks: Iterable[DraftPick]) -> dict[str, str]:
    """Map player id to "First Last" for drafted players whose pick carries a name."""
    return {p.player_id: p.player_name for p in picks if p.player_name}


def player_label(player_id: str, names: Mapping[str, str]) -> str:
    return names.get(player_id) or player_id
