"""Presentation of league reports: JSON payloads and console text."""

from typing import Any, List, Mapping, Optional

from .forecast import favorite_label
from .lookup import display_name, player_label
from .models import LeagueReport, Preview, StarPerformer, Summary, TeamDraftScore
from .utils import to_jsonable


def format_points(value: float) -> str:
    return f'{value:.2f}'


def summary_headline(summary: Summary) -> str:
    """'<winner> wins by <margin>.' or the tie line."""
    if summary.is_tie:
        return 'Dead even, a rare draw.'
    return f'{summary.winner} wins by {format_points(summary.margin)}.'


def grade_to_dict(score: TeamDraftScore) -> dict[str, Any]:
    data = to_jsonable(score)
    data['total'] = round(score.total, 1)
    return data


def preview_to_dict(preview: Preview, report: LeagueReport) -> dict[str, Any]:
    name_for = lambda rid: display_name(rid, report.owner_names)  # noqa: E731
    return {
        'matchup_id': preview.matchup_id,
        'team_a': preview.team_a,
        'team_b': preview.team_b,
        'name_a': name_for(preview.team_a),
        'name_b': name_for(preview.team_b),
        'power_a': round(preview.power_a, 1),
        'power_b': round(preview.power_b, 1),
        'diff': f'{preview.diff:.1f}',
        'label': favorite_label(preview, name_for),
    }


def star_to_dict(star: StarPerformer, player_names: Mapping[str, str]) -> dict[str, Any]:
    return {
        'player_id': star.player_id,
        'name': player_label(star.player_id, player_names),
        'points': star.points,
    }


def summary_to_dict(
    summary: Summary, player_names: Optional[Mapping[str, str]] = None
) -> dict[str, Any]:
    return {
        'matchup_id': summary.matchup_id,
        'name_a': summary.name_a,
        'name_b': summary.name_b,
        'points_a': format_points(summary.points_a),
        'points_b': format_points(summary.points_b),
        'winner': summary.winner,
        'margin': format_points(summary.margin),
        'headline': summary_headline(summary),
        'star': star_to_dict(summary.star, player_names or {}) if summary.star else None,
    }


def report_to_dict(report: LeagueReport) -> dict[str, Any]:
    """JSON-ready payload for one league. Grades are listed best first."""
    if not report.ok:
        return {'league_id': report.league_id, 'week': report.week, 'error': report.error}

    gotw = report.forecast.game_of_the_week
    league = report.league
    return {
        'league_id': report.league_id,
        'name': league.name if league else '',
        'season': league.season if league else '',
        'total_rosters': league.total_rosters if league else 0,
        'week': report.week,
        'draft_grades': [grade_to_dict(g) for g in reversed(report.grades)],
        'power_index': {str(k): round(v, 2) for k, v in report.power.items()},
        'previews': [preview_to_dict(p, report) for p in report.forecast.previews],
        'game_of_the_week': gotw.matchup_id if gotw else None,
        'unpaired': [
            {'matchup_id': u.matchup_id, 'roster_ids': [m.roster_id for m in u.sides]}
            for u in report.forecast.unpaired
        ],
        'summaries': [summary_to_dict(s, report.player_names) for s in report.summaries],
        'warnings': list(report.warnings),
    }


def format_report(report: LeagueReport) -> List[str]:
    """Console lines for one league."""
    if not report.ok:
        return [f'League {report.league_id}: ERROR {report.error}']

    name = report.league.name if report.league else report.league_id
    lines = [f'{name} ({report.league.season if report.league else ""}), week {report.week}']

    lines.append('Draft grades:')
    if not report.grades:
        lines.append('  No draft data yet.')
    for g in reversed(report.grades):
        lines.append(f'  {g.grade:<3} {g.owner}: {g.total:.1f}  {g.note}')
        for tag in g.tags:
            lines.append(f'        - {tag}')

    lines.append('Matchup previews:')
    gotw = report.forecast.game_of_the_week
    name_for = lambda rid: display_name(rid, report.owner_names)  # noqa: E731
    for p in report.forecast.previews:
        marker = ' [Game of the Week]' if p is gotw else ''
        lines.append(
            f'  {name_for(p.team_a)} vs {name_for(p.team_b)}: diff {p.diff:.1f}, '
            f'{favorite_label(p, name_for)}{marker}'
        )

    if report.summaries:
        lines.append('Results:')
        for s in report.summaries:
            lines.append(
                f'  {s.name_a} {format_points(s.points_a)} - {format_points(s.points_b)} {s.name_b}: '
                f'{summary_headline(s)}'
            )
            if s.star:
                star_name = player_label(s.star.player_id, report.player_names)
                lines.append(f'        Star: {star_name} ({format_points(s.star.points)} pts)')
    return lines
