from fakes import ARSENAL, CHELSEA, SPURS, match, player, scorer, standing

from matchday_mcp.formatters import (
    NO_LIVE_MATCHES,
    format_competitions,
    format_goal_difference,
    format_live_matches,
    format_long_date,
    format_match_date,
    format_matches_by_date,
    format_next_match,
    format_standings,
    format_team_form,
    format_team_info,
    format_team_results,
    format_team_squad,
    format_top_scorers,
    group_matches_by_date,
    summarize_form,
)
from matchday_mcp.schemas import Competition, Match, Player, Scorer, Standing, Team

ARSENAL_TEAM = Team.model_validate(ARSENAL)


def _matches(*payloads):
    return [Match.model_validate(p) for p in payloads]


# =============================================================================
# Helpers
# =============================================================================

def test_goal_difference_sign():
    assert format_goal_difference(5) == "+5"
    assert format_goal_difference(-3) == "-3"
    assert format_goal_difference(0) == "+0"


def test_match_date_is_month_day_year():
    assert format_match_date("2024-01-05T19:45:00Z") == "1/5/2024"


def test_long_date():
    assert format_long_date("2024-01-20") == "Saturday, January 20, 2024"


# =============================================================================
# Matches
# =============================================================================

def test_next_match_line():
    fixture = Match.model_validate(match(CHELSEA, ARSENAL, status="SCHEDULED", utc_date="2024-02-03T17:30:00Z"))
    assert format_next_match(ARSENAL_TEAM, fixture) == (
        "Next match for Arsenal FC: Chelsea FC vs Arsenal FC on 2/3/2024 (Premier League)"
    )


def test_live_matches_empty_is_exact_sentence():
    assert format_live_matches([]) == NO_LIVE_MATCHES
    assert format_live_matches([]) == "No live matches currently playing"


def test_live_matches_lists_score_minute_and_status():
    live = _matches(
        match(ARSENAL, CHELSEA, 1, 2, status="IN_PLAY", minute=67),
        match(SPURS, ARSENAL, None, None, status="PAUSED", half_time=(1, 0), match_id=2),
    )
    text = format_live_matches(live)
    assert text == (
        "Live Matches:\n\n"
        "1. Arsenal FC 1-2 Chelsea FC\n"
        "   Premier League - 67'\n"
        "   Status: IN_PLAY\n\n"
        "2. Tottenham Hotspur FC 1-0 Arsenal FC\n"
        "   Premier League - HT'\n"
        "   Status: PAUSED"
    )


def test_date_groups_are_emitted_in_ascending_order():
    matches = _matches(
        match(ARSENAL, CHELSEA, 2, 0, utc_date="2024-01-20T15:00:00Z", match_id=1),
        match(SPURS, CHELSEA, 1, 1, utc_date="2024-01-15T20:00:00Z", match_id=2),
        match(CHELSEA, SPURS, None, None, status="TIMED", utc_date="2024-01-20T12:30:00Z", match_id=3),
    )
    groups = group_matches_by_date(matches)
    assert [day for day, _ in groups] == ["2024-01-15", "2024-01-20"]
    # source order is kept inside a day
    assert [m.id for m in groups[1][1]] == [1, 3]

    text = format_matches_by_date(matches, "2024-01-15", "2024-01-20")
    assert text.startswith("Matches from 2024-01-15 to 2024-01-20:\n\n📅 Monday, January 15, 2024")
    assert text.index("Monday, January 15, 2024") < text.index("Saturday, January 20, 2024")
    assert "08:00 PM | Tottenham 1-1 Chelsea" in text
    assert "12:30 PM | Chelsea --- Tottenham" in text
    assert "     Premier League - TIMED" in text
    assert not text.endswith("\n")


def test_matches_by_date_empty():
    assert format_matches_by_date([], "2024-01-01", "2024-01-02") == (
        "No matches found between 2024-01-01 and 2024-01-02"
    )


def test_team_results_are_numbered_and_annotated():
    results = _matches(
        match(ARSENAL, CHELSEA, 2, 1, utc_date="2024-01-20T15:00:00Z", match_id=1),
        match(SPURS, ARSENAL, 3, 3, utc_date="2024-01-13T15:00:00Z", match_id=2),
    )
    assert format_team_results(ARSENAL_TEAM, results) == (
        "Recent results for Arsenal FC:\n\n"
        "1. Arsenal FC 2-1 Chelsea FC (W) - 1/20/2024\n"
        "2. Tottenham Hotspur FC 3-3 Arsenal FC (D) - 1/13/2024"
    )


# =============================================================================
# Form
# =============================================================================

def _newest_first_form_matches():
    # Newest first, as the API returns them: L, D, W
    return _matches(
        match(ARSENAL, CHELSEA, 0, 1, utc_date="2024-01-27T15:00:00Z", match_id=3),
        match(SPURS, ARSENAL, 2, 2, utc_date="2024-01-20T15:00:00Z", match_id=2),
        match(CHELSEA, ARSENAL, 0, 3, utc_date="2024-01-13T15:00:00Z", match_id=1),
    )


def test_form_summary_is_chronological():
    summary = summarize_form(_newest_first_form_matches(), ARSENAL["id"])
    assert summary.form_string == "WDL"
    assert (summary.wins, summary.draws, summary.losses) == (1, 1, 1)
    assert summary.points == 4
    assert summary.max_points == 9
    assert summary.win_rate == "33.3"
    assert [m.id for m in summary.matches] == [1, 2, 3]


def test_form_report():
    summary = summarize_form(_newest_first_form_matches(), ARSENAL["id"])
    text = format_team_form(ARSENAL_TEAM, summary)
    assert text.splitlines()[:8] == [
        "Team Form for Arsenal FC (Last 3 matches):",
        "",
        "Form: WDL",
        "Wins: 1 | Draws: 1 | Losses: 1",
        "Points: 4/9",
        "Win Rate: 33.3%",
        "",
        "Recent Results:",
    ]
    assert text.splitlines()[8] == "1. Chelsea 0-3 Arsenal (W) - 1/13/2024"
    assert text.splitlines()[-1] == "3. Arsenal 0-1 Chelsea (L) - 1/27/2024"


def test_form_of_no_matches():
    summary = summarize_form([], ARSENAL["id"])
    assert summary.played == 0
    assert summary.win_rate == "0.0"
    assert format_team_form(ARSENAL_TEAM, summary) == "No recent matches found for team 'Arsenal FC'"


# =============================================================================
# Teams
# =============================================================================

def test_squad_groups_positions_in_preferred_order():
    squad = [
        Player.model_validate(p)
        for p in (
            player("Declan Rice", "Midfield", "1999-01-14", shirt=41),
            player("David Raya", "Goalkeeper", "1995-09-15", nationality="Spain", shirt=22),
            player("Ethan Nwaneri", "Winger", "2007-03-21"),
            player("William Saliba", "Defence", "2001-03-24", nationality="France", shirt=2),
            player("Unlisted Trialist", None, ""),
        )
    ]
    text = format_team_squad(ARSENAL_TEAM, squad, current_year=2024)
    headings = [line for line in text.splitlines() if line.endswith(":")]
    assert headings == [
        "Squad for Arsenal FC:",
        "Goalkeepers:",
        "Defences:",
        "Midfields:",
        "Wingers:",
        "Others:",
    ]
    assert "  • David Raya #22 (Spain, 29 years old)" in text
    assert "  • Declan Rice #41 (England, 25 years old)" in text
    assert "  • Ethan Nwaneri (England, 17 years old)" in text
    assert "  • Unlisted Trialist (England, age unknown)" in text
    assert not text.endswith("\n")


def test_empty_squad():
    assert format_team_squad(ARSENAL_TEAM, [], current_year=2024) == (
        "No squad information available for team 'Arsenal FC'"
    )


def test_team_info_placeholders():
    bare = Team.model_validate({"id": 1, "name": "Unknown Rovers"})
    assert format_team_info(bare) == (
        "Team Information for Unknown Rovers:\n"
        "- Full Name: Unknown Rovers\n"
        "- Short Name: Unknown Rovers\n"
        "- Founded: Unknown\n"
        "- Colors: Unknown\n"
        "- Venue: Unknown\n"
        "- Website: Not available"
    )


def test_team_info_full():
    text = format_team_info(ARSENAL_TEAM)
    assert "- Founded: 1886" in text
    assert "- Venue: Emirates Stadium" in text


# =============================================================================
# Competitions
# =============================================================================

def test_standings_table_columns():
    table = [
        Standing.model_validate(standing(1, ARSENAL, 5, points=50)),
        Standing.model_validate(standing(2, CHELSEA, 0, points=45)),
        Standing.model_validate(standing(3, SPURS, -3, points=41)),
    ]
    lines = format_standings("pl", table).splitlines()
    assert lines[0] == "League Table for PL:"
    assert lines[2].startswith("Pos | Team")
    assert set(lines[3]) <= {"-", "|"}
    assert len(lines[3]) == len(lines[2])
    assert lines[4].startswith("  1 | Arsenal                  | 20 |")
    assert "|   +5 |  50 | W,W,D,L,W" in lines[4]
    assert "|   +0 |" in lines[5]
    assert "|   -3 |" in lines[6]
    # rows line up with the header
    assert lines[4].index("| W,W") == lines[2].index("| Form")


def test_standings_empty_table():
    assert format_standings("PL", []) == "No table data found for competition 'PL'"


def test_top_scorers_table():
    scorers = [
        Scorer.model_validate(scorer("Erling Haaland", {"id": 65, "name": "Manchester City FC"}, 21, assists=5)),
        Scorer.model_validate(scorer("Bukayo Saka", ARSENAL, 14)),
    ]
    lines = format_top_scorers("pl", scorers).splitlines()
    assert lines[0] == "Top Scorers in PL:"
    assert lines[4].startswith("  1 | Erling Haaland ")
    assert lines[4].endswith("|    21 |       5 |    -")
    assert lines[5].startswith("  2 | Bukayo Saka ")
    assert lines[5].endswith("|    14 |       - |    -")


def test_top_scorers_empty():
    assert format_top_scorers("XX", []) == "No scorer data found for competition 'XX'"


def test_competitions_list():
    comps = [
        Competition.model_validate({"id": 2021, "name": "Premier League", "code": "PL", "type": "LEAGUE"}),
        Competition.model_validate({"id": 2001, "name": "UEFA Champions League", "code": "CL", "type": "CUP"}),
    ]
    assert format_competitions(comps) == (
        "Available Competitions:\n\n"
        "1. Premier League (PL)\n"
        "   Type: LEAGUE\n"
        "   ID: 2021\n\n"
        "2. UEFA Champions League (CL)\n"
        "   Type: CUP\n"
        "   ID: 2001"
    )
    assert format_competitions([]) == "No competitions found"
