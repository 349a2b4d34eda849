#!/usr/bin/env python3
"""
CLI for testing Dream League esports match simulation
"""
import asyncio
from collections import defaultdict
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import track

from app.config import settings
from app.logging_config import setup_logging
from app.engine import MatchSimulationEngine, TournamentEngine, make_rng
from app.engine.types import MatchResult, TeamSide
from app.generators.player_generator import PlayerGenerator
from app.generators.team_generator import TeamGenerator
from app.services.audio_commentary import narrate_match
from app.services.match_simulation import simulate_match

console = Console()


def _demo_rosters(teams, seed: Optional[int]):
    generator = PlayerGenerator(seed)
    return {t.id: generator.generate_roster(t, TeamGenerator.skill_level(t)) for t in teams}


@click.group()
@click.option("--log-level", default=settings.LOG_LEVEL, help="Logging level")
def cli(log_level: str):
    """Dream League - Esports Match Simulation"""
    setup_logging(log_level)


@cli.command()
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible match")
@click.option("--audio", is_flag=True, help="Request spoken commentary from the TTS service")
def simulate(seed: Optional[int], audio: bool):
    """Simulate a demo match between the two top teams"""
    team_a, team_b = TeamGenerator.generate_teams(2)
    rosters = _demo_rosters([team_a, team_b], seed)

    for team, style in ((team_a, "cyan"), (team_b, "magenta")):
        console.print(Panel(f"[bold {style}]{team.name}[/bold {style}] (synergy {team.synergy_score:.0f})"))
        for p in rosters[team.id]:
            console.print(f"  {p.name} ({p.position}) - OVR: {p.overall_rating}")

    console.print("\n[yellow]Simulating match...[/yellow]\n")
    result = simulate_match(team_a, team_b, rosters[team_a.id], rosters[team_b.id], seed=seed)

    console.print(Panel("[bold]Match Result[/bold]"))
    console.print(f"[cyan]{team_a.name}:[/cyan] {result.score[0]}  (overall {result.performance_a.overall:.1f})")
    console.print(f"[magenta]{team_b.name}:[/magenta] {result.score[1]}  (overall {result.performance_b.overall:.1f})")
    console.print(f"\n[bold green]Winner: {result.winner.name.upper()}[/bold green]")
    console.print(f"[bold]Duration: {result.stats.duration} minutes[/bold]")
    if result.upset:
        console.print("[bold red]Upset adjustment applied![/bold red]")

    audio_urls = None
    if audio:
        audio_urls = asyncio.run(narrate_match(result.commentary))
        voiced = sum(1 for url in audio_urls if url)
        if voiced:
            console.print(f"[green]Audio generated for {voiced}/{len(audio_urls)} lines[/green]")
        else:
            console.print("[yellow]No audio commentary available (check AUDIO_ENABLED / AUDIO_SERVICE_URL)[/yellow]")

    _print_commentary(result, audio_urls)
    _print_box_score(result, TeamSide.TEAM_A, rosters[team_a.id])
    _print_box_score(result, TeamSide.TEAM_B, rosters[team_b.id])


def _print_commentary(result: MatchResult, audio_urls: Optional[list] = None):
    """Print the commentary feed, with audio links when they were generated"""
    table = Table(title="Commentary")
    table.add_column("Min", justify="right")
    table.add_column("Hype", style="yellow")
    table.add_column("Commentary")
    if audio_urls is not None:
        table.add_column("Audio", style="blue")

    for i, line in enumerate(result.commentary):
        row = [str(line.time), "*" * line.excitement, line.text]
        if audio_urls is not None:
            row.append(audio_urls[i] or "-")
        table.add_row(*row)

    console.print(table)


def _print_box_score(result: MatchResult, side: TeamSide, roster):
    """Print one team's box score"""
    team = result.team_a if side == TeamSide.TEAM_A else result.team_b
    team_stats = result.stats.for_side(side)

    table = Table(title=f"{team.name} - {team_stats.objectives} obj / {team_stats.teamfights} fights / {team_stats.plays} plays")
    table.add_column("Player", style="cyan")
    table.add_column("Pos")
    table.add_column("Rating", justify="right", style="green")
    table.add_column("K/D/A", justify="right")
    table.add_column("Gold", justify="right")
    table.add_column("Damage", justify="right")
    table.add_column("Vision", justify="right")

    for player in roster:
        perf = result.stats.player_performances[player.id]
        name = player.name
        if team_stats.mvp is not None and team_stats.mvp.id == player.id:
            name += " (MVP)"
        table.add_row(
            name,
            player.role.value,
            f"{perf.performance_score:.1f}",
            f"{perf.kills}/{perf.deaths}/{perf.assists}",
            f"{perf.gold_earned:,}",
            f"{perf.damage_dealt:,}",
            str(perf.vision_score),
        )

    console.print(table)


@cli.command()
@click.option("--matches", default=1000, help="Number of matches to simulate")
@click.option("--seed", default=1, help="First seed; match i uses seed + i")
def benchmark(matches: int, seed: int):
    """Run seeded simulations of the top two teams to check balance"""
    team_a, team_b = TeamGenerator.generate_teams(2)
    rosters = _demo_rosters([team_a, team_b], seed)

    stats = defaultdict(list)
    console.print(f"[yellow]Running {matches} simulations...[/yellow]")

    for i in track(range(matches), description="Simulating..."):
        engine = MatchSimulationEngine(make_rng(seed + i))
        result = engine.simulate(team_a, team_b, rosters[team_a.id], rosters[team_b.id])

        stats["team_a_wins"].append(1 if result.winner is team_a else 0)
        stats["upsets"].append(1 if result.upset else 0)
        stats["durations"].append(result.stats.duration)
        stats["margins"].append(abs(result.score[0] - result.score[1]))
        stats["overall_gap"].append(result.performance_a.overall - result.performance_b.overall)

    console.print(Panel("[bold]Simulation Statistics[/bold]"))
    win_pct = sum(stats["team_a_wins"]) / matches * 100
    console.print(f"[cyan]{team_a.name} Win %:[/cyan] {win_pct:.1f}%")
    console.print(f"[cyan]Upset adjustments:[/cyan] {sum(stats['upsets'])} ({sum(stats['upsets']) / matches * 100:.1f}%)")
    console.print(f"[cyan]Average Duration:[/cyan] {sum(stats['durations']) / matches:.1f} min")
    console.print(f"[cyan]Average Overall Gap:[/cyan] {sum(stats['overall_gap']) / matches:.2f}")

    brackets = {"0": 0, "1": 0, "2": 0, "3": 0, "4+": 0}
    for margin in stats["margins"]:
        brackets[str(margin) if margin < 4 else "4+"] += 1

    console.print("\n[bold]Score Margin Distribution:[/bold]")
    for bracket, count in brackets.items():
        pct = count / matches * 100
        bar = "█" * int(pct / 2)
        console.print(f"  {bracket:>4}: {bar} {pct:.1f}%")


@cli.command()
@click.option("--teams", "team_count", default=8, help="Number of demo teams (2-8)")
@click.option("--seed", type=int, default=None, help="Random seed")
def bracket(team_count: int, seed: Optional[int]):
    """Play a single-elimination bracket between demo teams"""
    teams = TeamGenerator.generate_teams(max(2, min(8, team_count)))
    rosters = _demo_rosters(teams, seed)

    outcome = TournamentEngine(make_rng(seed)).run_bracket(teams, rosters)

    for bracket_round in outcome.rounds:
        table = Table(title=bracket_round.name)
        table.add_column("Match")
        table.add_column("Team A", style="cyan")
        table.add_column("Team B", style="magenta")
        table.add_column("Score", justify="center")
        table.add_column("Winner", style="green")
        for m in bracket_round.matches:
            table.add_row(
                m.match_id,
                m.team_a.name if m.team_a else "-",
                m.team_b.name if m.team_b else "-",
                f"{m.score[0]}-{m.score[1]}" if m.score else ("bye" if m.is_bye else "-"),
                m.winner.name if m.winner else "-",
            )
        console.print(table)

    console.print(f"\n[bold green]Champion: {outcome.champion.name}[/bold green]")


if __name__ == "__main__":
    cli()
