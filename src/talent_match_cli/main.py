"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio

import structlog
import typer
from rich.console import Console
from rich.table import Table

from talent_match_core.config.settings import Settings
from talent_match_core.exceptions import UnlockError
from talent_match_core.models.enums import Dimension
from talent_match_core.models.match import CandidateMatch, RecentCandidatesPage
from talent_match_core.models.unlock import RequesterContext, UnlockResult
from talent_match_engine.observability import bind_request_context, configure_logging
from talent_match_engine.ranking.pipeline import CandidateRanker
from talent_match_engine.unlock.service import UnlockService
from talent_match_infra.db.engine import create_engine
from talent_match_infra.db.session import create_session_factory, init_db
from talent_match_infra.ledger import SqlCreditLedger
from talent_match_infra.store import SqlTalentStore

app = typer.Typer(
    name="talent-match",
    help="Weighted candidate/company matching and profile unlocks",
)
console = Console()
logger = structlog.get_logger()


def _load_settings(verbose: bool, command: str) -> Settings:
    settings = Settings()  # type: ignore[call-arg]
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    bind_request_context(command)
    return settings


@app.command()
def rank(
    company_id: str = typer.Argument(..., help="Company to rank candidates against"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Number of matches to show"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Show the best-matching active candidates for a company."""
    settings = _load_settings(verbose, "rank")
    matches = asyncio.run(_rank(settings, company_id, limit))

    if not matches:
        console.print(
            f"[yellow]No candidates scored {settings.min_match_score}+ for[/yellow] {company_id}"
        )
        return

    table = Table(title=f"Top matches for {company_id}")
    table.add_column("#", justify="right")
    table.add_column("Candidate")
    table.add_column("Score", justify="right")
    for dimension in Dimension:
        table.add_column(dimension.value.replace("_", " ").title(), justify="right")
    for match in matches:
        details = match.breakdown.details
        table.add_row(
            str(match.rank),
            match.candidate.name or match.candidate.id,
            f"[bold]{match.overall_score}[/bold]",
            *(str(details[d].score) if d in details else "-" for d in Dimension),
        )
    console.print(table)

    if verbose:
        for match in matches:
            console.print(f"\n[bold]{match.candidate.name or match.candidate.id}[/bold]")
            for dimension, detail in match.breakdown.details.items():
                console.print(f"  {dimension.value}: {detail.reason}")


@app.command()
def recent(
    page: int = typer.Option(0, "--page", min=0, help="Zero-based page index"),
    page_size: int | None = typer.Option(None, "--page-size", min=1, help="Candidates per page"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """List the newest active candidates, one page at a time."""
    settings = _load_settings(verbose, "recent")
    result = asyncio.run(_recent(settings, page, page_size))

    table = Table(title=f"Recent candidates (page {result.page})")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Headline")
    table.add_column("Status")
    for candidate in result.candidates:
        table.add_row(candidate.id, candidate.name, candidate.headline, candidate.status.value)
    console.print(table)
    console.print(f"[dim]{result.total} total, more: {'yes' if result.has_more else 'no'}[/dim]")


@app.command()
def unlock(
    candidate_id: str = typer.Argument(..., help="Candidate profile to unlock"),
    user_id: str = typer.Option(..., "--user-id", help="Acting user"),
    company_id: str = typer.Option(..., "--company-id", help="Company paying for the unlock"),
    role: str = typer.Option("recruiter", "--role", help="Acting user's role"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Unlock a candidate profile for a company, charging credits once."""
    settings = _load_settings(verbose, "unlock")
    requester = RequesterContext(user_id=user_id, role=role, company_id=company_id)

    try:
        result = asyncio.run(_unlock(settings, candidate_id, requester))
    except UnlockError as exc:
        console.print(f"[red]Error ({exc.code}):[/red] {exc.message}")
        raise typer.Exit(code=1) from exc

    if result.already_unlocked:
        console.print("[yellow]Already unlocked[/yellow], no credits charged")
    else:
        console.print(f"[bold green]Unlocked[/bold green] {candidate_id}")
    candidate = result.candidate
    console.print(f"  Name: {candidate.name}")
    console.print(f"  Email: {candidate.email or '-'}")
    console.print(f"  Location: {candidate.location or '-'}")
    console.print(f"  Credits remaining: {result.credits_remaining}")


@app.command("init-db")
def init_db_command(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Create the database tables."""
    settings = _load_settings(verbose, "init-db")
    asyncio.run(_init_db(settings))
    console.print("[bold green]Database initialized[/bold green]")


@app.command()
def version() -> None:
    """Show version."""
    console.print("talent-match v0.1.0")


async def _rank(settings: Settings, company_id: str, limit: int | None) -> list[CandidateMatch]:
    engine = create_engine(settings)
    try:
        ranker = CandidateRanker(SqlTalentStore(create_session_factory(engine)), settings)
        return await ranker.rank_candidates(company_id, limit=limit)
    finally:
        await engine.dispose()


async def _recent(settings: Settings, page: int, page_size: int | None) -> RecentCandidatesPage:
    engine = create_engine(settings)
    try:
        ranker = CandidateRanker(SqlTalentStore(create_session_factory(engine)), settings)
        return await ranker.list_recent_candidates(page=page, page_size=page_size)
    finally:
        await engine.dispose()


async def _unlock(
    settings: Settings, candidate_id: str, requester: RequesterContext
) -> UnlockResult:
    engine = create_engine(settings)
    try:
        factory = create_session_factory(engine)
        service = UnlockService(SqlTalentStore(factory), SqlCreditLedger(factory), settings)
        return await service.unlock(candidate_id, requester)
    finally:
        await engine.dispose()


async def _init_db(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await init_db(engine)
        logger.info("database_initialized", url=engine.url.render_as_string(hide_password=True))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    app()
