"""
cli.py — Click CLI entrypoint for the notary client.

Usage:
    notary fee quote land-transfer --area 600 --location outside --destination hanoi
    notary fee catalog
    notary login --email staff@example.com
    notary records list --status PENDING
    notary records approve <id> --notes "Hồ sơ hợp lệ"
    notary export records --format xlsx -o ho-so
    notary chat
    notary portal serve --port 8840
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

import click
import httpx
import structlog

from notary_shared.config import settings
from notary_shared.constants import CONTRACT_TYPES, DESTINATIONS, DISTRICTS, OFFICE_ADDRESS
from notary_shared.time_utils import format_date_vi, parse_api_datetime
from notary_client.api_client import NotaryApiClient
from notary_client.assistant import Conversation
from notary_client.errors import NotaryApiError, SessionExpiredError, user_message
from notary_client.fees import quote, quote_breakdown
from notary_client.services import (
    ArticleService,
    AuthService,
    ConsultationService,
    ListingService,
    RecordService,
)
from notary_client.token_store import TokenStore
from notary_client.utils.export import export_to_csv, export_to_excel, records_to_rows
from notary_client.utils.logging import configure_logging

log = structlog.get_logger(__name__)

T = TypeVar("T")


def _run(fn: Callable[[NotaryApiClient], Awaitable[T]]) -> T:
    """Run `fn` against a fresh client, turning API failures into CLI errors."""

    async def _main() -> T:
        async with NotaryApiClient() as api:
            return await fn(api)

    try:
        return asyncio.run(_main())
    except SessionExpiredError as exc:
        raise click.ClickException(f"{exc.message} (notary login)") from exc
    except NotaryApiError as exc:
        raise click.ClickException(user_message(exc)) from exc
    except httpx.TransportError as exc:
        raise click.ClickException(f"Không thể kết nối tới máy chủ {settings.api_base_url}: {exc}") from exc


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level",
)
def main(log_level: str) -> None:
    """Notary office client: fee quotes, records review and portal tools."""
    configure_logging(log_level=log_level)


# ---------------------------------------------------------------------------
# fee
# ---------------------------------------------------------------------------

@main.group()
def fee() -> None:
    """Notary fee calculator."""


@fee.command("quote")
@click.argument("contract_type", type=click.Choice(sorted(CONTRACT_TYPES)), metavar="CONTRACT_TYPE")
@click.option("--area", type=float, default=None, help="Area in m².")
@click.option("--location", type=click.Choice(["office", "outside"]), default="office", show_default=True)
@click.option("--destination", type=click.Choice(sorted(DESTINATIONS)), default=None)
@click.option("--at", "at_str", default=None, help="Evaluation time, ISO-8601 (default: now).")
def fee_quote(
    contract_type: str,
    area: float | None,
    location: str,
    destination: str | None,
    at_str: str | None,
) -> None:
    """Quote the fee for CONTRACT_TYPE."""
    at: datetime | None = None
    if at_str:
        at = parse_api_datetime(at_str)
        if at is None:
            raise click.BadParameter(f"not an ISO-8601 datetime: {at_str}", param_hint="--at")

    result = quote(contract_type, area, notary_location=location, destination=destination, at=at)
    if result is None:
        raise click.ClickException("Vui lòng nhập diện tích hợp lệ (lớn hơn 0)")

    for label, value in quote_breakdown(result, destination):
        click.echo(f"  {label:40s} {value}")


@fee.command("catalog")
def fee_catalog() -> None:
    """List contract types and destinations."""
    click.echo(f"Văn phòng: {OFFICE_ADDRESS}")
    click.echo("Loại hợp đồng:")
    for key, label in CONTRACT_TYPES.items():
        click.echo(f"  {key:24s} {label}")
    click.echo("Nơi công chứng ngoài văn phòng:")
    for key, label in DESTINATIONS.items():
        click.echo(f"  {key:24s} {label} ({len(DISTRICTS.get(key, {}))} quận/huyện)")


# ---------------------------------------------------------------------------
# auth
# ---------------------------------------------------------------------------

@main.command()
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True)
def login(email: str, password: str) -> None:
    """Sign in and store the session locally."""
    session = _run(lambda api: AuthService(api).login(email, password))
    name = session.user.full_name if session.user else email
    click.echo(f"Đăng nhập thành công: {name}")


@main.command()
def logout() -> None:
    """Forget the stored session."""
    TokenStore().clear()
    click.echo("Đã đăng xuất.")


@main.command()
def whoami() -> None:
    """Show the signed-in user."""
    user = TokenStore().current_user()
    if user is None:
        raise click.ClickException("Chưa đăng nhập (notary login)")
    click.echo(f"{user.full_name or '-'} <{user.email or '-'}> [{user.role}]")


# ---------------------------------------------------------------------------
# records
# ---------------------------------------------------------------------------

@main.group()
def records() -> None:
    """Review customer records."""


@records.command("list")
@click.option("--status", type=click.Choice(["PENDING", "APPROVED", "REJECTED"]), default=None)
@click.option("--search", default=None)
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=10, show_default=True)
def records_list(status: str | None, search: str | None, page: int, limit: int) -> None:
    """List records."""
    params = {"status": status, "search": search, "page": page, "limit": limit}
    result = _run(lambda api: RecordService(api).list(params))
    if not result.items:
        click.echo("Không có hồ sơ nào.")
        return
    for r in result.items:
        customer = (r.customer.full_name if r.customer else None) or "-"
        click.echo(f"  {r.id:36s} {r.status:9s} {format_date_vi(r.created_at):10s} {customer:20s} {r.title}")
    click.echo(f"Trang {result.page}/{result.pages} · {result.total} hồ sơ")


@records.command("show")
@click.argument("record_id")
def records_show(record_id: str) -> None:
    """Show one record."""
    r = _run(lambda api: RecordService(api).get(record_id))
    click.echo(f"Tiêu đề:     {r.title}")
    click.echo(f"Trạng thái:  {r.status}")
    click.echo(f"Khách hàng:  {r.customer.full_name if r.customer else '-'}")
    click.echo(f"Loại:        {r.type.name if r.type else '-'}")
    click.echo(f"Ngày tạo:    {format_date_vi(r.created_at)}")
    if r.description:
        click.echo(f"Mô tả:       {r.description}")
    for url in r.attachments or []:
        click.echo(f"Đính kèm:    {url}")
    if r.review_notes:
        click.echo(f"Ghi chú:     {r.review_notes}")


@records.command("approve")
@click.argument("record_id")
@click.option("--notes", default=None, help="Review notes.")
def records_approve(record_id: str, notes: str | None) -> None:
    """Approve a pending record."""
    r = _run(lambda api: RecordService(api).approve(record_id, notes))
    click.echo(f"Đã duyệt hồ sơ {r.id} ({r.status})")


@records.command("reject")
@click.argument("record_id")
@click.option("--notes", default=None, help="Reason for rejection.")
def records_reject(record_id: str, notes: str | None) -> None:
    """Reject a pending record."""
    r = _run(lambda api: RecordService(api).reject(record_id, notes))
    click.echo(f"Đã từ chối hồ sơ {r.id} ({r.status})")


# ---------------------------------------------------------------------------
# portal content
# ---------------------------------------------------------------------------

@main.group()
def listings() -> None:
    """Property listings."""


@listings.command("list")
@click.option("--search", default=None)
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=10, show_default=True)
def listings_list(search: str | None, page: int, limit: int) -> None:
    """List approved listings."""
    params = {"search": search, "page": page, "limit": limit}
    result = _run(lambda api: ListingService(api).public_list(params))
    for item in result.items:
        price = f"{int(item.price):,}".replace(",", ".") if item.price else "-"
        click.echo(f"  {item.id:36s} {price:>15s}  ♥{item.like_count:<4d} {item.title}")
    click.echo(f"Trang {result.page}/{result.pages} · {result.total} tin đăng")


@main.group()
def articles() -> None:
    """News and share articles."""


@articles.command("latest")
@click.option("--limit", type=int, default=5, show_default=True)
def articles_latest(limit: int) -> None:
    """Latest published articles."""
    result = _run(lambda api: ArticleService(api).latest(limit))
    for a in result.items:
        click.echo(f"  {format_date_vi(a.published_at):10s} [{a.type}] {a.title}")


@main.group()
def consultations() -> None:
    """Consultation bookings."""


@consultations.command("mine")
def consultations_mine() -> None:
    """My consultation bookings."""
    result = _run(lambda api: ConsultationService(api).mine())
    if not result.items:
        click.echo("Bạn chưa có lịch tư vấn nào.")
        return
    for c in result.items:
        when = c.requested_datetime.strftime("%d/%m/%Y %H:%M")
        click.echo(f"  {c.id:36s} {when}  {c.status}")


# ---------------------------------------------------------------------------
# chat
# ---------------------------------------------------------------------------

@main.command()
@click.option("--no-delay", is_flag=True, help="Reply immediately instead of simulating typing.")
def chat(no_delay: bool) -> None:
    """Talk to the legal assistant. Type 'exit' to quit."""
    convo = Conversation(delay=(lambda: 0.0)) if no_delay else Conversation()
    click.echo(f"AI: {convo.messages[0].content}")

    async def _loop() -> None:
        while True:
            try:
                text = click.prompt("Bạn", prompt_suffix=": ")
            except (EOFError, click.Abort):
                return
            if text.strip().lower() in ("exit", "quit"):
                return
            reply = await convo.send(text)
            if reply is not None:
                click.echo(f"AI: {reply.content}")

    asyncio.run(_loop())


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------

@main.group()
def export() -> None:
    """Export reports."""


@export.command("records")
@click.option("--status", type=click.Choice(["PENDING", "APPROVED", "REJECTED"]), default=None)
@click.option("--format", "fmt", type=click.Choice(["xlsx", "csv"]), default="xlsx", show_default=True)
@click.option("-o", "--output", type=click.Path(path_type=Path), default=Path("records"), show_default=True)
def export_records(status: str | None, fmt: str, output: Path) -> None:
    """Export every record (all pages) to a spreadsheet."""

    async def _fetch_all(api: NotaryApiClient) -> list[Any]:
        service = RecordService(api)
        items: list[Any] = []
        page = 1
        while True:
            result = await service.list({"status": status, "page": page, "limit": 100})
            items.extend(result.items)
            if not result.has_next:
                return items
            page += 1

    rows = records_to_rows(_run(_fetch_all))
    path = export_to_csv(rows, output) if fmt == "csv" else export_to_excel(rows, output, "Hồ sơ")
    click.echo(f"Đã xuất {len(rows)} hồ sơ → {path}")


# ---------------------------------------------------------------------------
# portal
# ---------------------------------------------------------------------------

@main.group()
def portal() -> None:
    """Self-service portal API."""


@portal.command("serve")
@click.option("--host", default=settings.portal_host, show_default=True)
@click.option("--port", type=int, default=settings.portal_port, show_default=True)
@click.option("--reload", is_flag=True)
def portal_serve(host: str, port: int, reload: bool) -> None:
    """Run the portal API with uvicorn."""
    import uvicorn

    log.info("portal_serve", host=host, port=port)
    uvicorn.run("notary_portal.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
