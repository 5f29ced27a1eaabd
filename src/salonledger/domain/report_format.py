"""Report rendering.

The same per-employee aggregation feeds three outputs: table rows for the
screen, a WhatsApp text message, and a printable HTML document. Totals always
come from ``compute_employee_totals`` so the three outputs agree.
"""

import html
import re
from datetime import datetime
from typing import Optional, Sequence
from urllib.parse import quote

from salonledger.domain.aggregation import compute_employee_totals
from salonledger.domain.entities import (
    Booking,
    Employee,
    EmployeeTotals,
    PeriodRange,
    PeriodReport,
    PeriodUnit,
    ReportRow,
    Transaction,
)
from salonledger.domain.errors import EmptyReportError, empty_report
from salonledger.domain.period import MONTH_NAMES

MESSAGING_URL = "https://wa.me/"
DEFAULT_COUNTRY_CODE = "51"
DEFAULT_CURRENCY = "S/."
DEFAULT_BUSINESS_NAME = "MIVIS STUDIO"
SEPARATOR = "------------------------------"
MONTH_TOTAL_LABEL = "Total Mes"


def format_money(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency} {amount:.2f}"


def format_percent(percent: float) -> str:
    """Render 40.0 as "40" and 12.5 as "12.5"."""
    return f"{percent:g}"


# Tabular


def build_table_rows(report: PeriodReport) -> list[ReportRow]:
    """Rows for the on-screen report.

    One row per employee; the month view adds a totals row at the end.
    """
    rows = [
        ReportRow(
            label=totals.employee.name,
            generated=totals.generated,
            payout=totals.payout,
            local_profit=totals.local_profit,
            service_count=totals.service_count,
            commission_percent=totals.commission_percent,
        )
        for totals in report.rows
    ]
    if report.unit == PeriodUnit.MONTH:
        rows.append(
            ReportRow(
                label=MONTH_TOTAL_LABEL,
                generated=report.total_generated,
                payout=report.total_payout,
                local_profit=report.total_local_profit,
                service_count=sum(t.service_count for t in report.rows),
                is_total=True,
            )
        )
    return rows


# Messaging


def build_messaging_report(
    totals: EmployeeTotals,
    period_label: str,
    title: str = f"Reporte {DEFAULT_BUSINESS_NAME}",
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Render the WhatsApp text for one employee's period.

    Raises:
        EmptyReportError: If the employee has no transactions in the period
    """
    if not totals.transactions:
        raise EmptyReportError(empty_report(totals.employee.name))

    lines = [
        f"*{title}* 💄",
        "",
        f"Hola {totals.employee.name},",
        f"Periodo: {period_label}",
        "",
    ]
    for txn in sorted(totals.transactions, key=lambda t: t.date):
        method = txn.payment_method or "-"
        lines.append(f"• {txn.service_name} — {format_money(txn.price, currency)} ({method})")
    lines.extend(
        [
            SEPARATOR,
            f"✅ *Servicios:* {totals.service_count}",
            f"💰 *Generado:* {format_money(totals.generated, currency)}",
            f"📊 *Comisión:* {format_percent(totals.commission_percent)}%",
            "",
            f"💵 *Total a Pagar:* {format_money(totals.payout, currency)}",
            "",
            "Gracias por tu trabajo! ✨",
        ]
    )
    return "\n".join(lines)


def build_messaging_link(
    text: str,
    phone: Optional[str] = None,
    country_code: str = DEFAULT_COUNTRY_CODE,
) -> str:
    """Build the deep-link that opens WhatsApp with ``text`` pre-filled.

    Without a phone the user picks the recipient; with one the link targets
    ``<country_code><phone>`` (non-digits stripped).
    """
    target = ""
    if phone:
        digits = re.sub(r"\D", "", phone)
        if digits:
            target = f"{country_code}{digits}"
    return f"{MESSAGING_URL}{target}?text={quote(text, safe='')}"


def build_booking_confirmation(
    booking: Booking,
    professional: Optional[Employee],
    business_name: str = DEFAULT_BUSINESS_NAME,
) -> str:
    """Confirmation text sent to the client of a booking."""
    who = professional.name if professional is not None else "nuestro equipo"
    when = booking.date
    return "\n".join(
        [
            f"*{business_name}* ✨",
            "",
            f"Hola {booking.client_name}, tu cita está confirmada.",
            f"💇 Servicio: {booking.service}",
            f"👤 Con: {who}",
            f"📅 Fecha: {when.day} {MONTH_NAMES[when.month - 1]} {when.year}",
            f"🕒 Hora: {when:%H:%M}",
            "",
            "¡Te esperamos!",
        ]
    )


# Printable document

_PRINT_STYLE = """
body { font-family: Georgia, serif; margin: 2rem; color: #111; }
h1 { font-size: 1.6rem; margin-bottom: 0; }
h2 { font-size: 1.2rem; margin-top: 2rem; border-bottom: 1px solid #999; }
table { width: 100%; border-collapse: collapse; font-size: 0.9rem; }
th, td { padding: 4px 8px; border-bottom: 1px solid #ddd; text-align: left; }
td.amount, th.amount { text-align: right; font-family: monospace; }
tr.summary td { font-weight: bold; border-top: 2px solid #333; }
section { page-break-inside: avoid; }
"""


def _print_section(totals: EmployeeTotals, currency: str) -> str:
    esc = html.escape
    employee = totals.employee
    body_rows = []
    for txn in sorted(totals.transactions, key=lambda t: t.date):
        body_rows.append(
            "<tr>"
            f"<td>{txn.date:%d/%m/%Y %H:%M}</td>"
            f"<td>{esc(txn.service_name)}</td>"
            f"<td>{esc(txn.payment_method or '-')}</td>"
            f'<td class="amount">{esc(format_money(txn.price, currency))}</td>'
            "</tr>"
        )
    return "\n".join(
        [
            "<section>",
            f"<h2>{esc(employee.name)} <small>({esc(employee.role)} · "
            f"{esc(format_percent(totals.commission_percent))}%)</small></h2>",
            "<table>",
            "<thead><tr><th>Fecha / Hora</th><th>Servicio</th><th>Método</th>"
            '<th class="amount">Precio</th></tr></thead>',
            "<tbody>",
            *body_rows,
            '<tr class="summary"><td colspan="3">Total generado</td>'
            f'<td class="amount">{esc(format_money(totals.generated, currency))}</td></tr>',
            '<tr class="summary"><td colspan="3">Total a pagar</td>'
            f'<td class="amount">{esc(format_money(totals.payout, currency))}</td></tr>',
            "</tbody>",
            "</table>",
            "</section>",
        ]
    )


def build_printable_report(
    employees: Sequence[Employee],
    transactions: Sequence[Transaction],
    period: PeriodRange,
    title: str = DEFAULT_BUSINESS_NAME,
    currency: str = DEFAULT_CURRENCY,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render the printable HTML document for a period (normally a month).

    Employees without transactions in the period are left out.
    """
    esc = html.escape
    month = f"{MONTH_NAMES[period.start.month - 1]} {period.start.year}"
    generated_at = generated_at or datetime.now()

    sections = []
    for employee in employees:
        totals = compute_employee_totals(employee, transactions, period)
        if not totals.transactions:
            continue
        sections.append(_print_section(totals, currency))
    if not sections:
        sections.append("<p>Sin servicios registrados en este periodo.</p>")

    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="es">',
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{esc(title)} · Reporte {esc(month)}</title>",
            f"<style>{_PRINT_STYLE}</style>",
            "</head>",
            "<body>",
            f"<h1>{esc(title)}</h1>",
            f"<p>Reporte de comisiones · {esc(month)} · "
            f"generado {generated_at:%d/%m/%Y %H:%M}</p>",
            *sections,
            "</body>",
            "</html>",
            "",
        ]
    )
