# core/formatters.py

# all pure text helpers
# must never import from models!

from core.config import (
    COLUMN_WIDTHS,
    CURRENCY_SYMBOL,
    SALARY_WIDTH,
    TABLE_RULE_WIDTH,
)

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_commas(items: list[str]) -> str:
    return ", ".join(items)


# === record table formatters ===


def format_table_row(*cells: object) -> str:
    return " | ".join(
        f"{str(cell):<{width}}" for cell, width in zip(cells, COLUMN_WIDTHS)
    )


def format_table_header() -> list[str]:
    rule = "-" * TABLE_RULE_WIDTH
    header = format_table_row("ID", "Role", "Name", "Telephone", "Email")

    return [rule, header, rule]


# === money formatters ===


def format_currency(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def format_salary(amount: float) -> str:
    return f"{format_currency(amount):>{SALARY_WIDTH}}"
