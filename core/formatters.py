# core/formatters.py

# all pure text helpers
# must never import from models!

ABSENT_MARKER = "nil"

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


# === field formatters ===


def format_optional_text(value: str | None) -> str:
    return ABSENT_MARKER if value is None else value


def format_field_line(field_name: str, value: str | None) -> str:
    return f"{field_name}: {format_optional_text(value)}"
