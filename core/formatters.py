# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_rule(width: int = 40) -> str:
    return "-" * width


# === number formatters ===


def format_marks(marks: float) -> str:
    return f"{marks:g}"


def format_average(value: float) -> str:
    return f"{value:.2f}"
