# cli/model_formatters.py

# anything that renders domain objects or roster read-only results
from textwrap import dedent

import core.formatters as formatters
from models.record import Record

NAME_WIDTH = 20
ROLL_WIDTH = 10
MARKS_WIDTH = 10

# === record formatters ===


def format_record_table_header() -> str:
    return f"{'Name':<{NAME_WIDTH}}{'Roll No':<{ROLL_WIDTH}}{'Marks':<{MARKS_WIDTH}}"


def format_record_oneline(record: Record) -> str:
    marks = formatters.format_marks(record.marks)

    return f"{record.name:<{NAME_WIDTH}}{record.roll_number:<{ROLL_WIDTH}}{marks:<{MARKS_WIDTH}}".rstrip()


def format_record_multiline(record: Record) -> str:
    return dedent(
        f"""\
        Student:
        ... Name: {record.name}
        ... Roll No: {record.roll_number}
        ... Marks: {formatters.format_marks(record.marks)}"""
    )


# === statistics formatters ===


def format_statistics(stats: dict) -> str:
    return dedent(
        f"""\
        --- Statistics ---
        Total Students: {stats["count"]}
        Average Marks: {formatters.format_average(stats["mean"])}
        Highest Marks: {formatters.format_marks(stats["max"])}
        Lowest Marks: {formatters.format_marks(stats["min"])}"""
    )
