"""
Text report formatting for the CLI scripts.

Provides consistent table formatting for segmentation and analysis reports.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{truncate_display(str(value), self.width):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 80):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        self.lines.append("-" * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."
    """
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."


def format_sections_report(document) -> str:
    """
    Render the sections of a ParsedDocument as a table.

    Args:
        document: ParsedDocument

    Returns:
        Report string
    """
    table = TableFormatter(
        [Column("Category", 13), Column("Title", 36), Column("Lines", 8, ">"), Column("Chars", 8, ">")]
    )
    table.add_section_header(f"Sections ({len(document.sections)})").add_table_header()
    for section in document.sections:
        line_count = section.body.count("\n") + 1 if section.body else 0
        table.add_row([section.category.value, section.title or "(untitled)", line_count, len(section.body)])

    if document.warnings:
        table.add_blank_line().add_text("Notes:")
        for warning in document.warnings:
            table.add_text(f"  ! {warning}")

    return table.render()


def format_analysis_report(result) -> str:
    """
    Render an AnalysisResult as labeled lines.

    Args:
        result: AnalysisResult

    Returns:
        Report string
    """
    table = TableFormatter([], total_width=80)
    table.add_section_header("Analysis")

    table.add_text(f"Skills ({len(result.skills)}): {', '.join(result.skills) or 'No skills detected'}")
    if result.missing_keywords:
        table.add_text(f"Consider adding: {', '.join(result.missing_keywords)}")

    if result.experience_years is not None:
        table.add_text(f"Experience: approximately {result.experience_years} years")
    else:
        table.add_text("Experience: could not be determined")

    if result.education_level is not None:
        table.add_text(f"Education: {result.education_level.value} degree")
    else:
        table.add_text("Education: could not be determined")

    table.add_blank_line()
    if result.suggestions:
        table.add_text("Suggestions:")
        for suggestion in result.suggestions:
            table.add_text(f"  - {suggestion}")
    else:
        table.add_text("Suggestions: none, the résumé covers every check")

    return table.render()
