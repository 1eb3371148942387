"""
Console formatter widget.

This module provides functionality to format a report for console display
with colorized output based on issue priority.
"""

from termcolor import colored

from ..core.data_structures import Issue, Report
from ..core.enums import Priority


class ConsoleFormatterWidget:
    """Widget for formatting reports for console display."""

    def __init__(self):
        """Initialize the console formatter widget."""
        self.color_map = {
            Priority.HIGH: "red",
            Priority.NORMAL: "yellow",
            Priority.LOW: "blue",
        }

    def format_summary(self, report: Report) -> str:
        """Format a summary of the report."""
        high, normal, low = report.priorities
        lines = [
            "\nReport Summary:",
            f"Total Issues: {len(report)}",
            f"High: {high}",
            f"Normal: {normal}",
            f"Low: {low}",
            f"Files: {len(report.files)}",
        ]
        return "\n".join(lines)

    def format_issue(self, issue: Issue) -> str:
        """Format a single issue without color."""
        location = issue.file_name
        if issue.line_start:
            location += f":{issue.line_start}"

        # Continuation lines keep their own indentation.
        return f"{issue.category}: {location} - {issue.message}"

    def colorize_issue(self, issue: Issue) -> str:
        """Format a single issue with color."""
        color = self.color_map.get(issue.priority, "white")
        return colored(self.format_issue(issue), color)

    def colorize_output(self, report: Report) -> None:
        """Print the report with colorized formatting based on issue priority."""
        print(self.format_summary(report))
        print("\nIssues:")

        for issue in report:
            print(self.colorize_issue(issue))

    def get_formatted_output(self, report: Report) -> str:
        """Get formatted output as a string without colors."""
        lines = [self.format_summary(report), "\nIssues:"]
        lines.extend(self.format_issue(issue) for issue in report)
        return "\n".join(lines)
