"""Human-readable reports for set diagnostics.

Each diagnostic becomes a report with a headline, one labelled source location
per span, and optional help footers:

    error: empty option
     --> animals.set:3:9
      |
    3 | a  ,  b ,, c
      |         ^^ expected a value here
      |
      = help: consider filling in a value
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum

from revise.lib.ui.colors import ANSIColors, colorize
from revise.models.diagnostic import Diagnostic, DiagnosticKind, Severity, Span


class LabelStyle(str, Enum):
    """How a label or footer is annotated."""

    ERROR = "error"
    WARNING = "warning"
    HELP = "help"
    NOTE = "note"


_STYLE_COLORS = {
    LabelStyle.ERROR: ANSIColors.RED,
    LabelStyle.WARNING: ANSIColors.YELLOW,
    LabelStyle.HELP: ANSIColors.CYAN,
    LabelStyle.NOTE: ANSIColors.CYAN,
}


@dataclass
class Label:
    """An annotation attached to a span, or to the whole source if span is None."""

    span: Span | None
    message: str
    style: LabelStyle = LabelStyle.ERROR


@dataclass
class Report:
    """A rendered-ready description of one diagnostic.

    Attributes:
        severity: Whether the headline is an error or a warning
        title: Headline message
        labels: Source annotations, in display order
        footers: Trailing help or note lines
    """

    severity: Severity
    title: str
    labels: list[Label] = field(default_factory=list)
    footers: list[tuple[LabelStyle, str]] = field(default_factory=list)


class SourceMap:
    """Maps UTF-8 byte offsets in a source text to lines and columns.

    Line breaks are recognized the same way the set parser recognizes them:
    LF, CRLF, and a bare CR.

    Attributes:
        text: The source text
        origin: Where the text came from (usually a file path), if known
    """

    def __init__(self, text: str, origin: str | None = None) -> None:
        """Index the line starts of ``text``."""
        self.text = text
        self.origin = origin
        self._data = text.encode("utf-8", "surrogatepass")
        self._line_starts = [0]
        index = 0
        while index < len(self._data):
            byte = self._data[index]
            if byte == 0x0D and self._data[index + 1 : index + 2] == b"\n":
                index += 2
                self._line_starts.append(index)
                continue
            if byte in (0x0A, 0x0D):
                self._line_starts.append(index + 1)
            index += 1

    @property
    def line_count(self) -> int:
        """Number of lines (an empty text has one empty line)."""
        return len(self._line_starts)

    def slice_text(self, start: int, end: int) -> str:
        """Decode the text between two byte offsets."""
        return self._data[start:end].decode("utf-8", "surrogatepass")

    def line_index(self, offset: int) -> int:
        """Zero-based index of the line containing ``offset``."""
        return bisect_right(self._line_starts, offset) - 1

    def line_bounds(self, line: int) -> tuple[int, int]:
        """Byte range of a line's text, excluding its line break."""
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1]
            while end > start and self._data[end - 1] in (0x0A, 0x0D):
                end -= 1
        else:
            end = len(self._data)
        return start, end

    def line_text(self, line: int) -> str:
        """Text of a line, excluding its line break."""
        return self.slice_text(*self.line_bounds(line))

    def location(self, offset: int) -> tuple[int, int]:
        """Return the one-based (line, column) of a byte offset.

        Columns count characters, not bytes.
        """
        line = self.line_index(offset)
        start, _ = self.line_bounds(line)
        column = len(self.slice_text(start, max(start, offset))) + 1
        return line + 1, column

    def describe(self, offset: int | None = None) -> str:
        """Return ``origin:line:column`` for an offset, or the origin alone."""
        origin = self.origin or "<input>"
        if offset is None:
            return origin
        line, column = self.location(offset)
        return f"{origin}:{line}:{column}"


def build_report(diagnostic: Diagnostic) -> Report:
    """Describe a diagnostic in words.

    Args:
        diagnostic: The diagnostic to describe

    Returns:
        Report with the headline, labels and help for the diagnostic's kind
    """
    spans = diagnostic.spans
    character = diagnostic.character
    report = Report(severity=diagnostic.severity, title="")

    match diagnostic.kind:
        case DiagnosticKind.NO_TITLE:
            report.title = "set does not have a title"
            line = spans[0] if spans and not spans[0].is_empty else None
            report.labels.append(Label(line, "expected a title"))
        case DiagnosticKind.EMPTY_SET:
            report.title = "expected one or more cards in the set"
            report.labels.append(
                Label(None, "no cards found in this set", LabelStyle.NOTE)
            )
        case DiagnosticKind.DUPLICATE_CARD:
            report.title = "encountered duplicate card"
            report.labels.append(
                Label(spans[0], "original card declared here", LabelStyle.WARNING)
            )
            report.labels.append(Label(spans[1], "identical card declared again here"))
        case DiagnosticKind.THIRD_PART:
            report.title = "encountered unexpected third section"
            report.labels.append(
                Label(
                    spans[0],
                    "this card already has terms and definitions",
                    LabelStyle.WARNING,
                )
            )
            report.labels.append(
                Label(spans[1], "unexpected third section to the card")
            )
            report.footers.append(
                (LabelStyle.HELP, "consider removing the unnecessary section")
            )
        case DiagnosticKind.MISSING_WHITESPACE_AROUND_DASH:
            report.title = "missing whitespace around dash"
            report.labels.append(
                Label(
                    spans[0],
                    "this dash should be surrounded by whitespace on both sides",
                )
            )
        case DiagnosticKind.NO_TERMS:
            report.title = "no terms provided"
            report.labels.append(
                Label(spans[0], "this card requires one or more terms")
            )
        case DiagnosticKind.NO_DEFINITIONS:
            report.title = "no definitions provided"
            report.labels.append(
                Label(spans[0], "this card requires one or more definitions")
            )
            report.footers.append(
                (
                    LabelStyle.HELP,
                    "add a comma-separated list of definitions to this card "
                    "after a ` - ` separator",
                )
            )
        case DiagnosticKind.DUPLICATE_OPTION:
            report.title = "duplicate option"
            report.labels.append(
                Label(spans[0], "original option here", LabelStyle.WARNING)
            )
            report.labels.append(
                Label(spans[1], "identical option declared again here")
            )
        case DiagnosticKind.EMPTY_OPTION:
            report.title = "empty option"
            report.labels.append(Label(spans[0], "expected a value here"))
            report.footers.append((LabelStyle.HELP, "consider filling in a value"))
        case DiagnosticKind.TRAILING_OPTION_CHARS:
            report.title = "characters after a quote in an option"
            report.labels.append(
                Label(spans[0], "remove these characters", LabelStyle.HELP)
            )
        case DiagnosticKind.UNKNOWN_ESCAPE:
            message = f"unknown escape sequence \\{character}"
            report.title = message
            report.labels.append(Label(spans[0], message))
            report.footers.append(
                (LabelStyle.HELP, 'known escape sequences are \\" and \\\\')
            )
        case DiagnosticKind.UNCLOSED_QUOTE:
            report.title = "unclosed quote"
            report.labels.append(Label(spans[0], "this string lacks a closing quote"))
        case DiagnosticKind.UNEXPECTED_CONTROL_CHAR:
            report.title = "unexpected control character"
            report.labels.append(
                Label(
                    spans[0],
                    f"the control character {character!r} is not allowed here",
                )
            )
        case DiagnosticKind.EXPECTED_SPACE:
            report.title = "expected space character"
            report.labels.append(
                Label(
                    spans[0],
                    f"the whitespace character {character!r} looks like a space, "
                    "but is not",
                    LabelStyle.HELP,
                )
            )
        case DiagnosticKind.MISSING_LINE_FEED:
            report.title = "missing LF in CRLF pair"
            report.labels.append(
                Label(spans[0], "found a bare CR with no following LF")
            )

    return report


def _render_label(
    label: Label, source: SourceMap, gutter: int, color: bool
) -> list[str]:
    style_color = _STYLE_COLORS[label.style]
    bar = colorize("|", ANSIColors.CYAN, force_tty=color)
    pad = " " * gutter

    if label.span is None:
        note = colorize(f"{label.style.value}:", style_color, force_tty=color)
        return [f"{pad} = {note} {label.message}"]

    line = source.line_index(label.span.start)
    line_start, line_end = source.line_bounds(line)
    text = source.line_text(line)

    prefix = source.slice_text(line_start, label.span.start)
    underlined = source.slice_text(label.span.start, min(label.span.end, line_end))
    marker = "^" * max(1, len(underlined))
    underline = colorize(f"{marker} {label.message}", style_color, force_tty=color)
    number = colorize(str(line + 1).rjust(gutter), ANSIColors.CYAN, force_tty=color)

    return [
        f"{number} {bar} {text}",
        f"{pad} {bar} {' ' * len(prefix)}{underline}",
    ]


def render_report(report: Report, source: SourceMap, color: bool = False) -> str:
    """Render a report against its source text.

    Args:
        report: The report to render
        source: Source map of the text the diagnostic refers to
        color: Whether to emit ANSI colors

    Returns:
        Multi-line report text without a trailing newline
    """
    headline_color = (
        ANSIColors.RED if report.severity == Severity.ERROR else ANSIColors.YELLOW
    )
    headline = colorize(
        f"{report.severity.value}:", headline_color + ANSIColors.BOLD, force_tty=color
    )
    lines = [f"{headline} {colorize(report.title, ANSIColors.BOLD, force_tty=color)}"]

    spanned = [label for label in report.labels if label.span is not None]
    last_line = max(
        (source.line_index(label.span.start) + 1 for label in spanned), default=1
    )
    gutter = len(str(last_line))
    arrow = colorize("-->", ANSIColors.CYAN, force_tty=color)
    bar = colorize("|", ANSIColors.CYAN, force_tty=color)

    first_offset = spanned[0].span.start if spanned else None
    lines.append(f"{' ' * gutter}{arrow} {source.describe(first_offset)}")
    lines.append(f"{' ' * gutter} {bar}")

    ordered = sorted(
        report.labels,
        key=lambda label: -1 if label.span is None else label.span.start,
    )
    for label in ordered:
        lines.extend(_render_label(label, source, gutter, color))

    if report.footers:
        lines.append(f"{' ' * gutter} {bar}")
        for style, message in report.footers:
            note = colorize(f"{style.value}:", _STYLE_COLORS[style], force_tty=color)
            lines.append(f"{' ' * gutter} = {note} {message}")

    return "\n".join(lines)


def render_diagnostics(
    diagnostics: list[Diagnostic],
    source: SourceMap,
    color: bool = False,
    limit: int | None = None,
) -> str:
    """Render several diagnostics, separated by blank lines.

    Args:
        diagnostics: Diagnostics in the order they were found
        source: Source map of the parsed text
        color: Whether to emit ANSI colors
        limit: Render at most this many, noting how many were left out

    Returns:
        The combined report text
    """
    shown = diagnostics if limit is None else diagnostics[:limit]
    blocks = [render_report(build_report(d), source, color) for d in shown]
    hidden = len(diagnostics) - len(shown)
    if hidden > 0:
        plural = "" if hidden == 1 else "s"
        blocks.append(f"... and {hidden} more diagnostic{plural}")
    return "\n\n".join(blocks)
