"""Split semi-structured generated text into titled sections of points."""

import re
from typing import NamedTuple

from models.interview import FormattedText, Section

SUGGESTION_HEADINGS: tuple[str, ...] = (
    "Structure",
    "Key Points",
    "Examples",
    "Tips",
    "Steps",
    "Approach",
    "What to Include",
    "How to Structure",
    "Important Notes",
    "Do's and Don'ts",
)

EMPHASIZED_TITLE = "SAMPLE ANSWER"
MIN_POINT_LENGTH = 3
UNTITLED_HEADING_LENGTH = 50

# An unterminated fence runs to the end of the text.
_CODE_BLOCK_RE = re.compile(r"```.*?(?:```|\Z)", re.DOTALL)
_HEADING_MARK_RE = re.compile(r"^[ \t]*#{1,6}[ \t]*", re.MULTILINE)
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*|__(.+?)__", re.DOTALL)
_ITALIC_RE = re.compile(r"(?<![\w*])\*(?![\s*])([^*\n]+?)(?<![\s*])\*(?![\w*])")


class LineRule(NamedTuple):
    kind: str  # "heading" | "title" | "bullet" | "numbered"
    pattern: re.Pattern


def _heading_rule(headings: tuple[str, ...]) -> LineRule:
    alternatives = "|".join(re.escape(h) for h in headings)
    return LineRule("heading", re.compile(rf"^({alternatives})\s*:\s*(.*)$", re.IGNORECASE))


# Order matters: the first matching rule decides how a line is treated.
BASE_LINE_RULES: tuple[LineRule, ...] = (
    LineRule("title", re.compile(r"^([A-Z][A-Za-z\d\s'&/-]*):$")),
    LineRule("bullet", re.compile(r"^[•\-–—*]\s+(.*)$")),
    LineRule("numbered", re.compile(r"^\d+[.)]\s+(.*)$")),
)


def clean_markdown(text: str) -> str:
    """Drop fenced code blocks, heading marks, bold/italic and inline code markers."""
    cleaned = _CODE_BLOCK_RE.sub("", text)
    cleaned = _HEADING_MARK_RE.sub("", cleaned)
    cleaned = _BOLD_RE.sub(lambda m: m.group(1) if m.group(1) is not None else m.group(2), cleaned)
    cleaned = _ITALIC_RE.sub(r"\1", cleaned)
    cleaned = cleaned.replace("**", "").replace("`", "")
    return cleaned.strip()


def build_line_rules(headings: tuple[str, ...] = SUGGESTION_HEADINGS) -> tuple[LineRule, ...]:
    if not headings:
        return BASE_LINE_RULES
    return (_heading_rule(headings),) + BASE_LINE_RULES


def classify_line(line: str, rules: tuple[LineRule, ...]) -> tuple[str, re.Match | None]:
    """Return the kind of the first rule matching ``line`` ('text' when none does)."""
    for rule in rules:
        match = rule.pattern.match(line)
        if match:
            return rule.kind, match
    return "text", None


def _new_section(title: str) -> Section:
    return Section(title=title, points=[], is_emphasized=title == EMPHASIZED_TITLE)


def _is_open(section: Section) -> bool:
    return bool(section.title or section.points)


def format_text(text: str | None, headings: tuple[str, ...] = SUGGESTION_HEADINGS) -> FormattedText:
    """Group lines into sections; fall back to plain content when no section forms."""
    cleaned = clean_markdown(text or "")
    lines = [line.strip() for line in cleaned.split("\n") if line.strip()]
    rules = build_line_rules(headings)

    sections: list[Section] = []
    current = _new_section("")

    for line in lines:
        kind, match = classify_line(line, rules)

        if kind in ("heading", "title"):
            if _is_open(current):
                sections.append(current)
            current = _new_section(match.group(1).strip())
            if kind == "heading" and match.group(2).strip():
                current.points.append(match.group(2).strip())
        elif kind in ("bullet", "numbered"):
            point = match.group(1).strip()
            if point:
                current.points.append(point)
        elif not current.title and len(line) > UNTITLED_HEADING_LENGTH:
            if _is_open(current):
                sections.append(current)
            current = _new_section(line)
        elif len(line) >= MIN_POINT_LENGTH:
            current.points.append(line)

    if _is_open(current):
        sections.append(current)

    if not sections:
        return FormattedText(is_structured=False, content=cleaned)
    return FormattedText(is_structured=True, sections=sections)
