"""Markdown listing renderer."""

from resource_directory.core import Entry, FilteredView, LibraryItem, ListingRenderer, parse_level

LEVEL_COUNT = 5
FILLED_CELL = "■"
EMPTY_CELL = "□"


def to_title_case(text: str) -> str:
    """Capitalize the first letter of every word."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def complexity_meter(entry: Entry) -> str:
    """Five cells, filled up to and including the entry's level."""
    level = parse_level(entry.literacy_level)
    return "".join(FILLED_CELL if cell <= level else EMPTY_CELL for cell in range(LEVEL_COUNT))


class MarkdownListingRenderer(ListingRenderer):
    """Render listings as markdown."""

    def render(self, title: str, view: FilteredView) -> str:
        lines = [f"# {title}", ""]

        if view.hidden_count > 0:
            lines.extend([f"*{view.hidden_count} items hidden due to filters.*", ""])

        if not view.entries:
            lines.append("No entries match the current filters.")
            return "\n".join(lines)

        for entry in view.entries:
            lines.extend(self._format_entry(entry))

        return "\n".join(lines)

    def render_library(self, title: str, items: list[LibraryItem]) -> str:
        lines = [f"# {title}", ""]

        if not items:
            lines.append("The library is empty.")
            return "\n".join(lines)

        for item in items:
            lines.append(f"- [{item.title}]({item.url}) by {item.author}")
            if item.tags:
                lines.append(f"  *{', '.join(item.tags)}*")

        return "\n".join(lines)

    def _format_entry(self, entry: Entry) -> list[str]:
        """Format single listing entry."""
        meta_parts = [f"Complexity {complexity_meter(entry)}"]
        if entry.city.is_specific:
            meta_parts.insert(0, f"🏙️ {entry.city.short_name}")

        categories = ", ".join(to_title_case(category.value) for category in entry.category)
        badges = [f"**{to_title_case(tier.value)}**" for tier in entry.pricing]

        lines = [
            f"### [{entry.title}]({entry.url})",
            "",
            f"*{' | '.join(meta_parts)}*",
            "",
            entry.headline,
            "",
            " | ".join([categories, *badges]),
            "",
            "---",
            "",
        ]

        return lines
