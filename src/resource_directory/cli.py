"""CLI entry point for the resource directory."""

from pathlib import Path
from typing import Optional

import typer

from resource_directory.adapters.catalog import YamlCatalogSource
from resource_directory.adapters.listing import MarkdownListingRenderer
from resource_directory.config import Settings, get_settings
from resource_directory.core import YamlPreferenceStore
from resource_directory.use_cases import FilterFormController, LiteracyLevelSelector

cli = typer.Typer(help="Browse the recommendation directory.", no_args_is_help=True)


def app() -> None:
    """CLI entry point."""
    cli()


def _preference_store(settings: Settings) -> YamlPreferenceStore:
    return YamlPreferenceStore(settings.preferences_file, key=settings.preferences.key)


def _build_controller(settings: Settings) -> FilterFormController:
    catalog = YamlCatalogSource(settings.content_dir)
    return FilterFormController(
        catalog.load_recommendations(),
        _preference_store(settings),
        compositional=settings.filters.compositional,
        filter_by_city=settings.filters.filter_by_city,
    )


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        print(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"Listing saved to {output}")


@cli.command("list")
def list_entries(
    free_only: bool = typer.Option(False, "--free-only", help="Only show free options"),
    category: Optional[str] = typer.Option(None, help="Category to show"),
    max_complexity: Optional[str] = typer.Option(None, help="Highest complexity level (0-4), saved as preference"),
    city: Optional[str] = typer.Option(None, help="City to show"),
    output: Optional[Path] = typer.Option(None, help="Write the listing to a file"),
    config: Path = typer.Option(Path("config.yaml"), help="Path to config file"),
) -> None:
    """Show recommendations matching the given filters."""
    settings = get_settings(config)
    controller = _build_controller(settings)

    changes = {
        "free_only": free_only or None,
        "category": category,
        "max_complexity": max_complexity,
        "city": city,
    }
    try:
        for name, value in changes.items():
            if value is not None:
                controller.update(name, value)
    except ValueError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)

    listing = MarkdownListingRenderer().render(settings.display.title, controller.view())
    _emit(listing, output)


@cli.command()
def literacy(
    level: Optional[str] = typer.Argument(None, help="Level to select (0-4)"),
    config: Path = typer.Option(Path("config.yaml"), help="Path to config file"),
) -> None:
    """Show or set your technical literacy level."""
    settings = get_settings(config)
    selector = LiteracyLevelSelector(_preference_store(settings))

    if level is not None:
        try:
            selector.select(level)
        except ValueError:
            print(f"❌ Unknown literacy level: {level}")
            raise typer.Exit(code=1)

    for option in selector.options():
        marker = "●" if option.level == selector.level else "○"
        line = f"  {marker} {option.level.value}  {option.description}"
        if option.url:
            line += f" ({option.url})"
        print(line)


@cli.command()
def reset(
    config: Path = typer.Option(Path("config.yaml"), help="Path to config file"),
) -> None:
    """Reset filters to their defaults."""
    settings = get_settings(config)
    controller = _build_controller(settings)
    controller.reset_to_defaults()
    print(f"✓ Filters reset, max complexity {controller.state.max_complexity.value}")


@cli.command()
def library(
    output: Optional[Path] = typer.Option(None, help="Write the listing to a file"),
    config: Path = typer.Option(Path("config.yaml"), help="Path to config file"),
) -> None:
    """Show the reading library."""
    settings = get_settings(config)
    items = YamlCatalogSource(settings.content_dir).load_library()
    _emit(MarkdownListingRenderer().render_library(settings.display.library_title, items), output)


if __name__ == "__main__":
    app()
