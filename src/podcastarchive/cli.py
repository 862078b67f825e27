"""CLI entry point for Podcast Archive."""

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from podcastarchive.config.logging import setup_logging
from podcastarchive.config.manager import ConfigManager
from podcastarchive.config.schema import GlobalConfig
from podcastarchive.service import ArchiveService
from podcastarchive.utils.errors import (
    ConfigError,
    FeedError,
    MediaNotFoundError,
    PodcastArchiveError,
)

app = typer.Typer(
    name="podcastarchive",
    help="Serve a folder of audio files as a podcast feed",
    no_args_is_help=True,
)
console = Console()

FEED_FORMATS = ("json", "rss")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """Podcast Archive - local audio files as JSON listing and RSS feed."""
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose}


def _load_config(ctx: typer.Context) -> GlobalConfig:
    """Load config and apply its log level unless --verbose was given."""
    config = ConfigManager().load_config()
    if not (ctx.obj or {}).get("verbose"):
        logging.getLogger().setLevel(config.log_level)
    return config


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podcastarchive import __version__

    console.print(f"[bold cyan]Podcast Archive[/bold cyan] v{__version__}")


@app.command("episodes")
def list_episodes(
    ctx: typer.Context,
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List episodes found in the media directory.

    Examples:
        podcastarchive episodes

        podcastarchive episodes --json
    """
    try:
        config = _load_config(ctx)
        service = ArchiveService(config.podcast)

        if output_json:
            listing = service.build_listing()
            print(json.dumps([item.model_dump() for item in listing], indent=2, ensure_ascii=False))
            return

        episodes = service.load_episodes()
        if not episodes:
            console.print("[yellow]No episodes found.[/yellow]")
            console.print(f"\nMedia directory: [cyan]{config.podcast.media_root}[/cyan]")
            return

        table = Table(title="[bold]Episodes[/bold]")
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Artist", style="green")
        table.add_column("Album", style="blue")
        table.add_column("Year", justify="right", style="yellow")
        table.add_column("Duration", justify="right", style="dim")

        for episode in episodes:
            table.add_row(
                episode.filename,
                episode.title,
                episode.artist,
                episode.album,
                str(episode.year) if episode.year is not None else "—",
                episode.duration_text,
            )

        console.print(table)
        console.print(f"\n[dim]Total: {len(episodes)} episode(s)[/dim]")

    except PodcastArchiveError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("feed")
def feed_command(
    ctx: typer.Context,
    output_format: str = typer.Option("json", "--format", "-f", help="Output format: json or rss"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write to file instead of stdout"
    ),
) -> None:
    """Build the JSON listing or the RSS feed.

    Examples:
        podcastarchive feed

        podcastarchive feed --format rss --output feed.xml
    """
    feed_format = output_format.strip().lower()
    if feed_format not in FEED_FORMATS:
        console.print(f"[red]✗[/red] Unknown format: {output_format}")
        console.print(f"Valid formats: {', '.join(FEED_FORMATS)}")
        sys.exit(1)

    try:
        config = _load_config(ctx)
        service = ArchiveService(config.podcast)

        if feed_format == "rss":
            content = service.build_feed_xml()
        else:
            listing = service.build_listing()
            content = json.dumps(
                [item.model_dump() for item in listing], indent=2, ensure_ascii=False
            )

        if output is None:
            print(content)
            return

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {feed_format} feed to [cyan]{output}[/cyan]")

    except FeedError as e:
        console.print(f"[red]✗[/red] Failed to build feed: {e}")
        sys.exit(1)
    except PodcastArchiveError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]✗[/red] Cannot write {output}: {e}")
        sys.exit(1)


@app.command("locate")
def locate_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Audio filename inside the media directory"),
) -> None:
    """Print the absolute path of a media file.

    Names that escape the media directory, have the wrong extension or do not
    exist are rejected.
    """
    try:
        config = _load_config(ctx)
        path = ArchiveService(config.podcast).locate(name)
        print(path)
    except MediaNotFoundError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except PodcastArchiveError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="Action: show or set <key> <value>"),
    key: str | None = typer.Argument(None, help="Config key (for 'set' action)"),
    value: str | None = typer.Argument(None, help="Config value (for 'set' action)"),
) -> None:
    """Manage Podcast Archive configuration.

    Actions:
        show: Display current configuration
        set:  Set a configuration value

    Examples:
        podcastarchive config show

        podcastarchive config set base_url https://podcasts.example.com

        podcastarchive config set podcast.explicit true
    """
    try:
        manager = ConfigManager()

        if action == "show":
            config = manager.load_config()
            podcast = config.podcast

            console.print("\n[bold]Podcast Archive Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("Log level", config.log_level)
            table.add_row("", "")
            table.add_row("Media directory", str(podcast.media_root))
            table.add_row("Image directory", str(podcast.image_dir))
            table.add_row("Audio extensions", ", ".join(podcast.audio_extensions))
            table.add_row("Base URL", podcast.normalized_base_url)
            table.add_row("", "")
            table.add_row("Channel title", podcast.effective_channel_title)
            table.add_row("Channel link", podcast.normalized_channel_link)
            table.add_row("Channel author", podcast.effective_channel_author)
            table.add_row("Explicit", "✓" if podcast.explicit else "✗")
            table.add_row("Owner", f"{podcast.effective_channel_owner_name} <{podcast.effective_channel_owner_email}>")
            table.add_row("Channel image", podcast.channel_image_url_or_none or "—")
            table.add_row("Image base path", podcast.normalized_image_base_path)

            console.print(table)

        elif action == "set":
            if not key or value is None:
                console.print("[red]✗[/red] Usage: podcastarchive config set <key> <value>")
                sys.exit(1)

            manager.set_value(key, value)
            console.print(f"[green]✓[/green] Set [cyan]{key}[/cyan] = [yellow]{value}[/yellow]")

        else:
            console.print(f"[red]✗[/red] Unknown action: {action}")
            console.print("Valid actions: show, set")
            sys.exit(1)

    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except PodcastArchiveError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    app()
