"""
reddit-responses CLI — inspect saved API responses.

Commands:
  reddit-responses listing FILE   Submission listing page
  reddit-responses thread FILE    Post and its comment tree
  reddit-responses about FILE     Subreddit metadata
"""

import json
from pathlib import Path
from typing import Any, Callable

try:
    import click
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    raise SystemExit("CLI requires extras: pip install reddit-responses[cli]")

from reddit_responses import __version__
from reddit_responses.errors import DecodeError
from reddit_responses.models import Comment, MoreComments
from reddit_responses.normalize import EditedAt
from reddit_responses.responses import decode_comment_response, decode_listing, decode_subreddit_about

console = Console()
CONFIG_FILE = Path.home() / ".reddit_responses" / "config.json"
DEFAULT_TITLE_WIDTH = 60


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _title_width() -> int:
    width = _load_config().get("title_width", DEFAULT_TITLE_WIDTH)
    if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
        return DEFAULT_TITLE_WIDTH
    return width


def _decode_file(path: str, decoder: Callable[[bytes], Any]) -> Any:
    try:
        return decoder(Path(path).read_bytes())
    except DecodeError as e:
        console.print(f"[red]{e.code}:[/red] {escape(str(e))}")
        if e.details:
            console.print(f"[dim]{escape(json.dumps(e.details, default=repr))}[/dim]")
        raise SystemExit(1)


def _edited_label(edited: Any) -> str:
    return str(edited.timestamp) if isinstance(edited, EditedAt) else "-"


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


@click.group()
@click.version_option(__version__)
def main():
    """Decode and inspect saved Reddit API responses."""


@main.command("listing")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", "--json", is_flag=True)
def listing_cmd(path, json_output):
    """Show a page of submissions."""
    thing = _decode_file(path, decode_listing)
    if json_output:
        click.echo(thing.model_dump_json(indent=2))
        return
    page = thing.data
    width = _title_width()
    table = Table(title=f"Listing ({len(page.children)} submissions)")
    table.add_column("ID", style="bold")
    table.add_column("Author")
    table.add_column("Score", justify="right")
    table.add_column("Edited")
    table.add_column("Title")
    for post in page.payloads():
        table.add_row(
            post.id, escape(post.author), str(post.score),
            _edited_label(post.edited), escape(_truncate(post.title, width)),
        )
    console.print(table)
    console.print(f"[dim]before: {page.before or '-'}  after: {page.after or '-'}[/dim]")


def _print_tree(children, indent: int = 0) -> None:
    pad = "  " * indent
    for child in children:
        node = child.data
        if isinstance(node, MoreComments):
            console.print(f"{pad}[dim]… {node.count} more[/dim]")
        elif isinstance(node, Comment):
            edited = " [yellow](edited)[/yellow]" if node.is_edited else ""
            console.print(f"{pad}[bold]{escape(node.author)}[/bold] ({node.score}){edited}")
            for line in node.body.splitlines() or [""]:
                console.print(f"{pad}  {escape(line)}")
            _print_tree(node.reply_children, indent + 1)


@main.command("thread")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", "--json", is_flag=True)
def thread_cmd(path, json_output):
    """Show a post and its comment tree."""
    response = _decode_file(path, decode_comment_response)
    if json_output:
        click.echo(response.model_dump_json(indent=2))
        return
    post = response.submission
    console.print(f"[green]{escape(post.title)}[/green]")
    console.print(f"[dim]r/{escape(post.subreddit)} · u/{escape(post.author)} · {post.score} points · "
                  f"{post.num_comments} comments · edited: {_edited_label(post.edited)}[/dim]\n")
    _print_tree(response.comments.data.children)


@main.command("about")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", "--json", is_flag=True)
def about_cmd(path, json_output):
    """Show subreddit metadata."""
    thing = _decode_file(path, decode_subreddit_about)
    if json_output:
        click.echo(thing.model_dump_json(indent=2))
        return
    about = thing.data
    table = Table(title=f"r/{escape(about.display_name)}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Title", escape(about.title))
    table.add_row("Type", about.subreddit_type)
    table.add_row("Subscribers", str(about.subscribers))
    table.add_row("Active", str(about.accounts_active))
    table.add_row("NSFW", "yes" if about.over18 else "no")
    table.add_row("Created (UTC)", str(about.created_utc))
    console.print(table)


if __name__ == "__main__":
    main()
