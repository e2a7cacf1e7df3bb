"""Terminal output using Rich for formatted tables and panels."""

from typing import Dict, List, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..analytics import JobAnalytics, NetworkAnalytics, PostAnalytics
from ..models import JobPosting, Message, Notification, Post, User
from ..text_utils import truncated


class TerminalNotifier:
    """Prints store contents and live events to the terminal."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def show_jobs(self, jobs: List[JobPosting], title: str = "Jobs") -> None:
        """
        Display jobs in a formatted table.

        Args:
            jobs: Jobs to display.
            title: Title for the output.
        """
        if not jobs:
            self.console.print(
                Panel(
                    "[dim]No jobs match these filters[/dim]",
                    title=title,
                    border_style="dim",
                )
            )
            return

        table = Table(
            title=f"[bold]{title}[/bold] ({len(jobs)} jobs)",
            show_header=True,
            header_style="bold cyan",
            border_style="blue",
            expand=True,
        )
        table.add_column("Title", style="white", no_wrap=False)
        table.add_column("Company", style="magenta")
        table.add_column("Location", style="yellow")
        table.add_column("Type", style="white")
        table.add_column("Salary", style="green", justify="right")
        table.add_column("Applicants", justify="right")

        for job in jobs:
            badges = []
            if job.is_urgent:
                badges.append("[red]urgent[/red]")
            if job.is_easy_apply:
                badges.append("[blue]easy apply[/blue]")
            title_cell = job.title if not badges else f"{job.title} {' '.join(badges)}"
            table.add_row(
                title_cell,
                job.company,
                job.location,
                f"{job.work_type.title} / {job.employment_type.title}",
                job.salary_range.formatted_range if job.salary_range else "-",
                str(job.applicant_count),
            )

        self.console.print()
        self.console.print(table)
        self.console.print()

    def show_posts(self, posts: List[Post], title: str = "Feed") -> None:
        if not posts:
            self.console.print(Panel("[dim]No posts[/dim]", title=title, border_style="dim"))
            return

        self.console.print()
        for post in posts:
            footer = (
                f"[dim]{post.like_count} likes · {post.comment_count} comments · "
                f"{post.share_count} shares[/dim]"
            )
            self.console.print(
                Panel(
                    f"{truncated(post.content, 280)}\n\n{footer}",
                    title=f"[bold]{post.author_name}[/bold]",
                    subtitle=post.author_headline or None,
                    border_style="blue",
                )
            )

    def show_job_analytics(self, analytics: JobAnalytics, trending: Sequence[str] = ()) -> None:
        table = Table(
            title="[bold]Job Board[/bold]",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Metric", style="white")
        table.add_column("Value", style="green", justify="right")

        table.add_row("Jobs shown", str(analytics.total_jobs))
        table.add_row("Applications", str(analytics.total_applications))
        table.add_row("Average salary", f"${analytics.average_salary:,}")
        table.add_row("Top industries", ", ".join(analytics.top_industries) or "-")
        table.add_row("Top locations", ", ".join(analytics.top_locations) or "-")
        if trending:
            table.add_row("Trending titles", ", ".join(trending))

        self.console.print()
        self.console.print(table)

    def show_post_analytics(
        self, analytics: PostAnalytics, trending: Sequence[Tuple[str, int]] = ()
    ) -> None:
        table = Table(
            title="[bold]Feed[/bold]",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Metric", style="white")
        table.add_column("Value", style="green", justify="right")

        table.add_row("Posts", str(analytics.total_posts))
        table.add_row("Likes", str(analytics.total_likes))
        table.add_row("Comments", str(analytics.total_comments))
        table.add_row("Shares", str(analytics.total_shares))
        table.add_row("Average engagement", f"{analytics.average_engagement:.1f}")
        if trending:
            table.add_row("Trending", ", ".join(f"{tag} ({count})" for tag, count in trending))

        self.console.print()
        self.console.print(table)
        self.console.print()

    def show_notifications(self, notifications: List[Notification], unread: int) -> None:
        table = Table(
            title=f"[bold]Notifications[/bold] ({unread} unread)",
            show_header=True,
            header_style="bold cyan",
            expand=True,
        )
        table.add_column("", width=1)
        table.add_column("Type", style="magenta")
        table.add_column("Message", style="white", no_wrap=False)
        table.add_column("When", style="dim")

        for notification in notifications:
            table.add_row(
                "[blue]●[/blue]" if not notification.is_read else "",
                notification.type.value.replace("_", " "),
                notification.message,
                notification.created_at.strftime("%Y-%m-%d %H:%M"),
            )

        self.console.print()
        self.console.print(table)
        self.console.print()

    def show_network(self, users: List[User], connections: List[User], analytics: NetworkAnalytics) -> None:
        table = Table(
            title=f"[bold]People you may know[/bold] ({analytics.connections} connections, "
            f"{analytics.pending_requests} pending)",
            show_header=True,
            header_style="bold cyan",
            expand=True,
        )
        table.add_column("Name", style="white")
        table.add_column("Headline", style="yellow", no_wrap=False)
        table.add_column("Location", style="dim")

        for user in users:
            table.add_row(user.full_name, user.headline, user.location or "-")

        self.console.print()
        self.console.print(table)
        if connections:
            names = ", ".join(user.full_name for user in connections)
            self.console.print(f"[dim]Connected with: {names}[/dim]")
        self.console.print()

    def show_notification(self, notification: Notification) -> None:
        self.console.print(f"[bold blue]🔔 {notification.title}:[/bold blue] {notification.message}")

    def show_message(self, message: Message) -> None:
        self.console.print(f"[bold magenta]✉ {message.sender_name}:[/bold magenta] {message.content}")

    def show_validation_errors(self, errors: Dict[str, str]) -> None:
        for name, message in errors.items():
            self.notify_error(f"{name}: {message}")

    def notify_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def notify_info(self, message: str) -> None:
        """Display an info message."""
        self.console.print(f"[dim]{message}[/dim]")

    def notify_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green]{message}[/green]")
