"""Main entry point for ProNet."""

import argparse
import asyncio
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import Optional

import schedule

from .config import Config, create_default_config
from .errors import ConfigError, ValidationError
from .events import EventEmitter
from .filters import DateRange, JobSearchFilters
from .generator import DemoDataGenerator
from .models import EmploymentType, ExperienceLevel, WorkType
from .notifiers import TerminalNotifier
from .session import Session
from .stores import ChatStore, ConnectionStore, JobStore, NotificationStore, PostStore
from .stores.chat import MESSAGE
from .stores.notifications import NOTIFICATION
from .validation import validate_signup

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@dataclass
class App:
    """The stores of one running instance, wired to a shared session."""

    config: Config
    session: Session
    generator: DemoDataGenerator
    jobs: JobStore
    posts: PostStore
    connections: ConnectionStore
    notifications: NotificationStore
    chat: ChatStore


def build_app(config: Config, seed: Optional[int] = None) -> App:
    """
    Create the session, generator and stores described by ``config``.

    Args:
        config: Application configuration.
        seed: Overrides the configured random seed.

    Returns:
        App with every store constructed.
    """
    seed = config.simulation.seed if seed is None else seed
    generator = DemoDataGenerator(rng=random.Random(seed))
    session = Session()
    session.sign_in(config.session.to_user())

    sim = config.simulation
    return App(
        config=config,
        session=session,
        generator=generator,
        jobs=JobStore(
            session,
            generator,
            events=EventEmitter(),
            page_size=config.jobs.page_size,
            catalog_size=config.jobs.catalog_size,
            initial_count=config.jobs.initial_count,
            search_delay=sim.search_delay,
            load_more_delay=sim.load_more_delay,
        ),
        posts=PostStore(
            session,
            generator,
            events=EventEmitter(),
            page_size=config.feed.page_size,
            catalog_size=config.feed.catalog_size,
            delay=sim.load_more_delay,
        ),
        connections=ConnectionStore(session, generator, events=EventEmitter(), delay=sim.search_delay),
        notifications=NotificationStore(session, generator, events=EventEmitter(), delay=sim.search_delay),
        chat=ChatStore(session, generator, events=EventEmitter(), delay=sim.search_delay),
    )


def filters_from_args(args: argparse.Namespace) -> JobSearchFilters:
    """Translate search flags into JobSearchFilters."""
    return JobSearchFilters(
        keywords=args.keywords or "",
        location=args.location or "",
        work_types={WorkType(v) for v in args.work_type or []},
        employment_types={EmploymentType(v) for v in args.employment_type or []},
        experience_levels={ExperienceLevel(v) for v in args.level or []},
        industries=set(args.industry or []),
        salary_min=args.salary_min,
        salary_max=args.salary_max,
        is_remote_only=args.remote,
        is_easy_apply_only=args.easy_apply,
        posted_within=DateRange(args.posted_within),
    )


async def run_search(app: App, filters: JobSearchFilters, pages: int) -> None:
    await app.jobs.search(filters)
    for _ in range(pages - 1):
        if not await app.jobs.load_more():
            break


async def run_feed(app: App, pages: int) -> None:
    await app.posts.refresh()
    for _ in range(pages - 1):
        if not await app.posts.fetch_posts():
            break


def _load(args: argparse.Namespace) -> Optional[App]:
    terminal = TerminalNotifier()
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        terminal.notify_error(str(e))
        return None
    if not args.verbose:
        logging.getLogger().setLevel(config.log_level)
    return build_app(config, seed=args.seed)


def cmd_search(args: argparse.Namespace) -> int:
    """Search the job board."""
    app = _load(args)
    if app is None:
        return 1
    terminal = TerminalNotifier()

    try:
        filters = filters_from_args(args)
    except ValueError as e:
        terminal.notify_error(str(e))
        return 1

    asyncio.run(run_search(app, filters, max(1, args.pages)))
    terminal.show_jobs(app.jobs.results, title="Search Results")
    if app.jobs.has_more:
        terminal.notify_info("More results available (use --pages)")
    return 0


def cmd_feed(args: argparse.Namespace) -> int:
    """Show the home feed."""
    app = _load(args)
    if app is None:
        return 1
    terminal = TerminalNotifier()

    asyncio.run(run_feed(app, max(1, args.pages)))

    posts = app.posts.results
    title = "Feed"
    if args.hashtag:
        posts = app.posts.posts_by_hashtag(args.hashtag)
        title = f"Posts tagged {args.hashtag}"
    elif args.query:
        posts = app.posts.search_posts(args.query)
        title = f"Posts matching '{args.query}'"

    terminal.show_posts(posts, title=title)
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Show job board and feed analytics."""
    app = _load(args)
    if app is None:
        return 1
    terminal = TerminalNotifier()

    asyncio.run(app.jobs.search())
    asyncio.run(app.posts.refresh())

    terminal.show_job_analytics(app.jobs.analytics, app.jobs.trending_job_titles())
    terminal.show_post_analytics(app.posts.analytics, app.posts.trending_hashtags())

    if args.title:
        insights = app.jobs.salary_insights(args.title)
        if insights.job_count:
            terminal.notify_success(
                f"{args.title}: {insights.formatted_range} across {insights.job_count} jobs"
            )
        else:
            terminal.notify_info(f"No salary data for {args.title}")
    return 0


def cmd_notifications(args: argparse.Namespace) -> int:
    """List notifications."""
    app = _load(args)
    if app is None:
        return 1
    terminal = TerminalNotifier()

    asyncio.run(app.notifications.fetch_notifications())
    if args.mark_all_read:
        changed = app.notifications.mark_all_as_read()
        terminal.notify_success(f"Marked {changed} notification(s) as read")

    terminal.show_notifications(app.notifications.results, app.notifications.unread_count)
    return 0


def cmd_network(args: argparse.Namespace) -> int:
    """Show connection suggestions."""
    app = _load(args)
    if app is None:
        return 1
    terminal = TerminalNotifier()

    asyncio.run(app.connections.fetch_users())
    if args.query:
        app.connections.search_users(args.query)

    terminal.show_network(app.connections.results, app.connections.connections, app.connections.analytics)
    return 0


def cmd_listen(args: argparse.Namespace) -> int:
    """Simulate incoming notifications and messages."""
    app = _load(args)
    if app is None:
        return 1
    terminal = TerminalNotifier()
    sim = app.config.simulation

    app.notifications.events.subscribe(NOTIFICATION, terminal.show_notification)
    app.chat.events.subscribe(MESSAGE, terminal.show_message)

    if app.chat.conversations:
        room_id = app.chat.conversations[0].id
        asyncio.run(app.chat.fetch_messages(room_id))
        terminal.notify_info(f"Listening in {app.chat.conversations[0].other_user.full_name}'s chat")

    terminal.notify_success(
        f"Simulating notifications every {sim.notification_interval_seconds}s "
        f"and messages every {sim.message_interval_seconds}s"
    )
    terminal.notify_info("Press Ctrl+C to stop")

    schedule.every(sim.notification_interval_seconds).seconds.do(
        app.notifications.simulate_new_notification
    )
    schedule.every(sim.message_interval_seconds).seconds.do(app.chat.simulate_incoming_message)

    deadline = time.monotonic() + args.duration if args.duration else None
    try:
        while deadline is None or time.monotonic() < deadline:
            schedule.run_pending()
            time.sleep(1)
    except KeyboardInterrupt:
        terminal.notify_info("\nStopped listening")
    finally:
        schedule.clear()

    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize configuration file."""
    terminal = TerminalNotifier()

    config_path = args.config or "config.yaml"
    create_default_config(config_path)

    terminal.notify_success(f"Created default configuration at {config_path}")
    terminal.notify_info("Edit the file to change the demo user, page sizes and delays")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Check a sign-up form."""
    terminal = TerminalNotifier()
    try:
        validate_signup(args.email, args.password, args.confirm_password, args.full_name)
    except ValidationError as e:
        terminal.show_validation_errors(e.errors)
        return 1

    terminal.notify_success("Sign-up details are valid")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ProNet - professional network demo engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help="Path to configuration file (default: config.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for demo data (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search the job board")
    search_parser.add_argument("-k", "--keywords", help="Match title, company or skills")
    search_parser.add_argument("-l", "--location", help="Location substring")
    search_parser.add_argument(
        "--work-type", action="append", choices=[w.value for w in WorkType],
    )
    search_parser.add_argument(
        "--employment-type", action="append", choices=[e.value for e in EmploymentType],
    )
    search_parser.add_argument(
        "--level", action="append", choices=[e.value for e in ExperienceLevel],
    )
    search_parser.add_argument("--industry", action="append")
    search_parser.add_argument("--salary-min", type=int)
    search_parser.add_argument("--salary-max", type=int)
    search_parser.add_argument("--remote", action="store_true", help="Remote jobs only")
    search_parser.add_argument("--easy-apply", action="store_true", help="Easy Apply jobs only")
    search_parser.add_argument(
        "--posted-within",
        default=DateRange.ANY_TIME.value,
        choices=[d.value for d in DateRange],
    )
    search_parser.add_argument("-p", "--pages", type=int, default=1, help="Pages to load")
    search_parser.set_defaults(func=cmd_search)

    # Feed command
    feed_parser = subparsers.add_parser("feed", help="Show the home feed")
    feed_parser.add_argument("-p", "--pages", type=int, default=1, help="Pages to load")
    feed_parser.add_argument("--hashtag", help="Only posts with this hashtag")
    feed_parser.add_argument("-q", "--query", help="Search loaded posts")
    feed_parser.set_defaults(func=cmd_feed)

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show job and feed analytics")
    stats_parser.add_argument("--title", help="Also show salary insights for a job title")
    stats_parser.set_defaults(func=cmd_stats)

    # Notifications command
    notifications_parser = subparsers.add_parser("notifications", help="List notifications")
    notifications_parser.add_argument(
        "--mark-all-read", action="store_true", help="Mark everything as read",
    )
    notifications_parser.set_defaults(func=cmd_notifications)

    # Network command
    network_parser = subparsers.add_parser("network", help="Show people you may know")
    network_parser.add_argument("-q", "--query", help="Filter by name, headline or bio")
    network_parser.set_defaults(func=cmd_network)

    # Listen command
    listen_parser = subparsers.add_parser("listen", help="Simulate live notifications and messages")
    listen_parser.add_argument(
        "-d", "--duration",
        type=int,
        help="Stop after this many seconds (default: run until Ctrl+C)",
    )
    listen_parser.set_defaults(func=cmd_listen)

    # Init command
    init_parser = subparsers.add_parser("init", help="Initialize configuration file")
    init_parser.set_defaults(func=cmd_init)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate sign-up details")
    validate_parser.add_argument("--email", default="")
    validate_parser.add_argument("--password", default="")
    validate_parser.add_argument("--confirm-password", default="")
    validate_parser.add_argument("--full-name", default="")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
