"""
Alert Engine - evaluate command.
Loads config, reads a JSON post batch and prints the alert dashboard
(or one alert's detail view) as JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from config.config import Config as AppConfig, load_config
from pkg.logger.logger import Logger, LoggerConfig
from internal.model import ErrInvalidPost, Post, Severity
from internal.signal_detection import ErrInvalidThreshold, Thresholds
from internal import alert_engine, alert_lifecycle, alert_report, alert_state
from utils.time_utils import parse_timestamp


def build_logger(app_config: AppConfig) -> Logger:
    level = "DEBUG" if app_config.logging.debug else app_config.logging.level
    return Logger(
        LoggerConfig(
            level=level,
            enable_console=app_config.logging.enable_console,
            colorize=app_config.logging.colorize,
            service_name=app_config.logging.service_name,
        )
    )


def build_report(app_config: AppConfig, logger: Optional[Logger] = None) -> alert_report.AlertReport:
    """Wire engine, lifecycle, state overlay and report from app config."""
    thresholds = Thresholds(**vars(app_config.thresholds))
    sla = app_config.lifecycle.sla_hours

    lifecycle = alert_lifecycle.New(
        alert_lifecycle.Config(
            enabled=app_config.lifecycle.enabled,
            seed=app_config.lifecycle.seed,
            sla_hours={
                Severity.CRITICAL: sla.critical,
                Severity.HIGH: sla.high,
                Severity.MEDIUM: sla.medium,
                Severity.LOW: sla.low,
            },
        ),
        logger,
    )
    engine = alert_engine.New(
        alert_engine.Config(
            thresholds=thresholds,
            max_alerts=app_config.engine.max_alerts,
            max_workers=app_config.engine.max_workers,
        ),
        logger,
        lifecycle=lifecycle,
    )
    state = alert_state.New(logger=logger)
    return alert_report.New(
        alert_report.Config(
            thresholds=thresholds,
            default_timeframe=app_config.report.default_timeframe,
            max_related=app_config.report.max_related,
            page_limit=app_config.report.page_limit,
        ),
        engine,
        state,
        logger,
    )


def read_posts(path: str, logger: Optional[Logger] = None) -> list[Post]:
    """Read posts from a JSON file holding a list or {"posts": [...]}.

    Records that cannot be parsed are skipped with a warning.
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        payload = json.load(f)
    raw_posts = payload.get("posts", []) if isinstance(payload, dict) else payload
    if not isinstance(raw_posts, list):
        raise ValueError("posts file must contain a list of posts")

    posts = []
    skipped = 0
    for raw in raw_posts:
        try:
            posts.append(Post.parse(raw))
        except ErrInvalidPost as e:
            skipped += 1
            if logger:
                logger.warning(
                    "commands.evaluate.read_posts: Skipping invalid post",
                    extra={"error": str(e)},
                )
    if logger:
        logger.info(
            "commands.evaluate.read_posts: Posts loaded",
            extra={"path": str(path), "posts": len(posts), "skipped": skipped},
        )
    return posts


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="alert-engine-evaluate",
        description="Evaluate alerts over a JSON post batch.",
    )
    parser.add_argument("posts", help="JSON file with a list of posts")
    parser.add_argument("--config", help="YAML config file (default: search config/config.yaml)")
    parser.add_argument("--alert-id", help="Print the detail view of one alert")
    parser.add_argument("--now", help="Evaluation clock (ISO-8601, default: current time)")
    parser.add_argument("--timeframe", choices=sorted(alert_report.TIMEFRAME_HOURS))
    parser.add_argument("--date-from")
    parser.add_argument("--date-to")
    parser.add_argument("--sentiment")
    parser.add_argument("--platform")
    parser.add_argument("--cluster")
    parser.add_argument("--subcluster")
    parser.add_argument("--search")
    parser.add_argument("--severity", help="Comma-separated severities")
    parser.add_argument("--status", help="Comma-separated statuses")
    parser.add_argument("--sort", choices=alert_report.SORT_KEYS)
    parser.add_argument("--cursor")
    parser.add_argument("--limit")
    parser.add_argument("--indent", type=int, default=2)
    return parser.parse_args(argv)


def build_query(args: argparse.Namespace) -> alert_report.Query:
    params: dict[str, Any] = {
        "timeframe": args.timeframe,
        "date_from": args.date_from,
        "date_to": args.date_to,
        "sentiment": args.sentiment,
        "platform": args.platform,
        "cluster": args.cluster,
        "subcluster": args.subcluster,
        "search": args.search,
        "severity": args.severity,
        "status": args.status,
        "sort": args.sort,
        "cursor": args.cursor,
        "limit": args.limit,
    }
    return alert_report.Query.from_dict(params)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # Load configuration
    try:
        app_config = load_config(args.config)
    except Exception as e:
        raise Exception(f"Error loading configuration: {e}")

    try:
        logger = build_logger(app_config)
    except Exception as e:
        raise Exception(f"Error initializing logger: {e}")

    try:
        now = parse_timestamp(args.now) if args.now else None
        if args.now and now is None:
            raise ValueError(f"invalid --now value: {args.now}")

        report = build_report(app_config, logger)
        posts = read_posts(args.posts, logger)
        query = build_query(args)

        with logger.trace_context(trace_id=args.alert_id or "dashboard"):
            if args.alert_id:
                result = report.detail(args.alert_id, posts, query, now=now).to_dict()
            else:
                result = report.dashboard(posts, query, now=now).to_dict()
    except alert_report.ErrAlertNotFound as e:
        logger.error(f"commands.evaluate.main: {e}")
        return 2
    except (ValueError, ErrInvalidThreshold, alert_report.ErrInvalidQuery) as e:
        logger.error(f"commands.evaluate.main: {e}")
        return 1

    json.dump(result, sys.stdout, ensure_ascii=False, indent=args.indent or None)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
