"""Main entry point for Todo Analytics."""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import structlog

from todo_analytics.models.task import TaskRecord
from todo_analytics.reporting.dashboard import DashboardBuilder
from todo_analytics.reporting.generator import TaskGenerator
from todo_analytics.search.logbook import build_logbook
from todo_analytics.search.task_search import group_by_page, search_tasks
from todo_analytics.utils.config import load_config, get_default_config
from todo_analytics.utils.logging_config import setup_logging

log = structlog.get_logger()


def load_task_records(input_path: str) -> List[TaskRecord]:
    """Load a JSON list of host-shaped task dicts."""
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"Task file not found: {input_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of task records in {input_path}")

    return [TaskRecord.from_dict(item) for item in data]


def resolve_config(config_path: Optional[str]) -> dict:
    """Load the config file if it exists, else fall back to defaults."""
    if config_path and Path(config_path).exists():
        return load_config(config_path)
    return get_default_config()


def run_report(args, config: dict) -> None:
    """Build the dashboard report for a task file and export it."""
    now = datetime.now()
    if args.input:
        records = load_task_records(args.input)
    else:
        records = TaskGenerator(seed=args.seed, config=config).generate_records(now)
        log.info("using_sample_records", count=len(records), seed=args.seed)

    builder = DashboardBuilder(config)
    report = builder.build(records, now=now, total_todos=args.total_todos)
    paths = builder.export(report, args.output)

    print(report.to_human_readable())
    print(f"\nReport saved to: {paths['json']}")
    print(f"Human-readable log saved to: {paths['log']}")


def run_search(args, config: dict) -> None:
    """Fuzzy search the task file and print results grouped by page."""
    records = load_task_records(args.input)
    results = search_tasks(records, args.query, args.status)

    print(f"{len(results)} {'matching' if args.query else 'total'} tasks")
    for page_title, page_results in group_by_page(results).items():
        print(f"\n📄 {page_title} ({len(page_results)})")
        for result in page_results:
            print(f"  [{result.status.value}] {result.display_content}  (score {result.score})")


def run_logbook(args, config: dict) -> None:
    """Print the logbook for a day, week or month."""
    records = load_task_records(args.input)
    selected = datetime.strptime(args.date, "%Y-%m-%d").date() if args.date else datetime.now().date()
    page = build_logbook(
        records,
        selected,
        view=args.view,
        search_term=args.query,
        page=args.page,
        sort_by=args.sort,
        config=config,
    )

    stats = page.stats
    print(f"Logbook {page.start_date} - {page.end_date} ({page.view.value})")
    print(f"Tasks completed: {stats.tasks_completed}")
    print(f"Est. time spent: {stats.estimated_time_label}")
    print(f"Productivity level: {stats.productivity_percent}%")
    if stats.first_task_time:
        print(f"First task: {stats.first_task_time}")

    for group in page.groups:
        print(f"\n{group.label}  {len(group.tasks)} task{'s' if len(group.tasks) > 1 else ''}")
        for task in group.tasks:
            print(f"  ✓ {task.content}  [{task.page_title}]")


def run_generate(args, config: dict) -> None:
    """Generate sample task records and save them as JSON."""
    now = datetime.now()
    generator = TaskGenerator(seed=args.seed, config=config)
    records = generator.generate_records(now, count=args.count)
    records.extend(generator.generate_open_records(now))

    output_path = Path(args.output)
    output_path.mkdir(parents=True, exist_ok=True)
    tasks_path = output_path / "generated_tasks.json"

    with open(tasks_path, 'w', encoding='utf-8') as f:
        json.dump([record.to_dict() for record in records], f, indent=2)

    print(f"Generated {len(records)} task records")
    print(f"Tasks saved to: {tasks_path}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Todo Analytics: streaks, scores, levels and achievements for task blocks"
    )
    parser.add_argument(
        'command',
        choices=['report', 'search', 'logbook', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument('--input', type=str, help='JSON file of task records')
    parser.add_argument('--output', type=str, default='results', help='Output directory (default: results)')
    parser.add_argument('--total-todos', type=int, default=0, help='Total open task count to attach')
    parser.add_argument('--query', type=str, default='', help='Search text')
    parser.add_argument(
        '--status',
        type=str,
        choices=['all', 'TODO', 'DOING', 'DONE', 'ARCHIVED'],
        default='all',
        help='Task status filter for search (default: all)'
    )
    parser.add_argument('--date', type=str, help='Logbook date, YYYY-MM-DD (default: today)')
    parser.add_argument('--view', type=str, choices=['day', 'week', 'month'], default='day')
    parser.add_argument('--page', type=str, default='all', help='Logbook page filter')
    parser.add_argument(
        '--sort',
        type=str,
        choices=['time-desc', 'time-asc', 'page', 'content'],
        default='time-desc'
    )
    parser.add_argument('--count', type=int, help='Number of records to generate (default: from config)')
    parser.add_argument('--seed', type=int, default=42, help='Generator seed')

    args = parser.parse_args(argv)

    try:
        config = resolve_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config)

    commands = {
        'report': run_report,
        'search': run_search,
        'logbook': run_logbook,
        'generate-tasks': run_generate,
    }

    if args.command in ('search', 'logbook') and not args.input:
        parser.error(f"--input is required for {args.command}")

    try:
        commands[args.command](args, config)
    except (FileNotFoundError, ValueError) as e:
        log.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
