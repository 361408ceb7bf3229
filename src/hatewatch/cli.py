"""Command-line interface for hatewatch."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants, ScrapeConstants
from .core.exceptions import HatewatchError
from .core.lexicon import ARTICLE_LABELS
from .core.models import Comment
from .core.pipeline import AnalysisPipeline
from .core.speech_act import is_aggressive
from .services.apify_client import ApifyService
from .services.llm import GenAIServiceFactory
from .services.model import TextClassifierCapability
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _load_comments(path: Path):
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("comments", [])
    if not isinstance(data, list):
        raise HatewatchError(f"Expected a list of comments in {path}")
    return [Comment.from_dict(item, i) for i, item in enumerate(data)]


def cmd_scrape(args):
    """Scrape command."""
    result = ApifyService().scrape_post(args.url, args.limit)

    label = " (demo data)" if result.is_demo else ""
    print(f"Scraped {len(result.comments)} comments{label}")
    print(f"Post: {result.post.title}")

    if result.comments:
        print("\nSample comment:")
        sample = result.comments[0]
        print(f"Author: {sample.author}")
        print(f"Text: {sample.text[:100]}...")

    if args.out:
        data = {"post": vars(result.post), "comments": [
            {
                "id": c.id,
                "author": c.author,
                "text": c.text,
                "timestamp": c.timestamp,
                "likes": c.likes,
                "replies": c.replies,
                "parent_id": c.parent_id,
            }
            for c in result.comments
        ], "metadata": {"is_demo": result.is_demo}}
        export_to_json(data, args.out)
        print(f"Comments saved to {args.out}")


def cmd_analyze(args):
    """Analyze command: scrape (or load) comments and classify them."""
    source = Path(args.source)
    post = None
    if source.is_file():
        comments = _load_comments(source)
        print(f"Loaded {len(comments)} comments from {source}")
    else:
        result = ApifyService().scrape_post(args.source, args.limit)
        comments, post = result.comments, result.post
        label = " (demo data)" if result.is_demo else ""
        print(f"Scraped {len(comments)} comments{label}")

    if not comments:
        print("No comments found!")
        return

    model = None
    if args.model or settings.enable_model:
        model = TextClassifierCapability()
        model.load()

    genai = GenAIServiceFactory.create() if args.genai else None

    pipeline = AnalysisPipeline(model=model, genai=genai)
    report = pipeline.analyze(comments, post=post)

    if args.out:
        export_to_json(prepare_export(report), args.out)
        print(f"Results exported to {args.out}")

    stats = report.statistics
    print(f"\nAnalysis Summary ({stats.total} comments, model: {report.model_state}):")
    print(f"  Hate:     {stats.hate} ({stats.hate_percentage}%)")
    print(f"  Neutral:  {stats.neutral} ({stats.neutral_percentage}%)")
    print(f"  Positive: {stats.positive} ({stats.positive_percentage}%)")

    if stats.hate:
        print("\nHate categories:")
        for category, count in report.categories.items():
            if count:
                print(f"  {category}: {count}")

    aggressive = sum(1 for r in report.results if is_aggressive(r.speech_act))
    print(f"\nAggressive speech acts: {aggressive}")

    summary = report.violations
    print(f"\nPotential UU ITE violations: {summary.total_violations} ({summary.violation_percentage}%)")
    for article, count in summary.article_counts.items():
        print(f"  {ARTICLE_LABELS.get(article, article)}: {count}")

    if report.clusters:
        print("\nTopics:")
        for c in report.clusters:
            print(f"  {c.id}. {c.topic}: {c.count} comments ({', '.join(c.keywords)})")

    if report.entities:
        print("\nMost mentioned targets:")
        for e in report.entities[:5]:
            print(f"  {e.entity} ({e.type.value}): {e.mentions} mentions")


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if args.pretty:
            # Pretty print the JSON
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            # Export to file
            output_file = args.output or args.input_file.replace('.json', '_export.json')
            with open(output_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            print(f"Exported to {output_file}")

    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="hatewatch - Facebook comment hate-speech and UU ITE analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Scrape command
    scrape_parser = subparsers.add_parser('scrape', help='Scrape comments of a Facebook post')
    scrape_parser.add_argument('url', help='Facebook post URL')
    scrape_parser.add_argument('--limit', type=int, default=ScrapeConstants.DEFAULT_RESULTS_LIMIT,
                               help='Number of comments to scrape')
    scrape_parser.add_argument('--out', help='Output JSON file')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze comments')
    analyze_parser.add_argument('source', help='Facebook post URL or JSON file of comments')
    analyze_parser.add_argument('--limit', type=int, default=ScrapeConstants.DEFAULT_RESULTS_LIMIT,
                                help='Number of comments to analyze')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--genai', action='store_true', help='Refine results with generative AI')
    analyze_parser.add_argument('--model', action='store_true', help='Load the local text-classification model')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export analysis results')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'scrape':
            cmd_scrape(args)
        elif args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'export':
            cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except HatewatchError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
