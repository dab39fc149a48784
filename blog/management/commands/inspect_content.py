"""
Management command to inspect how a post body is split into fragments.

Reads raw post content from a file (or stdin with "-") and prints the
fragment sequence the renderer would receive. Useful when a post renders
unexpectedly, e.g. a chart showing up as literal text.
"""

import json
import sys
from collections import Counter

from django.core.management.base import BaseCommand, CommandError

from blog.content import assemble_fragments, fragments_to_dicts

PREVIEW_LENGTH = 60


def _preview(fragment: dict) -> str:
    """One-line description of a fragment dict."""
    kind = fragment["type"]
    if kind == "text":
        detail = fragment["content"]
    elif kind == "code":
        detail = f"{fragment['language']} {fragment['filename']}".strip()
    elif kind == "embed":
        detail = f"{fragment['embedType']} {fragment['id']}"
    elif kind == "playground":
        detail = fragment["options"]["language"]
    elif kind == "chart":
        detail = fragment["chartType"]
    elif kind == "diagram":
        detail = fragment["definition"]
    elif kind == "gallery":
        detail = f"{len(fragment['images'])} image(s)"
    else:
        detail = ""

    detail = " ".join(detail.split())
    if len(detail) > PREVIEW_LENGTH:
        detail = detail[: PREVIEW_LENGTH - 3] + "..."
    return detail


class Command(BaseCommand):
    help = 'Show the fragments a post body is parsed into'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='File holding the raw post content, or "-" for stdin',
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print fragments as JSON instead of a summary',
        )
        parser.add_argument(
            '--interleave',
            action='store_true',
            help='Keep plain text around embeds, playgrounds, charts and diagrams',
        )

    def handle(self, *args, **options):
        path = options['path']
        interleave = options.get('interleave') or None

        if path == '-':
            raw = sys.stdin.read()
        else:
            try:
                with open(path, encoding='utf-8') as handle:
                    raw = handle.read()
            except OSError as e:
                raise CommandError(f'Could not read {path}: {e}')

        fragments = fragments_to_dicts(
            assemble_fragments(raw, interleave_rich_text=interleave)
        )

        if options.get('json'):
            self.stdout.write(json.dumps(fragments, indent=2, ensure_ascii=False))
            return

        for i, fragment in enumerate(fragments, 1):
            self.stdout.write(f"[{i}] {fragment['type']:<10} {_preview(fragment)}")

        # Print summary
        counts = Counter(fragment['type'] for fragment in fragments)
        self.stdout.write('=' * 60)
        self.stdout.write(f'Fragments:         {len(fragments)}')
        for kind, count in sorted(counts.items()):
            self.stdout.write(f'  {kind:<16} {count}')
        self.stdout.write('=' * 60)

        if not fragments:
            self.stdout.write(self.style.WARNING('Content is empty'))
        else:
            self.stdout.write(self.style.SUCCESS('PARSE COMPLETE'))
