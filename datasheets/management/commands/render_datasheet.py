"""
Django management command to render a product data sheet.

Reads spreadsheet rows from a JSON file (an array of arrays) and writes
the PDF produced by the selected backend.
"""

import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from datasheets.exceptions import RenderError
from datasheets.rendering.registry import list_renderers
from datasheets.service import DatasheetService


class Command(BaseCommand):
    help = 'Render a product data sheet PDF from tagged rows stored as JSON'

    def add_arguments(self, parser):
        parser.add_argument('rows', help='JSON file holding an array of rows')
        parser.add_argument('output', help='Path of the PDF to write')
        parser.add_argument(
            '--backend',
            choices=list_renderers(),
            default=None,
            help='Rendering backend (default: DATASHEETS_DEFAULT_BACKEND)'
        )
        parser.add_argument(
            '--uploads-dir',
            default=None,
            help='Directory searched for logo and product images'
        )

    def handle(self, *args, **options):
        """Execute the command."""
        rows = self._load_rows(Path(options['rows']))
        output = Path(options['output'])
        service = DatasheetService(uploads_dir=options['uploads_dir'])

        try:
            with open(output, 'wb') as sink:
                document = service.render(rows, sink, backend=options['backend'])
        except (RenderError, KeyError) as e:
            output.unlink(missing_ok=True)
            raise CommandError(f"Failed to render data sheet: {e}")
        except OSError as e:
            output.unlink(missing_ok=True)
            raise CommandError(f"Could not write {output}: {e}")

        self.stdout.write(
            self.style.SUCCESS(
                f"✓ Rendered '{document.header or 'data sheet'}' "
                f"({len(document.sections)} sections) to {output}"
            )
        )

    def _load_rows(self, path: Path) -> list:
        try:
            rows = json.loads(path.read_text(encoding='utf-8'))
        except OSError as e:
            raise CommandError(f"Could not read {path}: {e}")
        except json.JSONDecodeError as e:
            raise CommandError(f"{path} is not valid JSON: {e}")

        if not isinstance(rows, list):
            raise CommandError(f"{path} must contain a JSON array of rows")
        return rows
