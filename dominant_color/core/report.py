"""Report builder — text and JSON output for a batch of extractions."""

import json
from typing import Any

from dominant_color.core.types import FileResult


def format_text(results: list[FileResult]) -> str:
    """One line per image, then a summary line."""
    lines = []
    for entry in results:
        if entry.result is None:
            lines.append(f'{entry.path}  ✗ {entry.error_kind}: {entry.error}')
            continue
        r = entry.result
        transparency = 'transparent' if r.has_transparency else 'opaque'
        lines.append(f'{entry.path}  {r.width}×{r.height}  #{r.dominant_color}  {transparency}')

    failed = sum(1 for e in results if not e.ok)
    lines.append('')
    lines.append(f'OK {len(results) - failed}/{len(results)} images  FAIL {failed}/{len(results)} images')
    return '\n'.join(lines)


def _entry_json(entry: FileResult) -> dict[str, Any]:
    obj: dict[str, Any] = {'image': entry.path, 'backend': entry.backend}
    if entry.result is None:
        obj['error'] = {'kind': entry.error_kind, 'message': entry.error}
        return obj
    r = entry.result
    obj['dimensions'] = {'width': r.width, 'height': r.height}
    obj['samples'] = r.samples
    obj.update(r.as_metadata())
    return obj


def format_json(results: list[FileResult]) -> str:
    """Format results as JSON."""
    failed = sum(1 for e in results if not e.ok)
    obj = {
        'images': [_entry_json(e) for e in results],
        'summary': {
            'total': len(results),
            'ok': len(results) - failed,
            'failed': failed,
        },
    }
    return json.dumps(obj, indent=2)
