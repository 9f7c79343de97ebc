# src/taskdesk/tasks/task_codec.py

"""
Flat-file representation of a task.

File layout: first line is the title, every following line is the description.
There is no escaping: a title containing a newline reads back as a title plus
description lines.
"""

from __future__ import annotations

import re

from .task_models import UNTITLED_TASK, DecodeMode, Task

_SLUG_RE = re.compile(r"[^a-zA-Z0-9]")

# Unicode space separators, line terminators and U+FEFF; unlike str.strip(),
# the \x1c-\x1f information separators are kept.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim_text(text: str) -> str:
    return text.strip(_TRIM_CHARS)


def encode_task(title: str, description: str | None) -> str:
    return f"{title}\n{description or ''}"


def decode_task(
    raw: str,
    *,
    task_id: str,
    mode: DecodeMode = DecodeMode.DISPLAY,
) -> Task:
    """
    Parse file content into a Task.

    Missing title -> "Untitled Task".
    Missing (or whitespace-only) description -> mode.description_default().
    """
    lines = raw.split("\n")
    title = lines[0] or UNTITLED_TASK
    description = trim_text("\n".join(lines[1:])) or mode.description_default()
    return Task(
        id=task_id,
        title=title,
        description=description,
        filename=Task.filename_for(task_id),
    )


def sanitize_title(title: str) -> str:
    """Filename-safe slug: non-alphanumerics become '_', then lowercase."""
    return _SLUG_RE.sub("_", title).lower()


def make_task_id(title: str, now_ts: float) -> str:
    return f"{int(now_ts * 1000)}_{sanitize_title(title)}"
