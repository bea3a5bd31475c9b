"""Opening files in the user's editor."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Optional, Union

from sak import config
from sak.errors import EditorError

logger = logging.getLogger(__name__)


def resolve_editor(editor: Optional[str] = None) -> str:
    """Explicit editor, else ``$EDITOR``, else vim."""

    return editor or os.getenv(config.EDITOR_ENV_VAR) or config.DEFAULT_EDITOR


def open_in_editor(path: Union[str, Path], editor: Optional[str] = None) -> None:
    """Run the editor on ``path`` in the current terminal and wait for it."""

    command = shlex.split(resolve_editor(editor)) + [str(path)]
    logger.info("Opening %s with %s...", path, command[0])
    try:
        subprocess.run(command, check=True)
    except FileNotFoundError as exc:
        raise EditorError(f"editor not found: {command[0]}") from exc
    except subprocess.CalledProcessError as exc:
        raise EditorError(f"{command[0]} exited with status {exc.returncode}") from exc
    except OSError as exc:
        raise EditorError(f"failed to start {command[0]}: {exc}") from exc
