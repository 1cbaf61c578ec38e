"""Interactive console prompts.

Blocking yes/no confirmation and free-text reads. A confirmation is
affirmative only for an explicit "yes" or "y"; everything else,
including empty input and end-of-file, is a "no", never an error.
"""

from rich.console import Console
from rich.markup import escape

from sysclean.core.cancel import CancelToken

AFFIRMATIVE_ANSWERS: frozenset[str] = frozenset({"yes", "y"})


def is_affirmative(answer: str | None) -> bool:
    """Check if an answer confirms the question.

    Args:
        answer: Raw line read from the console.

    Returns:
        True iff the trimmed, lowercased answer is "yes" or "y".
    """
    if answer is None:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def _read_line(prompt: str, console: Console) -> str | None:
    try:
        return console.input(prompt)
    except EOFError:
        return None


def ask_confirmation(
    message: str,
    *,
    console: Console,
    cancel: CancelToken | None = None,
) -> bool:
    """Ask a yes/no question and block for the answer.

    Args:
        message: Question to display.
        console: Console to prompt on.
        cancel: Process-wide token; a cancelled run always answers "no".

    Returns:
        True if the user answered affirmatively.
    """
    if cancel is not None and cancel.is_cancelled():
        return False

    answer = _read_line(f"\n[warning]⚠️ [/] {escape(message)} (yes/no): ", console)

    if cancel is not None and cancel.is_cancelled():
        return False
    return is_affirmative(answer)


def ask_directory(*, console: Console, cancel: CancelToken | None = None) -> str | None:
    """Read the directory to scan from the console.

    Returns:
        The trimmed, non-empty answer, or None for empty input, end-of-file
        or a cancelled run.
    """
    if cancel is not None and cancel.is_cancelled():
        return None

    answer = _read_line("📂 Enter directory to scan: ", console)

    if answer is None or (cancel is not None and cancel.is_cancelled()):
        return None
    return answer.strip() or None
