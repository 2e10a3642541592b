import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple

from dashcharts.exceptions import ChartError, ChartFileError

from .commands import get as get_command
from .commands import names as list_command_names

logger = logging.getLogger(__name__)


def _is_number(val: str) -> bool:
    try:
        float(val)
    except ValueError:
        return False
    return True


def _coerce_scalar(val: str) -> Any:
    """Best-effort cast of string token to int/float/bool/str."""
    low = val.lower()
    if low in ("true", "false"):
        return low == "true"
    for caster in (int, float):
        try:
            return caster(val)
        except ValueError:
            pass
    return val


def _parse_args(parts: Sequence[str]) -> Tuple[str | None, List[str], Dict[str, Any]]:
    """
    Split command tokens into (subcommand, args, options).
    Supports:
      - flags: -k v, --key v, --flag (True)
      - key=value tokens
      - positional args collected into args list (negative numbers included)
    """
    if not parts:
        return None, [], {}
    sub = parts[0]
    args: List[str] = []
    opts: Dict[str, Any] = {}

    i = 1
    while i < len(parts):
        t = parts[i]
        if _is_number(t):
            args.append(t)
        elif "=" in t and not t.startswith("--="):
            key, val = t.split("=", 1)
            opts[key.lstrip("-")] = _coerce_scalar(val)
        elif t.startswith("-"):
            key = t.lstrip("-")
            # standalone flag
            if i + 1 >= len(parts) or (parts[i + 1].startswith("-") and not _is_number(parts[i + 1])):
                opts[key] = True
            else:
                opts[key] = _coerce_scalar(parts[i + 1])
                i += 1
        else:
            args.append(t)
        i += 1

    return sub, args, opts


class ConsoleDispatcher:
    """Writes command output to text streams."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def utter_message(self, text: str | None = None, json_message: Dict[str, Any] | None = None) -> None:
        if text is not None:
            print(text, file=self.out)
        if json_message is not None:
            print(json.dumps(json_message, indent=2), file=self.out)

    def utter_error(self, text: str) -> None:
        print(text, file=self.err)


def run(parts: Sequence[str], dispatcher: Optional[ConsoleDispatcher] = None) -> int:
    """
    Dispatch one command line to its registered handler.

    Examples:
      dashcharts help
      dashcharts bar 5000 6000 4500 --labels Jan,Feb,Mar --format png
      dashcharts pie "Product A:300" "Product B:200" --format json
      dashcharts dashboard --output-dir out --format svg
    """
    dispatcher = dispatcher or ConsoleDispatcher()
    sub, args, opts = _parse_args(list(parts))

    # If no subcommand, default to 'help'
    if not sub:
        sub = "help"

    handler = get_command(sub)
    if handler is None:
        dispatcher.utter_error(f"Unknown command: {sub}. Try one of: {', '.join(sorted(list_command_names()))}")
        return 2

    try:
        return handler(dispatcher, args, opts)
    except ChartError as e:
        logger.debug("Command %s failed: %s", sub, e.to_dict())
        dispatcher.utter_error(f"{e.error_type.value}: {e.message}")
        return 1
    except ChartFileError as e:
        dispatcher.utter_error(str(e))
        return 1
    except OSError as e:
        logger.debug("Command %s failed on I/O", sub, exc_info=True)
        dispatcher.utter_error(f"I/O error: {e}")
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
