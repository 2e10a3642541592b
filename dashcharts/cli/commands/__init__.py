from typing import Any, Callable, Dict, Iterable, List, Protocol, TypeVar


class Dispatcher(Protocol):
    def utter_message(self, text: str | None = None, json_message: Dict[str, Any] | None = None) -> None: ...

    def utter_error(self, text: str) -> None: ...


class CommandHandler(Protocol):
    def __call__(self, dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int: ...


_REGISTRY: Dict[str, CommandHandler] = {}


def register(name: str, handler: CommandHandler) -> None:
    _REGISTRY[name] = handler


def get(name: str) -> CommandHandler | None:
    return _REGISTRY.get(name)


def names() -> Iterable[str]:
    return _REGISTRY.keys()


F = TypeVar("F", bound=Callable[..., int])


def command(name: str) -> Callable[[F], F]:
    def _decorator(fn: F) -> F:
        register(name, fn)
        return fn

    return _decorator


from . import charts as _charts  # noqa: E402
from . import core as _core  # noqa: E402
from . import dashboard as _dashboard  # noqa: E402

_ = (_core, _charts, _dashboard)
