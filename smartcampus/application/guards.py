from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar, cast

from smartcampus.application.errors import RoomNotFoundError

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def serialized(func: F) -> F:
    """Run the wrapped coroutine method while holding the service lock."""

    @wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        async with self._lock:
            return await func(self, *args, **kwargs)

    return cast(F, wrapper)


def room_exists(func: F) -> F:
    @wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        room_id = kwargs.get("room_id")
        if room_id is None:
            if not args:
                raise ValueError("room_id is required")
            room_id = args[0]
        if self._store.get(room_id) is None:
            self._log.warning("room_not_found", room_id=room_id)
            raise RoomNotFoundError(room_id)
        return await func(self, *args, **kwargs)

    return cast(F, wrapper)
