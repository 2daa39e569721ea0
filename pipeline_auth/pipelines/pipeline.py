"""
Ordered hook pipelines run before and after a request handler.

Responsibilities:
    - Keep an ordered list of hooks with start/end insertion
    - BeforePipeline: run hooks in order, stop at the first one returning a Response
    - AfterPipeline: run every hook in order against the context's response

Hook signatures:
    before hook: (RequestContext) -> Optional[Response]
    after hook:  (RequestContext) -> None

Plain functions are run in Starlette's threadpool so a blocking hook
(e.g. a user validator hitting a database) does not stall the event loop.
Coroutine functions and objects with an async __call__ are awaited directly.

LLM Prompt Example:
    "Show how to model before/after request hooks as ordered lists that
    a middleware drives, with short-circuiting on the before side."
"""

import inspect
from typing import Any, Callable, Iterator, List, Optional

from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from .context import RequestContext

BeforeHook = Callable[[RequestContext], Optional[Response]]
AfterHook = Callable[[RequestContext], None]


def _is_async_hook(hook: Callable[[RequestContext], Any]) -> bool:
    return inspect.iscoroutinefunction(hook) or inspect.iscoroutinefunction(
        getattr(hook, "__call__", None)
    )


async def _call(hook: Callable[[RequestContext], Any], context: RequestContext) -> Any:
    if _is_async_hook(hook):
        return await hook(context)
    result = await run_in_threadpool(hook, context)
    # sync callable that handed back an awaitable
    if inspect.isawaitable(result):
        result = await result
    return result


class Pipeline:
    """Ordered collection of hooks."""

    def __init__(self) -> None:
        self._items: List[Callable[[RequestContext], Any]] = []

    @property
    def items(self) -> List[Callable[[RequestContext], Any]]:
        """Snapshot of the hooks in execution order."""
        return list(self._items)

    def add_item_to_start_of_pipeline(self, hook: Callable[[RequestContext], Any]) -> None:
        self._items.insert(0, hook)

    def add_item_to_end_of_pipeline(self, hook: Callable[[RequestContext], Any]) -> None:
        self._items.append(hook)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Callable[[RequestContext], Any]]:
        return iter(self.items)


class BeforePipeline(Pipeline):
    """Hooks run before the handler; the first non-None Response wins."""

    async def invoke(self, context: RequestContext) -> Optional[Response]:
        """
        Run hooks in order until one produces a response.

        Returns:
            Optional[Response]: The short-circuit response, or None to continue.
        """
        for hook in self.items:
            response = await _call(hook, context)
            if response is not None:
                return response
        return None


class AfterPipeline(Pipeline):
    """Hooks run after the handler; each may mutate `context.response`."""

    async def invoke(self, context: RequestContext) -> None:
        for hook in self.items:
            await _call(hook, context)
