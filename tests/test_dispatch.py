import asyncio
import threading

import pytest

from emojiparse.parser import Tokenizer, get_parser
from emojiparse.scheduler.dispatch import (
    AsyncioDispatcher,
    BaseDispatcher,
    ThreadPoolDispatcher,
    create_dispatcher,
)
from emojiparse.tokens import CustomEmoji, Emoji, Text
from emojiparse.utils.config import build_config
from emojiparse.utils.exceptions import (
    DispatchError,
    DispatcherShutdownError,
    TaskCancelledError,
    TaskFailedError,
)

from .conftest import GRINNING, PNG_GRINNING

HELLO = "Hello <a:pepega:123456789012345678> World"


class FailingResolver:
    def lookup(self, char):
        raise RuntimeError("broken table")


class BlockingResolver:
    """Блокирует поток на символе "#" до release."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def lookup(self, char):
        if char == "#":
            self.started.set()
            self.release.wait(timeout=5)
        return None


def test_create_dispatcher_by_mode(resolver):
    tokenizer = Tokenizer(resolver)
    assert create_dispatcher(tokenizer, build_config()) is None
    assert isinstance(create_dispatcher(tokenizer, build_config(asyncio_dispatch=True)), AsyncioDispatcher)
    dispatcher = create_dispatcher(
        tokenizer, build_config(thread_pool_dispatch=True, thread_pool_workers=2)
    )
    assert isinstance(dispatcher, ThreadPoolDispatcher)
    assert dispatcher.max_workers == 2
    dispatcher.shutdown()


@pytest.mark.parametrize("mode", [{"asyncio_dispatch": True}, {"thread_pool_dispatch": True}])
def test_dispatch_matches_synchronous_result(resolver, mode):
    config = build_config(custom_emoji=True, **mode)
    expected = Tokenizer.from_config(config, resolver).tokenize(HELLO + GRINNING)
    parse = get_parser(config, resolver)

    tokens = asyncio.run(parse(HELLO + GRINNING))

    assert tokens == expected
    assert tokens[6] == CustomEmoji.from_id("123456789012345678")
    assert tokens[-1] == Emoji(PNG_GRINNING)
    if isinstance(parse.__self__, ThreadPoolDispatcher):
        parse.__self__.shutdown()


def test_asyncio_dispatch_wraps_task_failure():
    dispatcher = AsyncioDispatcher(Tokenizer(FailingResolver()))
    with pytest.raises(TaskFailedError) as exc_info:
        asyncio.run(dispatcher.parse("a"))
    assert isinstance(exc_info.value, DispatchError)
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert dispatcher.stats["failed"] == 1


def test_thread_pool_dispatch_wraps_task_failure():
    with ThreadPoolDispatcher(Tokenizer(FailingResolver()), max_workers=1) as dispatcher:
        with pytest.raises(TaskFailedError):
            asyncio.run(dispatcher.parse("a"))


def test_empty_input_in_background(resolver):
    dispatcher = AsyncioDispatcher(Tokenizer(resolver, custom_emoji=True))
    assert asyncio.run(dispatcher.parse("")) == []
    assert dispatcher.stats["completed"] == 1


def test_thread_pool_submit_for_sync_callers(resolver):
    with ThreadPoolDispatcher(Tokenizer(resolver), max_workers=2) as dispatcher:
        futures = [dispatcher.submit(text) for text in ["a", GRINNING, ""]]
        results = [future.result(timeout=5) for future in futures]
    assert results == [[Text("a")], [Emoji(PNG_GRINNING)], []]


def test_thread_pool_cancelled_task():
    resolver = BlockingResolver()
    dispatcher = ThreadPoolDispatcher(Tokenizer(resolver), max_workers=1)

    async def scenario():
        blocker = dispatcher.submit("#")
        assert resolver.started.wait(timeout=5)

        task = asyncio.ensure_future(dispatcher.parse("queued"))
        await asyncio.sleep(0)

        dispatcher.shutdown(wait=False, cancel_futures=True)
        resolver.release.set()

        with pytest.raises(TaskCancelledError):
            await task
        assert blocker.result(timeout=5) == [Text("#")]

    asyncio.run(scenario())
    assert dispatcher.stats["cancelled"] == 1


def test_cancelling_the_caller_abandons_the_task():
    resolver = BlockingResolver()
    dispatcher = AsyncioDispatcher(Tokenizer(resolver))

    async def scenario():
        task = asyncio.ensure_future(dispatcher.parse("#"))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        resolver.release.set()

    asyncio.run(scenario())
    assert dispatcher.stats == {"completed": 0, "failed": 0, "cancelled": 0, "rejected": 0}


def test_base_dispatcher_is_abstract(resolver):
    with pytest.raises(TypeError):
        BaseDispatcher(Tokenizer(resolver))


def test_thread_pool_rejects_work_after_shutdown(resolver):
    dispatcher = ThreadPoolDispatcher(Tokenizer(resolver), max_workers=1)
    dispatcher.shutdown()

    with pytest.raises(DispatcherShutdownError) as exc_info:
        asyncio.run(dispatcher.parse("a"))
    assert isinstance(exc_info.value, DispatchError)
    assert isinstance(exc_info.value.__cause__, RuntimeError)

    with pytest.raises(DispatcherShutdownError):
        dispatcher.submit("a")
    assert dispatcher.stats["rejected"] == 2


def test_asyncio_dispatch_after_default_executor_shutdown(resolver):
    dispatcher = AsyncioDispatcher(Tokenizer(resolver))

    async def scenario():
        await asyncio.get_running_loop().shutdown_default_executor()
        with pytest.raises(DispatcherShutdownError):
            await dispatcher.parse("a")

    asyncio.run(scenario())
    assert dispatcher.stats["rejected"] == 1
