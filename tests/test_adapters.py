"""Tests for boundary adapters: try_catch, deferred adapters, @safe, @safe_async."""

import asyncio

import pytest
from rustlike import (
    Empty,
    Err,
    Ok,
    Some,
    UnwrapError,
    configure,
    option_from_deferred,
    result_from_deferred,
    safe,
    safe_async,
    try_catch,
)

pytestmark = pytest.mark.usefixtures('fresh_config')


class TestTryCatch:
    """Tests for try_catch."""

    def test_normal_return(self):
        """A normal return is wrapped in Ok."""
        assert try_catch(lambda: 42) == Ok(42)

    def test_raised_exception(self):
        """A raised exception is wrapped in Err."""
        result = try_catch(lambda: 1 / 0)
        assert result.is_failure()
        assert isinstance(result.unwrap_err(), ZeroDivisionError)

    def test_invoked_immediately(self):
        """The callable runs exactly once, at call time."""
        calls = []
        try_catch(lambda: calls.append(1))
        assert calls == [1]

    def test_unwrap_fault_is_captured(self):
        """A fault raised inside the callable is captured like any other."""
        result = try_catch(Empty.unwrap)
        assert isinstance(result.unwrap_err(), UnwrapError)

    def test_explicit_exceptions(self):
        """Only the listed exception types are captured."""
        assert try_catch(lambda: int('x'), exceptions=(ValueError,)).is_failure()
        with pytest.raises(ZeroDivisionError):
            try_catch(lambda: 1 / 0, exceptions=(ValueError,))

    def test_keyboard_interrupt_propagates(self):
        """BaseException subclasses outside the default set propagate."""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            try_catch(interrupt)

    def test_configured_capture(self):
        """The configured capture set is used by default."""
        configure(capture=(KeyError,))
        assert try_catch(lambda: {}['missing']).is_failure()
        with pytest.raises(ValueError):
            try_catch(lambda: int('x'))


class TestResultFromDeferred:
    """Tests for result_from_deferred."""

    @pytest.mark.asyncio
    async def test_fulfilled(self):
        """A fulfilled awaitable becomes Ok."""

        async def compute() -> int:
            await asyncio.sleep(0)
            return 7

        assert await result_from_deferred(compute()) == Ok(7)

    @pytest.mark.asyncio
    async def test_rejected(self):
        """A rejected awaitable becomes Err carrying the exception."""

        async def explode() -> int:
            raise ValueError('x')

        result = await result_from_deferred(explode())
        assert isinstance(result, Err)
        assert isinstance(result.error, ValueError)
        assert str(result.error) == 'x'

    @pytest.mark.asyncio
    async def test_future(self):
        """Futures settled elsewhere are supported."""
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        loop.call_soon(future.set_exception, RuntimeError('late'))
        result = await result_from_deferred(future)
        assert result.is_failure_and(lambda e: isinstance(e, RuntimeError))

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Cancelling the awaiting task is not turned into Err."""
        started = asyncio.Event()

        async def wait_forever() -> None:
            started.set()
            await asyncio.Event().wait()

        task = asyncio.ensure_future(result_from_deferred(wait_forever()))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_uncaptured_exception_propagates(self):
        """Exceptions outside the capture set propagate."""

        async def explode() -> int:
            raise KeyError('k')

        with pytest.raises(KeyError):
            await result_from_deferred(explode(), exceptions=(ValueError,))


class TestOptionFromDeferred:
    """Tests for option_from_deferred."""

    @pytest.mark.asyncio
    async def test_fulfilled(self):
        """A fulfilled awaitable becomes Some."""

        async def compute() -> str:
            return 'ok'

        assert await option_from_deferred(compute()) == Some('ok')

    @pytest.mark.asyncio
    async def test_fulfilled_with_none(self):
        """Fulfilling with None is still occupied."""

        async def compute() -> None:
            return None

        assert await option_from_deferred(compute()) == Some(None)

    @pytest.mark.asyncio
    async def test_rejected_discards_reason(self):
        """A rejection becomes Empty; the reason is dropped."""

        async def explode() -> str:
            raise ValueError('x')

        assert await option_from_deferred(explode()) is Empty

    @pytest.mark.asyncio
    async def test_uncaptured_exception_propagates(self):
        """Exceptions outside the capture set propagate instead of becoming Empty."""

        async def explode() -> str:
            raise KeyError('k')

        with pytest.raises(KeyError):
            await option_from_deferred(explode(), exceptions=(ValueError,))

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Cancelling the awaiting task is not turned into Empty."""
        started = asyncio.Event()

        async def wait_forever() -> None:
            started.set()
            await asyncio.Event().wait()

        task = asyncio.ensure_future(option_from_deferred(wait_forever()))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task


class TestSafe:
    """Tests for the @safe decorator."""

    def test_without_arguments(self):
        """@safe wraps return values and exceptions."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Ok(5.0)
        assert isinstance(divide(1, 0).unwrap_err(), ZeroDivisionError)

    def test_with_exceptions(self):
        """@safe(exceptions=...) narrows what is captured."""

        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        assert parse('3') == Ok(3)
        assert parse('x').is_failure()

    def test_uncaptured_propagates(self):
        """Exceptions outside the listed types propagate."""

        @safe(exceptions=(ValueError,))
        def lookup(key: str) -> int:
            return {}[key]

        with pytest.raises(KeyError):
            lookup('missing')

    def test_preserves_metadata(self):
        """The wrapper keeps the wrapped function's name and docstring."""

        @safe
        def documented() -> int:
            """Return one."""
            return 1

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Return one.'

    def test_methods(self):
        """@safe works on methods."""

        class Parser:
            base = 10

            @safe
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse('12') == Ok(12)
        assert Parser().parse('zz').is_failure()


class TestSafeAsync:
    """Tests for the @safe_async decorator."""

    @pytest.mark.asyncio
    async def test_without_arguments(self):
        """@safe_async wraps awaited results."""

        @safe_async
        async def fetch(value: int) -> int:
            await asyncio.sleep(0)
            if value < 0:
                raise ValueError('negative')
            return value

        assert await fetch(1) == Ok(1)
        assert (await fetch(-1)).is_failure()

    @pytest.mark.asyncio
    async def test_with_exceptions(self):
        """@safe_async(exceptions=...) narrows what is captured."""

        @safe_async(exceptions=(ValueError,))
        async def fetch() -> int:
            raise TypeError('wrong')

        with pytest.raises(TypeError):
            await fetch()

    @pytest.mark.asyncio
    async def test_bad_call_arguments_captured(self):
        """A TypeError raised while creating the coroutine becomes Err."""

        @safe_async
        async def fetch(value: int) -> int:
            return value

        result = await fetch()  # type: ignore[call-arg]
        assert result.is_failure()
        assert isinstance(result.unwrap_err(), TypeError)

    @pytest.mark.asyncio
    async def test_bad_call_arguments_outside_capture_propagate(self):
        """Call-time errors outside the listed types still propagate."""

        @safe_async(exceptions=(ValueError,))
        async def fetch(value: int) -> int:
            return value

        with pytest.raises(TypeError):
            await fetch()  # type: ignore[call-arg]
