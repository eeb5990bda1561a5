import time
from functools import wraps
from typing import List, Dict, Any, Callable

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """ansi colour codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that. subclasses AssertionError so pytest reports it as a failure."""
    pass


def test(description: str) -> Callable:
    """register a function as a test case. the function is returned unchanged for pytest."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: type, func: Callable, *args, **kwargs) -> BaseException:
    """call func and check it raises error_type. returns the caught exception."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


def run(title: str = "test run") -> bool:
    """run every registered test, print a report and return True when all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _registry['results'] = []
    for entry in _registry['tests']:
        error = None
        try:
            entry['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _registry['results'].append({'passed': error is None, 'description': entry['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {entry['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {entry['description']}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    passed = _print_summary(start_time)
    # clear so several modules can run back to back in one process
    _registry['tests'] = []
    return passed


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    total = len(results)
    failed_count = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{colour}ran {total} tests in {_c.warn}{duration:.2f}ms{colour}: "
          f"{total - failed_count} passed, {failed_count} failed{_c.reset}\n")
    return failed_count == 0
