import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """terminal colour codes"""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailure(AssertionError):
    """a failed check, as opposed to an unexpected error inside a case."""
    pass

# --- public api ---

def case(description: str) -> Callable:
    """register a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "check failed") -> None:
    if not condition:
        raise CheckFailure(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    if actual != expected:
        raise CheckFailure(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable, *args: Any, **kwargs: Any) -> BaseException:
    """call func and check that it raises error_type. returns the error for further checks."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise CheckFailure(f"expected {error_type.__name__} from {getattr(func, '__name__', func)!r}")


def run(title: str = "test run") -> bool:
    """run every registered case, print a report and return whether all passed"""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = _registry['results'] = []
    for item in _registry['cases']:
        error = None
        try:
            item['func']()
        except CheckFailure as e:
            error = f"check failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': item['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {item['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {item['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed = sum(1 for r in results if not r['passed'])
    duration = (time.perf_counter() - start_time) * 1000
    colour = _c.ok if failed == 0 else _c.fail
    print(f"\n{colour}ran {len(results)} cases in {_c.warn}{duration:.2f}ms{colour}: "
          f"{len(results) - failed} passed, {failed} failed{_c.reset}\n")

    # a fresh registry lets several suites run from one script
    _registry['cases'] = []
    return failed == 0
