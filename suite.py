import logging
import time
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    __test__ = False

# --- public api ---

def test(description: str) -> Callable:
    """
    decorator to register a function as a test case.
    the decorated function keeps its name, so pytest collects it as well.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator

# the registration decorator itself is not a test case
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """asserts that calling func raises error_type and returns the raised error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@contextmanager
def capture_logs(logger_name: str, level: int = logging.DEBUG) -> Iterator[List[str]]:
    """collects the formatted messages logged under logger_name while the block runs."""
    target = logging.getLogger(logger_name)
    handler = _ListHandler()
    previous_level = target.level
    target.addHandler(handler)
    target.setLevel(level)
    try:
        yield handler.messages
    finally:
        target.removeHandler(handler)
        target.setLevel(previous_level)


def _run_one(func: Callable, verbose_errors: bool) -> Dict[str, Any]:
    """runs a single case and reports outcome, error text and duration in ms."""
    started = time.perf_counter()
    try:
        func()
        error = None
    except TestAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        if verbose_errors:
            traceback.print_exc()
    return {
        'passed': error is None,
        'error': error,
        'ms': (time.perf_counter() - started) * 1000
    }


def run(title: str = "test run", keyword: Optional[str] = None, verbose_errors: bool = False) -> bool:
    """
    executes the registered tests, prints a report and returns whether all of them passed.
    with a keyword, only tests whose description contains it are run.
    """
    print(f"\n{_c.info}--- riding: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    selected = [t for t in _suite_state['tests'] if keyword is None or keyword in t['description']]

    for test_item in selected:
        outcome = _run_one(test_item['func'], verbose_errors)
        outcome['description'] = test_item['description']
        _suite_state['results'].append(outcome)

        timing = f"{_c.grey}{outcome['ms']:.2f}ms{_c.reset}"
        if outcome['passed']:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {outcome['description']}  {timing}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {outcome['description']}  {timing}")
            print(f"    {_c.grey}└─> {outcome['error']}{_c.reset}")

    all_passed = _print_summary(start_time)

    # registered tests are dropped so several suites can run from one script
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float) -> bool:
    """prints totals and repeats the failed descriptions at the end."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']
    failures = [r for r in results if not r['passed']]

    summary_color = _c.ok if not failures else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - len(failures)}{_c.reset}, {_c.fail}failed: {len(failures)}{_c.reset}")
    for failure in failures:
        print(f"    {_c.fail}- {failure['description']}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return not failures
