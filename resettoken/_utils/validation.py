from resettoken.errors import ExpectedTypeError, InvalidConfigurationError

MAX_COUNTER = 2**64


def _check_int(value: object, param: str) -> int:
    # bool is an int subclass, but never a meaningful step or window
    if isinstance(value, bool) or not isinstance(value, int):
        raise ExpectedTypeError(value, "int", param)
    return value


def validate_step(step: object) -> int:
    step = _check_int(step, "step")
    if step <= 0:
        msg = f"step must be a positive number of seconds, got {step}"
        raise InvalidConfigurationError(msg)
    return step


def validate_window(window: object) -> int:
    window = _check_int(window, "window")
    if window < 0:
        msg = f"window must be >= 0, got {window}"
        raise InvalidConfigurationError(msg)
    return window


def validate_counter(counter: object) -> int:
    counter = _check_int(counter, "counter")
    if counter < 0 or counter >= MAX_COUNTER:
        msg = f"counter must be between 0 - {MAX_COUNTER - 1}"
        raise InvalidConfigurationError(msg)
    return counter
