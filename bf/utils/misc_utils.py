import functools
import inspect


def filter_kwargs(func):
    """
    Drops keyword arguments `func` does not accept, so config dicts
    with extra keys can be passed as is
    """
    parameters = inspect.signature(func).parameters

    if any(x.kind == inspect.Parameter.VAR_KEYWORD for x in parameters.values()):
        return func

    @functools.wraps(func, updated=())
    def wrapped_func(*args, **kwargs):
        kwargs = {k: v for k, v in kwargs.items() if k in parameters}
        return func(*args, **kwargs)
    return wrapped_func

def update_existing(dict1, dict2):
    for k, v in dict2.items():
        if k not in dict1:
            dict1[k] = v
    return dict1
