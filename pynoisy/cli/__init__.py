"""
Command Line Interface for pynoisy

Available Commands:
- noisy: Generate a noise image and save it as PNG

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noisy": (".noise_commands", "noisy"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
