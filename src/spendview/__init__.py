# Import main lazily so library users do not pay for click at import time
def __getattr__(name):
    if name == "main":
        from spendview.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
