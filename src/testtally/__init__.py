# Lightweight package init: avoid eager imports of the CLI and plotting stack.
__all__ = ["Reporter", "Outcome", "RunSummary", "TestCase", "InvalidCase", "RunFinalized", "TallyError"]

def __getattr__(name):
    if name == "Reporter":
        from .reporter import Reporter as _Reporter
        return _Reporter
    if name in ("Outcome", "RunSummary", "TestCase"):
        from . import model
        return getattr(model, name)
    if name in ("InvalidCase", "RunFinalized", "TallyError"):
        from . import errors
        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
