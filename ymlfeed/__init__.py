"""Build, validate and export Yandex Market Language (YML) product catalogs."""

__version__ = "0.1.0"
__all__ = ["catalog", "countries", "export"]