from infrable_logo.config.default import DEFAULT_CONFIG, COLOR_SCHEMES

__all__ = ["DEFAULT_CONFIG", "COLOR_SCHEMES"]
