"""Exception hierarchy. Every error is terminal for the run."""


class Md2EpubError(RuntimeError):
    """Base class for all errors reported to the user."""


class ValidationError(Md2EpubError):
    """Input missing, or output already present without overwrite."""


class ReadError(Md2EpubError):
    """The Markdown source could not be read."""


class ConversionError(Md2EpubError):
    """Markdown could not be converted to HTML."""


class AssemblyError(Md2EpubError):
    """A step of building or writing the EPUB container failed."""


class ConfigError(Md2EpubError):
    """The config file is missing or malformed."""
