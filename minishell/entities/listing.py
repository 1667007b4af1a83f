from dataclasses import dataclass, field

FLAG_OPTIONS = {"-a": "show_hidden", "-l": "long_format", "-F": "classify"}


@dataclass(frozen=True)
class ListingRequest:
    """Configuration for one listing: target directory and three independent flags."""

    directory: str = "."
    show_hidden: bool = False
    long_format: bool = False
    classify: bool = False

    @classmethod
    def from_flags(cls, flags: list[str], directory: str = ".") -> "ListingRequest":
        """
        Build a request from single-letter flags such as ``["-l", "-a"]``.

        Raises:
            ValueError: If a flag is not one of -a, -l, -F
        """
        options: dict[str, bool] = {}
        for flag in flags:
            if flag not in FLAG_OPTIONS:
                raise ValueError(f"invalid option -- '{flag.lstrip('-')}'")
            options[FLAG_OPTIONS[flag]] = True
        return cls(directory=directory, **options)


@dataclass(frozen=True)
class ListingResult:
    path: str
    lines: list[str] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)
