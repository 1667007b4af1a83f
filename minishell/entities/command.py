from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    status: int = 0
    stdout: str = ""
    stderr: list[str] | None = None

    @property
    def diagnostics(self) -> list[str]:
        return list(self.stderr or [])


class Command:
    """One line of shell input, split into a command name and arguments."""

    raw: str

    def __init__(self, raw: str):
        self.raw = raw.strip()
        parts = self.raw.split()
        self.name: str = parts[0] if parts else ""
        self.args: list[str] = parts[1:]

    def is_empty(self) -> bool:
        return not self.name

    def expand_flags(self) -> list[str]:
        # '-laF' -> ['-l', '-a', '-F']; '-l', 'path' and '-' stay as they are
        expanded: list[str] = []
        for arg in self.args:
            if arg.startswith("-") and len(arg) > 2:
                expanded.extend(f"-{c}" for c in arg[1:])
            else:
                expanded.append(arg)
        return expanded

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, args={self.args!r})"
