from dataclasses import dataclass, field

REDIRECT_APPEND = ">>"
REDIRECT_OVERWRITE = ">"


@dataclass(frozen=True)
class ParsedCommand:
    """A tokenized input line: the verb and its ordered arguments."""

    verb: str
    arguments: list[str] = field(default_factory=list)

    @classmethod
    def from_line(cls, line: str) -> "ParsedCommand":
        # whitespace tokenization only, no quoting
        tokens = line.split()
        if not tokens:
            return cls(verb="")
        return cls(verb=tokens[0], arguments=tokens[1:])

    def is_empty(self) -> bool:
        return not self.verb

    def argument(self, index: int) -> str | None:
        if index < len(self.arguments):
            return self.arguments[index]
        return None


@dataclass(frozen=True)
class RedirectionSpec:
    producing_command_text: str
    target_path: str
    append_mode: bool

    @property
    def operator(self) -> str:
        return REDIRECT_APPEND if self.append_mode else REDIRECT_OVERWRITE
