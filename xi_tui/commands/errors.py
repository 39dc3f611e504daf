"""Errors raised when a prompt line or keymap binding cannot be parsed."""


class ParseCommandError(Exception):
    """Base class for all command parse failures."""


class UnexpectedArgument(ParseCommandError):
    """An argument was given that the command cannot use."""

    def __init__(self) -> None:
        super().__init__("Unexpected argument")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnexpectedArgument)

    def __hash__(self) -> int:
        return hash(UnexpectedArgument)


class ExpectedArgument(ParseCommandError):
    """The command needs an argument but got none."""

    def __init__(self, cmd: str) -> None:
        self.cmd = cmd
        super().__init__(f"Command '{cmd}' expects an argument")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExpectedArgument) and other.cmd == self.cmd

    def __hash__(self) -> int:
        return hash((ExpectedArgument, self.cmd))


class TooManyArguments(ParseCommandError):
    """The command got more arguments than it takes."""

    def __init__(self, cmd: str, expected: int, found: int) -> None:
        self.cmd = cmd
        self.expected = expected
        self.found = found
        super().__init__(
            f"Command '{cmd}' takes at most {expected} arguments, got {found}"
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, TooManyArguments)
            and (other.cmd, other.expected, other.found)
            == (self.cmd, self.expected, self.found)
        )

    def __hash__(self) -> int:
        return hash((TooManyArguments, self.cmd, self.expected, self.found))


class UnknownCommand(ParseCommandError):
    """The input did not match any known command or argument."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown command: {token}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnknownCommand) and other.token == self.token

    def __hash__(self) -> int:
        return hash((UnknownCommand, self.token))
