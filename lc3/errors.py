"""Error kinds raised by the simulator core, the program loader and the
console front end. Every core failure is an `LC3Error`; front ends catch
that base class and decide whether to report and continue."""


class LC3Error(Exception):
    """Base error for everything the simulator can reject."""


# ─────────────────────────────── core ────────────────────────────────
class CpuNotRunning(LC3Error):
    def __init__(self):
        super().__init__("CPU is not currently running; unable to run instruction")


class ReservedOpcode(LC3Error):
    def __init__(self):
        super().__init__("Tried calling the reserved op code (1101)")


class UnsupportedOperation(LC3Error):
    def __init__(self, name: str = "RTI"):
        self.name = name
        super().__init__(f"This implementation does not support the {name} opcode")


class UnsupportedTrapCode(LC3Error):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"This implementation does not support trap code x{code:02X}")


class InvalidRegister(LC3Error):
    def __init__(self, index):
        self.index = index
        super().__init__(f"Invalid register {index}; the choices are r0 - r7")


class AddressOutOfRange(LC3Error):
    def __init__(self, address):
        self.address = address
        super().__init__(f"Address {address} must be within x0000 - xFFFF")


class InputExhausted(LC3Error):
    def __init__(self):
        super().__init__("Console input closed while waiting for a character")


# ────────────────────────────── loader ───────────────────────────────
class ProgramError(LC3Error):
    """Raised when a program image cannot be parsed."""


class ProgramMissingHeader(ProgramError):
    def __init__(self):
        super().__init__("program file missing header")


class BadProgramHeader(ProgramError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"file has an invalid header {token!r}")


class BadProgramInstructions(ProgramError):
    def __init__(self, line_no: int, token: str):
        self.line_no = line_no
        self.token = token
        super().__init__(f"file has an invalid instruction {token!r} on line {line_no}")


# ────────────────────────────── console ──────────────────────────────
class UnrecognizedCommand(LC3Error):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"{command} is not a recognized command")


class BadArgument(LC3Error):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f"failed operation; given bad argument {arg!r}")


class MissingArgument(LC3Error):
    def __init__(self):
        super().__init__("failed operation; missing argument")
